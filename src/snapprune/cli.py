# src/snapprune/cli.py
"""snapprune Command Line Interface.

Entry point for the snapprune CLI tool.

Typical use pipes a listing of date-stamped snapshots in and the names to
delete out:

    ls /backups | snapprune prune -p 1d:7 -p 1w:4 | xargs -r -I{} rm -r /backups/{}
"""

from __future__ import annotations

import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn

import typer
from dynaconf.vendor.ruamel.yaml.parser import ParserError as YamlParserError
from dynaconf.vendor.ruamel.yaml.scanner import ScannerError as YamlScannerError
from pydantic import ValidationError

from snapprune import __version__
from snapprune.cli_formatters import echo_console_result, echo_json_result, echo_schedule
from snapprune.cli_helpers import resolve_settings
from snapprune.contracts.errors import ConfigurationError
from snapprune.contracts.retention import Alignment
from snapprune.core.config import SnapPruneSettings, resolve_config
from snapprune.core.logging import get_logger

__all__ = ["app"]

logger = get_logger(__name__)


class OutputFormat(StrEnum):
    """Output format of the prune command."""

    CONSOLE = "console"
    JSON = "json"


app = typer.Typer(
    name="snapprune",
    help="snapprune: decide which dated snapshots to keep under periodic retention policies.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"snapprune version {__version__}")
        raise typer.Exit()


def _fail(message: str) -> NoReturn:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


def _load_dotenv(env_file: Path | None = None) -> bool:
    """Load environment variables from .env file.

    Args:
        env_file: Explicit path to .env file. If None, searches for .env
                 in current directory and parent directories.

    Returns:
        True if .env was found and loaded, False otherwise.

    Raises:
        typer.Exit: If explicit env_file path doesn't exist.
    """
    from dotenv import load_dotenv

    if env_file is not None:
        if not env_file.exists():
            _fail(f".env file not found: {env_file}")
        return load_dotenv(env_file, override=False)

    return load_dotenv(override=False)  # Don't override existing env vars


def _settings_or_exit(
    *,
    settings_path: Path | None,
    policy_specs: list[str] | None,
    date_format: str | None,
    alignment: Alignment | None,
) -> SnapPruneSettings:
    """Resolve settings, turning every configuration error into exit code 1."""
    try:
        return resolve_settings(
            settings_path=settings_path.expanduser() if settings_path is not None else None,
            policy_specs=policy_specs,
            date_format=date_format,
            alignment=alignment,
        )
    except ConfigurationError as e:
        _fail(str(e))
    except FileNotFoundError:
        _fail(f"Settings file not found: {settings_path}")
    except (YamlParserError, YamlScannerError) as e:
        _fail(f"YAML syntax error in {settings_path}: {e.problem}")
    except ValidationError as e:
        typer.echo("Configuration errors:", err=True)
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            typer.echo(f"  - {loc}: {error['msg']}", err=True)
        if not policy_specs and settings_path is None:
            typer.echo("Hint: define at least one policy with --policy INTERVAL:COUNT or --settings FILE.", err=True)
        raise typer.Exit(1) from None


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    no_dotenv: bool = typer.Option(
        False,
        "--no-dotenv",
        help="Skip loading .env file.",
    ),
    env_file: Path | None = typer.Option(
        None,
        "--env-file",
        help="Path to .env file (skips automatic search).",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging on stderr.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs on stderr (for machine processing).",
    ),
) -> None:
    """snapprune: decide which dated snapshots to keep under periodic retention policies."""
    from snapprune.core.logging import configure_logging

    configure_logging(json_output=json_logs, level="DEBUG" if debug else "WARNING")

    if not no_dotenv:
        _load_dotenv(env_file=env_file)
    elif env_file is not None:
        typer.secho(
            "Warning: --env-file ignored because --no-dotenv is set.",
            fg=typer.colors.YELLOW,
            err=True,
        )


@app.command()
def prune(
    policy: list[str] | None = typer.Option(
        None,
        "--policy",
        "-p",
        help="Retention policy INTERVAL:COUNT, e.g. 1d:7 or 86400:7. Repeatable; replaces policies from --settings.",
    ),
    settings: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
    date_format: str | None = typer.Option(
        None,
        "--date-format",
        "-f",
        help="strptime format of the date stamps (default: %Y%m%d-%H:%M).",
    ),
    directory: Path | None = typer.Option(
        None,
        "--directory",
        "-d",
        help="Read entry names from this directory instead of stdin.",
    ),
    include_hidden: bool = typer.Option(
        False,
        "--include-hidden",
        help="With --directory, also consider names starting with '.'.",
    ),
    align: Alignment | None = typer.Option(
        None,
        "--align",
        "-a",
        case_sensitive=False,
        help="Bucket alignment: 'anchor' (from the latest entry, default) or 'interval' (whole multiples of each interval).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print the entries being kept on stderr.",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.CONSOLE,
        "--output-format",
        "-o",
        case_sensitive=False,
        help="Output format: 'console' (dropped entries, one per line) or 'json' (keep and drop lists).",
    ),
) -> None:
    """Print the entries that the retention schedule drops.

    Entries are date stamps read one per line from stdin, or the names in
    --directory. Unparseable entries are reported on stderr and ignored.
    Nothing is deleted: pipe the output into your deletion command.

    Examples:

        # Keep 3 daily and 6 weekly snapshots
        ls /backups | snapprune prune -p 1d:3 -p 1w:6

        # Same, reading the directory directly and showing what is kept
        snapprune prune -p 1d:3 -p 1w:6 --directory /backups --verbose
    """
    from snapprune.core.retention import evaluate
    from snapprune.core.sources import read_directory, read_lines

    config = _settings_or_exit(
        settings_path=settings,
        policy_specs=policy,
        date_format=date_format,
        alignment=align,
    )

    try:
        if directory is not None:
            collected = read_directory(directory.expanduser(), config.date_format, include_hidden=include_hidden)
        else:
            collected = read_lines(sys.stdin, config.date_format)
    except ConfigurationError as e:
        _fail(str(e))

    result = evaluate(config.retention_policies(), collected.entries, alignment=config.alignment)
    logger.info(
        "Retention evaluated",
        kept=len(result.keep),
        dropped=len(result.drop),
        rejected=len(collected.rejected),
        alignment=config.alignment.value,
    )

    if output_format is OutputFormat.JSON:
        echo_json_result(result)
    else:
        echo_console_result(result, verbose=verbose)


@app.command()
def validate(
    policy: list[str] | None = typer.Option(
        None,
        "--policy",
        "-p",
        help="Retention policy INTERVAL:COUNT. Repeatable; replaces policies from --settings.",
    ),
    settings: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
    align: Alignment | None = typer.Option(
        None,
        "--align",
        "-a",
        case_sensitive=False,
        help="Bucket alignment: 'anchor' or 'interval'.",
    ),
    show_config: bool = typer.Option(
        False,
        "--show-config",
        help="Print the fully resolved configuration as YAML.",
    ),
) -> None:
    """Validate a retention schedule without reading any entries.

    Examples:

        snapprune validate -p 1d:7 -p 1w:4

        snapprune validate --settings settings.yaml --show-config
    """
    import yaml

    config = _settings_or_exit(
        settings_path=settings,
        policy_specs=policy,
        date_format=None,
        alignment=align,
    )

    if show_config:
        typer.echo(yaml.safe_dump(resolve_config(config), sort_keys=False), nl=False)
        return
    echo_schedule(config)


if __name__ == "__main__":
    app()
