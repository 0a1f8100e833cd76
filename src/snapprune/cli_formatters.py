# src/snapprune/cli_formatters.py
"""CLI output for retention results and schedules.

Output channel contract:
- stdout: dropped entries, one per line (console), or a single JSON document
- stderr: ``Keep <entry>`` lines under --verbose, warnings and logs

stdout is intended to be piped into a deletion command, so nothing but
dropped entries (or the JSON document) may ever be written there.
"""

from __future__ import annotations

import json

import typer

from snapprune.contracts.retention import RetentionResult
from snapprune.core.config import SnapPruneSettings
from snapprune.core.durations import format_duration


def echo_console_result(result: RetentionResult[str], *, verbose: bool = False) -> None:
    """Print dropped entries on stdout and, if verbose, kept ones on stderr."""
    for entry in result.drop.values():
        typer.echo(entry)
    if verbose:
        for entry in result.keep.values():
            typer.echo(f"Keep {entry}", err=True)


def echo_json_result(result: RetentionResult[str]) -> None:
    """Print the full partition as one JSON document on stdout."""
    typer.echo(
        json.dumps(
            {
                "keep": list(result.keep.values()),
                "drop": list(result.drop.values()),
            }
        )
    )


def echo_schedule(settings: SnapPruneSettings) -> None:
    """Print a human-readable summary of the retention schedule."""
    typer.echo("Retention schedule:")
    for policy in settings.policies:
        typer.echo(f"  {policy.count} x {format_duration(policy.interval)} (spans {format_duration(policy.interval * policy.count)})")
    typer.echo(f"Alignment: {settings.alignment.value}")
    typer.echo(f"Date format: {settings.date_format}")
    typer.echo(f"Maximum retained: {1 + sum(p.count for p in settings.policies)}")
