# src/snapprune/core/config.py
"""
Configuration schema and loading for snapprune.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.

Example settings.yaml:
    policies:
      - interval: 1d      # or 86400
        count: 7
      - interval: 1w
        count: 4
    date_format: "%Y%m%d-%H:%M"
    alignment: anchor
"""

import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from snapprune.contracts.errors import DurationError, PolicyError
from snapprune.contracts.retention import Alignment, RetentionPolicy
from snapprune.core.durations import parse_duration

DEFAULT_DATE_FORMAT = "%Y%m%d-%H:%M"

ENVVAR_PREFIX = "SNAPPRUNE"


class PolicySettings(BaseModel):
    """One periodic retention rule.

    Example YAML:
        policies:
          - interval: 1d
            count: 7
    """

    model_config = {"frozen": True}

    interval: int = Field(
        gt=0,
        description="Bucket length in seconds; accepts suffixed strings such as '6h', '1d', '2w'",
    )
    count: int = Field(
        ge=0,
        description="Number of buckets to keep one entry from",
    )

    @field_validator("interval", mode="before")
    @classmethod
    def parse_interval(cls, v: Any) -> Any:
        """Accept duration strings as well as plain integers."""
        if isinstance(v, str):
            try:
                return parse_duration(v)
            except DurationError as e:
                raise ValueError(str(e)) from e
        return v

    def to_policy(self) -> RetentionPolicy:
        """Convert to the contract type consumed by the evaluator."""
        return RetentionPolicy(interval=self.interval, count=self.count)


class SnapPruneSettings(BaseModel):
    """Top-level snapprune configuration.

    All settings are validated and frozen after construction.
    """

    model_config = {"frozen": True}

    policies: list[PolicySettings] = Field(
        min_length=1,
        description="Ordered retention policies (at least one required)",
    )
    date_format: str = Field(
        default=DEFAULT_DATE_FORMAT,
        description="strptime format of the date stamps being pruned",
    )
    alignment: Alignment = Field(
        default=Alignment.ANCHOR,
        description="Bucket alignment: 'anchor' (from latest entry) or 'interval' (whole multiples of the interval)",
    )

    @field_validator("date_format")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """A format without directives would map every entry to the same instant."""
        if "%" not in v:
            raise ValueError(f"date_format must contain at least one strptime directive, got {v!r}")
        return v

    def retention_policies(self) -> list[RetentionPolicy]:
        """Policies as evaluator contracts, in configured order."""
        return [p.to_policy() for p in self.policies]


def parse_policy_spec(spec: str) -> RetentionPolicy:
    """Parse a command-line policy of the form ``INTERVAL:COUNT``.

    Args:
        spec: e.g. "86400:3", "1d:7", "2w:6"

    Returns:
        Validated RetentionPolicy

    Raises:
        PolicyError: If the spec is malformed, the interval is not a positive
            duration or the count is not a non-negative integer
    """
    interval_text, sep, count_text = spec.partition(":")
    if not sep or not interval_text.strip() or not count_text.strip():
        raise PolicyError(f"Invalid policy {spec!r}: expected INTERVAL:COUNT, e.g. 1d:7")

    interval = parse_duration(interval_text)
    try:
        count = int(count_text.strip())
    except ValueError:
        raise PolicyError(f"Invalid count {count_text.strip()!r} in policy {spec!r}") from None
    return RetentionPolicy(interval=interval, count=count)


_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")


def _expand_env_vars(config: dict[str, Any]) -> dict[str, Any]:
    """Recursively expand ${VAR} and ${VAR:-default} patterns in config values.

    Args:
        config: Configuration dict (may contain nested structures)

    Returns:
        New dict with environment variables expanded
    """
    import os

    def _expand_string(value: str) -> str:
        def replacer(match: re.Match[str]) -> str:
            env_value = os.environ.get(match.group(1))
            if env_value is not None:
                return env_value
            default = match.group(2)
            if default is not None:
                return default
            # No env var and no default - keep original (will likely fail validation)
            return match.group(0)

        return _ENV_VAR_PATTERN.sub(replacer, value)

    def _expand_value(value: Any) -> Any:
        if isinstance(value, str):
            return _expand_string(value)
        elif isinstance(value, dict):
            return {k: _expand_value(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [_expand_value(item) for item in value]
        else:
            return value

    return {k: _expand_value(v) for k, v in config.items()}


def load_settings(config_path: Path) -> SnapPruneSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (SNAPPRUNE_*) - highest priority
    2. Config file (settings.yaml)
    3. Defaults from Pydantic schema - lowest priority

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated SnapPruneSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[str(config_path)],
        environments=False,  # No [default]/[production] sections
        load_dotenv=False,  # .env is loaded by the CLI callback
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    # Also filter out internal Dynaconf settings
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    raw_config = _expand_env_vars(raw_config)

    return SnapPruneSettings(**raw_config)


def resolve_config(settings: SnapPruneSettings) -> dict[str, Any]:
    """Convert validated settings to a plain dict (explicit values + defaults)."""
    return settings.model_dump(mode="json")
