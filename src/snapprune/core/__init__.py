# src/snapprune/core/__init__.py
"""Core infrastructure: Retention evaluation, Configuration, Sources, Logging."""

from snapprune.core.config import (
    DEFAULT_DATE_FORMAT,
    PolicySettings,
    SnapPruneSettings,
    load_settings,
    parse_policy_spec,
)
from snapprune.core.durations import format_duration, parse_duration
from snapprune.core.logging import (
    configure_logging,
    get_logger,
)
from snapprune.core.retention import evaluate
from snapprune.core.sources import (
    CollectedEntries,
    parse_timestamp,
    read_directory,
    read_lines,
)

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "CollectedEntries",
    "PolicySettings",
    "SnapPruneSettings",
    "configure_logging",
    "evaluate",
    "format_duration",
    "get_logger",
    "load_settings",
    "parse_duration",
    "parse_policy_spec",
    "parse_timestamp",
    "read_directory",
    "read_lines",
]
