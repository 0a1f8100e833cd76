# tests/conftest.py
"""Shared test fixtures and helpers.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import logging
import os
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

# Snapshot names produced by the default date format ("%Y%m%d-%H:%M")
SNAPSHOT_FORMAT = "%Y%m%d-%H:%M"

DAY = 86400
WEEK = 7 * DAY


def timestamp(value: datetime) -> int:
    """Epoch seconds of a naive-UTC or aware datetime."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int(value.timestamp())


def snapshot_name(ts: int) -> str:
    """Render a timestamp the way a snapshot tool using SNAPSHOT_FORMAT names it."""
    return datetime.fromtimestamp(ts, tz=UTC).strftime(SNAPSHOT_FORMAT)


def january_snapshots(*, days: int = 30, hours: tuple[int, ...] = (0, 4, 8, 12, 16, 20)) -> dict[int, str]:
    """Snapshots taken at fixed hours on each of the first ``days`` days of January 2020."""
    start = datetime(2020, 1, 1, tzinfo=UTC)
    snapshots: dict[int, str] = {}
    for day in range(days):
        for hour in hours:
            ts = timestamp(start + timedelta(days=day, hours=hour))
            snapshots[ts] = snapshot_name(ts)
    return snapshots


@pytest.fixture
def snapshots() -> dict[int, str]:
    """30 days x 6 snapshots per day (180 entries)."""
    return january_snapshots()


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo logging configuration made by CLI invocations between tests.

    The CLI callback points the root handler at whatever sys.stderr is during
    the invocation; CliRunner closes that stream afterwards.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
