# src/snapprune/contracts/errors.py
"""Exception hierarchy for snapprune.

Two classes of failure exist:

- ConfigurationError: fatal. A schedule or source that cannot be used.
  The CLI reports it and exits non-zero before any evaluation happens.
- EntryParseError: non-fatal, per entry. The offending line or name is
  skipped with a warning and evaluation continues without it.

The retention evaluator itself raises neither for valid inputs.
"""


class SnapPruneError(Exception):
    """Base class for all snapprune errors."""


# =============================================================================
# Fatal configuration errors
# =============================================================================


class ConfigurationError(SnapPruneError):
    """Raised when the retention schedule or entry source is unusable."""


class PolicyError(ConfigurationError):
    """Raised when a retention policy definition is malformed.

    Examples: zero interval, negative count, "86400" without a count.
    """


class DurationError(PolicyError):
    """Raised when an interval string cannot be parsed as a positive duration."""


class SourceError(ConfigurationError):
    """Raised when an entry source (e.g. a directory) cannot be read at all."""


# =============================================================================
# Per-entry parse errors
# =============================================================================


class EntryParseError(SnapPruneError, ValueError):
    """Raised when a line or name does not match the configured date format.

    Attributes:
        text: The offending input text
        date_format: The strptime format it was parsed against
    """

    def __init__(self, text: str, date_format: str, reason: str | None = None) -> None:
        self.text = text
        self.date_format = date_format
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not parse {text!r} with format {date_format!r}{detail}")
