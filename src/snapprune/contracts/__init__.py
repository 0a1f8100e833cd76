"""Shared contracts for cross-boundary data types.

This package is a LEAF MODULE with no outbound dependencies to core.
Settings classes (PolicySettings, SnapPruneSettings) are NOT re-exported
here - import them from snapprune.core.config.

Import patterns:
    # Contracts (lightweight, no heavy dependencies)
    from snapprune.contracts import RetentionPolicy, RetentionResult

    # Settings classes (from core, pulls in pydantic/dynaconf)
    from snapprune.core.config import SnapPruneSettings
"""

from snapprune.contracts.errors import (
    ConfigurationError,
    DurationError,
    EntryParseError,
    PolicyError,
    SnapPruneError,
    SourceError,
)
from snapprune.contracts.retention import (
    Alignment,
    BucketWindow,
    RetentionPolicy,
    RetentionResult,
)

__all__ = [
    "Alignment",
    "BucketWindow",
    "ConfigurationError",
    "DurationError",
    "EntryParseError",
    "PolicyError",
    "RetentionPolicy",
    "RetentionResult",
    "SnapPruneError",
    "SourceError",
]
