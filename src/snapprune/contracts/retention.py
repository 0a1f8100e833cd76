# src/snapprune/contracts/retention.py
"""Retention schedule and result contracts.

These types cross the boundary between the configuration layer (which
builds policies from YAML or CLI arguments), the evaluator (which consumes
them) and the CLI (which routes the result). Timestamps are plain integer
seconds since the Unix epoch; the evaluator is calendar-agnostic.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Generic, TypeVar

from snapprune.contracts.errors import PolicyError

T = TypeVar("T")


class Alignment(StrEnum):
    """Where the bucket boundaries of a policy fall.

    ANCHOR: buckets are measured back from the latest entry's exact instant.
    INTERVAL: buckets end on whole multiples of the policy interval since the
        epoch (e.g. daily buckets end on UTC midnight).
    """

    ANCHOR = "anchor"
    INTERVAL = "interval"


@dataclass(frozen=True)
class RetentionPolicy:
    """Keep up to ``count`` entries, one per ``interval``-second bucket.

    Attributes:
        interval: Bucket length in seconds (must be > 0)
        count: Number of buckets to fill (0 keeps nothing extra)
    """

    interval: int
    count: int

    def __post_init__(self) -> None:
        """Validate interval and count.

        Zero intervals are rejected here so they can never reach the
        evaluator's modulo/multiplication arithmetic.
        """
        # bool is an int subclass; True/False are never meaningful here
        if type(self.interval) is not int:
            raise PolicyError(f"interval must be an integer number of seconds, got {self.interval!r}")
        if type(self.count) is not int:
            raise PolicyError(f"count must be an integer, got {self.count!r}")
        if self.interval <= 0:
            raise PolicyError(f"interval must be > 0 seconds, got {self.interval}")
        if self.count < 0:
            raise PolicyError(f"count must be >= 0, got {self.count}")


@dataclass(frozen=True)
class BucketWindow:
    """Half-open time range ``(lower, upper]`` considered by one bucket."""

    lower: int  # exclusive
    upper: int  # inclusive

    def contains(self, timestamp: int) -> bool:
        """Whether timestamp falls inside this window."""
        return self.lower < timestamp <= self.upper


@dataclass(frozen=True)
class RetentionResult(Generic[T]):
    """Disjoint keep/drop partition of an evaluated entry mapping.

    Both mappings are ordered by ascending timestamp. Together they hold
    exactly the keys and payload objects of the input.
    """

    keep: dict[int, T] = field(default_factory=dict)
    drop: dict[int, T] = field(default_factory=dict)
