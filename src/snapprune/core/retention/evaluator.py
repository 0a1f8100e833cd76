# src/snapprune/core/retention/evaluator.py
"""Retention evaluator: partition dated entries into keep and drop.

The evaluator is a pure function. It performs no I/O, holds no state
between calls and never mutates the mapping it is given; callers may act
on ``drop`` (e.g. delete snapshots) once it has returned.

Algorithm:
    1. The newest entry (the anchor) is always kept.
    2. Each policy, in order, walks its buckets back from the anchor.
    3. A bucket already holding a kept entry is satisfied and skipped, so
       policies share entries and re-evaluating ``keep`` is idempotent.
    4. Otherwise the newest not-yet-kept entry inside the bucket is kept.
       Empty buckets stay empty.
    5. Every entry never kept is dropped.
"""

from bisect import bisect_right, insort
from collections.abc import Iterable, Mapping
from typing import TypeVar

from snapprune.contracts.retention import Alignment, BucketWindow, RetentionPolicy, RetentionResult
from snapprune.core.retention.periods import bucket_windows

T = TypeVar("T")


def _newest_index_in(timestamps: list[int], window: BucketWindow) -> int | None:
    """Index of the largest timestamp inside window, or None.

    Args:
        timestamps: Sorted ascending timestamps
        window: Half-open window (lower, upper]
    """
    idx = bisect_right(timestamps, window.upper)
    if idx and timestamps[idx - 1] > window.lower:
        return idx - 1
    return None


def evaluate(
    policies: Iterable[RetentionPolicy],
    entries: Mapping[int, T],
    *,
    alignment: Alignment = Alignment.ANCHOR,
) -> RetentionResult[T]:
    """Apply retention policies to a timestamp-keyed mapping.

    Args:
        policies: Retention policies, evaluated in order
        entries: Mapping of epoch-second timestamps to opaque payloads
        alignment: Bucket alignment mode (default: measured from the anchor)

    Returns:
        RetentionResult whose keep/drop mappings partition ``entries``,
        each ordered by ascending timestamp.
    """
    if not entries:
        return RetentionResult()

    remaining = sorted(entries)
    oldest = remaining[0]
    latest = remaining.pop()
    kept = [latest]

    for policy in policies:
        if not remaining:
            break
        for window in bucket_windows(latest, policy, alignment):
            if window.upper < oldest:
                # Every later window is older still
                break
            if _newest_index_in(kept, window) is not None:
                continue
            idx = _newest_index_in(remaining, window)
            if idx is not None:
                insort(kept, remaining.pop(idx))

    return RetentionResult(
        keep={ts: entries[ts] for ts in kept},
        drop={ts: entries[ts] for ts in remaining},
    )
