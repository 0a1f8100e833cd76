# src/snapprune/core/retention/periods.py
"""Bucket arithmetic for periodic retention policies.

All values are integer seconds since the epoch. Python integers do not
wrap, so windows whose lower bound reaches before the epoch simply have a
negative lower bound and still contain timestamp 0.
"""

from collections.abc import Iterator

from snapprune.contracts.retention import Alignment, BucketWindow, RetentionPolicy


def reference_point(latest: int, interval: int, alignment: Alignment) -> int:
    """Return the instant from which a policy's buckets are counted back.

    Args:
        latest: Timestamp of the newest entry (the anchor)
        interval: Policy interval in seconds
        alignment: Bucket alignment mode

    Returns:
        ``latest`` itself for ANCHOR alignment; for INTERVAL alignment the
        first multiple of ``interval`` strictly after ``latest``. An anchor
        sitting exactly on a multiple moves a full interval forward.
    """
    if alignment is Alignment.ANCHOR:
        return latest
    return latest - latest % interval + interval


def bucket_count(policy: RetentionPolicy, alignment: Alignment) -> int:
    """Number of windows a policy walks.

    Interval-aligned policies walk one extra window. The anchor satisfies one
    of the first two windows: window 0 normally, window 1 when it sits exactly
    on a multiple of the interval and window 0 is left empty.
    """
    if alignment is Alignment.INTERVAL:
        return policy.count + 1
    return policy.count


def bucket_windows(latest: int, policy: RetentionPolicy, alignment: Alignment) -> Iterator[BucketWindow]:
    """Yield the policy's windows, newest first.

    Window ``n`` is ``(reference - (n + 1) * interval, reference - n * interval]``.
    Windows are produced lazily so callers can stop once they pass the
    oldest entry, regardless of how large ``count`` is.
    """
    reference = reference_point(latest, policy.interval, alignment)
    for n in range(bucket_count(policy, alignment)):
        yield BucketWindow(
            lower=reference - (n + 1) * policy.interval,
            upper=reference - n * policy.interval,
        )
