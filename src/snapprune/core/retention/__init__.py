# src/snapprune/core/retention/__init__.py
"""Retention evaluation for dated snapshot collections.

Provides evaluate() for partitioning timestamped entries into keep/drop
under an ordered list of periodic retention policies.
"""

from snapprune.core.retention.evaluator import evaluate
from snapprune.core.retention.periods import bucket_count, bucket_windows, reference_point

__all__ = ["bucket_count", "bucket_windows", "evaluate", "reference_point"]
