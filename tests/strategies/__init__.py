# tests/strategies/__init__.py
"""Hypothesis strategies for property-based tests.

Re-exports commonly used strategies for convenience:
    from tests.strategies import entry_maps, policy_lists, STANDARD_SETTINGS
"""

from tests.strategies.retention import alignments, duration_strings, entry_maps, policies, policy_lists, timestamps
from tests.strategies.settings import INVARIANT_SETTINGS, QUICK_SETTINGS, STANDARD_SETTINGS

__all__ = [
    "INVARIANT_SETTINGS",
    "QUICK_SETTINGS",
    "STANDARD_SETTINGS",
    "alignments",
    "duration_strings",
    "entry_maps",
    "policies",
    "policy_lists",
    "timestamps",
]
