"""
snapprune: periodic retention schedules for dated backup snapshots.

Decides which snapshots of an ever-growing, dated collection to keep and
which to drop, given rules such as "3 daily, 6 weekly".
"""

__version__ = "0.1.0"
