# tests/property/__init__.py
"""Property-based tests for snapprune.

Property-based testing validates invariants that must hold for ALL inputs,
not just the specific schedules we think of.

Test categories:
- core/: Retention evaluator partition, anchor, bound and idempotence properties
"""
