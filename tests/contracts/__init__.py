"""Tests for contracts package.

Covers the shared retention types: policy validation, bucket windows,
result defaults and the alignment enum.
"""
