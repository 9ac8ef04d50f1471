"""Core type definitions for indexstore."""

type Index = int
"""Permanent position assigned to a value at insertion time.

Indices start at 0, grow by exactly one per insertion and are never handed
out twice by the same store (until an explicit `reset()`).
"""
