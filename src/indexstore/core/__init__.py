"""Core primitives shared across indexstore modules."""

from indexstore.core.types import Index

__all__ = [
    "Index",
]
