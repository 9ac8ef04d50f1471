"""Index allocation service.

IndexAllocator is a stateful service that hands out monotonically increasing
indices and never recycles them.
"""

from __future__ import annotations

import sys
import warnings

from indexstore.core.types import Index


class IndexExhaustedError(OverflowError):
    """Raised when no further index can be allocated."""

    pass


class IndexAllocator:
    """Allocates append-only indices with an explicit exhaustion limit.

    Unlike a recycling allocator there is no free list: every index is issued
    at most once. A single ResourceWarning is emitted when the issued count
    crosses `warn_ratio * max_index`.

    Args:
        max_index: Number of indices available (indices 0..max_index-1).
        warn_ratio: Fraction of the index space after which to warn.
    """

    def __init__(self, max_index: int = sys.maxsize, warn_ratio: float = 0.9):
        """Initialize allocator.

        Args:
            max_index: Number of indices available (default sys.maxsize).
            warn_ratio: Fraction of the index space after which to warn.

        Raises:
            ValueError: If max_index < 1 or warn_ratio is outside (0, 1].
        """
        if max_index < 1:
            raise ValueError(f"max_index must be >= 1, got {max_index}")
        if not 0 < warn_ratio <= 1:
            raise ValueError(f"warn_ratio must be in (0, 1], got {warn_ratio}")
        self._max_index = max_index
        self._warn_ratio = warn_ratio
        self._warn_at = max(1, int(max_index * warn_ratio))
        self._next_index = 0
        self._warned = False

    @property
    def max_index(self) -> int:
        """Total number of indices this allocator can issue."""
        return self._max_index

    @property
    def warn_ratio(self) -> float:
        """Fraction of the index space after which a warning is emitted."""
        return self._warn_ratio

    def allocate(self) -> Index:
        """Issue the next index.

        Returns:
            Newly allocated index.

        Raises:
            IndexExhaustedError: If all max_index indices were already issued.
                Allocator state is left unchanged.
        """
        index = self._next_index
        if index >= self._max_index:
            raise IndexExhaustedError(
                f"Index space exhausted: all {self._max_index} indices have been assigned"
            )
        self._next_index += 1
        if not self._warned and self._next_index >= self._warn_at:
            self._warned = True
            warnings.warn(
                f"{self._next_index} of {self._max_index} indices assigned; "
                f"index space is nearly exhausted.",
                ResourceWarning,
                stacklevel=3,
            )
        return index

    def peek(self) -> Index:
        """Return the index the next allocate() call will issue."""
        return self._next_index

    def reset(self) -> None:
        """Restart numbering at 0 and re-arm the exhaustion warning."""
        self._next_index = 0
        self._warned = False

    def restore(self, next_index: int) -> None:
        """Resume numbering from a previously saved position.

        Args:
            next_index: Index to issue next.

        Raises:
            ValueError: If next_index is negative or beyond max_index.
        """
        if not 0 <= next_index <= self._max_index:
            raise ValueError(
                f"Cannot restore next_index {next_index} outside [0, {self._max_index}]"
            )
        self._next_index = next_index
        self._warned = next_index >= self._warn_at
