"""
Module: batch_helpers.py
Description: Utility functions for batch operations.

Provides the chunking used to group hooks before each delivery round.

Key Components:
- chunk_list(): Split a sequence into consecutive fixed-size chunks

Dependencies: typing
"""

from typing import List, Sequence, TypeVar

T = TypeVar('T')


def chunk_list(items: Sequence[T], chunk_size: int) -> List[List[T]]:
    """
    Split a sequence into consecutive chunks of the given size.

    The last chunk holds the remainder. Order is preserved within and
    across chunks, and an empty input yields no chunks at all.

    Args:
        items: Ordered items to split
        chunk_size: Maximum size of each chunk

    Returns:
        List of chunks, where each chunk is a list of items

    Raises:
        ValueError: If chunk_size is not a positive integer

    Example:
        >>> chunk_list([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
        >>> chunk_list([], 3)
        []
    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise ValueError("chunk_size must be an integer")
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    return [list(items[i:i + chunk_size]) for i in range(0, len(items), chunk_size)]
