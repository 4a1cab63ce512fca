"""
Module: test_batch_helpers.py
Description: Unit tests for hook list chunking.
"""

import pytest

from hookfanout.utils.batch_helpers import chunk_list


class TestChunkList:
    """Test cases for chunk_list."""

    def test_splits_into_consecutive_chunks(self):
        assert chunk_list([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]

    def test_exact_multiple_has_no_short_chunk(self):
        assert chunk_list(list("abcdef"), 3) == [["a", "b", "c"], ["d", "e", "f"]]

    def test_chunk_larger_than_input(self):
        assert chunk_list([1, 2, 3], 10) == [[1, 2, 3]]

    def test_chunk_size_one(self):
        assert chunk_list(["x", "y"], 1) == [["x"], ["y"]]

    def test_empty_input_yields_no_chunks(self):
        """An empty list is zero chunks, not one empty chunk."""
        assert chunk_list([], 3) == []

    def test_accepts_tuples(self):
        assert chunk_list((1, 2, 3), 2) == [[1, 2], [3]]

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 7, 11])
    def test_partition_completeness(self, size):
        """Chunks rebuild the input in order and only the last may be short."""
        items = list(range(23))
        chunks = chunk_list(items, size)

        assert [item for chunk in chunks for item in chunk] == items
        assert all(len(chunk) <= size for chunk in chunks)
        assert all(len(chunk) == size for chunk in chunks[:-1])
        assert 1 <= len(chunks[-1]) <= size

    @pytest.mark.parametrize("size", [0, -1, -10])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(ValueError, match="chunk_size must be positive"):
            chunk_list([1, 2, 3], size)

    def test_non_positive_size_rejected_for_empty_input(self):
        with pytest.raises(ValueError):
            chunk_list([], 0)

    @pytest.mark.parametrize("size", [2.5, "3", None, True])
    def test_non_integer_size_rejected(self, size):
        with pytest.raises(ValueError, match="chunk_size must be an integer"):
            chunk_list([1, 2, 3], size)
