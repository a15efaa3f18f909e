"""Reorder a mutable sequence in place according to a permutation index."""

from __future__ import annotations

import operator
import os
from collections.abc import Iterable, MutableSequence, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, TypeVar

__all__ = [
    "PermuteError",
    "InvalidIndexError",
    "LengthMismatchError",
    "PermuteIndex",
    "try_order_by_index_inplace",
    "order_by_index_inplace",
    "try_order_by_index_parallel_inplace_with_threads",
    "try_order_by_index_parallel_inplace",
]

T = TypeVar("T")

PARALLEL_THRESHOLD = 10_000


class PermuteError(ValueError):
    """Base error for invalid permutations and mismatched lengths."""


class InvalidIndexError(PermuteError):
    """The index is not a permutation of ``0..len``."""

    def __init__(self) -> None:
        super().__init__("Invalid index: indices must be unique and in 0..len")


class LengthMismatchError(PermuteError):
    """The index length differs from the data length."""

    def __init__(self) -> None:
        super().__init__("Index length must match data length")


def _is_permutation(index: Sequence[int]) -> bool:
    size = len(index)
    seen = [False] * size
    for i in index:
        if i < 0 or i >= size or seen[i]:
            return False
        seen[i] = True
    return True


@dataclass(frozen=True)
class PermuteIndex:
    """A permutation of ``0..len``; position ``i`` names the source of element ``i``."""

    indices: tuple[int, ...]

    @classmethod
    def try_new(cls, index: Iterable[int]) -> PermuteIndex:
        """Build a validated index, raising :class:`InvalidIndexError` if invalid."""
        indices = tuple(operator.index(i) for i in index)
        if not _is_permutation(indices):
            raise InvalidIndexError()
        return cls(indices)

    @classmethod
    def new_unchecked(cls, index: Iterable[int]) -> PermuteIndex:
        """Build an index without validating it."""
        return cls(tuple(index))

    def __len__(self) -> int:
        return len(self.indices)

    def generate_swaps(self) -> list[tuple[int, int]]:
        """Return the swaps that, applied in order, realise this permutation."""
        indices = self.indices
        visited = [False] * len(indices)
        swaps: list[tuple[int, int]] = []
        for start, target in enumerate(indices):
            if visited[start] or target == start:
                continue
            x = start
            while not visited[indices[x]]:
                visited[x] = True
                x = indices[x]
                swaps.append((start, x))
        swaps.reverse()
        return swaps


def _as_index(index: PermuteIndex | Iterable[int]) -> PermuteIndex:
    if isinstance(index, PermuteIndex):
        return index
    return PermuteIndex.try_new(index)


def try_order_by_index_inplace(data: MutableSequence[Any], index: PermuteIndex) -> None:
    """Reorder ``data`` so that ``data[i]`` becomes the old ``data[index[i]]``.

    Raises :class:`LengthMismatchError` if the lengths differ.
    """
    if len(index) != len(data):
        raise LengthMismatchError()
    for a, b in index.generate_swaps():
        data[a], data[b] = data[b], data[a]


def order_by_index_inplace(
    data: MutableSequence[Any], index: PermuteIndex | Iterable[int]
) -> None:
    """Reorder ``data`` in place; a plain sequence of ints is validated first."""
    try_order_by_index_inplace(data, _as_index(index))


def try_order_by_index_parallel_inplace_with_threads(
    data: MutableSequence[Any], index: PermuteIndex, num_threads: int
) -> None:
    """Reorder ``data`` in place, gathering chunks on ``num_threads`` threads.

    Small inputs (fewer than 10,000 elements) or a single thread fall back to
    :func:`try_order_by_index_inplace`.
    """
    size = len(data)
    if size < PARALLEL_THRESHOLD or num_threads <= 1:
        try_order_by_index_inplace(data, index)
        return
    if size != len(index):
        raise LengthMismatchError()

    indices = index.indices
    chunk_size = -(-size // num_threads)
    source = list(data)

    def gather(start: int) -> list[Any]:
        return [source[i] for i in indices[start : start + chunk_size]]

    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        chunks = pool.map(gather, range(0, size, chunk_size))
        buffer = [item for chunk in chunks for item in chunk]

    data[:] = buffer


def try_order_by_index_parallel_inplace(
    data: MutableSequence[Any], index: PermuteIndex
) -> None:
    """Like the threaded variant, using as many threads as there are CPUs."""
    num_threads = os.cpu_count() or 1
    try_order_by_index_parallel_inplace_with_threads(data, index, num_threads)