# index_permute

Reorder a mutable sequence in place so that position `i` ends up holding the
element that was at `index[i]`. The sequential path only swaps elements; it
never copies them.

## Installation

```
pip install index_permute
```

## Usage

```python
from index_permute.permute import PermuteIndex, order_by_index_inplace

index = PermuteIndex.try_new([2, 0, 1])
data = [10, 20, 30]
order_by_index_inplace(data, index)
assert data == [30, 10, 20]
```

`PermuteIndex.try_new` checks the index before it is used. Every value must
appear exactly once and lie in `0..len(index)`. If that is not the case,
`InvalidIndexError` is raised.

`PermuteIndex.new_unchecked` wraps an index without checking it. Use it only
when you already know the index is a valid permutation.

`PermuteIndex.generate_swaps()` returns the list of `(a, b)` position pairs
that, swapped in order, carry out the permutation:

```python
PermuteIndex.try_new([2, 0, 1, 4, 3]).generate_swaps()
# [(3, 4), (0, 1), (0, 2)]
```

### Handling errors

`try_order_by_index_inplace(data, index)` takes a `PermuteIndex` and raises
`LengthMismatchError` when the index and the data differ in length.

`order_by_index_inplace(data, index)` does the same work, but also accepts a
plain sequence of integers as the index; such a sequence is validated with
`PermuteIndex.try_new` first, so it may raise `InvalidIndexError` as well as
`LengthMismatchError`.

Both errors derive from `PermuteError`, which is itself a `ValueError`:

```python
from index_permute.permute import (
    PermuteError,
    PermuteIndex,
    try_order_by_index_inplace,
)

try:
    try_order_by_index_inplace([1, 2], PermuteIndex.try_new([0, 1, 2]))
except PermuteError as exc:
    print(exc)  # Index length must match data length
```

### Parallel variant

`try_order_by_index_parallel_inplace_with_threads(data, index, num_threads)`
takes a snapshot of `data`, gathers the reordered elements in chunks across
worker threads and then writes them back into `data` in one slice assignment.
Inputs shorter than 10,000 elements, or a thread count of one or less, use the
sequential swap path instead. The function
`try_order_by_index_parallel_inplace(data, index)` uses one thread per
available CPU.

## Running the tests

```
pip install -e ".[test]"
pytest
```