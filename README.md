# indexset

A hash set whose values keep a consistent order. Insertions and removals set
that order. The values and their hashes do not. Values sit at compact indices
`0..len(s)` and can be looked up by value or by position.

The package has no dependencies outside the standard library.

## Installation

```
pip install indexset
```

## Usage

```python
from indexset.indexset import IndexSet

letters = IndexSet("a short treatise on fungi")
assert "s" in letters and "y" not in letters

s = IndexSet([0, 1, 2, 3, 4])
s.insert(2)              # already present: returns False, order unchanged
s.get_index_of(3)        # 3
s[0]                     # 0
s.swap_remove(1)         # moves the last value into index 1 -> [0, 4, 2, 3]
s.shift_remove(2)        # shifts the later values down   -> [0, 4, 3]
list(s)                  # [0, 4, 3]
```

Lookups that find nothing return `None`. This applies to `get`, `get_full`,
`get_index_of`, `get_index`, `first`, `last`, `pop`, `swap_take`,
`shift_take`, `swap_remove_index` and `shift_remove_index`. Indexing with
`s[i]` raises `IndexError` when `i` is out of range.

`replace` and `replace_full` store the new value in place of an equal one. They
return the value that was replaced.

### Set operations keep order

`difference` and `intersection` yield values in the order of the left set.
`union` yields the left set, then the values found only in the right set.
`symmetric_difference` yields the left-only values, then the right-only
values. These methods return lazy iterators. The operators `&`, `|`, `^` and
`-` build new `IndexSet`s in the same order.

```python
a = IndexSet(range(0, 3))
b = IndexSet(range(3, 6))
list(b | a)                # [3, 4, 5, 0, 1, 2]
a == IndexSet([2, 1, 0])   # True: equality ignores order
a.is_disjoint(b)           # True
```

The same operations are available as plain functions in `indexset.setops`:
`difference`, `intersection`, `symmetric_difference` and `union`. They take any
two collections that can be iterated in order and tested for membership.

### Indices, ranges and slices

- `get_index`, `first`, `last`, `get_range` and `as_slice` give positional
  access.
- `move_index`, `swap_indices`, `truncate`, `split_off`, `drain`, `splice` and
  `retain` change which values are held or where they sit.
- `drain(bounds)` and `splice(bounds, replace_with)` return the removed values
  as a list.

Ranges are given as a `slice` or a `range` with a step of one, as in
`s.drain(slice(1, 3))` or `s[2:]`. Bounds that do not fit raise `IndexError`
in `s[...]`, `drain` and `splice`. A start after the end raises `ValueError`.
`get_range` returns `None` instead of raising. The resolution rules are in
`indexset.ranges`: `simplify_range` raises on bad bounds, and
`try_simplify_range` returns `None` for them.

A `SetSlice`, from `indexset.slice`, is an ordered, read-only run of values.
Unlike the set, it compares by order, supports `<` and `<=`, and can be
hashed. It offers `get_index`, `get_range`, `first`, `last`, `split_at`,
`split_first` and `split_last`.

### Sorting and searching

`sort(key=None, reverse=False)`, `sort_by(cmp)`, `sort_by_cached_key(sort_key)`
and `reverse()` reorder the set in place. `sorted_by(cmp)` returns an iterator
over the sorted values and leaves the set as it is. Comparators return a
negative number, zero or a positive number.

`binary_search`, `binary_search_by` and `binary_search_by_key` work on sorted
sets and slices. Each returns `(True, index)` when the target is found. When
it is not, each returns `(False, index)`, where `index` is the position that
would keep the order. `partition_point(pred)` returns the index of the first
value for which `pred` is false.

```python
s = IndexSet([1, 2, 4, 6, 8, 9])
s.binary_search(6)                    # (True, 3)
s.binary_search(5)                    # (False, 3)
s.partition_point(lambda x: x < 7)    # 4
```

## What it does not do

The package is an in-memory collection only. It does not serialize sets to
or from any file or wire format, and it has no parallel iteration or sorting.
It does not offer a choice of hash function or any capacity management.
Values must be hashable, and ordinary Python hashing and equality decide
membership.

## Running the tests

```
pip install -e .[test]
pytest
```