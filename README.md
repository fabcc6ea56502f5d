# handytools

Small everyday helpers for working with lists, dicts, sets, files and numbers. It also
has background futures whose result can be fetched any number of times.

The package has no dependencies outside the standard library.

## Installation

```
pip install handytools
```

## Modules

### `handytools.sequences`

Functions that take a sequence and return a new list, unless the description says otherwise.

- `take_while(seq, f)` returns the leading elements for which `f` is true.
  `drop_while(seq, f)` returns the elements that come after them.
- `int_sequence(length, start=0)` returns `length` consecutive integers.
- `repeat(elt, n)` returns a list that holds the same object `n` times.
- `repeatedly(n, f)` calls `f` `n` times and returns a list of the results, so each
  element is a fresh value.
  These three functions raise `ValueError` when the count is negative.
- `transpose(data)` transposes a list of rows. The width comes from the first row. An
  empty matrix, or one whose first row is empty, gives `[]`.
- `map_list`, `filter_list`, `remove` (keeps the elements for which the predicate is
  false), `reverse`, `copy_list`, `concat(*seqs)`.
- `sum_of(seq)` returns 0 for an empty sequence. `prod(seq)` returns 1 for an empty sequence.
- `reduce(f, start_value, seq)` is a left fold.
- `sort_by(lst, less)` and `sort_stable(lst, less)` sort a list in place with a
  less-than function and return the list. The sort is stable.
- `every(seq, pred)` and `some(seq, pred)`.
- `partition_by(seq, f)` splits the sequence into runs of neighbouring elements for which
  `f` gives equal values.
- `partition_at(seq, value)` splits the sequence at elements equal to `value` and drops
  those separators.
- `identity(v)`.
- `index_of(seq, elt)` returns the index of the first equal element, or `-1`.

### `handytools.maps`

`map_values(m, f)` and `map_keys(m, f)` return new dicts. There are also
`has_key(m, key)`, `get_keys(m)` and `get_values(m)`.

### `handytools.sets`

`Set` is a subclass of the built-in `set`. Its in-place methods alter the set and return
it, so calls can be chained:

- `add(*elts)`, `delete(elt)`, `add_set(other)`, `subtract_set(other)` and
  `intersect(other)` change the set and return it.
- `contains(elt)`, `is_subset_of(other)`, `is_superset_of(other)`, `every(pred)` and
  `some(pred)` answer questions about it.
- `copy()` returns a shallow copy.
- `to_list()` returns the elements as a list.
- `get_arbitrary_element()` returns some element. It raises `KeyError` on an empty set.

The module functions `make_set(*elts)`, `union(a, b)`, `intersection(a, b)`,
`set_difference(a, b)` and `map_set(s, f)` return new sets and leave their inputs
unchanged.

### `handytools.future`

`Future(func)`, or `future(func)`, starts `func` in a background thread. Calling the
future waits for the result and returns it. Later calls return the same result. If
`func` raised an exception, every call raises that same exception.

- `future_with_error(func)` catches an exception raised by `func` and returns it. The
  future gives `(value, None)` on success and `(None, exc)` on failure.
- `future_with_ok(func)` is for a `func` that returns `(value, ok)`. The future gives
  that pair.

### `handytools.numbers`

- `string_to_int(st)` accepts only a decimal integer with an optional sign. For anything
  else it raises `ValueError`.
- `abs_value(n)` returns the absolute value.
- `gcd(a, b)` returns the greatest common divisor. It raises `ZeroDivisionError` when the
  smaller argument is zero.
- `lcm(a, b)` returns the least common multiple.

### `handytools.files`

- `file_exists(path)` tells whether a file exists.
- `read_lines(path)` returns the lines without their `\n` or `\r\n` endings.
- `write_lines(path, lines)` writes each line followed by `\n`.
- `read_bytes(path)` and `write_bytes(path, content)` read and write binary content.
- `read_json_file(path)` parses a JSON file and returns the result.
- `write_json_file(path, data)` writes compact UTF-8 JSON with sorted keys.

## Examples

```python
from handytools.sequences import partition_by, partition_at, transpose
from handytools.sets import make_set, union
from handytools.future import future
from handytools.numbers import lcm

partition_by([1, 2, 3, 4, 5], lambda n: n // 2)   # [[1], [2, 3], [4, 5]]
partition_at([1, 2, 0, 3, 4, 0, 5], 0)            # [[1, 2], [3, 4], [5]]
transpose([[1, 2, 3], [4, 5, 6]])                 # [[1, 4], [2, 5], [3, 6]]

union(make_set(1, 2), make_set(2, 3))             # Set({1, 2, 3})

value = future(lambda: 42)   # starts running in the background
value()                      # waits, then 42; later calls return the same
lcm(10, 12)                  # 60
```

## What it does not do

The package has none of the following helpers:

- extracting integers from text
- partial application of function arguments (use `functools.partial`)
- a ternary helper
- assertion or assumption helpers

## Running the tests

```
pip install -e .[test]
pytest
```