"""Helpers for lists and other sequences, in a functional style."""

from __future__ import annotations

import functools
import itertools
import math
from typing import Any, Callable, Hashable, Iterable, Sequence, TypeVar

A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K", bound=Hashable)
N = TypeVar("N", int, float)

_MISSING: Any = object()


def take_while(seq: Iterable[A], f: Callable[[A], bool]) -> list[A]:
    """Return the leading elements for which f is true."""
    return list(itertools.takewhile(f, seq))


def drop_while(seq: Iterable[A], f: Callable[[A], bool]) -> list[A]:
    """Return the elements after the leading ones for which f is true."""
    return list(itertools.dropwhile(f, seq))


def int_sequence(length: int, start: int = 0) -> list[int]:
    """Return length consecutive integers beginning at start.

    Raises ValueError if length is negative.
    """
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    return list(range(start, start + length))


def repeat(elt: A, n: int) -> list[A]:
    """Return a list holding the same object n times.

    Raises ValueError if n is negative.
    """
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")
    return [elt] * n


def repeatedly(n: int, f: Callable[[], A]) -> list[A]:
    """Call f n times and return the results, one fresh value each.

    Raises ValueError if n is negative.
    """
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")
    return [f() for _ in range(n)]


def transpose(data: Sequence[Sequence[A]]) -> list[list[A]]:
    """Transpose a matrix given as a list of rows.

    The width is taken from the first row; an empty matrix, or one whose
    first row is empty, gives an empty list. Rows shorter than the first
    raise IndexError.
    """
    if not data or not data[0]:
        return []
    return [[row[column] for row in data] for column in range(len(data[0]))]


def map_list(seq: Iterable[A], f: Callable[[A], B]) -> list[B]:
    """Return f applied to every element."""
    return [f(value) for value in seq]


def filter_list(seq: Iterable[A], f: Callable[[A], bool]) -> list[A]:
    """Return the elements for which f is true."""
    return [value for value in seq if f(value)]


def remove(seq: Iterable[A], f: Callable[[A], bool]) -> list[A]:
    """Return the elements for which f is false."""
    return [value for value in seq if not f(value)]


def sum_of(seq: Iterable[N]) -> N:
    """Return the sum of the numbers; 0 when there are none."""
    return sum(seq)


def prod(seq: Iterable[N]) -> N:
    """Return the product of the numbers; 1 when there are none."""
    return math.prod(seq)


def reverse(seq: Iterable[A]) -> list[A]:
    """Return a new list with the elements in reverse order."""
    return list(seq)[::-1]


def copy_list(seq: Iterable[A]) -> list[A]:
    """Return a shallow copy as a new list."""
    return list(seq)


def reduce(f: Callable[[A, B], A], start_value: A, seq: Iterable[B]) -> A:
    """Fold seq from the left with f, starting from start_value."""
    return functools.reduce(f, seq, start_value)


def concat(*args: Iterable[A]) -> list[A]:
    """Concatenate the given sequences into one new list."""
    return list(itertools.chain.from_iterable(args))


def _key_from_less(less: Callable[[A, A], bool]) -> Callable[[A], Any]:
    def compare(a: A, b: A) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return functools.cmp_to_key(compare)


def sort_by(seq: list[A], less: Callable[[A, A], bool]) -> list[A]:
    """Sort the list in place by a less-than function and return it."""
    seq.sort(key=_key_from_less(less))
    return seq


def sort_stable(seq: list[A], less: Callable[[A, A], bool]) -> list[A]:
    """Sort the list in place, keeping the order of equal elements, and return it."""
    seq.sort(key=_key_from_less(less))
    return seq


def every(seq: Iterable[A], pred: Callable[[A], bool]) -> bool:
    """Tell whether pred holds for every element (true when empty)."""
    return all(pred(value) for value in seq)


def some(seq: Iterable[A], pred: Callable[[A], bool]) -> bool:
    """Tell whether pred holds for at least one element."""
    return any(pred(value) for value in seq)


def partition_by(seq: Iterable[A], f: Callable[[A], K]) -> list[list[A]]:
    """Split into runs of consecutive elements for which f gives equal values."""
    return [list(group) for _, group in itertools.groupby(seq, key=f)]


def partition_at(seq: Iterable[A], compare_value: A) -> list[list[A]]:
    """Split at elements equal to compare_value, dropping those separators.

    A separator closes the current block, even when that block is empty.
    The element right after a separator always starts the next block, even
    if it is a separator itself. No empty block is added at the end.
    """
    result: list[list[A]] = []
    chunk: list[A] = []
    items = iter(seq)
    for item in items:
        if item == compare_value:
            result.append(chunk)
            chunk = []
            following = next(items, _MISSING)
            if following is not _MISSING:
                chunk.append(following)
        else:
            chunk.append(item)
    if chunk:
        result.append(chunk)
    return result


def identity(v: A) -> A:
    """Return the argument unchanged, for use as a key or mapping function."""
    (value,) = (v,)
    return value


def index_of(seq: Iterable[A], elt: A) -> int:
    """Return the index of the first element equal to elt, or -1 if absent."""
    for index, value in enumerate(seq):
        if value == elt:
            return index
    return -1