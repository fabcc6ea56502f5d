"""A mathematical set with chainable, in-place helpers."""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterable, TypeVar

C = TypeVar("C", bound=Hashable)
D = TypeVar("D", bound=Hashable)


class Set(set, Generic[C]):
    """An unordered collection holding each element once.

    The in-place methods alter the set and return it, so calls can be chained.
    """

    def is_subset_of(self, superset: Iterable[C]) -> bool:
        """Tell whether every element is also in superset."""
        return self.issubset(superset)

    def is_superset_of(self, subset: Iterable[C]) -> bool:
        """Tell whether every element of subset is also in this set."""
        return self.issuperset(subset)

    def copy(self) -> Set[C]:
        """Return a shallow copy of the set."""
        return type(self)(self)

    def contains(self, elt: C) -> bool:
        """Tell whether elt is in the set."""
        return elt in self

    def add(self, *args: C) -> Set[C]:  # type: ignore[override]
        """Add any number of elements; return the set."""
        self.update(args)
        return self

    def delete(self, elt: C) -> Set[C]:
        """Remove elt if present; return the set."""
        self.discard(elt)
        return self

    def add_set(self, other: Iterable[C]) -> Set[C]:
        """Add all elements of other; return the set."""
        self.update(other)
        return self

    def subtract_set(self, other: Iterable[C]) -> Set[C]:
        """Remove all elements of other; return the set."""
        self.difference_update(other)
        return self

    def intersect(self, other: Iterable[C]) -> Set[C]:
        """Keep only elements also in other; return the set."""
        self.intersection_update(other)
        return self

    def to_list(self) -> list[C]:
        """Return the elements as a list in no particular order."""
        return list(self)

    def get_arbitrary_element(self) -> C:
        """Return some element of the set without removing it.

        Raises KeyError if the set is empty.
        """
        for elt in self:
            return elt
        raise KeyError("requested element from an empty set")

    def every(self, pred: Callable[[C], bool]) -> bool:
        """Tell whether pred holds for every element (true when empty)."""
        return all(pred(elt) for elt in self)

    def some(self, pred: Callable[[C], bool]) -> bool:
        """Tell whether pred holds for at least one element."""
        return any(pred(elt) for elt in self)


def make_set(*args: C) -> Set[C]:
    """Build a set from the given elements."""
    return Set(args)


def union(set1: Iterable[C], set2: Iterable[C]) -> Set[C]:
    """Return a new set with the elements of both sets."""
    return Set(set1).add_set(set2)


def intersection(set1: Iterable[C], set2: Iterable[C]) -> Set[C]:
    """Return a new set with the elements present in both sets."""
    first, second = Set(set1), Set(set2)
    smaller, larger = (first, second) if len(first) <= len(second) else (second, first)
    return Set(elt for elt in smaller if elt in larger)


def set_difference(set1: Iterable[C], set2: Iterable[C]) -> Set[C]:
    """Return a new set with the elements of set1 that are not in set2."""
    excluded = Set(set2)
    return Set(elt for elt in set1 if elt not in excluded)


def map_set(s: Iterable[C], f: Callable[[C], D]) -> Set[D]:
    """Return the set of f applied to every element; it may be smaller."""
    return Set(f(elt) for elt in s)