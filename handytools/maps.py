"""Helpers for working with dictionaries."""

from __future__ import annotations

from typing import Callable, Hashable, Mapping, TypeVar

K = TypeVar("K", bound=Hashable)
K2 = TypeVar("K2", bound=Hashable)
V = TypeVar("V")
V2 = TypeVar("V2")


def map_values(m: Mapping[K, V], f: Callable[[V], V2]) -> dict[K, V2]:
    """Return a new dict with f applied to every value."""
    return {key: f(value) for key, value in m.items()}


def map_keys(m: Mapping[K, V], f: Callable[[K], K2]) -> dict[K2, V]:
    """Return a new dict with f applied to every key."""
    return {f(key): value for key, value in m.items()}


def has_key(m: Mapping[K, V], key: K) -> bool:
    """Tell whether a mapping contains a key."""
    return key in m


def get_keys(m: Mapping[K, V]) -> list[K]:
    """Return the keys of a mapping as a list."""
    return list(m.keys())


def get_values(m: Mapping[K, V]) -> list[V]:
    """Return the values of a mapping as a list."""
    return list(m.values())