"""Comparator helpers for deterministic ordering."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


def sort_selector(selector: Callable[[T], Any]) -> Callable[[T, T], int]:
    """Build a comparator that orders items ascending by a selected key.

    Use with ``functools.cmp_to_key``; since ``sorted`` is stable, items with
    equal keys keep their relative input order.

    Example:
        sorted(types, key=cmp_to_key(sort_selector(lambda t: t.name)))
    """

    def compare(a: T, b: T) -> int:
        key_a = selector(a)
        key_b = selector(b)
        if key_a < key_b:
            return -1
        if key_a > key_b:
            return 1
        return 0

    return compare
