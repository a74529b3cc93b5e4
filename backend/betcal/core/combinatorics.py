from __future__ import annotations

import itertools
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def power_set(items: Sequence[T]) -> list[list[T]]:
    """Every subset of ``items``, from ``[]`` up to the full sequence.

    Subset ``mask`` holds ``items[i]`` when bit ``i`` of ``mask`` is set, so
    the ordering is stable for a given input order.
    """
    size = len(items)
    return [[items[i] for i in range(size) if mask >> i & 1] for mask in range(1 << size)]


def combinations(items: Sequence[T], choose_count: int) -> list[list[T]]:
    if not items:
        return []
    if choose_count < 0 or len(items) < choose_count:
        return []
    return [list(combo) for combo in itertools.combinations(items, choose_count)]
