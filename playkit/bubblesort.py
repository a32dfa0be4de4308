"""Bubble sort with early exit."""

from __future__ import annotations

import operator
from typing import Any, Callable, MutableSequence, Optional


def bubble_sort(
    items: MutableSequence[Any], less: Optional[Callable[[Any, Any], bool]] = None
) -> None:
    """Sort ``items`` in place, stopping once a pass makes no swaps."""
    less = less or operator.lt
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if not less(items[j], items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            return