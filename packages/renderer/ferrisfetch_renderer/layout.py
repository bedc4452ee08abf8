"""Pure layout helpers: column merge and usage bar arithmetic."""

from __future__ import annotations

from typing import Sequence, TypeVar

L = TypeVar("L")
R = TypeVar("R")

BAR_SLOTS = 10
GUTTER = "  "


def zip_padded(left: Sequence[L], right: Sequence[R], left_pad: L, right_pad: R) -> list[tuple[L, R]]:
    """Pair two sequences row by row, padding the shorter one to the longer."""
    rows = max(len(left), len(right))
    return [
        (left[i] if i < len(left) else left_pad, right[i] if i < len(right) else right_pad)
        for i in range(rows)
    ]


def ratio_half_up(used: int, total: int, scale: int) -> int:
    """``round(used / total * scale)`` with halves rounded away from zero, in exact integers."""
    if total <= 0:
        return 0
    used = min(max(used, 0), total)
    return (2 * used * scale + total) // (2 * total)


def bar_slots(used: int, total: int, slots: int = BAR_SLOTS) -> int:
    return min(max(ratio_half_up(used, total, slots), 0), slots)


def usage_percent(used: int, total: int) -> int:
    return ratio_half_up(used, total, 100)
