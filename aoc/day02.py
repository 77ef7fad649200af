"""
Day 2: Red-Nosed Reports

Each line is a report of levels. A report is safe when it is strictly
monotonic and every step changes by 1, 2 or 3.
"""

from typing import Sequence

import numpy as np

from aoc.inputs import int_rows


def is_safe(levels: Sequence[int]) -> bool:
    # Too short to break either rule
    if len(levels) < 2:
        return True

    steps = np.diff(np.asarray(levels, dtype=np.int64))
    rising = bool(((steps >= 1) & (steps <= 3)).all())
    falling = bool(((steps <= -1) & (steps >= -3)).all())
    return rising or falling


def is_nearly_safe(levels: Sequence[int]) -> bool:
    """Safe, or safe once any single level is removed."""
    if is_safe(levels):
        return True

    levels = np.asarray(levels, dtype=np.int64)
    return any(is_safe(np.delete(levels, i)) for i in range(levels.size))


def part1(text: str) -> int:
    return sum(1 for report in int_rows(text) if is_safe(report))


def part2(text: str) -> int:
    return sum(1 for report in int_rows(text) if is_nearly_safe(report))
