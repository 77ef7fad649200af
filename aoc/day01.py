"""
Day 1: Historian Hysteria

Two columns of location IDs. Part 1 pairs the lists smallest-to-smallest and
sums the distances; part 2 weights each left ID by how often it appears on
the right.
"""

from typing import Tuple

import numpy as np

from aoc.inputs import int_rows


def parse(text: str) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split the input into (left, right) int64 arrays.

    Raises:
        ValueError: if a non-blank line does not hold exactly two integers
    """
    rows = int_rows(text)
    for i, row in enumerate(rows):
        if len(row) != 2:
            raise ValueError(f"Row {i} has {len(row)} values, expected 2")

    pairs = np.array(rows, dtype=np.int64).reshape(-1, 2)
    return pairs[:, 0], pairs[:, 1]


def part1(text: str) -> int:
    left, right = parse(text)
    return int(np.abs(np.sort(left) - np.sort(right)).sum())


def part2(text: str) -> int:
    left, right = parse(text)
    if right.size == 0:
        return 0

    # Histogram of the right list, then look each left ID up in it
    values, counts = np.unique(right, return_counts=True)
    idx = np.clip(np.searchsorted(values, left), 0, values.size - 1)
    matched = values[idx] == left
    occurrences = np.where(matched, counts[idx], 0)

    return int((left * occurrences).sum())
