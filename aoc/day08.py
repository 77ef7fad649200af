"""
Day 8: Resonant Collinearity

Antennas share a frequency when they share a character. Every pair of
same-frequency antennas a, b (offset d = b - a) creates antinodes:

  - part 1: at a - d and b + d
  - part 2: at a + m*d for every integer m that stays on the map

Antinodes are collected into a boolean mask so overlaps count once.
"""

from typing import Dict

import numpy as np

from aoc.inputs import parse_grid


EMPTY = ord(".")


def antennas_by_frequency(grid: np.ndarray) -> Dict[str, np.ndarray]:
    """Map frequency char -> (k, 2) array of antenna positions."""
    groups = {}
    for value in np.unique(grid[grid != EMPTY]).tolist():
        groups[chr(value)] = np.argwhere(grid == value)
    return groups


def _in_bounds(points: np.ndarray, H: int, W: int) -> np.ndarray:
    return points[
        (points[:, 0] >= 0) & (points[:, 0] < H)
        & (points[:, 1] >= 0) & (points[:, 1] < W)
    ]


def antinode_mask(grid: np.ndarray, resonant: bool = False) -> np.ndarray:
    """
    Boolean mask of antinode positions.

    Args:
        grid: Antenna map
        resonant: If True, use the part 2 rule (all multiples of the offset)

    Returns:
        mask: bool array, same shape as grid
    """
    H, W = grid.shape
    mask = np.zeros((H, W), dtype=bool)

    if resonant:
        multiples = np.arange(-max(H, W), max(H, W) + 1)
    else:
        multiples = np.array([-1, 2])

    for positions in antennas_by_frequency(grid).values():
        if len(positions) < 2:
            continue

        # All unordered pairs at once
        i, j = np.triu_indices(len(positions), k=1)
        a = positions[i]
        d = positions[j] - a

        # points[p, m] = a[p] + multiples[m] * d[p]
        points = a[:, None, :] + multiples[None, :, None] * d[:, None, :]
        points = _in_bounds(points.reshape(-1, 2), H, W)
        mask[points[:, 0], points[:, 1]] = True

    return mask


def part1(text: str) -> int:
    return int(antinode_mask(parse_grid(text)).sum())


def part2(text: str) -> int:
    return int(antinode_mask(parse_grid(text), resonant=True).sum())
