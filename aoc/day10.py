"""
Day 10: Hoof It

Topographic map of heights 0-9; '.' is impassable. A hiking trail starts at
a 0 (trailhead), ends at a 9 and climbs by exactly 1 per orthogonal step.

Both parts sweep heights from 9 down to 0 over a sentinel-padded grid. At
height h each cell combines the values of its four neighbours at height h+1:

  - part 1 (score): value is the set of reachable 9s, one boolean channel
    per 9, combined with OR
  - part 2 (rating): value is the number of distinct trails, combined with +

No Python loops over cells; each height level is four shifted slices.
"""

from typing import Callable

import numpy as np

from aoc.inputs import parse_grid


PEAK = 9
IMPASSABLE = -1

# (dr, dc): up, down, left, right
NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def heights_from_text(text: str) -> np.ndarray:
    """int16 height map; non-digit cells become IMPASSABLE."""
    grid = parse_grid(text).astype(np.int16) - ord("0")
    return np.where((grid >= 0) & (grid <= PEAK), grid, IMPASSABLE).astype(np.int16)


def trailheads(heights: np.ndarray) -> np.ndarray:
    """Row-major (row, col) positions of every height-0 cell."""
    return np.argwhere(heights == 0)


def _climb(
    heights: np.ndarray,
    values: np.ndarray,
    combine: Callable[[np.ndarray, np.ndarray], np.ndarray],
) -> np.ndarray:
    """
    Propagate per-cell values from the peaks down to height 0.

    Args:
        heights: (H, W) height map
        values: (H, W, K) seed values, non-zero only at peaks
        combine: np.logical_or or np.add

    Returns:
        values: (H, W, K) with every cell filled in from its uphill neighbours
    """
    H, W = heights.shape
    padded_heights = np.pad(heights, 1, mode='constant', constant_values=IMPASSABLE)

    for h in range(PEAK - 1, -1, -1):
        padded_values = np.pad(values, ((1, 1), (1, 1), (0, 0)), mode='constant')
        acc = np.zeros_like(values)

        for dr, dc in NEIGHBOURS:
            nh = padded_heights[1 + dr:1 + dr + H, 1 + dc:1 + dc + W]
            nv = padded_values[1 + dr:1 + dr + H, 1 + dc:1 + dc + W]
            uphill = (nh == h + 1)[:, :, None]
            acc = combine(acc, np.where(uphill, nv, 0).astype(values.dtype))

        values = np.where((heights == h)[:, :, None], acc, values)

    return values


def total_score(heights: np.ndarray) -> int:
    """Sum over trailheads of the number of distinct peaks reachable."""
    peaks = np.argwhere(heights == PEAK)
    H, W = heights.shape

    seed = np.zeros((H, W, len(peaks)), dtype=bool)
    seed[peaks[:, 0], peaks[:, 1], np.arange(len(peaks))] = True

    reach = _climb(heights, seed, np.logical_or)
    return int(reach[heights == 0].sum())


def total_rating(heights: np.ndarray) -> int:
    """Sum over trailheads of the number of distinct trails."""
    seed = (heights == PEAK)[:, :, None].astype(np.int64)
    ways = _climb(heights, seed, np.add)
    return int(ways[heights == 0].sum())


def part1(text: str) -> int:
    return total_score(heights_from_text(text))


def part2(text: str) -> int:
    return total_rating(heights_from_text(text))
