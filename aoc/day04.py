"""
Day 4: Ceres Search

Word search over a byte grid. Fully vectorized: for each direction the k-th
letter of every candidate placement is a shifted slice of the grid, so a
whole direction is checked with len(word) array comparisons.

Reversed placements are found by matching the reversed word, never by
reversing the grid.
"""

from typing import List, Tuple

import numpy as np

from aoc.inputs import parse_grid


TARGET_WORD = "XMAS"

# (dr, dc): right, down, down-right, down-left. The other four are covered
# by matching the reversed word.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def _letter_slices(grid: np.ndarray, n: int, dr: int, dc: int) -> List[np.ndarray]:
    """
    Return n aligned views: view k holds the k-th letter of every placement
    of an n-letter word running in direction (dr, dc).

    Returns an empty list if the grid is too small for the word.
    """
    H, W = grid.shape
    span_r, span_c = (n - 1) * dr, (n - 1) * abs(dc)
    if span_r >= H or span_c >= W:
        return []

    views = []
    for k in range(n):
        r0 = k * dr
        if dc >= 0:
            c0 = k * dc
        else:
            c0 = span_c - k
        views.append(grid[r0:r0 + H - span_r, c0:c0 + W - span_c])
    return views


def count_word(grid: np.ndarray, word: str) -> int:
    """Count placements of word in all eight directions (overlaps allowed)."""
    targets = [word] if word == word[::-1] else [word, word[::-1]]
    total = 0

    for dr, dc in DIRECTIONS:
        views = _letter_slices(grid, len(word), dr, dc)
        if not views:
            continue
        for target in targets:
            hit = np.ones(views[0].shape, dtype=bool)
            for view, letter in zip(views, target):
                hit &= view == ord(letter)
            total += int(hit.sum())

    return total


def count_x_mas(grid: np.ndarray) -> int:
    """
    Count A cells whose two diagonals each read MAS in either direction:

      M.S
      .A.
      M.S
    """
    H, W = grid.shape
    if H < 3 or W < 3:
        return 0

    M, A, S = ord("M"), ord("A"), ord("S")
    center = grid[1:-1, 1:-1]
    tl, tr = grid[:-2, :-2], grid[:-2, 2:]
    bl, br = grid[2:, :-2], grid[2:, 2:]

    leading = ((tl == M) & (br == S)) | ((tl == S) & (br == M))
    trailing = ((tr == M) & (bl == S)) | ((tr == S) & (bl == M))

    return int(((center == A) & leading & trailing).sum())


def part1(text: str) -> int:
    return count_word(parse_grid(text), TARGET_WORD)


def part2(text: str) -> int:
    return count_x_mas(parse_grid(text))
