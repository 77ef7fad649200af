"""
Day 6: Guard Gallivant

A guard walks a lab map: straight ahead until the next cell is an obstacle,
then a 90 degree right turn. The walk ends when the guard steps off the map.

Rather than stepping cell by cell, the walk jumps a whole leg at a time.
For every cell and heading the nearest obstacle is precomputed with
cumulative max/min scans, so each leg is one table lookup. Part 2 reuses the
same tables and overlays the single extra obstruction on the fly.

  - part 1: distinct cells visited (bitset over row-major cell index)
  - part 2: cells where one new obstruction traps the guard in a loop
"""

from typing import Optional, Tuple

import numpy as np

from aoc.bitset import Bitset
from aoc.inputs import parse_grid


# Headings in clockwise order: up, right, down, left
UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3
GUARD_HEADINGS = {"^": UP, ">": RIGHT, "v": DOWN, "<": LEFT}

Cell = Tuple[int, int]


def _nearest_blockers(obstacles: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Nearest obstacle strictly before / after each cell along axis 1.

    Returns:
        before: column of the nearest obstacle to the left, -1 if none
        after: column of the nearest obstacle to the right, W if none
    """
    H, W = obstacles.shape
    cols = np.broadcast_to(np.arange(W), (H, W))

    last_seen = np.maximum.accumulate(np.where(obstacles, cols, -1), axis=1)
    before = np.full((H, W), -1, dtype=np.int64)
    before[:, 1:] = last_seen[:, :-1]

    next_seen = np.minimum.accumulate(np.where(obstacles, cols, W)[:, ::-1], axis=1)[:, ::-1]
    after = np.full((H, W), W, dtype=np.int64)
    after[:, :-1] = next_seen[:, 1:]

    return before, after


class LabMap:
    def __init__(self, obstacles: np.ndarray, start: Cell, heading: int):
        self.obstacles = obstacles
        self.start = start
        self.heading = heading
        self.H, self.W = obstacles.shape

        self._left, self._right = _nearest_blockers(obstacles)
        up_T, down_T = _nearest_blockers(obstacles.T)
        self._up, self._down = up_T.T, down_T.T

    def _leg(self, r: int, c: int, heading: int, extra: Optional[Cell]) -> Tuple[int, int, bool]:
        """
        Walk straight from (r, c) until blocked or off the map.

        Returns:
            (r, c, exits): last cell reached, and whether the guard left the map
        """
        if heading == UP:
            b = int(self._up[r, c])
            if extra is not None and extra[1] == c and b < extra[0] < r:
                b = extra[0]
            return (0, c, True) if b < 0 else (b + 1, c, False)

        if heading == DOWN:
            b = int(self._down[r, c])
            if extra is not None and extra[1] == c and r < extra[0] < b:
                b = extra[0]
            return (self.H - 1, c, True) if b >= self.H else (b - 1, c, False)

        if heading == LEFT:
            b = int(self._left[r, c])
            if extra is not None and extra[0] == r and b < extra[1] < c:
                b = extra[1]
            return (r, 0, True) if b < 0 else (r, b + 1, False)

        b = int(self._right[r, c])
        if extra is not None and extra[0] == r and c < extra[1] < b:
            b = extra[1]
        return (r, self.W - 1, True) if b >= self.W else (r, b - 1, False)

    def _state_index(self, r: int, c: int, heading: int) -> int:
        return (r * self.W + c) * 4 + heading

    def _mark_leg(self, visited: Bitset, r: int, c: int, r2: int, c2: int) -> None:
        if r == r2:
            # Horizontal legs are contiguous in row-major order
            lo, hi = min(c, c2), max(c, c2)
            visited.set_range(r * self.W + lo, r * self.W + hi + 1)
        else:
            for rr in range(min(r, r2), max(r, r2) + 1):
                visited.set(rr * self.W + c)

    def patrol(self) -> Bitset:
        """
        Cells visited before the guard leaves, as row-major indices.

        Raises:
            ValueError: if the guard never leaves the map
        """
        visited = Bitset(self.H * self.W)
        turns = Bitset(self.H * self.W * 4)
        r, c = self.start
        heading = self.heading

        while True:
            r2, c2, exits = self._leg(r, c, heading, None)
            self._mark_leg(visited, r, c, r2, c2)
            if exits:
                return visited
            if not turns.set(self._state_index(r2, c2, heading)):
                raise ValueError("Guard never leaves the map")
            r, c, heading = r2, c2, (heading + 1) % 4

    def loops_with(self, extra: Cell) -> bool:
        """True if an obstruction at extra traps the guard in a loop."""
        turns = Bitset(self.H * self.W * 4)
        r, c = self.start
        heading = self.heading

        while True:
            r, c, exits = self._leg(r, c, heading, extra)
            if exits:
                return False
            # Arriving at the same turning point with the same heading twice is a cycle
            if not turns.set(self._state_index(r, c, heading)):
                return True
            heading = (heading + 1) % 4


def parse(text: str) -> LabMap:
    """
    Raises:
        ValueError: if the map does not contain exactly one guard
    """
    grid = parse_grid(text)
    guard_mask = np.isin(grid, [ord(ch) for ch in GUARD_HEADINGS])
    guards = np.argwhere(guard_mask)
    if len(guards) != 1:
        raise ValueError(f"Expected exactly one guard, found {len(guards)}")

    r, c = (int(v) for v in guards[0])
    heading = GUARD_HEADINGS[chr(grid[r, c])]
    return LabMap(grid == ord("#"), (r, c), heading)


def part1(text: str) -> int:
    return parse(text).patrol().count()


def part2(text: str) -> int:
    lab = parse(text)
    start_index = lab.start[0] * lab.W + lab.start[1]

    # An obstruction off the unobstructed patrol route never changes the walk
    loops = 0
    for index in lab.patrol():
        if index == start_index:
            continue
        if lab.loops_with(divmod(index, lab.W)):
            loops += 1
    return loops
