import numpy as np

from aoc.day08 import antennas_by_frequency, antinode_mask, part1, part2
from aoc.inputs import parse_grid


EXAMPLE = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""

EXAMPLE_ANTINODES = """\
......#....#
...#........
....#.....#.
..#.........
.........#..
.#....#.....
...#........
#......#....
............
............
..........#.
..........#.
"""


def test_part1_example():
    assert part1(EXAMPLE) == 14


def test_part2_example():
    assert part2(EXAMPLE) == 34


def test_antinode_positions_match_example():
    expected = parse_grid(EXAMPLE_ANTINODES) == ord("#")
    assert np.array_equal(antinode_mask(parse_grid(EXAMPLE)), expected)


def test_antennas_grouped_by_frequency():
    groups = antennas_by_frequency(parse_grid(EXAMPLE))
    assert sorted(groups) == ["0", "A"]
    assert groups["A"].tolist() == [[5, 6], [8, 8], [9, 9]]


def test_single_antenna_has_no_antinodes():
    assert part1("...\n.a.\n...") == 0
    assert part2("...\n.a.\n...") == 0


def test_resonant_line_includes_antennas():
    grid = """\
T.........
...T......
.T........
..........
..........
..........
..........
..........
..........
..........
"""
    assert part2(grid) == 9
