import pytest

from aoc.day06 import UP, parse, part1, part2


EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_parse_map():
    lab = parse(EXAMPLE)
    assert lab.obstacles[0, 4]
    assert lab.obstacles[1, 9]
    assert lab.start == (6, 4)
    assert lab.heading == UP


def test_part1_example():
    assert part1(EXAMPLE) == 41


def test_part2_example():
    assert part2(EXAMPLE) == 6


def test_walk_straight_off_the_map():
    assert part1("...\n.^.\n...") == 2
    assert part1("..>") == 1


def test_turn_in_place_twice():
    # Blocked ahead and to the right: the guard turns twice and walks down
    lab_map = ".#.\n.^#\n..."
    assert part1(lab_map) == 2


def test_loops_with_single_obstruction():
    lab = parse(EXAMPLE)
    assert not lab.loops_with((0, 0))
    assert lab.loops_with((6, 3))


def test_guard_that_never_leaves_is_malformed():
    trapped = ".#..\n...#\n#^..\n..#."
    with pytest.raises(ValueError):
        part1(trapped)


def test_requires_exactly_one_guard():
    with pytest.raises(ValueError):
        parse("....\n....")
    with pytest.raises(ValueError):
        parse("^..^")
