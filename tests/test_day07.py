import pytest

from aoc.day07 import Equation, can_calibrate, digit_count, parse, part1, part2


EXAMPLE = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_parse_example():
    equations = parse(EXAMPLE)
    assert len(equations) == 9
    assert equations[1] == Equation(3267, [81, 40, 27])


def test_part1_example():
    assert part1(EXAMPLE) == 3749


def test_part2_example():
    assert part2(EXAMPLE) == 11387


def test_calibration_with_add_and_multiply():
    assert can_calibrate(Equation(190, [10, 19]))
    assert can_calibrate(Equation(292, [11, 6, 16, 20]))
    assert not can_calibrate(Equation(156, [15, 6]))


def test_calibration_with_concatenation():
    assert can_calibrate(Equation(156, [15, 6]), concat=True)
    assert can_calibrate(Equation(7290, [6, 8, 6, 15]), concat=True)
    assert not can_calibrate(Equation(21037, [9, 7, 18, 13]), concat=True)


def test_evaluation_is_left_to_right():
    # 2 + 3 * 4 = 20 left to right, never 14
    assert can_calibrate(Equation(20, [2, 3, 4]))
    assert not can_calibrate(Equation(14, [2, 3, 4]))


def test_single_number():
    assert can_calibrate(Equation(5, [5]))
    assert not can_calibrate(Equation(6, [5]))


def test_digit_count():
    assert digit_count(0) == 1
    assert digit_count(9) == 1
    assert digit_count(10) == 2
    assert digit_count(999999) == 6
    assert digit_count(1000000000) == 10


def test_malformed_line():
    with pytest.raises(ValueError):
        parse("190 10 19\n")
    with pytest.raises(ValueError):
        parse("190:\n")


def test_multiply_by_zero():
    assert can_calibrate(Equation(0, [5, 0]))
    assert can_calibrate(Equation(0, [3, 4, 0]))
    assert not can_calibrate(Equation(1, [5, 0]))
