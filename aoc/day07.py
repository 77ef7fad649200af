"""
Day 7: Bridge Repair

Each equation is "test: n1 n2 ... nk". Operators are inserted between the
numbers and evaluated strictly left to right. An equation is calibrated if
some choice of operators produces the test value.

Search runs backwards from the test value. If the expression is true, the
prefix n1..n(k-1) must evaluate to one of:

  - test - nk          (last operator was +)
  - test / nk          (last operator was *, only if it divides exactly)
  - test // 10^d(nk)   (last operator was ||, only if test ends in nk's digits)

Most branches die immediately, so the search is far smaller than the
3^(k-1) forward enumeration.
"""

from typing import List, NamedTuple, Sequence


class Equation(NamedTuple):
    test_value: int
    numbers: List[int]


def digit_count(n: int) -> int:
    return len(str(n))


def parse(text: str) -> List[Equation]:
    """
    Raises:
        ValueError: if a line lacks the "test:" prefix, numbers, or has bad integers
    """
    equations = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        head, sep, tail = line.partition(":")
        numbers = tail.split()
        if not sep or not numbers:
            raise ValueError(f"Line {lineno}: malformed equation {line!r}")
        equations.append(Equation(int(head), [int(n) for n in numbers]))
    return equations


def _solvable(target: int, numbers: Sequence[int], i: int, concat: bool) -> bool:
    n = numbers[i]
    if i == 0:
        return target == n

    if n == 0:
        # Anything times zero is zero
        if target == 0:
            return True
    elif target % n == 0 and _solvable(target // n, numbers, i - 1, concat):
        return True

    if concat:
        scale = 10 ** digit_count(n)
        if target % scale == n and _solvable(target // scale, numbers, i - 1, concat):
            return True

    return target >= n and _solvable(target - n, numbers, i - 1, concat)


def can_calibrate(equation: Equation, concat: bool = False) -> bool:
    return _solvable(equation.test_value, equation.numbers, len(equation.numbers) - 1, concat)


def part1(text: str) -> int:
    return sum(eq.test_value for eq in parse(text) if can_calibrate(eq))


def part2(text: str) -> int:
    return sum(eq.test_value for eq in parse(text) if can_calibrate(eq, concat=True))
