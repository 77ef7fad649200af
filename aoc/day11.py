"""
Day 11: Plutonian Pebbles

Every blink each stone changes by the first rule that applies:

  - 0 becomes 1
  - an even number of digits splits into its left and right halves
  - otherwise multiply by 2024

Order never matters for the count, and the same numbers recur constantly,
so stones are tracked as a multiset: number -> how many stones carry it.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple


BLINKS_PART1 = 25
BLINKS_PART2 = 75


def parse(text: str) -> List[int]:
    """
    Raises:
        ValueError: if any token is not an integer
    """
    return [int(tok) for tok in text.split()]


def stone_rule(stone: int) -> Tuple[int, Optional[int]]:
    """Apply one blink to a single stone. Returns (stone, second stone or None)."""
    if stone == 0:
        return 1, None

    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])

    return stone * 2024, None


def blink(counts: Dict[int, int]) -> Counter:
    after: Counter = Counter()
    for stone, n in counts.items():
        first, second = stone_rule(stone)
        after[first] += n
        if second is not None:
            after[second] += n
    return after


def count_stones(stones: Iterable[int], blinks: int) -> int:
    counts = Counter(stones)
    for _ in range(blinks):
        counts = blink(counts)
    return sum(counts.values())


def part1(text: str) -> int:
    return count_stones(parse(text), BLINKS_PART1)


def part2(text: str) -> int:
    return count_stones(parse(text), BLINKS_PART2)
