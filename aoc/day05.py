"""
Day 5: Print Queue

Ordering rules "X|Y" say page X must be printed before page Y. Pages are
two-digit numbers, so the rules fit in a table of 100 bitsets: successors[X]
holds every Y that must come after X.

For a rule set that totally orders an update, the number of the update's
pages that must follow page p is exactly p's distance from the end of the
sorted update. That turns "find the middle page after sorting" into a
lookup: the middle page, at sorted index len(update) // 2, is the one with
(len(update) - 1) // 2 successors in the update.
"""

from typing import List, Tuple

from aoc.bitset import Bitset
from aoc.inputs import split_sections


PAGE_LIMIT = 100


class OrderingRules:
    def __init__(self):
        self.successors = [Bitset(PAGE_LIMIT) for _ in range(PAGE_LIMIT)]

    def add_rule(self, before: int, after: int) -> None:
        self.successors[before].set(after)

    def must_precede(self, before: int, after: int) -> bool:
        return self.successors[before].get(after)

    def followers_in(self, page: int, pages: Bitset) -> int:
        """How many of pages must come after page."""
        return (self.successors[page] & pages).count()


def _page(token: str) -> int:
    page = int(token)
    if not 0 <= page < PAGE_LIMIT:
        raise ValueError(f"Page {page} outside [0, {PAGE_LIMIT})")
    return page


def page_set(update: List[int]) -> Bitset:
    pages = Bitset(PAGE_LIMIT)
    for p in update:
        pages.set(p)
    return pages


def parse(text: str) -> Tuple[OrderingRules, List[List[int]]]:
    """
    Parse rules and updates.

    Raises:
        ValueError: missing section, malformed rule, or out-of-range page
    """
    sections = split_sections(text)
    if len(sections) != 2:
        raise ValueError(f"Expected rules and updates sections, found {len(sections)}")

    rules = OrderingRules()
    for line in sections[0].splitlines():
        before, sep, after = line.strip().partition("|")
        if not sep:
            raise ValueError(f"Malformed rule: {line!r}")
        rules.add_rule(_page(before), _page(after))

    updates = [
        [_page(tok) for tok in line.strip().split(",")]
        for line in sections[1].splitlines()
    ]
    return rules, updates


def is_well_ordered(update: List[int], rules: OrderingRules) -> bool:
    """True if no page is required to precede a page printed before it."""
    printed = Bitset(PAGE_LIMIT)
    for p in update:
        if rules.followers_in(p, printed):
            return False
        printed.set(p)
    return True


def middle_page(update: List[int], rules: OrderingRules) -> int:
    """
    Middle page of the update once sorted by the rules.

    Raises:
        ValueError: if the rules do not totally order the update
    """
    pages = page_set(update)
    # Sorted index len // 2 has this many followers, for odd and even lengths
    mid = (len(update) - 1) // 2
    for p in update:
        if rules.followers_in(p, pages) == mid:
            return p
    raise ValueError(f"Rules do not order update {update}")


def part1(text: str) -> int:
    rules, updates = parse(text)
    return sum(u[len(u) // 2] for u in updates if is_well_ordered(u, rules))


def part2(text: str) -> int:
    rules, updates = parse(text)
    return sum(middle_page(u, rules) for u in updates if not is_well_ordered(u, rules))
