"""
Advent of Code 2024 Solutions
Self-contained per-day puzzle solvers with a small shared toolkit.

Modules:
- inputs: input file location, grid and integer parsing
- bitset: fixed-width packed bitset over NumPy words
- receipts: per-day answer receipts + JSONL writer
- day01 .. day11: one module per puzzle, each with part1/part2
- solve: day registry and command-line runner
"""

__version__ = "0.1.0"
