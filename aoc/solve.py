"""
Runner + Receipts

Batch runner that loads each day's input, solves both parts, prints the
answers and optionally emits receipts.

Modes:
  - run: solve one day (--day N) or every registered day (--all)
  - audit: print the stored receipt for a day

CLI:
  python -m aoc.solve --day 6
  python -m aoc.solve --day 6 --input path/to/day6.txt
  python -m aoc.solve --all --input-dir input/2024 --out outputs/receipts.jsonl
  python -m aoc.solve --day 9 --out outputs/receipts.jsonl --append
  python -m aoc.solve --mode audit --day 6 --receipts outputs/receipts.jsonl
"""

import argparse
import json
import logging
import time
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Optional, Sequence

from aoc import day01, day02, day03, day04, day05, day06, day07, day08, day09, day10, day11
from aoc.inputs import DEFAULT_INPUT_DIR, default_input_path, read_input, sha256_text
from aoc.receipts import build_answer_receipt, find_receipt, write_jsonl


DAYS: Dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
}


def solve_day(day: int, text: str) -> Dict[str, Any]:
    """
    Solve both parts of a day and build its receipt.

    Args:
        day: Registered day number
        text: Raw puzzle input

    Returns:
        Receipt dict (see receipts.build_answer_receipt)

    Raises:
        KeyError: day is not registered
        ValueError: input is malformed
    """
    module = DAYS[day]

    t0 = time.perf_counter()
    answer1 = module.part1(text)
    t1 = time.perf_counter()
    answer2 = module.part2(text)
    t2 = time.perf_counter()

    return build_answer_receipt(
        day=day,
        input_sha256=sha256_text(text),
        part1=answer1,
        part2=answer2,
        elapsed_ms=((t1 - t0) * 1000.0, (t2 - t1) * 1000.0),
    )


def run_days(
    days: Sequence[int],
    input_dir: Optional[Path] = None,
    input_path: Optional[Path] = None,
    out_path: Optional[Path] = None,
    append: bool = False,
) -> List[Dict[str, Any]]:
    """
    Solve each day in turn, printing answers to stdout.

    Any failure stops the run: the first missing input or malformed input is
    logged and the process exits with status 1.

    Args:
        days: Day numbers to solve
        input_dir: Directory holding day<N>.txt files
        input_path: Explicit input file (single-day runs only)
        out_path: Optional receipts JSONL output path
        append: Add to out_path instead of overwriting it

    Returns:
        Receipts for every solved day
    """
    receipts: List[Dict[str, Any]] = []

    for day in days:
        if day not in DAYS:
            logging.error(f"No solution registered for day {day}")
            raise SystemExit(1)

        path = input_path if input_path is not None else default_input_path(day, input_dir)
        if not path.exists():
            logging.error(f"Input not found for day {day}: {path}")
            raise SystemExit(1)

        try:
            receipt = solve_day(day, read_input(path))
        except ValueError as e:
            logging.error(f"Day {day}: malformed input ({e})")
            raise SystemExit(1)

        print(f"Day {day}")
        print(f"  part 1: {receipt['part1']}")
        print(f"  part 2: {receipt['part2']}")
        receipts.append(receipt)

    if out_path is not None:
        write_jsonl(out_path, receipts, append=append)

    total_ms = sum(sum(r["elapsed_ms"]) for r in receipts)
    logging.info(f"Solved days={len(receipts)}, total_ms={total_ms:.1f}")

    return receipts


def run_audit(day: int, receipts_path: Path) -> None:
    """Audit mode - print the receipt recorded for a day."""
    try:
        receipt = find_receipt(receipts_path, day)
    except ValueError as e:
        logging.error(f"Malformed receipts ({e})")
        raise SystemExit(1)
    if receipt is None:
        logging.error(f"Day {day} not found in receipts")
        raise SystemExit(1)
    print(json.dumps(receipt, indent=2, sort_keys=True))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point with argparse."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Advent of Code 2024 - puzzle runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--mode",
        type=str,
        choices=["run", "audit"],
        default="run",
        help="run: solve puzzles and print answers; audit: print a stored receipt",
    )

    parser.add_argument(
        "--day",
        type=int,
        choices=sorted(DAYS),
        help="Day to solve (or audit)",
    )

    parser.add_argument(
        "--all",
        action="store_true",
        help="Solve every registered day (run mode)",
    )

    parser.add_argument(
        "--input",
        type=Path,
        help="Explicit input file (single-day runs only)",
    )

    parser.add_argument(
        "--input-dir",
        type=Path,
        default=DEFAULT_INPUT_DIR,
        help="Directory containing day<N>.txt inputs",
    )

    parser.add_argument(
        "--out",
        type=Path,
        help="Output path for receipts JSONL (run mode)",
    )

    parser.add_argument(
        "--append",
        action="store_true",
        help="Append to --out instead of overwriting it",
    )

    parser.add_argument(
        "--receipts",
        type=Path,
        help="Receipts JSONL to read (audit mode)",
    )

    args = parser.parse_args(argv)

    if args.mode == "audit":
        if args.day is None or args.receipts is None:
            parser.error("audit mode requires --day and --receipts")
        if not args.receipts.exists():
            logging.error(f"Receipts not found: {args.receipts}")
            raise SystemExit(1)
        run_audit(day=args.day, receipts_path=args.receipts)
        return

    if args.all == (args.day is not None):
        parser.error("specify exactly one of --day or --all")
    if args.input is not None and args.all:
        parser.error("--input applies to a single day; use --input-dir with --all")

    days = sorted(DAYS) if args.all else [args.day]
    run_days(
        days=days,
        input_dir=args.input_dir,
        input_path=args.input,
        out_path=args.out,
        append=args.append,
    )


if __name__ == "__main__":
    main()
