"""
Answer Receipts + JSONL Writer

A receipt records one solved day: which input was used (by SHA256), both
answers, and how long each part took. One JSONL line per day.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple


def build_answer_receipt(
    day: int,
    input_sha256: str,
    part1: int,
    part2: int,
    elapsed_ms: Tuple[float, float],
) -> Dict[str, Any]:
    """
    Build the receipt dict for a single day.

    Args:
        day: Puzzle day (1-25)
        input_sha256: SHA256 of the input text
        part1, part2: Answers
        elapsed_ms: Wall time of (part1, part2) in milliseconds

    Returns:
        Receipt dict ready for JSONL output
    """
    return {
        "day": day,
        "input_sha256": input_sha256,
        "part1": part1,
        "part2": part2,
        "elapsed_ms": [round(elapsed_ms[0], 3), round(elapsed_ms[1], 3)],
    }


class ReceiptWriter:
    """
    JSONL sink for day receipts, one line per receipt.

    With append=True new receipts are added after those already in the file,
    so one file can collect runs over time (find_receipt picks the latest).
    """

    def __init__(self, output_path: Path, append: bool = False):
        self.output_path = Path(output_path)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.mode = 'a' if append else 'w'
        self.days_written: List[int] = []
        self.file_handle = None

    def __enter__(self):
        self.file_handle = open(self.output_path, self.mode, encoding='utf-8')
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def write(self, receipt: Dict[str, Any]):
        """
        Raises:
            RuntimeError: writer used outside its context manager
            ValueError: receipt has no integer "day"
        """
        if not self.file_handle:
            raise RuntimeError("ReceiptWriter not opened (use context manager)")
        if not isinstance(receipt.get("day"), int):
            raise ValueError(f"Receipt has no day: {receipt!r}")

        self.file_handle.write(json.dumps(receipt, sort_keys=True) + '\n')
        self.file_handle.flush()
        self.days_written.append(receipt["day"])


def write_jsonl(output_path: Path, receipts: Iterable[Dict[str, Any]], append: bool = False) -> None:
    with ReceiptWriter(output_path, append=append) as writer:
        for receipt in receipts:
            writer.write(receipt)


def read_receipts(receipts_path: Path) -> List[Dict[str, Any]]:
    """
    Read every day receipt from a JSONL file, skipping blank lines.

    Raises:
        ValueError: a line is not JSON or is not a receipt with a day
    """
    receipts = []
    with open(receipts_path, 'r', encoding='utf-8') as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                receipt = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"{receipts_path}:{lineno}: {e}") from e
            if not isinstance(receipt, dict) or "day" not in receipt:
                raise ValueError(f"{receipts_path}:{lineno}: not a day receipt")
            receipts.append(receipt)
    return receipts


def find_receipt(receipts_path: Path, day: int) -> Optional[Dict[str, Any]]:
    """Return the last receipt recorded for day, or None."""
    found = None
    for receipt in read_receipts(receipts_path):
        if receipt.get("day") == day:
            found = receipt
    return found
