"""
Input Loading

Each day reads one static text file. These helpers locate that file, read it,
and convert the common shapes of puzzle input into Python/NumPy structures:

  - character maps -> uint8 grids (one byte per cell, newlines removed)
  - whitespace-separated integers -> list of int rows
  - blank-line separated blocks -> list of sections

Inputs are assumed well-formed. Anything that cannot be parsed raises
ValueError and is reported by the runner.
"""

import hashlib
from pathlib import Path
from typing import List, Optional

import numpy as np


DEFAULT_INPUT_DIR = Path("input") / "2024"


def default_input_path(day: int, input_dir: Optional[Path] = None) -> Path:
    """Return the conventional input path for a day: <input_dir>/day<N>.txt."""
    base = Path(input_dir) if input_dir is not None else DEFAULT_INPUT_DIR
    return base / f"day{day}.txt"


def read_input(path: Path) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def sha256_text(text: str) -> str:
    """Hex SHA256 of the UTF-8 encoded input text."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()


def parse_grid(text: str, pad: int = 0, fill: str = ".") -> np.ndarray:
    """
    Convert a character map into a byte grid.

    All rows must have the same width. Leading and trailing blank lines and
    carriage returns are ignored.

    Args:
        text: Raw puzzle input
        pad: Number of sentinel cells to add on every side
        fill: Sentinel character used for padding

    Returns:
        grid: uint8 array of shape (H + 2*pad, W + 2*pad)

    Raises:
        ValueError: empty input, ragged rows, or non-ASCII characters
    """
    lines = [line.rstrip("\r") for line in text.lstrip("\r\n").rstrip().splitlines()]
    if not lines or not lines[0]:
        raise ValueError("Empty grid")

    W = len(lines[0])
    for i, line in enumerate(lines):
        if len(line) != W:
            raise ValueError(
                f"Ragged grid: line {i} has width {len(line)}, expected {W}"
            )

    try:
        raw = "".join(lines).encode("ascii")
    except UnicodeEncodeError as e:
        raise ValueError(f"Grid contains non-ASCII characters: {e}") from e

    # frombuffer is read-only, copy so callers may write into the grid
    grid = np.frombuffer(raw, dtype=np.uint8).reshape(len(lines), W).copy()

    if pad > 0:
        grid = np.pad(grid, pad_width=pad, mode='constant', constant_values=ord(fill))

    return grid


def find_all(grid: np.ndarray, char: str) -> np.ndarray:
    """Row-major (row, col) coordinates of every cell equal to char, shape (k, 2)."""
    return np.argwhere(grid == ord(char))


def int_rows(text: str) -> List[List[int]]:
    """
    Parse whitespace-separated integers, one list per non-blank line.

    Raises:
        ValueError: if any token is not an integer
    """
    rows = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            rows.append([int(tok) for tok in line.split()])
        except ValueError as e:
            raise ValueError(f"Line {lineno}: {e}") from e
    return rows


def split_sections(text: str) -> List[str]:
    """Split input into blocks separated by one or more blank lines."""
    sections = []
    current: List[str] = []
    for line in text.splitlines():
        if line.strip():
            current.append(line)
        elif current:
            sections.append("\n".join(current))
            current = []
    if current:
        sections.append("\n".join(current))
    return sections
