"""
Day 9: Disk Fragmenter

The disk map alternates file lengths and free-space lengths, one digit each.
File i has id i. The checksum is the sum of position * file id over every
occupied block.

Part 1 never materialises the disk: files are consumed from the front while
gaps are back-filled from the end, and each contiguous run contributes its
checksum in closed form (arithmetic series).

Part 2 moves whole files, highest id first, into the leftmost free span that
fits. Free runs between non-empty files are bucketed by length in min-heaps
keyed by start, so the leftmost fitting run is the smallest head across
buckets >= size.
"""

import heapq
from typing import List, Tuple

import numpy as np


def sum_range(start: int, length: int) -> int:
    """start + (start+1) + ... + (start+length-1)."""
    return length * (2 * start + length - 1) // 2


def sum_checksum_range(start: int, length: int, file_id: int) -> int:
    """Checksum contribution of file_id occupying [start, start+length)."""
    return sum_range(start, length) * file_id


def parse(text: str) -> Tuple[List[int], List[int]]:
    """
    Split the disk map into per-file (used, free) lengths.

    A map with an odd number of digits has no free space after the last file.

    Raises:
        ValueError: empty map or non-digit characters
    """
    digits = text.strip()
    if not digits:
        raise ValueError("Empty disk map")
    if not digits.isascii() or not digits.isdigit():
        raise ValueError("Disk map must contain only digits")

    values = np.frombuffer(digits.encode("ascii"), dtype=np.uint8) - ord("0")
    if values.size % 2:
        values = np.append(values, 0)

    return values[0::2].tolist(), values[1::2].tolist()


def compact_blocks_checksum(used: List[int], free: List[int]) -> int:
    checksum = 0
    block = 0

    left_id = 0
    right_id = len(used)  # points past the last file
    right_remaining = 0

    while right_id > left_id:
        # Left file stays where it is
        checksum += sum_checksum_range(block, used[left_id], left_id)
        block += used[left_id]
        gap = free[left_id]
        left_id += 1

        # Back-fill the gap from the end
        while gap > 0 and right_id > left_id:
            if right_remaining == 0:
                right_id -= 1
                right_remaining = used[right_id]

            fill = min(gap, right_remaining)
            checksum += sum_checksum_range(block, fill, right_id)
            right_remaining -= fill
            gap -= fill
            block += fill

    # The last file pulled from the end may not have been fully placed
    checksum += sum_checksum_range(block, right_remaining, right_id)
    return checksum


def compact_files_checksum(used: List[int], free: List[int]) -> int:
    starts = []
    runs: List[Tuple[int, int]] = []

    # An empty file does not split the free space around it
    block = 0
    run_start, run_len = 0, 0
    for u, f in zip(used, free):
        starts.append(block)
        if u:
            if run_len:
                runs.append((run_start, run_len))
            run_start, run_len = block + u, 0
        block += u + f
        run_len += f
    if run_len:
        runs.append((run_start, run_len))

    longest = max((n for _, n in runs), default=0)
    spans: List[List[int]] = [[] for _ in range(longest + 1)]
    for run_start, run_len in runs:
        spans[run_len].append(run_start)

    # Appended in increasing position order, so each bucket is already a heap
    checksum = 0
    for file_id in range(len(used) - 1, -1, -1):
        size, start = used[file_id], starts[file_id]
        if size == 0:
            continue

        best_len, best_start = 0, start
        for length in range(size, len(spans)):
            if spans[length] and spans[length][0] < best_start:
                best_len, best_start = length, spans[length][0]

        if best_len:
            heapq.heappop(spans[best_len])
            leftover = best_len - size
            if leftover:
                heapq.heappush(spans[leftover], best_start + size)
            start = best_start

        checksum += sum_checksum_range(start, size, file_id)

    return checksum


def part1(text: str) -> int:
    return compact_blocks_checksum(*parse(text))


def part2(text: str) -> int:
    return compact_files_checksum(*parse(text))
