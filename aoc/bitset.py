"""
Packed Bitset

Fixed-capacity set of small non-negative integers packed into 64-bit words.
Words are held in a NumPy uint64 array so whole-set operations (union,
intersection, population count) are single vectorized calls.

Bit i lives in word i // 64 at position i % 64. Bits at positions >= size
in the last word are always zero.
"""

from typing import Iterator

import numpy as np


WORD_BITS = 64
_ONE = np.uint64(1)


def _word_mask(lo: int, hi: int) -> np.uint64:
    """Mask with bits [lo, hi) set, 0 <= lo <= hi <= 64."""
    return np.uint64(((1 << (hi - lo)) - 1) << lo)


class Bitset:
    """
    Set of integers in [0, size).

    set() reports whether the bit was newly set, which lets callers count
    distinct insertions without a separate membership test.
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"Bitset size must be non-negative, got {size}")
        self.size = size
        self.words = np.zeros((size + WORD_BITS - 1) // WORD_BITS, dtype=np.uint64)

    @classmethod
    def empty(cls, size: int) -> "Bitset":
        return cls(size)

    @classmethod
    def full(cls, size: int) -> "Bitset":
        bs = cls(size)
        bs.set_range(0, size)
        return bs

    @classmethod
    def _from_words(cls, size: int, words: np.ndarray) -> "Bitset":
        bs = cls(size)
        bs.words = words
        return bs

    def _locate(self, index: int):
        if not 0 <= index < self.size:
            raise IndexError(f"Bit {index} out of range for bitset of size {self.size}")
        return index // WORD_BITS, _ONE << np.uint64(index % WORD_BITS)

    def set(self, index: int) -> bool:
        """Set bit index. Returns True if it was previously clear."""
        w, mask = self._locate(index)
        was_clear = (self.words[w] & mask) == 0
        self.words[w] |= mask
        return bool(was_clear)

    def unset(self, index: int) -> None:
        w, mask = self._locate(index)
        self.words[w] &= ~mask

    def get(self, index: int) -> bool:
        w, mask = self._locate(index)
        return bool((self.words[w] & mask) != 0)

    def __contains__(self, index: int) -> bool:
        return 0 <= index < self.size and self.get(index)

    def _check_range(self, start: int, stop: int) -> None:
        if start < 0 or stop > self.size:
            raise IndexError(
                f"Range [{start}, {stop}) out of range for bitset of size {self.size}"
            )

    def set_range(self, start: int, stop: int) -> None:
        """Set every bit in [start, stop)."""
        self._check_range(start, stop)
        if start >= stop:
            return

        first, last = start // WORD_BITS, (stop - 1) // WORD_BITS
        lo, hi = start % WORD_BITS, (stop - 1) % WORD_BITS + 1

        if first == last:
            self.words[first] |= _word_mask(lo, hi)
            return

        self.words[first] |= _word_mask(lo, WORD_BITS)
        self.words[first + 1:last] = _word_mask(0, WORD_BITS)
        self.words[last] |= _word_mask(0, hi)

    def unset_range(self, start: int, stop: int) -> None:
        """Clear every bit in [start, stop)."""
        self._check_range(start, stop)
        if start >= stop:
            return

        first, last = start // WORD_BITS, (stop - 1) // WORD_BITS
        lo, hi = start % WORD_BITS, (stop - 1) % WORD_BITS + 1

        if first == last:
            self.words[first] &= ~_word_mask(lo, hi)
            return

        self.words[first] &= ~_word_mask(lo, WORD_BITS)
        self.words[first + 1:last] = 0
        self.words[last] &= ~_word_mask(0, hi)

    def _bytes(self) -> np.ndarray:
        # Force little-endian so byte k of word w holds bits 8k..8k+7
        return self.words.astype('<u8').view(np.uint8)

    def count(self) -> int:
        """Number of set bits."""
        return int(np.unpackbits(self._bytes()).sum())

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[int]:
        bits = np.unpackbits(self._bytes(), bitorder='little')[:self.size]
        for i in np.flatnonzero(bits):
            yield int(i)

    def _check_same_size(self, other: "Bitset") -> None:
        if not isinstance(other, Bitset):
            raise TypeError(f"Expected Bitset, got {type(other).__name__}")
        if other.size != self.size:
            raise ValueError(f"Bitset size mismatch: {self.size} vs {other.size}")

    def __and__(self, other: "Bitset") -> "Bitset":
        self._check_same_size(other)
        return Bitset._from_words(self.size, self.words & other.words)

    def __or__(self, other: "Bitset") -> "Bitset":
        self._check_same_size(other)
        return Bitset._from_words(self.size, self.words | other.words)

    def __iand__(self, other: "Bitset") -> "Bitset":
        self._check_same_size(other)
        self.words &= other.words
        return self

    def __ior__(self, other: "Bitset") -> "Bitset":
        self._check_same_size(other)
        self.words |= other.words
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.words, other.words)

    def __repr__(self) -> str:
        return f"Bitset(size={self.size}, count={self.count()})"
