"""Word boundary detection and the sliding window of recent words."""

from __future__ import annotations

import unicodedata
from functools import lru_cache
from typing import Iterator


_LATIN1_SPACE = frozenset("\t\n\v\f\r \x85\xa0")


@lru_cache(maxsize=8192)
def is_separator(ch: str) -> bool:
    """Punctuation (Unicode category P*) or whitespace.

    Whitespace is the Latin-1 set above plus separator categories Z*;
    the information separators U+001C to U+001F are word characters.
    """
    if ch in _LATIN1_SPACE:
        return True
    cat = unicodedata.category(ch)
    return cat[0] == "P" or (cat[0] == "Z" and ch > "\xff")


def iter_word_spans(text: str) -> Iterator[tuple[int, int]]:
    """Yield half-open (start, end) spans of maximal non-separator runs.

    End of input closes a trailing word, as if a separator followed it.
    """
    start = 0
    prev_sep = True  # first char of the input may legitimately start a word
    for off, ch in enumerate(text):
        sep = is_separator(ch)
        if prev_sep and not sep:
            start = off
        elif sep and not prev_sep:
            yield start, off
        prev_sep = sep
    if not prev_sep:
        yield start, len(text)


class SpanWindow:
    """Fixed-capacity ring buffer of (start, end) word spans.

    Pushing onto a full window evicts and returns the oldest span.
    """

    __slots__ = ("_starts", "_ends", "_head", "_size", "_capacity")

    def __init__(self, capacity: int = 20) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = capacity
        self._starts = [0] * capacity
        self._ends = [0] * capacity
        self._head = 0  # slot of the oldest span
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, start: int, end: int) -> tuple[int, int] | None:
        cap = self._capacity
        if self._size < cap:
            slot = (self._head + self._size) % cap
            self._starts[slot] = start
            self._ends[slot] = end
            self._size += 1
            return None
        slot = self._head
        evicted = (self._starts[slot], self._ends[slot])
        self._starts[slot] = start
        self._ends[slot] = end
        self._head = (slot + 1) % cap
        return evicted

    def recent(self) -> Iterator[tuple[int, int]]:
        """Iterate spans from newest to oldest."""
        cap = self._capacity
        last = self._head + self._size - 1
        for i in range(last, self._head - 1, -1):
            slot = i % cap
            yield self._starts[slot], self._ends[slot]

    def clear(self) -> None:
        self._head = 0
        self._size = 0
