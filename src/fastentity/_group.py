"""Group: a named bucket index of registered phrases."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._engine import find
from ._hash import bucket_key, fold
from ._lock import RWLock
from ._types import DEFAULT_CONFIG

if TYPE_CHECKING:
    from ._types import Entity, StoreConfig


class Group:
    """Phrases bucketed by folded prefix and length.

    Additions take the write lock; lookups and searches take the read lock.
    """

    __slots__ = ("name", "config", "_buckets", "_max_len", "_count", "_lock")

    def __init__(self, name: str, config: StoreConfig = DEFAULT_CONFIG) -> None:
        self.name = name
        self.config = config
        self._buckets: dict[str, list[tuple[str, str]]] = {}
        self._max_len = 0
        self._count = 0
        self._lock = RWLock()

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"Group({self.name!r}, phrases={self._count}, max_len={self._max_len})"

    @property
    def max_len(self) -> int:
        """Longest registered phrase, in code points."""
        return self._max_len

    def add(self, *phrases: str) -> None:
        """Register phrases. Every call is stored, duplicates included.

        Raises:
            ValueError: If a phrase is empty. Nothing is added in that case.
        """
        entries = []
        for phrase in phrases:
            if not phrase:
                raise ValueError(f"empty phrase for group {self.name!r}")
            folded = fold(phrase)
            entries.append((bucket_key(folded, 0, len(phrase)), phrase, folded))

        with self._lock.write():
            for key, phrase, folded in entries:
                self._buckets.setdefault(key, []).append((phrase, folded))
                if len(phrase) > self._max_len:
                    self._max_len = len(phrase)
            self._count += len(entries)

    def lookup(self, key: str) -> list[str]:
        with self._lock.read():
            return [phrase for phrase, _ in self._buckets.get(key, ())]

    def phrases(self) -> list[str]:
        """Every stored phrase, bucket by bucket."""
        with self._lock.read():
            return [
                phrase
                for bucket in self._buckets.values()
                for phrase, _ in bucket
            ]

    def find(self, text: str) -> list[Entity]:
        """Search text for this group's phrases only."""
        with self._lock.read():
            return find(text, (self,), self.config)[self.name]

    def _view(self) -> tuple[str, int, dict[str, list[tuple[str, str]]]]:
        # Unlocked snapshot of the index for the matching engine.
        return self.name, self._max_len, self._buckets
