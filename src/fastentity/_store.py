"""Store: registry of named groups with single-pass search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._engine import find
from ._errors import FastEntityStateError
from ._group import Group
from ._lock import RWLock
from ._types import DEFAULT_CONFIG

if TYPE_CHECKING:
    from ._types import Entity, StoreConfig

logger = logging.getLogger(__name__)


class Store:
    """Collection of entity groups. Holds all phrases and exposes the public API."""

    __slots__ = ("_config", "_groups", "_lock")

    def __init__(self, *names: str, config: StoreConfig | None = None) -> None:
        self._config = config if config is not None else DEFAULT_CONFIG
        self._lock = RWLock()
        self._groups: dict[str, Group] | None = {
            name: Group(name, self._config) for name in names
        }

    def __repr__(self) -> str:
        return f"Store(groups={self.group_names!r})"

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._groups or ())

    def __contains__(self, name: object) -> bool:
        with self._lock.read():
            return self._groups is not None and name in self._groups

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._groups is None

    @property
    def group_names(self) -> list[str]:
        """Names of all known groups, sorted."""
        with self._lock.read():
            return sorted(self._groups or ())

    def group(self, name: str) -> Group | None:
        with self._lock.read():
            if self._groups is None:
                return None
            return self._groups.get(name)

    def close(self) -> None:
        """Release every group. The store accepts no further phrases."""
        with self._lock.write():
            self._groups = None

    # -- Registration --

    def add(self, name: str, *phrases: str) -> None:
        """Add phrases to the group called name, creating it if needed.

        Raises:
            FastEntityStateError: If the store has been closed.
            ValueError: If a phrase is empty.
        """
        if not all(phrases):
            raise ValueError(f"empty phrase for group {name!r}")
        with self._lock.write():
            if self._groups is None:
                raise FastEntityStateError(
                    f"cannot add to group {name!r}: store is closed"
                )
            group = self._groups.get(name)
            if group is None:
                group = Group(name, self._config)
                self._groups[name] = group
                logger.debug("created group %r", name)

        group.add(*phrases)

        too_long = sum(1 for p in phrases if len(p) > self._config.max_entity_len)
        if too_long:
            logger.warning(
                "%d phrase(s) in group %r exceed max_entity_len=%d "
                "and will never be found",
                too_long, name, self._config.max_entity_len,
            )

    # -- Search --

    def find_all(self, text: str) -> dict[str, list[Entity]]:
        """Search text against every group in one tokenization pass.

        Returns a mapping of group name -> matches (each group present, possibly
        empty). Must not race with add() on the same store.
        """
        with self._lock.read():
            groups = list((self._groups or {}).values())
        return find(text, groups, self._config)

    def find(self, name: str, text: str) -> list[Entity]:
        """Search text against one group. An unknown group yields no matches."""
        group = self.group(name)
        if group is None:
            return []
        return group.find(text)
