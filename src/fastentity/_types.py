"""Data structures for fastentity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Entity:
    text: str    # slice of the searched input, original casing
    offset: int  # code-point index of text within the input


@dataclass(slots=True, frozen=True)
class StoreConfig:
    max_entity_len: int = 30     # code points; longer phrases are never found
    group_size_hint: int = 1000  # bulk-load batch size per group
    window_size: int = 20        # words held by the sliding window

    def __post_init__(self) -> None:
        for name in ("max_entity_len", "group_size_hint", "window_size"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive int, got {value!r}")


DEFAULT_CONFIG = StoreConfig()
