"""Single-pass multi-group matching over a sliding window of words."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._hash import bucket_key, fold
from ._tokenizer import SpanWindow, iter_word_spans
from ._types import DEFAULT_CONFIG, Entity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._group import Group
    from ._types import StoreConfig


def find(
    text: str,
    groups: Iterable[Group],
    config: StoreConfig = DEFAULT_CONFIG,
) -> dict[str, list[Entity]]:
    """Find every registered phrase of every group in text.

    Callers are responsible for excluding concurrent additions to the
    groups for the duration of the call.

    Returns a mapping of group name -> matches in discovery order. Every
    group passed in gets an entry, empty when nothing matched.
    """
    views = [g._view() for g in groups]
    results: dict[str, list[Entity]] = {name: [] for name, _, _ in views}
    if not text or not views:
        return results

    max_entity_len = config.max_entity_len
    folded = fold(text)
    window = SpanWindow(config.window_size)

    for word_start, end in iter_word_spans(text):
        window.push(word_start, end)
        for start, _ in window.recent():
            n = end - start
            if n > max_entity_len:
                break  # older spans only get longer
            key = None
            for name, max_len, buckets in views:
                if n > max_len:
                    continue
                if key is None:
                    key = bucket_key(folded, start, end)
                bucket = buckets.get(key)
                if not bucket:
                    continue
                candidate = folded[start:end]
                for phrase, phrase_folded in bucket:
                    if len(phrase) != n:
                        continue
                    if phrase_folded == candidate:
                        results[name].append(Entity(text[start:end], start))
    return results
