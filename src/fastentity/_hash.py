"""Bucket keys: folded prefix plus exact length."""

_PREFIX_LEN: int = 3


class _FoldTable(dict):
    """str.translate table filled on first sight of each code point."""

    def __missing__(self, cp: int) -> str:
        low = chr(cp).lower()
        # Offsets are code points, so folding must never change the length.
        folded = low if len(low) == 1 else low[0]
        self[cp] = folded
        return folded


_FOLD_TABLE = _FoldTable()


def fold(text: str) -> str:
    """Lowercase text one code point at a time, preserving its length.

    Each character folds on its own, never by context (capital sigma is
    always σ, wherever it sits in a word).
    """
    return text.translate(_FOLD_TABLE)


def bucket_key(folded: str, start: int, end: int) -> str:
    """Key for the span folded[start:end]. The span must not be empty."""
    n = end - start
    return f"{folded[start:start + min(n, _PREFIX_LEN)]}{n:03d}"


def phrase_key(phrase: str) -> str:
    """Key for a whole phrase as it would be registered."""
    if not phrase:
        raise ValueError("cannot hash an empty phrase")
    return bucket_key(fold(phrase), 0, len(phrase))
