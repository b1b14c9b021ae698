"""Tests for word boundary detection and the sliding window."""

import pytest

from fastentity._tokenizer import SpanWindow, is_separator, iter_word_spans


@pytest.mark.parametrize("ch", [" ", "\t", "\n", ".", ",", "!", "?", "-", "(", "'", "、", "。"])
def test_separators(ch):
    assert is_separator(ch)


@pytest.mark.parametrize("ch", ["a", "Z", "7", "本", "é", "$", "+"])
def test_word_characters(ch):
    """Letters, digits and symbols (not punctuation) belong to words."""
    assert not is_separator(ch)


def test_word_spans():
    text = "jack was, a dev."
    assert list(iter_word_spans(text)) == [(0, 4), (5, 8), (10, 11), (12, 15)]


def test_trailing_word_is_emitted():
    """End of input closes the last word."""
    assert list(iter_word_spans("golang developer")) == [(0, 6), (7, 16)]


def test_leading_and_repeated_separators():
    assert list(iter_word_spans("  ...hi,,  there  ")) == [(5, 7), (11, 16)]


def test_empty_and_separator_only():
    assert list(iter_word_spans("")) == []
    assert list(iter_word_spans(" .,; ")) == []


def test_code_point_offsets():
    assert list(iter_word_spans("日 本語.")) == [(0, 1), (2, 4)]


def test_window_push_and_recent():
    w = SpanWindow(3)
    assert w.push(0, 1) is None
    assert w.push(2, 3) is None
    assert len(w) == 2
    assert list(w.recent()) == [(2, 3), (0, 1)]


def test_window_evicts_oldest():
    w = SpanWindow(2)
    w.push(0, 1)
    w.push(2, 3)
    assert w.push(4, 5) == (0, 1)
    assert w.push(6, 7) == (2, 3)
    assert len(w) == 2
    assert list(w.recent()) == [(6, 7), (4, 5)]


def test_window_wraps_many_times():
    w = SpanWindow(4)
    for i in range(50):
        w.push(i, i + 1)
    assert list(w.recent()) == [(49, 50), (48, 49), (47, 48), (46, 47)]


def test_window_clear():
    w = SpanWindow(2)
    w.push(0, 1)
    w.clear()
    assert len(w) == 0
    assert list(w.recent()) == []
    assert w.capacity == 2


def test_window_invalid_capacity():
    with pytest.raises(ValueError):
        SpanWindow(0)


@pytest.mark.parametrize("ch", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_information_separators_are_word_characters(ch):
    assert not is_separator(ch)


@pytest.mark.parametrize("ch", ["\x85", "\xa0", "\u2003", "\u2028", "\u3000"])
def test_unicode_whitespace_separates(ch):
    assert is_separator(ch)
    assert list(iter_word_spans(f"ab{ch}cd")) == [(0, 2), (3, 5)]
