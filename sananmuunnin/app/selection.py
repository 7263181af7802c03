"""Choosing the ``from`` side of a search: everything, one word, or a regex."""

from __future__ import annotations

import re
from typing import Optional

from ..core.analyzer import WordAnalyzer
from ..core.lexicon import WordList
from ..errors import SelectionError
from .dictionary_loader import normalize_word


def select_all(word_list: WordList) -> WordList:
    return word_list


def select_word(word: str, analyzer: Optional[WordAnalyzer] = None) -> WordList:
    """Return a one-word list for ``word``; it need not be in the dictionary."""

    normalized = normalize_word(word)
    if not normalized:
        raise SelectionError("search word must not be empty")
    return WordList.build([normalized], analyzer)


def select_regex(pattern: str, word_list: WordList) -> WordList:
    """Return the words of ``word_list`` that fully match ``pattern``, ignoring case."""

    try:
        compiled = re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise SelectionError(f"invalid regex {pattern!r}: {exc}") from exc
    return word_list.filter(lambda word: compiled.fullmatch(word) is not None)


__all__ = ["select_all", "select_word", "select_regex"]
