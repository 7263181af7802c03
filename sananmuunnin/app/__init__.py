"""Command line collaborators around the swap engine core."""

from .config import SearchSettings
from .dictionary_loader import DictionaryLoader, normalize_word, normalize_words
from .result_formatter import MatchFormatter
from .selection import select_all, select_regex, select_word

__all__ = [
    "SearchSettings",
    "DictionaryLoader",
    "normalize_word",
    "normalize_words",
    "MatchFormatter",
    "select_all",
    "select_regex",
    "select_word",
]
