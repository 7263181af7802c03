"""Initial mora segmentation for Finnish words."""

from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from ..utils.observability import get_logger

# Enumeration order matters: the first entry that matches at a position wins.
VOWELS: Tuple[str, ...] = ("a", "e", "i", "o", "u", "y", "å", "ä", "ö", "é")


@dataclass(frozen=True)
class WordDescriptor:
    """Segmentation of a word's initial mora.

    ``mora_length`` is the offset (in code points) just past the leading
    consonants, the first vowel and, for a long vowel, its repeat.  Words
    without any vowel keep ``vowel=None`` and span their whole length.
    """

    mora_length: int
    has_long_vowel: bool = False
    vowel: Optional[str] = None

    @property
    def has_vowel(self) -> bool:
        return self.vowel is not None

    def mora(self, word: str) -> str:
        return word[: self.mora_length]

    def tail(self, word: str) -> str:
        return word[self.mora_length :]


def _vowel_at(word: str, index: int, vowels: Sequence[str]) -> Optional[str]:
    for vowel in vowels:
        if word.startswith(vowel, index):
            return vowel
    return None


def analyze_word(word: str, vowels: Sequence[str] = VOWELS) -> WordDescriptor:
    """Return the :class:`WordDescriptor` for ``word``.

    Scans consonants until the first vowel grapheme, then swallows an
    immediate repeat of that same grapheme as vowel length.
    """

    index = 0
    length = len(word)
    while index < length:
        vowel = _vowel_at(word, index, vowels)
        if vowel is None:
            index += 1
            continue

        index += len(vowel)
        if word.startswith(vowel, index):
            return WordDescriptor(index + len(vowel), True, vowel)
        return WordDescriptor(index, False, vowel)

    return WordDescriptor(length)


class WordAnalyzer:
    """Memoising front end for :func:`analyze_word` with an injected vowel table."""

    def __init__(
        self,
        vowels: Optional[Iterable[str]] = None,
        *,
        max_cache_entries: int = 65536,
    ) -> None:
        table = tuple(VOWELS if vowels is None else vowels)
        if not table or any(not vowel for vowel in table):
            raise ValueError("vowel table must contain non-empty graphemes")

        self.vowels: Tuple[str, ...] = table
        self._cache_lock = threading.RLock()
        self._max_cache_entries = max(1, int(max_cache_entries))
        self._descriptor_cache: "OrderedDict[str, WordDescriptor]" = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._logger = get_logger(__name__).bind(component="word_analyzer")
        self._logger.debug(
            "Word analyzer initialised",
            context={"vowels": "".join(self.vowels), "max_cache_entries": self._max_cache_entries},
        )

    def analyze(self, word: str) -> WordDescriptor:
        with self._cache_lock:
            cached = self._descriptor_cache.get(word)
            if cached is not None:
                self._descriptor_cache.move_to_end(word)
                self._hits += 1
                return cached

        descriptor = analyze_word(word, self.vowels)

        with self._cache_lock:
            self._misses += 1
            self._descriptor_cache[word] = descriptor
            if len(self._descriptor_cache) > self._max_cache_entries:
                self._descriptor_cache.popitem(last=False)
        return descriptor

    __call__ = analyze

    def clear_cached_results(self) -> None:
        with self._cache_lock:
            self._descriptor_cache.clear()
            self._hits = 0
            self._misses = 0

    def cache_info(self) -> Dict[str, int]:
        with self._cache_lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self._descriptor_cache),
                "max_size": self._max_cache_entries,
            }


DEFAULT_ANALYZER = WordAnalyzer()

__all__ = ["VOWELS", "WordDescriptor", "WordAnalyzer", "analyze_word", "DEFAULT_ANALYZER"]
