"""The sananmuunnos swap: exchange the initial morae of two words."""

from __future__ import annotations

from typing import Optional, Tuple

from .analyzer import DEFAULT_ANALYZER, WordAnalyzer, WordDescriptor


def swap(
    word1: str,
    desc1: WordDescriptor,
    word2: str,
    desc2: WordDescriptor,
) -> Optional[Tuple[str, str]]:
    """Swap the initial morae of ``word1`` and ``word2``.

    Returns ``None`` when either word lacks a vowel, when the words share
    their prefix over the shorter mora, or when their tails are identical.

    Vowel length stays with the mora position: when only one of the words
    starts with a long vowel, the long side gives up its repeated vowel and
    the short side's mora is lengthened with its own vowel instead, so
    ``kalastaa`` + ``maalata`` becomes ``malastaa`` + ``kaalata``.
    """

    if desc1.vowel is None or desc2.vowel is None:
        return None

    shortest = min(desc1.mora_length, desc2.mora_length)
    if word1[:shortest] == word2[:shortest]:
        return None

    tail1 = desc1.tail(word1)
    tail2 = desc2.tail(word2)
    if tail1 == tail2:
        return None

    mora1 = desc1.mora(word1)
    mora2 = desc2.mora(word2)

    if desc1.has_long_vowel == desc2.has_long_vowel:
        return mora2 + tail1, mora1 + tail2

    if desc2.has_long_vowel:
        shortened = mora2[: len(mora2) - len(desc2.vowel)]
        return shortened + tail1, mora1 + desc1.vowel + tail2

    shortened = mora1[: len(mora1) - len(desc1.vowel)]
    return mora2 + desc2.vowel + tail1, shortened + tail2


def swap_words(
    word1: str,
    word2: str,
    analyzer: Optional[WordAnalyzer] = None,
) -> Optional[Tuple[str, str]]:
    """Analyse both words and :func:`swap` them."""

    analyzer = analyzer or DEFAULT_ANALYZER
    return swap(word1, analyzer.analyze(word1), word2, analyzer.analyze(word2))


__all__ = ["swap", "swap_words"]
