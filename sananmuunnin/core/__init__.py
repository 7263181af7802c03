"""Swap engine core: mora segmentation, recombination and pairwise search."""

from .analyzer import DEFAULT_ANALYZER, VOWELS, WordAnalyzer, WordDescriptor, analyze_word
from .lexicon import Lexicon, WordEntry, WordList
from .coordinator import (
    EXECUTORS,
    MAX_PARALLELISM,
    MatchRecord,
    PartitionResult,
    SearchCoordinator,
    effective_parallelism,
    partition_bounds,
    search,
)
from .swap import swap, swap_words

__all__ = [
    "VOWELS",
    "DEFAULT_ANALYZER",
    "WordAnalyzer",
    "WordDescriptor",
    "analyze_word",
    "Lexicon",
    "WordEntry",
    "WordList",
    "swap",
    "swap_words",
    "EXECUTORS",
    "MAX_PARALLELISM",
    "MatchRecord",
    "PartitionResult",
    "SearchCoordinator",
    "effective_parallelism",
    "partition_bounds",
    "search",
]
