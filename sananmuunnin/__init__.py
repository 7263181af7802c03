"""Find sananmuunnos pairs: words whose initial morae swap into other words."""

from .core import (
    MAX_PARALLELISM,
    VOWELS,
    Lexicon,
    MatchRecord,
    SearchCoordinator,
    WordAnalyzer,
    WordDescriptor,
    WordList,
    analyze_word,
    search,
    swap,
    swap_words,
)
from .errors import (
    DictionaryLoadError,
    ParallelismError,
    SananmuunninError,
    SearchError,
    SelectionError,
)

__all__ = [
    "MAX_PARALLELISM",
    "VOWELS",
    "Lexicon",
    "MatchRecord",
    "SearchCoordinator",
    "WordAnalyzer",
    "WordDescriptor",
    "WordList",
    "analyze_word",
    "search",
    "swap",
    "swap_words",
    "SananmuunninError",
    "DictionaryLoadError",
    "ParallelismError",
    "SearchError",
    "SelectionError",
]
