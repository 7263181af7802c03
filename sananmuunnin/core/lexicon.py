"""Word collections used by the search: a membership set and an ordered list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union, overload

from .analyzer import DEFAULT_ANALYZER, WordAnalyzer, WordDescriptor


class Lexicon:
    """Read-only set of known words used to validate swap outputs."""

    __slots__ = ("_words",)

    def __init__(self, words: FrozenSet[str] = frozenset()) -> None:
        self._words = frozenset(words)

    @classmethod
    def build(cls, words: Iterable[str]) -> "Lexicon":
        return cls(frozenset(words))

    @classmethod
    def from_word_list(cls, word_list: "WordList") -> "Lexicon":
        return cls(frozenset(word_list.words()))

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lexicon):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"Lexicon(size={len(self._words)})"


@dataclass(frozen=True)
class WordEntry:
    """A word paired with its precomputed descriptor."""

    word: str
    descriptor: WordDescriptor


class WordList:
    """Ordered, deduplicated words with descriptors, iterated by the search.

    Words are kept in code point order, which matches the byte order of
    their UTF-8 encoding, so partitions and output are reproducible.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Tuple[WordEntry, ...] = ()) -> None:
        self._entries = tuple(entries)

    @classmethod
    def build(
        cls,
        words: Iterable[str],
        analyzer: Optional[WordAnalyzer] = None,
    ) -> "WordList":
        analyzer = analyzer or DEFAULT_ANALYZER
        return cls(
            tuple(WordEntry(word, analyzer.analyze(word)) for word in sorted(set(words)))
        )

    @classmethod
    def from_entries(cls, entries: Iterable[WordEntry]) -> "WordList":
        """Wrap already analysed entries, keeping their order."""

        return cls(tuple(entries))

    @property
    def entries(self) -> Tuple[WordEntry, ...]:
        return self._entries

    def words(self) -> List[str]:
        return [entry.word for entry in self._entries]

    def filter(self, predicate: Callable[[str], bool]) -> "WordList":
        return WordList(tuple(entry for entry in self._entries if predicate(entry.word)))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self._entries)

    @overload
    def __getitem__(self, index: int) -> WordEntry: ...

    @overload
    def __getitem__(self, index: slice) -> "WordList": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[WordEntry, "WordList"]:
        if isinstance(index, slice):
            return WordList(self._entries[index])
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordList):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"WordList(size={len(self._entries)})"


__all__ = ["Lexicon", "WordEntry", "WordList"]
