"""Text rendering of search results."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from ..core.lexicon import WordList
from ..core.coordinator import MatchRecord


class MatchFormatter:
    """Render matches as ``word1 word2 => out1 out2`` lines plus a total."""

    regex_header = "Searching for following regex matches:"

    def format_match(self, record: MatchRecord) -> str:
        return record.format()

    def format_regex_header(self, word_list: WordList) -> List[str]:
        return [self.regex_header] + [f"\t{word}" for word in word_list.words()]

    def format_summary(self, count: int) -> str:
        return f"{count} found"

    def render(self, records: Iterable[MatchRecord]) -> Iterator[str]:
        count = 0
        for record in records:
            count += 1
            yield self.format_match(record)
        yield self.format_summary(count)


__all__ = ["MatchFormatter"]
