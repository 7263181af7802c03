"""Reading word list files into a lexicon and an ordered word list."""

from __future__ import annotations

import unicodedata
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..core.analyzer import WordAnalyzer
from ..core.lexicon import Lexicon, WordList
from ..errors import DictionaryLoadError
from ..utils.observability import get_logger


def normalize_word(word: str) -> str:
    """Lower-case ``word`` and compose its diacritics (``a`` + U+0308 -> ``ä``)."""

    return unicodedata.normalize("NFC", word.strip()).lower()


def normalize_words(lines: Iterable[str]) -> List[str]:
    """Normalise, drop blanks and deduplicate, returning words in sorted order."""

    words = {normalize_word(line) for line in lines}
    words.discard("")
    return sorted(words)


class DictionaryLoader:
    """Lazy loader for a one-word-per-line dictionary file."""

    def __init__(
        self,
        dict_path: Path | str,
        *,
        encoding: str = "utf-8",
        analyzer: Optional[WordAnalyzer] = None,
    ) -> None:
        self.dict_path: Path = Path(dict_path)
        self.encoding = encoding
        self.analyzer = analyzer
        self._words: List[str] = []
        self._loaded: bool = False
        self._logger = get_logger(__name__).bind(
            component="dictionary_loader", path=str(self.dict_path)
        )

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return

        try:
            with self.dict_path.open("r", encoding=self.encoding) as handle:
                words = normalize_words(handle)
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.error("Dictionary could not be read", context={"error": str(exc)})
            raise DictionaryLoadError(f"{self.dict_path}: Unable to read file") from exc

        self._words = words
        self._loaded = True
        self._logger.info("Dictionary loaded", context={"words": len(words)})

    def load(self) -> List[str]:
        """Return the normalised, deduplicated words in sorted order."""

        self._ensure_loaded()
        return list(self._words)

    def build(self) -> Tuple[Lexicon, WordList]:
        """Return the lexicon and the analysed word list for the whole file."""

        words = self.load()
        return Lexicon.build(words), WordList.build(words, self.analyzer)


__all__ = ["DictionaryLoader", "normalize_word", "normalize_words"]
