import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from sananmuunnin.core import Lexicon, WordAnalyzer, WordList


SWAP_QUARTET = ["kalat", "kalot", "talat", "talot"]


def _synthetic_words():
    onsets = ["k", "t", "m", "s", "p"]
    nuclei = ["a", "aa", "u", "uu"]
    codas = ["lo", "la", "si", "ta"]
    return [onset + nucleus + coda for onset in onsets for nucleus in nuclei for coda in codas]


@pytest.fixture
def analyzer():
    """Fresh analyzer so cache statistics start from zero."""

    return WordAnalyzer()


@pytest.fixture
def quartet():
    """Lexicon and word list where every cross pair swaps into known words."""

    word_list = WordList.build(SWAP_QUARTET)
    return Lexicon.build(SWAP_QUARTET), word_list


@pytest.fixture
def synthetic_dictionary():
    words = _synthetic_words()
    return Lexicon.build(words), WordList.build(words)


@pytest.fixture
def dictionary_file(tmp_path):
    """Write ``lines`` to a dictionary file and return its path."""

    def _write(lines, name="sanat.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
