import pytest

from sananmuunnin.app.selection import select_all, select_regex, select_word
from sananmuunnin.core import WordList, analyze_word
from sananmuunnin.errors import SelectionError


@pytest.fixture
def word_list():
    return WordList.build(["kala", "kalat", "sana", "talo", "talot"])


def test_regex_must_match_whole_word(word_list):
    assert select_regex("ka", word_list).words() == []
    assert select_regex("ka.*", word_list).words() == ["kala", "kalat"]


def test_regex_ignores_case(word_list):
    assert select_regex("TA.*T", word_list).words() == ["talot"]


def test_regex_keeps_descriptors(word_list):
    selected = select_regex("sana", word_list)

    assert selected[0].descriptor == analyze_word("sana")


def test_invalid_regex_raises_selection_error(word_list):
    with pytest.raises(SelectionError):
        select_regex("(", word_list)


def test_select_word_normalises_query():
    selected = select_word("  Kalastaa ")

    assert selected.words() == ["kalastaa"]
    assert selected[0].descriptor == analyze_word("kalastaa")


def test_select_word_rejects_blank_query():
    with pytest.raises(SelectionError):
        select_word("   ")


def test_select_all_is_identity(word_list):
    assert select_all(word_list) is word_list
