import itertools

import pytest

from sananmuunnin.core import WordAnalyzer, analyze_word, swap, swap_words


def _swap(word1, word2):
    return swap(word1, analyze_word(word1), word2, analyze_word(word2))


def test_short_vowel_meets_long_vowel():
    # "ka" + "lastaa" and "maa" + "lata": the long vowel moves to the other word.
    assert _swap("kalastaa", "maalata") == ("malastaa", "kaalata")


def test_long_vowel_meets_short_vowel():
    assert _swap("maalata", "kalastaa") == ("kaalata", "malastaa")


def test_straight_swap_of_short_vowels():
    assert _swap("kalat", "talot") == ("talat", "kalot")


def test_straight_swap_of_long_vowels():
    assert _swap("kuusi", "taala") == ("taasi", "kuula")


def test_long_front_vowel_donates_length():
    assert _swap("ääni", "kala") == ("kaani", "äla")


def test_same_word_never_swaps():
    assert _swap("kalastaa", "kalastaa") is None


@pytest.mark.parametrize(
    "word1, word2",
    [
        ("krt", "kala"),
        ("kala", "krt"),
        ("", "kala"),
        ("psst", "hmm"),
    ],
)
def test_words_without_vowel_never_swap(word1, word2):
    assert _swap(word1, word2) is None


def test_shared_prefix_over_shorter_mora_is_rejected():
    assert _swap("kala", "kalu") is None
    assert _swap("sana", "saari") is None


def test_identical_tails_are_rejected():
    assert _swap("kala", "tala") is None


def test_single_vowel_words():
    # "a" and "e" have empty tails, which are identical.
    assert _swap("a", "e") is None
    assert _swap("a", "talo") == ("ta", "alo")


def test_swap_words_uses_given_analyzer(analyzer):
    assert swap_words("kalastaa", "maalata", analyzer) == ("malastaa", "kaalata")
    assert analyzer.cache_info()["misses"] == 2


def test_swap_is_symmetric_up_to_output_order():
    words = ["kalastaa", "maalata", "kuusi", "taala", "ääni", "kala", "tala", "krt", "a", "strutsi"]

    for word1, word2 in itertools.permutations(words, 2):
        forward = _swap(word1, word2)
        backward = _swap(word2, word1)
        if forward is None:
            assert backward is None
        else:
            assert backward == (forward[1], forward[0])


def test_outputs_come_in_pairs():
    analyzer = WordAnalyzer()
    words = ["kalastaa", "maalata", "kuusi", "krt", ""]

    for word1, word2 in itertools.product(words, repeat=2):
        result = swap_words(word1, word2, analyzer)
        assert result is None or (isinstance(result, tuple) and len(result) == 2)
