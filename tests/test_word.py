import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from word import (
    InvariantError,
    MAX_LETTERS,
    SHIFT_POSITIONS,
    WordError,
    decode,
    dupl_first,
    encode,
    is_valid,
    length,
    neighbours,
    pop,
    rotate,
    shifts,
    _word,
)

WORDS = ["a", "z", "ab", "az", "abc", "sick", "true", "abcde", "zzzzzz", "abcdefghi", "abcdefghijkl"]


def decoded(words):
    return [decode(w) if w is not None else None for w in words]


@pytest.mark.parametrize("s", WORDS)
def test_round_trip_and_length(s):
    w = encode(s)
    assert decode(w) == s
    assert length(w) == len(s)
    assert is_valid(w)


def test_first_letter_in_lowest_field():
    assert encode("a") == 1
    assert encode("z") == 26
    assert encode("ab") == 1 | (2 << 5)


@pytest.mark.parametrize("bad", ["", "Abc", "ab1", "ab c", "é", "a" * (MAX_LETTERS + 1)])
def test_encode_rejects_bad_words(bad):
    with pytest.raises(WordError):
        encode(bad)


def test_encode_respects_max_length():
    assert decode(encode("abcd", max_length=4)) == "abcd"
    with pytest.raises(WordError):
        encode("abcde", max_length=4)
    with pytest.raises(WordError):
        encode("a", max_length=0)
    with pytest.raises(WordError):
        encode("a", max_length=MAX_LETTERS + 1)


def test_is_valid_rejects_non_words():
    assert not is_valid(0)
    assert not is_valid(1 | (1 << 10))  # gap at field 1
    assert not is_valid(27)
    assert not is_valid(1 << (MAX_LETTERS * 5))


def test_single_letter():
    a = encode("a")
    assert decode(a) == "a"
    assert length(a) == 1
    assert pop(a) is None
    assert decode(dupl_first(a, 8)) == "aa"
    assert rotate(a) == [None, None]


def test_dupl_first():
    assert decode(dupl_first(encode("ab"), 6)) == "aab"
    assert decode(dupl_first(encode("abcde"), 6)) == "aabcde"
    assert dupl_first(encode("abcdef"), 6) is None
    assert dupl_first(encode("abc"), 3) is None
    assert decode(dupl_first(encode("abc"), 4)) == "aabc"


def test_pop():
    assert decode(pop(encode("abcde"))) == "bcde"
    assert decode(pop(encode("ab"))) == "b"
    assert pop(encode("a")) is None


@pytest.mark.parametrize("s", ["a", "ab", "abc", "zzz", "sick"])
def test_pop_undoes_dupl_first(s):
    w = encode(s)
    assert pop(dupl_first(w, 6)) == w


def test_shifts_wrap_single_letter():
    assert decoded(shifts(encode("a"))) == ["b", None, None, None, None, None, "z", None, None, None, None, None]
    assert decoded(shifts(encode("z"))) == ["a", None, None, None, None, None, "y", None, None, None, None, None]


def test_shifts_two_letters():
    assert decoded(shifts(encode("bc"))) == [
        "cc", "bd", None, None, None, None,
        "ac", "bb", None, None, None, None,
    ]


def test_shifts_six_letters():
    assert decoded(shifts(encode("oooooo"))) == [
        "pooooo", "opoooo", "oopooo", "ooopoo", "oooopo", "ooooop",
        "nooooo", "onoooo", "oonooo", "ooonoo", "oooono", "ooooon",
    ]


def test_shifts_ignore_letters_past_sixth():
    result = shifts(encode("aaaaaaaa"))
    assert len(result) == 2 * SHIFT_POSITIONS
    assert decode(result[0]) == "baaaaaaa"
    assert decode(result[11]) == "aaaaazaa"


@pytest.mark.parametrize("s", ["azm", "zzzz", "abcdef"])
def test_shift_up_then_down_restores(s):
    w = encode(s)
    for i in range(len(s)):
        up = shifts(w)[i]
        down = shifts(w)[i + SHIFT_POSITIONS]
        assert shifts(up)[i + SHIFT_POSITIONS] == w
        assert shifts(down)[i] == w
        others = [j for j in range(len(s)) if j != i]
        assert all(decode(up)[j] == s[j] for j in others)


def test_rotate():
    assert decoded(rotate(encode("abc"))) == ["bca", "cab"]
    assert decoded(rotate(encode("ab"))) == ["ba", "ba"]
    assert decoded(rotate(encode("aa"))) == ["aa", "aa"]
    assert decoded(rotate(encode("abcdef"))) == ["bcdefa", "fabcde"]


@pytest.mark.parametrize("s", ["ab", "abc", "sick", "abcdef", "abcdefghijkl"])
def test_rotations_invert_each_other(s):
    w = encode(s)
    left, right = rotate(w)
    assert rotate(left)[1] == w
    assert rotate(right)[0] == w


def test_neighbours_order():
    assert [decode(w) for w in neighbours(encode("a"), 2)] == ["aa", "b", "z"]
    result = [decode(w) for w in neighbours(encode("ab"), 2)]
    assert result == ["b", "bb", "ac", "zb", "aa", "ba", "ba"]


def test_zero_operator_result_is_an_invariant_failure():
    with pytest.raises(InvariantError):
        _word(0)
    assert _word(encode("ab")) == encode("ab")
    assert not issubclass(InvariantError, WordError)
