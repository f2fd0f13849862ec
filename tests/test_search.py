import pytest

from libftx.search import (
    strchr,
    strclen,
    strcmp,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


@pytest.mark.parametrize("text", ["", "a", "hello world", "tab\there"])
def test_strlen_matches_len(text):
    assert strlen(text) == len(text)


def test_strchr_finds_first_occurrence():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strchr_missing_returns_none():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr("hello", "\0") == len("hello")


def test_strrchr_finds_last_occurrence():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "x") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strclen_counts_preceding_characters():
    text = "key=value"
    n = strclen(text, "=")
    assert text[:n] == "key"


def test_strclen_missing_raises():
    with pytest.raises(ValueError):
        strclen("abc", "\n")


@pytest.mark.parametrize(
    "a, b",
    [("abc", "abd"), ("ab", "abc"), ("", "a"), ("Apple", "apple")],
)
def test_strcmp_sign_follows_ordering(a, b):
    assert strcmp(a, b) < 0
    assert strcmp(b, a) > 0
    assert strcmp(a, b) == -strcmp(b, a)


def test_strcmp_equal_is_zero():
    assert strcmp("same", "same") == 0


def test_strcmp_is_difference_of_codes():
    assert strcmp("a", "c") == ord("a") - ord("c")
    assert strcmp("ab", "a") == ord("b")


def test_strncmp_limits_comparison():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abcdef", "abcxyz", 4) < 0
    assert strncmp("anything", "else", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("ab", "ab", 10) == 0


def test_strnstr_finds_within_length():
    hay = "lorem ipsum dolor"
    index = strnstr(hay, "ipsum", len(hay))
    assert hay[index:index + len("ipsum")] == "ipsum"


def test_strnstr_match_must_fit_in_length():
    hay = "lorem ipsum dolor"
    start = hay.index("ipsum")
    assert strnstr(hay, "ipsum", start + len("ipsum") - 1) is None
    assert strnstr(hay, "ipsum", start + len("ipsum")) == start


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None