import pytest

from pushswap.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first():
    assert strchr("hello", "l") == "hello".index("l")
    assert strchr("hello", ord("e")) == "hello".index("e")


def test_strchr_missing_and_terminator():
    assert strchr("abc", "z") is None
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strrchr_finds_last():
    assert strrchr("hello", "l") == "hello".rindex("l")
    assert strrchr("hello", "z") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strncmp_equal_and_limited():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign_of_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strnstr_within_length():
    haystack = "Foo Bar Baz"
    assert strnstr(haystack, "Bar", len(haystack)) == haystack.index("Bar")


def test_strnstr_needle_must_fit():
    haystack = "Foo Bar Baz"
    assert strnstr(haystack, "Bar", haystack.index("Bar") + 2) is None
    assert strnstr(haystack, "Bar", haystack.index("Bar") + 3) == haystack.index("Bar")
    assert strnstr(haystack, "Qux", 100) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_substr_basic_and_bounds():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 2, 100) == "hello"[2:]
    assert substr(None, 0, 1) is None


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_concatenation_invariants():
    first, second = "push", "swap"
    joined = strjoin(first, second)
    assert joined.startswith(first)
    assert joined.endswith(second)
    assert len(joined) == len(first) + len(second)


def test_strjoin_missing_side():
    assert strjoin(None, "x") == "x"
    assert strjoin("x", None) == "x"
    assert strjoin(None, None) is None


def test_strtrim():
    assert strtrim("xyhixy", "xy") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("abc", "") == "abc"
    assert strtrim(None, "x") is None


def test_split_invariants():
    text = "  a  bb   c "
    words = split(text, " ")
    assert all(words)
    assert all(" " not in word for word in words)
    assert "".join(words) == text.replace(" ", "")


def test_split_only_separators():
    assert split("    ", " ") == []
    assert split("", " ") == []


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    indexes = strmapi("abcd", lambda i, c: str(i))
    assert [int(d) for d in indexes] == list(range(len("abcd")))
    assert strmapi(None, lambda i, c: c) is None


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda i, s: s.__setitem__(i, s[i].upper()))
    assert "".join(chars) == strmapi("abc", lambda i, c: c.upper())


def test_striteri_passes_each_index():
    seen = []
    chars = list("wxyz")
    striteri(chars, lambda i, s: seen.append(i))
    assert seen == list(range(len(chars)))
    assert striteri(None, lambda i, s: seen.append(i)) is None
    assert seen == list(range(len(chars)))