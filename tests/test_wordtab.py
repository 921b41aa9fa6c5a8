import pytest

from solong.wordtab import split_words, str_str, str_str_quoted


def test_str_str_finds_needle():
    text = 'static char *xpm[] = { "32 32 3 1",'
    pos = str_str(text, '"', len(text))
    assert text[pos] == '"'
    assert '"' not in text[:pos]


def test_str_str_missing_returns_minus_one():
    text = "no quotes here"
    assert str_str(text, '"', len(text)) == -1


def test_str_str_needle_longer_than_length():
    text = "abcdef"
    assert str_str(text, "cd", 1) == -1


def test_str_str_empty_needle_rejected():
    with pytest.raises(ValueError):
        str_str("abc", "", 3)


def test_quoted_skips_match_inside_quotes():
    text = '"a/*b" /* comment */'
    pos = str_str_quoted(text, "/*", len(text))
    assert text[pos:pos + 2] == "/*"
    assert pos > text.rindex('"')


def test_quoted_matches_outside_quotes_first():
    text = '/* head */ "x"'
    assert str_str_quoted(text, "/*", len(text)) == str_str(text, "/*", len(text))


def test_quoted_only_inside_quotes_is_not_found():
    text = '"// not a comment"'
    assert str_str_quoted(text, "//", len(text)) == -1


def test_quoted_needle_longer_than_length():
    assert str_str_quoted("abc//", "//", 1) == -1


def test_split_words_spaces_and_tabs():
    assert split_words("  24 24\t3   1\t") == ["24", "24", "3", "1"]


def test_split_words_blank_text():
    assert split_words(" \t  ") == []


def test_split_words_rejoin_round_trip():
    words = ["c", "#FF0000", "s", "red"]
    assert split_words("\t".join(words)) == words