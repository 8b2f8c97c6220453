import re

import pytest

from lookpath.search import (
    Pattern,
    PatternError,
    SearchMethod,
    look_match,
    regex_match,
)


@pytest.mark.parametrize(
    "pattern,text,expected",
    [
        ("ls", "ls", True),
        ("l", "ls", True),
        ("lsx", "ls", False),
        ("", "anything", True),
        ("s", "ls", False),
    ],
)
def test_look_match(pattern, text, expected):
    assert look_match(pattern, text) is expected


def test_regex_match_searches_anywhere():
    assert regex_match(re.compile("th"), "python") is True
    assert regex_match(re.compile("^th"), "python") is False


def test_default_method_is_look():
    pattern = Pattern("py")
    assert pattern.method is SearchMethod.LOOK
    assert pattern.find("python3") is True
    assert pattern.find("xpython") is False


def test_regex_pattern():
    pattern = Pattern("^py.*3$", SearchMethod.REGEX)
    pattern.compile()
    assert pattern.find("python3") is True
    assert pattern.find("python2") is False


def test_regex_pattern_compiles_lazily():
    pattern = Pattern("on", SearchMethod.REGEX)
    assert pattern.find("python") is True


def test_invalid_regex_raises():
    pattern = Pattern("(", SearchMethod.REGEX)
    with pytest.raises(PatternError):
        pattern.compile()


def test_missing_text_raises():
    with pytest.raises(PatternError):
        Pattern().compile()
    with pytest.raises(PatternError):
        Pattern().find("ls")


def test_look_ignores_regex_syntax():
    pattern = Pattern("(")
    pattern.compile()
    assert pattern.find("(paren") is True