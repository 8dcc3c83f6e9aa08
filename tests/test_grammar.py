from __future__ import annotations

import pytest

from simplesel.grammar import PATTERNS, match_kind
from simplesel.tokens import TokenKind


def test_every_kind_has_a_pattern():
    assert set(PATTERNS) == set(TokenKind.ALL)


def test_patterns_are_anchored():
    assert match_kind(TokenKind.TAG, " div") is None
    assert match_kind(TokenKind.CLASS, "div.foo") is None
    assert match_kind(TokenKind.CLASS, "div.foo", 3).group(0) == ".foo"


@pytest.mark.parametrize(
    "text",
    [
        "div",
        "h1",
        "_private",
        "-webkit-box",
        "caf\u00e9",
        "\u65e5\u672c",
        "foo\\:bar",
        "\\31 23",
        "\\e9t\u00e9",
    ],
)
def test_tag_identifiers(text):
    match = match_kind(TokenKind.TAG, text)
    assert match is not None
    assert match.group(0) == text


@pytest.mark.parametrize("text", ["123abc", "--foo", "-1", "", "*"])
def test_tag_rejects_invalid_identifier_start(text):
    assert match_kind(TokenKind.TAG, text) is None


def test_identifier_stops_at_punctuation():
    assert match_kind(TokenKind.TAG, "div#main").group(0) == "div"
    assert match_kind(TokenKind.ID, "#main.wide").group(1) == "main"
    assert match_kind(TokenKind.CLASS, ".wide[title]").group(1) == "wide"


def test_id_and_class_require_identifier():
    assert match_kind(TokenKind.ID, "#") is None
    assert match_kind(TokenKind.ID, "#1a") is None
    assert match_kind(TokenKind.CLASS, ".") is None


def test_attribute_presence():
    match = match_kind(TokenKind.ATTR, "[disabled]")
    assert match.groups() == ("disabled", None, None)


def test_attribute_with_quoted_values():
    match = match_kind(TokenKind.ATTR, '[title="a b"]')
    assert match.groups() == ("title", "=", '"a b"')

    match = match_kind(TokenKind.ATTR, "[title='it\\'s']")
    assert match.groups() == ("title", "=", "'it\\'s'")


def test_attribute_string_allows_escaped_newline():
    match = match_kind(TokenKind.ATTR, '[title="a\\\nb"]')
    assert match is not None
    assert match.group(3) == '"a\\\nb"'


@pytest.mark.parametrize(
    "text",
    [
        "[]",
        "[title",
        "[title=]",
        '[title="a\nb"]',
        '[title="open]',
        "[title=='x']",
        "[title = x]",
    ],
)
def test_attribute_rejects_malformed_clauses(text):
    assert match_kind(TokenKind.ATTR, text) is None
