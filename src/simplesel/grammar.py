# Lexical grammar for simple selectors
# Fragments follow the CSS 2.1 tokenization appendix (ident, string, escape)

from __future__ import annotations

import re

from .tokens import TokenKind

_UNICODE = r"\\[0-9a-fA-F]{1,6}(?:\r\n|[ \n\r\t\f])?"
_ESCAPE = rf"(?:{_UNICODE})|\\[^\n\r\f0-9a-fA-F]"
_NL = r"\n|\r\n|\r|\f"
_NONASCII = r"[^\x00-\x7f]"
_NMSTART = rf"[_a-zA-Z]|(?:{_NONASCII})|(?:{_ESCAPE})"
_NMCHAR = rf"[_a-zA-Z0-9-]|(?:{_NONASCII})|(?:{_ESCAPE})"
_IDENT = rf"-?(?:{_NMSTART})(?:{_NMCHAR})*"
_NAME = rf"(?:{_NMCHAR})+"
_STRING1 = rf'"(?:[^\n\r\f\\"]|\\(?:{_NL})|(?:{_ESCAPE}))*"'
_STRING2 = rf"'(?:[^\n\r\f\\']|\\(?:{_NL})|(?:{_ESCAPE}))*'"
_STRING = rf"(?:{_STRING1})|(?:{_STRING2})"
_ATTROP = r"=|~=|\|=|\^=|\$=|\*="
# Unquoted values use the `name` production so [data-x=1] is accepted
_ATTRVAL = rf"(?:{_NAME})|(?:{_STRING})"

ATTRIBUTE_OPERATORS: tuple[str, ...] = ("=", "~=", "|=", "^=", "$=", "*=")

NEGATION_PREFIX: str = ":not("
NEGATION_SUFFIX: str = ")"

# Group 1 is the token's data; ATTR adds operator (2) and operand (3)
PATTERNS: dict[str, re.Pattern[str]] = {
    TokenKind.TAG: re.compile(rf"({_IDENT})"),
    TokenKind.ID: re.compile(rf"#({_IDENT})"),
    TokenKind.CLASS: re.compile(rf"\.({_IDENT})"),
    TokenKind.ATTR: re.compile(rf"\[({_IDENT})(?:({_ATTROP})({_ATTRVAL}))?\]"),
}


def match_kind(kind: str, text: str, pos: int = 0) -> re.Match[str] | None:
    """Match the pattern for ``kind`` anchored at ``pos`` (never searches ahead)."""
    return PATTERNS[kind].match(text, pos)
