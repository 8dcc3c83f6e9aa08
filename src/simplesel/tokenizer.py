# Simple selector tokenizer
# Greedy, left-to-right, no backtracking across token boundaries

from __future__ import annotations

import logging

from .errors import UnrecognizedSyntaxError, UnterminatedNegationError
from .grammar import NEGATION_PREFIX, NEGATION_SUFFIX, match_kind
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)


def read_token(source: str, pos: int, kind: str) -> Token | None:
    """Read one token of ``kind`` starting at ``pos``.

    A leading ``:not(`` wraps the clause; the wrapped clause must be followed
    by ``)``.

    Returns:
        The token, or None if ``kind`` does not match at ``pos``

    Raises:
        UnterminatedNegationError: If a negated clause is missing its ``)``
    """
    negated = source.startswith(NEGATION_PREFIX, pos)
    start = pos + len(NEGATION_PREFIX) if negated else pos

    match = match_kind(kind, source, start)
    if match is None:
        return None

    value = match.group(0)
    data = match.group(1)
    operator: str | None = None
    operand: str | None = None
    if kind == TokenKind.ATTR:
        operator = match.group(2)
        operand = match.group(3)

    if not negated:
        return Token(kind, value, data, False, operator, operand)

    end = match.end()
    if not source.startswith(NEGATION_SUFFIX, end):
        raise UnterminatedNegationError(f"{NEGATION_PREFIX}{value}", end)

    return Token(kind, f"{NEGATION_PREFIX}{value}{NEGATION_SUFFIX}", data, True, operator, operand)


class SelectorTokenizer:
    """Tokenizes a simple selector string into tokens."""

    __slots__ = ("length", "pos", "source")

    source: str
    pos: int
    length: int

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.length = len(source)

    def _read_next(self) -> Token | None:
        for kind in TokenKind.ALL:
            token = read_token(self.source, self.pos, kind)
            if token is not None:
                return token
        return None

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []

        while self.pos < self.length:
            token = self._read_next()
            if token is None:
                remainder = self.source[self.pos :]
                logger.debug("No token matches at offset %d of %r", self.pos, self.source)
                raise UnrecognizedSyntaxError(remainder, self.pos)

            tokens.append(token)
            self.pos += len(token)

        return tokens


def tokenize(source: str) -> list[Token]:
    """Split a simple selector into its tokens, in source order."""
    return SelectorTokenizer(source).tokenize()
