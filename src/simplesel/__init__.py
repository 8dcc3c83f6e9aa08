"""Tokenize and memoize simple CSS selectors."""

from .errors import (
    SelectorConstructionError,
    SelectorError,
    UnrecognizedSyntaxError,
    UnterminatedNegationError,
)
from .selector import HostElement, Selector, SelectorRegistry, attributes_from_tokens, default_registry, get
from .tokenizer import SelectorTokenizer, tokenize
from .tokens import Token, TokenKind

__all__ = [
    "HostElement",
    "Selector",
    "SelectorConstructionError",
    "SelectorError",
    "SelectorRegistry",
    "SelectorTokenizer",
    "Token",
    "TokenKind",
    "UnrecognizedSyntaxError",
    "UnterminatedNegationError",
    "attributes_from_tokens",
    "default_registry",
    "get",
    "tokenize",
]
