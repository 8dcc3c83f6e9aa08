"""Exception types and error message definitions for selector parsing.

Every error raised while turning selector text into tokens carries a
kebab-case ``code``; ``generate_error_message`` maps those codes to the
human-readable messages shown to callers.
"""

from __future__ import annotations


def generate_error_message(code: str, **context: str) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        **context: Values interpolated into the message (``construct``,
            ``remainder``, ``source``, ``reason``)

    Returns:
        Human-readable error message string
    """
    construct = context.get("construct", "")
    remainder = context.get("remainder", "")
    source = context.get("source", "")
    reason = context.get("reason", "")

    messages = {
        # Tokenizer errors
        "unterminated-negation": f"Expected close-parenthesis after '{construct}'",
        "unrecognized-syntax": f"Invalid or unsupported syntax near '{remainder}'",
        # Registry errors
        "selector-construction-failed": f"Error in selector '{source}': {reason}",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)


class SelectorError(ValueError):
    """Raised when a selector is invalid."""

    code: str = "selector-error"


class UnterminatedNegationError(SelectorError):
    """A ``:not(`` clause matched but was not followed by ``)``."""

    code = "unterminated-negation"

    construct: str
    position: int

    def __init__(self, construct: str, position: int) -> None:
        self.construct = construct
        self.position = position
        super().__init__(generate_error_message(self.code, construct=construct))


class UnrecognizedSyntaxError(SelectorError):
    """No grammar rule matches at the current position."""

    code = "unrecognized-syntax"

    remainder: str
    position: int

    def __init__(self, remainder: str, position: int) -> None:
        self.remainder = remainder
        self.position = position
        super().__init__(generate_error_message(self.code, remainder=remainder))


class SelectorConstructionError(SelectorError):
    """Wraps a tokenizer error with the selector text that caused it."""

    code = "selector-construction-failed"

    source: str
    error: SelectorError

    def __init__(self, source: str, error: SelectorError) -> None:
        self.source = source
        self.error = error
        super().__init__(generate_error_message(self.code, source=source, reason=str(error)))
