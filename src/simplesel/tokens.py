from __future__ import annotations

from typing import Any, Literal


class TokenKind:
    """The closed set of simple selector token kinds, in matching priority order."""

    __slots__ = ()

    TAG: Literal["TAG"] = "TAG"  # div, span, etc.
    ID: Literal["ID"] = "ID"  # #foo
    CLASS: Literal["CLASS"] = "CLASS"  # .bar
    ATTR: Literal["ATTR"] = "ATTR"  # [href], [lang|=en], [title="x"]

    ALL: tuple[str, ...] = (TAG, ID, CLASS, ATTR)


class Token:
    """One simple selector clause, exactly as it appeared in the source text."""

    __slots__ = ("data", "kind", "negated", "operand", "operator", "value")

    kind: str
    value: str
    data: str
    operator: str | None
    operand: str | None
    negated: bool

    def __init__(
        self,
        kind: str,
        value: str,
        data: str | None = None,
        negated: bool = False,
        operator: str | None = None,
        operand: str | None = None,
    ) -> None:
        if kind not in TokenKind.ALL:
            raise ValueError(f"Unknown token kind: {kind!r}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "data", data or "")
        object.__setattr__(self, "negated", bool(negated))
        object.__setattr__(self, "operator", operator)
        object.__setattr__(self, "operand", operand)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def attribute(self) -> str | None:
        """Name of the element attribute this token reads, or None for tags."""
        kind = self.kind
        if kind == TokenKind.TAG:
            return None
        if kind == TokenKind.ID:
            return "id"
        if kind == TokenKind.CLASS:
            return "class"
        if kind == TokenKind.ATTR:
            return self.data
        raise ValueError(f"Unknown token kind: {kind!r}")

    def __len__(self) -> int:
        return len(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value and self.negated == other.negated

    def __hash__(self) -> int:
        return hash((self.kind, self.value, self.negated))

    def __repr__(self) -> str:
        if self.negated:
            return f"Token({self.kind}, {self.value!r}, negated=True)"
        return f"Token({self.kind}, {self.value!r})"
