# Parsed simple selectors and the registry that memoizes them

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Any, Protocol

from .errors import SelectorConstructionError, SelectorError
from .tokenizer import tokenize

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .tokens import Token

logger = logging.getLogger(__name__)


class HostElement(Protocol):
    """Anything that can evaluate selector text against itself."""

    def matches(self, selector: str) -> bool: ...


def attributes_from_tokens(tokens: Iterable[Token]) -> frozenset[str]:
    """Collect the distinct attribute names a token sequence reads."""
    result: set[str] = set()
    for token in tokens:
        attribute = token.attribute
        if attribute is not None:
            result.add(attribute)
    return frozenset(result)


class Selector:
    """A tokenized simple selector.

    Instances are immutable and are normally obtained through
    ``Selector.get()`` (or a ``SelectorRegistry``) so that each distinct
    source string is parsed once and shared afterwards.
    """

    __slots__ = ("attributes", "source", "tokens")

    source: str
    tokens: tuple[Token, ...]
    attributes: frozenset[str]

    def __init__(self, source: str) -> None:
        try:
            tokens = tuple(tokenize(source))
        except SelectorError as e:
            raise SelectorConstructionError(source, e) from e
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "tokens", tokens)
        object.__setattr__(self, "attributes", attributes_from_tokens(tokens))

    @classmethod
    def get(cls, source: Any, registry: SelectorRegistry | None = None) -> Selector:
        """Return the shared Selector for ``source``, parsing it on first use.

        Args:
            source: Selector text; surrounding whitespace is ignored
            registry: Registry to use instead of ``default_registry``

        Raises:
            SelectorConstructionError: If the text cannot be tokenized
        """
        return (registry if registry is not None else default_registry).get(source)

    @property
    def dependent_attributes(self) -> frozenset[str]:
        return self.attributes

    def matches(self, element: HostElement) -> bool:
        """Evaluate this selector with the element's own ``matches()``."""
        return element.matches(self.source)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return self.source

    def __repr__(self) -> str:
        return f"Selector({self.source!r})"


class SelectorRegistry:
    """Maps trimmed selector text to the one Selector built for it.

    Entries are added on first request and never replaced or evicted. Failed
    parses are not cached, so asking again for the same bad text raises again.
    """

    __slots__ = ("_lock", "_selectors")

    _selectors: dict[str, Selector]
    _lock: AbstractContextManager[Any]

    def __init__(self, *, thread_safe: bool = True) -> None:
        self._selectors = {}
        self._lock = threading.Lock() if thread_safe else nullcontext()

    def get(self, source: Any) -> Selector:
        key = str(source).strip()

        selector = self._selectors.get(key)
        if selector is not None:
            return selector

        with self._lock:
            # Another thread may have built it while we waited
            selector = self._selectors.get(key)
            if selector is None:
                logger.debug("Parsing selector %r", key)
                try:
                    selector = Selector(key)
                except SelectorConstructionError as e:
                    logger.debug("Rejected selector %r: %s", key, e.error)
                    raise
                self._selectors[key] = selector
        return selector

    def __contains__(self, source: object) -> bool:
        return str(source).strip() in self._selectors

    def __len__(self) -> int:
        return len(self._selectors)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._selectors))

    def __repr__(self) -> str:
        return f"SelectorRegistry({len(self._selectors)} selectors)"


# Registry shared by Selector.get() and get()
default_registry: SelectorRegistry = SelectorRegistry()


def get(source: Any) -> Selector:
    """Return the shared Selector for ``source`` from ``default_registry``."""
    return default_registry.get(source)
