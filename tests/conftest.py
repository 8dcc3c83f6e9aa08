from __future__ import annotations

import pytest

from simplesel import SelectorRegistry


class FakeElement:
    """Stands in for a host element; answers from a fixed set of selector texts."""

    def __init__(self, accepted: set[str] | None = None) -> None:
        self.accepted = accepted or set()
        self.calls: list[str] = []

    def matches(self, selector: str) -> bool:
        self.calls.append(selector)
        return selector in self.accepted


@pytest.fixture
def registry() -> SelectorRegistry:
    return SelectorRegistry()


@pytest.fixture
def element() -> FakeElement:
    return FakeElement({"div.note", ":not(.hidden)"})
