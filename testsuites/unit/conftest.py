"""
Browser-free fixtures: an in-memory stand-in for a Playwright page that
records the actions page objects perform.
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest
from playwright.async_api import Error as PlaywrightError


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str):
        self.page = page
        self.selector = selector

    @property
    def first(self) -> "FakeLocator":
        return self

    async def fill(self, value: str, timeout: Optional[float] = None) -> None:
        self.page.actions.append(("fill", self.selector, value))

    async def select_option(self, label: Optional[str] = None, timeout: Optional[float] = None) -> List[str]:
        options = self.page.options.get(self.selector, [])
        if label not in options:
            raise PlaywrightError(f"Timeout {timeout}ms exceeded waiting for option '{label}'")
        self.page.actions.append(("select", self.selector, label))
        return [label]

    async def click(self, **kwargs: Any) -> None:
        self.page.actions.append(("click", self.selector))


class FakePage:
    def __init__(self, options: Optional[Dict[str, List[str]]] = None):
        self.options = options or {}
        self.actions: List[Tuple[Any, ...]] = []
        self.url = "about:blank"

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    async def goto(self, url: str, wait_until: Optional[str] = None) -> None:
        self.url = url
        self.actions.append(("goto", url))

    async def wait_for_load_state(self, state: str = "load", timeout: Optional[float] = None) -> None:
        self.actions.append(("wait", state))


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage(
        options={
            "#criteria_channel": ["", "WebUS", "WebUK"],
            "#criteria_total_currency": ["", "Euro", "British Pound"],
        }
    )
