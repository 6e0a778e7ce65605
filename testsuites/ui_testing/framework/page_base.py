"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and URL handling
    - Element registry (symbolic name -> CSS selector)
    - Document-level form operations (fill field, select option)
    - Screenshot and failure capture for Allure

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import urlencode

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from .config import get_config
from .element_registry import ElementRegistry


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class PageBase:
    """
    Base class for all page objects.

    Subclasses declare their elements in `ELEMENTS` and extend
    `defined_elements()` when they combine elements from other sources.
    The merged registry is built once, at construction time.

    Usage:
        class ProductIndexPage(PageBase):
            URL_PATH = "/admin/products/"
            ELEMENTS = {"filter_enabled": "#criteria_enabled"}

            async def choose_enabled_filter(self):
                await self.get_element("filter_enabled").check()
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""
    ELEMENTS: Dict[str, str] = {}

    def __init__(
        self,
        page: Page,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application, defaults to `ui.base_url`
        """
        self.page = page
        if not base_url:
            base_url = get_config("ui.base_url", "http://localhost:8080")
        self.base_url = base_url.rstrip("/")
        self.elements = ElementRegistry(self.defined_elements())

    def defined_elements(self) -> Dict[str, str]:
        """Element name -> selector mapping for this page."""
        return dict(self.ELEMENTS)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate(self, wait_for: str = "load", **query: Any) -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
            **query: Optional query string parameters
        """
        url = self.url
        if query:
            url = f"{url}?{urlencode(query, doseq=True)}"
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(url, wait_until=wait_for)
            logger.debug(f"Navigated to: {url}")

    async def wait_for_page_load(
        self,
        state: str = "load",
        timeout: int = 15000,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds
        """
        await self.page.wait_for_load_state(state, timeout=timeout)

    # =========================================================================
    # Element Registry Access
    # =========================================================================

    def get_element(self, element_name: str) -> Locator:
        """
        Get a locator for a registered element.

        Raises:
            UnknownElementError: When `element_name` is not registered
        """
        return self.page.locator(self.elements.resolve(element_name))

    def has_element(self, element_name: str) -> bool:
        """Check whether `element_name` is registered on this page."""
        return element_name in self.elements

    # =========================================================================
    # Document-level Form Operations
    # =========================================================================

    def find_field(self, field: str) -> Locator:
        """Locate a form field by its id or name attribute."""
        return self.page.locator(f"[id='{field}'], [name='{field}']").first

    async def fill_field(
        self,
        field: str,
        value: Union[str, int, float],
        timeout: Optional[int] = None,
    ) -> None:
        """
        Fill a form field identified by id or name.

        Args:
            field: Field id or name
            value: Value to fill; non-strings are converted with str()
            timeout: Optional Playwright timeout in milliseconds
        """
        text = value if isinstance(value, str) else str(value)
        with allure.step(f"Fill field {field}: {text}"):
            await self.find_field(field).fill(text, timeout=timeout)
            logger.debug(f"Filled field '{field}' with '{text}'")

    async def select_option(
        self,
        field: str,
        option: str,
        timeout: Optional[int] = None,
    ) -> None:
        """Select the option with visible text `option` in a select field."""
        with allure.step(f"Select {option} in {field}"):
            await self.find_field(field).select_option(label=option, timeout=timeout)
            logger.debug(f"Selected '{option}' in field '{field}'")

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """Attach a full-page screenshot and the current URL to the report."""
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "PageBase",
]
