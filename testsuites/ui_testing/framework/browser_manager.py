"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for the admin UI suites.

Features:
    - Single browser instance per session
    - Isolated contexts per test
    - Launch and context presets driven by the `ui.*` configuration

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .config import get_bool, get_config


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages the browser instance and contexts for UI testing.

    Usage:
        async with BrowserManager() as manager:
            page = await manager.new_page()
            await page.goto("http://localhost:8080/admin/orders/")
    """

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        default_timeout: Optional[int] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (default: `ui.headless`)
            browser_type: 'chromium', 'firefox' or 'webkit' (default: `ui.browser`)
            default_timeout: Default action timeout in ms (default: `ui.timeout`)
        """
        self.headless = get_bool("ui.headless", True) if headless is None else headless
        self.browser_type = browser_type or get_config("ui.browser", "chromium")
        self.default_timeout = int(
            default_timeout if default_timeout is not None else get_config("ui.timeout", 10000)
        )
        if self.browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{self.browser_type}', "
                f"expected one of: {', '.join(SUPPORTED_BROWSERS)}"
            )

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> Browser:
        """Start Playwright and launch the configured browser."""
        self._playwright = await async_playwright().start()
        launcher = getattr(self._playwright, self.browser_type)
        try:
            self._browser = await launcher.launch(headless=self.headless)
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise
        logger.info(f"Browser started: {self.browser_type} (headless={self.headless})")
        return self._browser

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        for context in self._contexts:
            await context.close()
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.info("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create an isolated browser context.

        Args:
            **options: Context options overriding the configured presets
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {
            **self.DEFAULT_CONTEXT_OPTIONS,
            "viewport": get_config("ui.viewport", {"width": 1920, "height": 1080}),
            **options,
        }
        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.default_timeout)
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """Create a page in `context`, or in a fresh context when omitted."""
        if context is None:
            context = await self.new_context(**context_options)
        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
