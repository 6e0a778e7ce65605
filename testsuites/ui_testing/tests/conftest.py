"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects and failure capture.

Key Features:
- Browser and page lifecycle management
- Order list page rendered from a static fixture (no backend required)
- Screenshot capture on failure, attached to Allure

Browser-backed tests are skipped when Playwright cannot launch a browser
(e.g. `playwright install` was never run).

================================================================================
"""

from pathlib import Path
from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.pages.order_index_page import OrderIndexPage


FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Short timeout so that negative cases (missing options) fail fast
UI_TEST_TIMEOUT_MS = 2000


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase report on the item so fixtures can inspect the outcome."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """Started browser manager; skips the test when no browser is available."""
    manager = BrowserManager(default_timeout=UI_TEST_TIMEOUT_MS)
    try:
        await manager.start()
    except PlaywrightError as exc:
        pytest.skip(f"Browser unavailable: {str(exc).splitlines()[0]}")
    yield manager
    await manager.close()


@pytest.fixture
async def page(request, browser_manager: BrowserManager) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page in an isolated context.

    On test failure a full-page screenshot is attached to the Allure report.
    """
    page = await browser_manager.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        logger.warning(f"Test failed, capturing screenshot: {request.node.name}")
        await PageBase(page).capture_failure(request.node.name)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def order_index_html() -> str:
    """Static markup of the admin order list (filters + grid)."""
    return (FIXTURES_DIR / "order_index.html").read_text(encoding="utf-8")


@pytest.fixture
async def order_index_page(page: Page, order_index_html: str) -> OrderIndexPage:
    """OrderIndexPage bound to a page showing the order list markup."""
    await page.set_content(order_index_html)
    return OrderIndexPage(page)
