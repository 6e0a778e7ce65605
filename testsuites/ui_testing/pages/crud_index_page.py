"""
================================================================================
CRUD Index Page Object
================================================================================

Generic admin listing ("index") page shared by every resource grid:
filter form submission, pagination, sorting and table inspection.

Resource-specific pages embed an instance and merge its element registry
with their own filter elements.

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from testsuites.ui_testing.framework.page_base import PageBase


def _normalize(text: Optional[str]) -> str:
    return " ".join((text or "").split())


class CrudIndexPage(PageBase):
    """Page Object for a generic admin resource index (grid) page."""

    URL_PATH = "/admin/"

    ELEMENTS = {
        "filter": "button:has-text('Filter')",
        "reset_filter": "a:has-text('Clear filters')",
        "table": "table",
        "pagination": ".pagination",
        "next_page": ".pagination a[rel='next']",
        "previous_page": ".pagination a[rel='prev']",
        "no_results": ".message.info",
    }

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        url_path: Optional[str] = None,
    ):
        if url_path is not None:
            self.URL_PATH = url_path
        super().__init__(page, base_url)

    @property
    def table(self) -> Locator:
        return self.get_element("table").first

    # ============================================================
    # Navigation
    # ============================================================

    async def open(self, **query: Any) -> "CrudIndexPage":
        """Open the index, optionally with grid query parameters."""
        await self.navigate(**query)
        return self

    @allure.step("Filter")
    async def filter(self) -> None:
        """Submit the filter form."""
        await self.get_element("filter").click()
        await self.wait_for_page_load()

    @allure.step("Clear filters")
    async def reset_filter(self) -> None:
        await self.get_element("reset_filter").click()
        await self.wait_for_page_load()

    @allure.step("Go to next page")
    async def go_to_next_page(self) -> None:
        await self.get_element("next_page").click()
        await self.wait_for_page_load()

    @allure.step("Go to previous page")
    async def go_to_previous_page(self) -> None:
        await self.get_element("previous_page").click()
        await self.wait_for_page_load()

    @allure.step("Sort by {column}")
    async def sort_by(self, column: str) -> None:
        """Click the sortable header link of `column`."""
        await self.table.locator("thead th a", has_text=column).first.click()
        await self.wait_for_page_load()

    # ============================================================
    # Table Inspection
    # ============================================================

    async def count_items(self) -> int:
        """Number of rows in the grid, 0 when the empty-grid message is shown."""
        if await self.get_element("no_results").count() > 0:
            return 0
        return await self.table.locator("tbody tr").count()

    async def get_column_index(self, column: str) -> int:
        """
        Zero-based position of the header named `column` (case-insensitive).

        Raises:
            ValueError: When no header matches
        """
        headers = [
            _normalize(text).lower()
            for text in await self.table.locator("thead th").all_text_contents()
        ]
        wanted = _normalize(column).lower()
        if wanted not in headers:
            raise ValueError(f"Column '{column}' not found in headers: {headers}")
        return headers.index(wanted)

    async def get_column_fields(self, column: str) -> List[str]:
        """Cell texts of `column`, one per row, whitespace-normalized."""
        index = await self.get_column_index(column)
        cells = self.table.locator(f"tbody tr td:nth-child({index + 1})")
        return [_normalize(text) for text in await cells.all_text_contents()]

    async def is_single_resource_on_page(self, **columns: Any) -> bool:
        """
        Check that exactly one row contains every given column value.

        Keyword names are column headers; underscores match spaces, so
        `payment_state="paid"` targets the "Payment state" column.
        """
        indexes: Dict[int, str] = {}
        for column, value in columns.items():
            index = await self.get_column_index(column.replace("_", " "))
            indexes[index] = _normalize(str(value))

        matches = 0
        for row in await self.table.locator("tbody tr").all():
            cells = [_normalize(text) for text in await row.locator("td").all_text_contents()]
            if all(i < len(cells) and value in cells[i] for i, value in indexes.items()):
                matches += 1

        logger.debug(f"{matches} row(s) match {columns}")
        return matches == 1


__all__ = [
    "CrudIndexPage",
]
