"""
================================================================================
Order Index Page Object (Async / Playwright)
================================================================================

Admin order list page. Adds the order-specific grid filters (date range,
channel, currency, total bounds) on top of the generic CRUD index page,
which it embeds as `listing`.

Date bounds are given as a single "<date> <time>" string, e.g.
"2020-01-01 14:30"; the time part is optional.

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple, Union

import allure
from playwright.async_api import Page

from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.pages.crud_index_page import CrudIndexPage


def split_date_time(date_time: str) -> Tuple[str, str]:
    """
    Split "<date> <time>" on the first space.

    >>> split_date_time("2020-01-01 14:30")
    ('2020-01-01', '14:30')
    >>> split_date_time("2020-01-01")
    ('2020-01-01', '')
    """
    date, _, time = date_time.partition(" ")
    return date, time


class OrderIndexPage(PageBase):
    """Order list page object (async)."""

    URL_PATH = "/admin/orders/"
    PAGE_TITLE = "Orders"

    ELEMENTS = {
        "filter_channel": "#criteria_channel",
        "filter_currency": "#criteria_total_currency",
    }

    def __init__(self, page: Page, base_url: str = ""):
        self.listing = CrudIndexPage(page, base_url, url_path=self.URL_PATH)
        super().__init__(page, base_url)

    def defined_elements(self) -> Dict[str, str]:
        return {**self.listing.defined_elements(), **self.ELEMENTS}

    # ============================================================
    # Order Filters
    # ============================================================

    @allure.step("Specify filter date from: {date_time}")
    async def specify_filter_date_from(self, date_time: str) -> None:
        date, time = split_date_time(date_time)
        await self.fill_field("criteria_date_from_date", date)
        await self.fill_field("criteria_date_from_time", time)

    @allure.step("Specify filter date to: {date_time}")
    async def specify_filter_date_to(self, date_time: str) -> None:
        date, time = split_date_time(date_time)
        await self.fill_field("criteria_date_to_date", date)
        await self.fill_field("criteria_date_to_time", time)

    @allure.step("Choose channel filter: {channel_name}")
    async def choose_channel_filter(self, channel_name: str) -> None:
        await self.get_element("filter_channel").select_option(label=channel_name)

    @allure.step("Choose currency filter: {currency_name}")
    async def choose_currency_filter(self, currency_name: str) -> None:
        await self.get_element("filter_currency").select_option(label=currency_name)

    @allure.step("Specify filter total greater than: {total}")
    async def specify_filter_total_greater_than(self, total: Union[str, int, float]) -> None:
        await self.fill_field("criteria_total_greaterThan", total)

    @allure.step("Specify filter total less than: {total}")
    async def specify_filter_total_less_than(self, total: Union[str, int, float]) -> None:
        await self.fill_field("criteria_total_lessThan", total)

    # ============================================================
    # Listing
    # ============================================================

    @allure.step("Open order list")
    async def open(self, **query: Any) -> "OrderIndexPage":
        await self.listing.open(**query)
        return self

    async def filter(self) -> None:
        await self.listing.filter()

    async def reset_filter(self) -> None:
        await self.listing.reset_filter()

    async def count_items(self) -> int:
        return await self.listing.count_items()

    async def get_column_fields(self, column: str) -> List[str]:
        return await self.listing.get_column_fields(column)

    async def is_single_resource_on_page(self, **columns: Any) -> bool:
        return await self.listing.is_single_resource_on_page(**columns)

    async def sort_by(self, column: str) -> None:
        await self.listing.sort_by(column)

    async def go_to_next_page(self) -> None:
        await self.listing.go_to_next_page()

    async def go_to_previous_page(self) -> None:
        await self.listing.go_to_previous_page()


__all__ = [
    "OrderIndexPage",
    "split_date_time",
]
