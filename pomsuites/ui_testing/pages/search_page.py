"""
================================================================================
Search Page Object (Async / Playwright)
================================================================================

Search box + result list. `search()` types the term key by key and
submits, the way a user would.

================================================================================
"""

from __future__ import annotations

from typing import List

import allure

from pomsuites.ui_testing.framework.locators import By
from pomsuites.ui_testing.framework.page_base import PageBase


class SearchPage(PageBase):
    """Search page object (async)."""

    URL_PATH = "/search"
    PAGE_TITLE = "Search"

    SEARCH_INPUT = By.name("q")
    SEARCH_BUTTON = By.test_id("btn-search")
    RESULTS = By.test_id("search-results")
    RESULT_ITEM = By.css("[data-testid='search-results'] [data-testid='result-item']")

    @allure.step("Open search page")
    async def open(self) -> "SearchPage":
        await self.navigate()
        await self.wait_for_page_load()
        return self

    @allure.step("Search for {term}")
    async def search(self, term: str) -> None:
        """Type `term` into the search box and submit."""
        await self.fill(self.SEARCH_INPUT, "")
        await self.send_keys(self.SEARCH_INPUT, term)
        await self.click(self.SEARCH_BUTTON)
        await self.find_element(self.RESULTS).wait_for(state="visible")

    async def result_count(self) -> int:
        return await self.find_element(self.RESULT_ITEM).count()

    async def result_titles(self) -> List[str]:
        titles = await self.find_element(self.RESULT_ITEM).all_text_contents()
        return [title.strip() for title in titles]
