"""Search engine landing page"""

import logging
from typing import Optional

from playwright.sync_api import Page, Locator

from ..config import TestForgeSettings
from ..reporting import step
from .base_page import BasePage

logger = logging.getLogger(__name__)


class SearchPage(BasePage):
    """
    Page object for a search engine front page.

    Usage:
        search_page = SearchPage(page)
        search_page.open()
        results = search_page.submit_search("playwright")
    """

    def __init__(self, page: Page, settings: Optional[TestForgeSettings] = None, url: Optional[str] = None):
        super().__init__(page, settings)
        self.url = url or self.settings.ui_base_url

    def open(self):
        self.goto(self.url)

    @step("Submit search")
    def submit_search(self, query: str) -> Locator:
        """
        Fill the search field with query, press Enter and return the result container.

        Raises:
            ElementNotFoundError: If the search field is not on the page
        """
        search_input = self.wait_for(self.settings.search_input_selector)
        search_input.first.fill(query)
        search_input.first.press("Enter")
        logger.info(f"Submitted search for '{query}'")
        return self.page.locator(self.settings.result_selector)
