"""Base page object shared by all page wrappers"""

import logging
from typing import Optional

from playwright.sync_api import Page, Locator, Error as PlaywrightError

from ..config import TestForgeSettings, get_settings
from ..exceptions import NavigationError
from ..waiting import wait_for_element

logger = logging.getLogger(__name__)


class BasePage:
    """
    Wraps a Playwright Page with explicit waits and typed navigation errors.

    Subclasses keep their own address and add one method per user-facing action,
    navigating with goto().
    """

    def __init__(self, page: Page, settings: Optional[TestForgeSettings] = None):
        self.page = page
        self.settings = settings or get_settings()

    def goto(self, url: str):
        """Navigate to url, raising NavigationError on failure"""
        try:
            response = self.page.goto(url)
        except PlaywrightError as e:
            logger.error(f"Navigation to {url} failed: {e}")
            raise NavigationError(url, str(e)) from e

        if response is not None and response.status >= 400:
            logger.warning(f"HTTP {response.status} navigating to {url}")
        logger.debug(f"Navigated to {url}")

    def wait_for(self, selector: str, timeout: Optional[float] = None) -> Locator:
        """Poll until selector matches and return its Locator"""
        return wait_for_element(
            self.page,
            selector,
            timeout=timeout if timeout is not None else self.settings.element_timeout_s,
            interval=self.settings.poll_interval_s,
            url=self.page.url,
        )

    def title(self) -> str:
        return self.page.title()
