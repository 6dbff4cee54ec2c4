"""
Browser lifecycle for test suites

One browser per test class, one isolated context per test case:

    fixture = BrowserFixture()
    fixture.suite_setup()
    try:
        with fixture.test_case() as page:
            ...
    finally:
        fixture.suite_teardown()
"""

import logging
import uuid
from contextlib import contextmanager
from enum import Enum
from typing import Optional, Iterator

from playwright.sync_api import sync_playwright, Browser, BrowserContext, Page, Playwright

from .config import TestForgeSettings, get_settings
from .exceptions import LaunchError, FixtureStateError

logger = logging.getLogger(__name__)


class FixtureState(str, Enum):
    """Lifecycle states of a BrowserFixture"""
    UNINITIALIZED = "uninitialized"
    SUITE_READY = "suite_ready"
    TEST_READY = "test_ready"
    SUITE_TORNDOWN = "suite_torndown"


class BrowserSession:
    """Process-wide handle pairing the Playwright driver with a launched browser"""

    def __init__(self, playwright: Playwright, browser: Browser, browser_name: str):
        self.playwright = playwright
        self.browser = browser
        self.browser_name = browser_name
        self.session_id = uuid.uuid4().hex[:12]
        self.closed = False

    def new_context(self, **options) -> BrowserContext:
        """Create a fresh context with its own cookies and storage"""
        if self.closed:
            raise FixtureStateError(f"Session {self.session_id} is closed")
        return self.browser.new_context(**options)

    def close(self):
        """Close the browser and stop the driver"""
        if self.closed:
            return
        try:
            self.browser.close()
        finally:
            self.playwright.stop()
            self.closed = True
            logger.info(f"Browser session {self.session_id} closed")

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<BrowserSession {self.session_id} {self.browser_name} {state}>"


class BrowserFixture:
    """
    Owns the Session, Context and Page lifecycle for one test class.

    State machine:
        UNINITIALIZED -> SUITE_READY -> (TEST_READY -> SUITE_READY)* -> SUITE_TORNDOWN
    """

    def __init__(self, settings: Optional[TestForgeSettings] = None):
        self.settings = settings or get_settings()
        self.state = FixtureState.UNINITIALIZED
        self._session: Optional[BrowserSession] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    # ============== Handles ==============

    @property
    def session(self) -> BrowserSession:
        if self._session is None:
            raise FixtureStateError(f"No browser session (state: {self.state.value})")
        return self._session

    @property
    def context(self) -> BrowserContext:
        if self._context is None:
            raise FixtureStateError(f"No active test context (state: {self.state.value})")
        return self._context

    @property
    def page(self) -> Page:
        if self._page is None:
            raise FixtureStateError(f"No active test page (state: {self.state.value})")
        return self._page

    def _require(self, expected: FixtureState, action: str):
        if self.state != expected:
            raise FixtureStateError(
                f"Cannot {action} in state {self.state.value} (expected {expected.value})"
            )

    # ============== Suite lifecycle ==============

    def suite_setup(self) -> BrowserSession:
        """Start Playwright and launch the configured browser"""
        self._require(FixtureState.UNINITIALIZED, "set up suite")

        browser_name = self.settings.browser
        playwright = None
        try:
            playwright = sync_playwright().start()
            browser_type = getattr(playwright, browser_name)
            browser = browser_type.launch(
                headless=self.settings.headless,
                slow_mo=self.settings.slow_mo_ms,
            )
        except Exception as e:
            logger.error(f"Failed to launch {browser_name}: {e}")
            if playwright is not None:
                try:
                    playwright.stop()
                except Exception as stop_error:
                    logger.debug(f"Error stopping Playwright after failed launch: {stop_error}")
            raise LaunchError(f"Could not launch {browser_name}: {e}") from e

        self._session = BrowserSession(playwright, browser, browser_name)
        self.state = FixtureState.SUITE_READY
        logger.info(f"Browser session {self._session.session_id} started ({browser_name}, headless={self.settings.headless})")
        return self._session

    def suite_teardown(self):
        """Release the session, closing an active test context first"""
        if self.state == FixtureState.UNINITIALIZED:
            return
        if self.state == FixtureState.SUITE_TORNDOWN:
            raise FixtureStateError("Suite already torn down")

        try:
            if self.state == FixtureState.TEST_READY:
                logger.warning("Suite teardown with an active test context, closing it first")
                self.test_teardown()
        finally:
            try:
                self.session.close()
            finally:
                self.state = FixtureState.SUITE_TORNDOWN

    # ============== Test lifecycle ==============

    def _context_options(self) -> dict:
        options = {
            "viewport": self.settings.viewport,
            "locale": self.settings.locale,
        }
        if self.settings.user_agent:
            options["user_agent"] = self.settings.user_agent
        return options

    def test_setup(self) -> Page:
        """Create a fresh context and page for the next test"""
        self._require(FixtureState.SUITE_READY, "set up test")

        context = self.session.new_context(**self._context_options())
        try:
            page = context.new_page()
            page.set_default_timeout(self.settings.default_timeout_ms)
        except Exception:
            context.close()
            raise

        self._context = context
        self._page = page
        self.state = FixtureState.TEST_READY
        logger.debug(f"Test context opened on session {self.session.session_id}")
        return page

    def test_teardown(self):
        """Close the context created by test_setup"""
        self._require(FixtureState.TEST_READY, "tear down test")

        context = self._context
        self._context = None
        self._page = None
        self.state = FixtureState.SUITE_READY
        try:
            context.close()
        except Exception as e:
            logger.error(f"Error closing test context: {e}")
            raise
        logger.debug(f"Test context closed on session {self.session.session_id}")

    @contextmanager
    def test_case(self) -> Iterator[Page]:
        """Pair test_setup with test_teardown on every exit path"""
        page = self.test_setup()
        try:
            yield page
        finally:
            self.test_teardown()
