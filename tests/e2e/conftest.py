"""Playwright E2E Test Configuration"""

import pytest
from playwright.sync_api import Page

from testforge import BrowserFixture, HttpProbe, SearchPage, configure_logging, get_settings


@pytest.fixture(scope="session", autouse=True)
def _logging():
    configure_logging()


@pytest.fixture(scope="class")
def browser_fixture():
    """One browser session per test class"""
    fixture = BrowserFixture(get_settings())
    fixture.suite_setup()
    try:
        yield fixture
    finally:
        fixture.suite_teardown()


@pytest.fixture
def page(browser_fixture: BrowserFixture):
    """Fresh isolated context and page for each test"""
    with browser_fixture.test_case() as page:
        yield page


@pytest.fixture
def search_page(page: Page):
    return SearchPage(page)


@pytest.fixture
def http_probe():
    """HTTP probe against the configured API base URL"""
    with HttpProbe(get_settings().api_base_url) as probe:
        yield probe
