"""Unit Tests for the browser fixture lifecycle"""

import pytest
from unittest.mock import Mock, patch

from testforge.config import TestForgeSettings
from testforge.exceptions import LaunchError, FixtureStateError
from testforge.fixture import BrowserFixture, BrowserSession, FixtureState


def make_context():
    """A fake BrowserContext whose new_page returns a fresh fake Page"""
    context = Mock(name="context")
    context.new_page.return_value = Mock(name="page")
    return context


@pytest.fixture
def playwright_mock():
    """Patch sync_playwright and return the fake Playwright driver"""
    with patch("testforge.fixture.sync_playwright") as sync_playwright:
        driver = Mock(name="playwright")
        browser = Mock(name="browser")
        browser.new_context.side_effect = lambda **options: make_context()
        driver.chromium.launch.return_value = browser
        driver.firefox.launch.return_value = browser
        sync_playwright.return_value.start.return_value = driver
        yield driver


@pytest.fixture
def fixture(settings, playwright_mock):
    return BrowserFixture(settings)


class TestSuiteLifecycle:
    """Test suite_setup and suite_teardown"""

    def test_suite_setup_launches_browser_once(self, fixture, playwright_mock, settings):
        """Test that suite_setup launches the configured browser"""
        session = fixture.suite_setup()

        playwright_mock.chromium.launch.assert_called_once_with(
            headless=settings.headless,
            slow_mo=settings.slow_mo_ms,
        )
        assert isinstance(session, BrowserSession)
        assert fixture.session is session
        assert fixture.state == FixtureState.SUITE_READY

    def test_suite_setup_uses_configured_browser(self, playwright_mock):
        """Test that the browser type comes from settings"""
        fixture = BrowserFixture(TestForgeSettings(_env_file=None, browser="firefox"))
        fixture.suite_setup()

        playwright_mock.firefox.launch.assert_called_once()
        playwright_mock.chromium.launch.assert_not_called()
        assert fixture.session.browser_name == "firefox"

    def test_launch_failure_raises_launch_error(self, fixture, playwright_mock):
        """Test that a failed launch aborts with LaunchError and stops the driver"""
        playwright_mock.chromium.launch.side_effect = RuntimeError("Executable doesn't exist")

        with pytest.raises(LaunchError) as exc_info:
            fixture.suite_setup()

        assert "chromium" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        playwright_mock.stop.assert_called_once()
        assert fixture.state == FixtureState.UNINITIALIZED

    def test_driver_start_failure_raises_launch_error(self, settings):
        """Test that a driver that cannot start is a launch failure"""
        with patch("testforge.fixture.sync_playwright") as sync_playwright:
            sync_playwright.return_value.start.side_effect = RuntimeError("driver missing")
            fixture = BrowserFixture(settings)

            with pytest.raises(LaunchError):
                fixture.suite_setup()

    def test_suite_setup_twice_fails(self, fixture):
        """Test that the session is created exactly once"""
        fixture.suite_setup()

        with pytest.raises(FixtureStateError):
            fixture.suite_setup()

    def test_suite_teardown_releases_session(self, fixture, playwright_mock):
        """Test that teardown closes the browser and stops the driver"""
        session = fixture.suite_setup()

        fixture.suite_teardown()

        session.browser.close.assert_called_once()
        playwright_mock.stop.assert_called_once()
        assert session.closed is True
        assert fixture.state == FixtureState.SUITE_TORNDOWN

    def test_suite_teardown_without_setup_is_noop(self, fixture, playwright_mock):
        """Test that teardown before setup does nothing"""
        fixture.suite_teardown()

        playwright_mock.stop.assert_not_called()
        assert fixture.state == FixtureState.UNINITIALIZED

    def test_session_not_reused_after_teardown(self, fixture):
        """Test that a torn-down fixture refuses further use"""
        session = fixture.suite_setup()
        fixture.suite_teardown()

        with pytest.raises(FixtureStateError):
            fixture.test_setup()
        with pytest.raises(FixtureStateError):
            fixture.suite_teardown()
        with pytest.raises(FixtureStateError):
            session.new_context()

    def test_suite_teardown_closes_active_context(self, fixture):
        """Test that an open test context is closed before the session"""
        fixture.suite_setup()
        fixture.test_setup()
        context = fixture.context

        fixture.suite_teardown()

        context.close.assert_called_once()
        fixture.session.browser.close.assert_called_once()
        assert fixture.state == FixtureState.SUITE_TORNDOWN


class TestTestLifecycle:
    """Test test_setup, test_teardown and test_case"""

    def test_test_setup_before_suite_fails(self, fixture):
        """Test that a context cannot be created without a session"""
        with pytest.raises(FixtureStateError):
            fixture.test_setup()

    def test_test_setup_creates_context_and_page(self, fixture, settings):
        """Test that test_setup opens a context and page with settings applied"""
        fixture.suite_setup()

        page = fixture.test_setup()

        fixture.session.browser.new_context.assert_called_once_with(
            viewport={"width": settings.viewport_width, "height": settings.viewport_height},
            locale=settings.locale,
        )
        assert fixture.page is page
        page.set_default_timeout.assert_called_once_with(settings.default_timeout_ms)
        assert fixture.state == FixtureState.TEST_READY

    def test_user_agent_passed_when_configured(self, playwright_mock):
        """Test that a configured user agent reaches the context"""
        fixture = BrowserFixture(TestForgeSettings(_env_file=None, user_agent="testforge-agent"))
        fixture.suite_setup()

        fixture.test_setup()

        _, kwargs = fixture.session.browser.new_context.call_args
        assert kwargs["user_agent"] == "testforge-agent"

    def test_test_setup_twice_fails(self, fixture):
        """Test that one test owns one context at a time"""
        fixture.suite_setup()
        fixture.test_setup()

        with pytest.raises(FixtureStateError):
            fixture.test_setup()

    def test_test_teardown_closes_context(self, fixture):
        """Test that teardown closes the context and clears the handles"""
        fixture.suite_setup()
        fixture.test_setup()
        context = fixture.context

        fixture.test_teardown()

        context.close.assert_called_once()
        assert fixture.state == FixtureState.SUITE_READY
        with pytest.raises(FixtureStateError):
            fixture.page
        with pytest.raises(FixtureStateError):
            fixture.context

    def test_test_teardown_without_setup_fails(self, fixture):
        """Test that teardown requires an active test"""
        fixture.suite_setup()

        with pytest.raises(FixtureStateError):
            fixture.test_teardown()

    def test_teardown_runs_after_assertion_failure(self, fixture):
        """Test that test_case releases the context when the body fails"""
        fixture.suite_setup()
        contexts = []

        with pytest.raises(AssertionError):
            with fixture.test_case():
                contexts.append(fixture.context)
                assert False, "test body failed"

        assert len(contexts) == 1
        contexts[0].close.assert_called_once()
        assert fixture.state == FixtureState.SUITE_READY

    def test_teardown_runs_once_on_success(self, fixture):
        """Test that test_case closes the context exactly once"""
        fixture.suite_setup()

        with fixture.test_case() as page:
            context = fixture.context
            assert page is fixture.page

        context.close.assert_called_once()

    def test_page_setup_failure_closes_context(self, fixture):
        """Test that a context is not leaked when the page cannot be opened"""
        fixture.suite_setup()
        context = make_context()
        context.new_page.side_effect = RuntimeError("page crashed")
        fixture.session.browser.new_context.side_effect = None
        fixture.session.browser.new_context.return_value = context

        with pytest.raises(RuntimeError):
            fixture.test_setup()

        context.close.assert_called_once()
        assert fixture.state == FixtureState.SUITE_READY


class TestSequentialTests:
    """Test session sharing and context isolation across tests"""

    def test_session_shared_contexts_isolated(self, fixture):
        """Test that two tests share the session but not the context"""
        fixture.suite_setup()
        seen = []

        for _ in range(2):
            with fixture.test_case() as page:
                seen.append((fixture.session, fixture.context, page))

        (session_a, context_a, page_a), (session_b, context_b, page_b) = seen
        assert session_a is session_b
        assert session_a.session_id == session_b.session_id
        assert context_a is not context_b
        assert page_a is not page_b
        assert fixture.session.browser.new_context.call_count == 2

        fixture.suite_teardown()
        fixture.session.playwright.stop.assert_called_once()
