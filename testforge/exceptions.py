"""Error taxonomy for browser and API test helpers"""

from typing import Optional


class TestForgeError(Exception):
    """Base class for all testforge errors"""

    __test__ = False


class LaunchError(TestForgeError):
    """The browser session could not be created"""


class FixtureStateError(TestForgeError):
    """A fixture lifecycle call was made in the wrong state"""


class TransportError(TestForgeError):
    """Network-level failure while talking to the API"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Transport error for {url}: {message}")


class UnexpectedStatusError(TestForgeError):
    """The API answered with a status other than the expected one"""

    def __init__(self, url: str, status_code: int, expected: int = 200):
        self.url = url
        self.status_code = status_code
        self.expected = expected
        super().__init__(f"Unexpected status {status_code} for {url} (expected {expected})")


class NavigationError(TestForgeError):
    """The browser failed to navigate to an address"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Navigation to {url} failed: {message}")


class WaitTimeoutError(TestForgeError):
    """A bounded wait ran out of time"""

    def __init__(self, description: str, timeout: float):
        self.description = description
        self.timeout = timeout
        super().__init__(f"Timed out after {timeout:.2f}s waiting for {description}")


class ElementNotFoundError(WaitTimeoutError):
    """No element matched a selector within the wait timeout"""

    def __init__(self, selector: str, timeout: float, url: Optional[str] = None):
        self.selector = selector
        self.url = url
        description = f"element '{selector}'"
        if url:
            description += f" on {url}"
        super().__init__(description, timeout)
