"""testforge - browser and API end-to-end test automation helpers"""

from .config import TestForgeSettings, get_settings, configure_logging
from .exceptions import (
    TestForgeError,
    LaunchError,
    TransportError,
    UnexpectedStatusError,
    NavigationError,
    WaitTimeoutError,
    ElementNotFoundError,
    FixtureStateError,
)
from .http_probe import HttpProbe, RequestSpec
from .fixture import BrowserFixture, BrowserSession, FixtureState
from .pages import BasePage, SearchPage
from .reporting import Severity, TestMetadata, metadata, step

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "TestForgeSettings",
    "get_settings",
    "configure_logging",
    # Errors
    "TestForgeError",
    "LaunchError",
    "TransportError",
    "UnexpectedStatusError",
    "NavigationError",
    "WaitTimeoutError",
    "ElementNotFoundError",
    "FixtureStateError",
    # API
    "HttpProbe",
    "RequestSpec",
    # Browser
    "BrowserFixture",
    "BrowserSession",
    "FixtureState",
    "BasePage",
    "SearchPage",
    # Reporting
    "Severity",
    "TestMetadata",
    "metadata",
    "step",
]
