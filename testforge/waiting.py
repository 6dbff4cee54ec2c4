"""
Explicit bounded waits

Playwright auto-waits inside every action, but with an opaque default.
These helpers poll with a fixed timeout and interval so a missing element
fails with a clear, typed error.
"""

import time
import logging
from typing import Callable, Optional, TypeVar

from .exceptions import WaitTimeoutError, ElementNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def poll_until(
    predicate: Callable[[], T],
    timeout: float,
    interval: float = 0.25,
    description: str = "condition",
) -> T:
    """
    Call predicate until it returns a truthy value or the timeout elapses.

    Args:
        predicate: Zero-argument callable to poll
        timeout: Total time budget in seconds
        interval: Sleep between attempts in seconds
        description: Used in the timeout error message

    Returns:
        The first truthy value returned by predicate

    Raises:
        WaitTimeoutError: If no attempt succeeded within the timeout
    """
    deadline = time.monotonic() + timeout
    attempts = 0

    while True:
        attempts += 1
        result = predicate()
        if result:
            return result

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            logger.debug(f"Gave up on {description} after {attempts} attempts")
            raise WaitTimeoutError(description, timeout)

        time.sleep(min(interval, remaining))


def wait_for_element(page, selector: str, timeout: float, interval: float = 0.25, url: Optional[str] = None):
    """Wait until at least one element matches selector and return its Locator"""
    locator = page.locator(selector)
    try:
        poll_until(lambda: locator.count() > 0, timeout, interval, f"element '{selector}'")
    except WaitTimeoutError:
        logger.warning(f"Element '{selector}' not found within {timeout}s")
        raise ElementNotFoundError(selector, timeout, url) from None
    return locator
