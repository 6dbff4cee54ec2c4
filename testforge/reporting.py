"""
Test metadata and step logging

Report metadata (severity, ownership, tracker links) and step names travel
on a side channel: pytest markers recorded as report properties, and log
records on the "testforge.steps" logger. Nothing here changes control flow.
"""

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

import pytest

step_logger = logging.getLogger("testforge.steps")

MARKER_NAME = "testforge_meta"


class Severity(str, Enum):
    """Test severity levels"""
    BLOCKER = "blocker"
    CRITICAL = "critical"
    NORMAL = "normal"
    MINOR = "minor"
    TRIVIAL = "trivial"


@dataclass(frozen=True)
class TestMetadata:
    """Per-test reporting record"""

    __test__ = False

    display_name: Optional[str] = None
    description: Optional[str] = None
    severity: Severity = Severity.NORMAL
    owner: Optional[str] = None
    issue: Optional[str] = None
    tms_link: Optional[str] = None

    def as_properties(self) -> List[Tuple[str, str]]:
        """Return (name, value) pairs for report properties, skipping empty fields"""
        values = [
            ("display_name", self.display_name),
            ("description", self.description),
            ("severity", self.severity.value),
            ("owner", self.owner),
            ("issue", self.issue),
            ("tms_link", self.tms_link),
        ]
        return [(name, value) for name, value in values if value]


def metadata(
    display_name: Optional[str] = None,
    description: Optional[str] = None,
    severity: Severity = Severity.NORMAL,
    owner: Optional[str] = None,
    issue: Optional[str] = None,
    tms_link: Optional[str] = None,
):
    """
    Attach a TestMetadata record to a test.

    Usage:
        @metadata(display_name="Test Google Search", severity=Severity.CRITICAL)
        def test_search(...):
            ...
    """
    record = TestMetadata(
        display_name=display_name,
        description=description,
        severity=severity,
        owner=owner,
        issue=issue,
        tms_link=tms_link,
    )
    return getattr(pytest.mark, MARKER_NAME)(record)


def metadata_for(item) -> Optional[TestMetadata]:
    """Return the TestMetadata attached to a collected pytest item, if any"""
    marker = item.get_closest_marker(MARKER_NAME)
    if marker is None or not marker.args:
        return None
    return marker.args[0]


def step(name: Optional[str] = None) -> Callable:
    """Log start and outcome of the wrapped call as a named step"""

    def decorator(func: Callable) -> Callable:
        step_name = name or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            step_logger.info(f"Step started: {step_name}")
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                step_logger.error(f"Step failed: {step_name}: {e}")
                raise
            step_logger.info(f"Step passed: {step_name}")
            return result

        return wrapper

    return decorator
