"""Shared pytest configuration"""

import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from testforge.config import TestForgeSettings
from testforge.reporting import metadata_for


@pytest.fixture(autouse=True)
def _record_test_metadata(request, record_property):
    """Copy @metadata records into the test report properties"""
    record = metadata_for(request.node)
    if record is not None:
        for name, value in record.as_properties():
            record_property(name, value)


@pytest.fixture
def settings():
    """Settings built from defaults only, ignoring any .env file"""
    return TestForgeSettings(_env_file=None)
