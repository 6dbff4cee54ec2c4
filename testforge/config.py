"""Settings for testforge, loaded from environment variables and .env"""

import sys
import logging
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class TestForgeSettings(BaseSettings):
    """Test run settings. Every field can be overridden with TESTFORGE_<NAME>"""

    __test__ = False  # not a pytest test class

    # Targets
    api_base_url: str = "https://www.google.com/"
    ui_base_url: str = "https://www.google.com"

    # Browser settings
    browser: str = "chromium"
    headless: bool = True
    slow_mo_ms: int = 0
    default_timeout_ms: int = 30000
    viewport_width: int = 1280
    viewport_height: int = 720
    locale: str = "en-US"
    user_agent: Optional[str] = None

    # Explicit waits
    element_timeout_s: float = 10.0
    poll_interval_s: float = 0.25

    # HTTP settings
    http_timeout_s: float = 30.0

    # Search page locators
    search_input_selector: str = "textarea[name='q']"
    result_selector: str = "div.g"
    expected_title: str = "Google"

    log_level: str = "info"

    class Config:
        env_prefix = "TESTFORGE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("browser")
    @classmethod
    def validate_browser(cls, v):
        """Only browser types Playwright ships are accepted"""
        name = v.strip().lower()
        if name not in SUPPORTED_BROWSERS:
            raise ValueError(f"Unsupported browser '{v}', expected one of {', '.join(SUPPORTED_BROWSERS)}")
        return name

    @field_validator("default_timeout_ms", "element_timeout_s", "poll_interval_s", "http_timeout_s")
    @classmethod
    def validate_positive(cls, v):
        if v <= 0:
            raise ValueError("Timeouts must be positive")
        return v

    @property
    def viewport(self) -> dict:
        return {"width": self.viewport_width, "height": self.viewport_height}


@lru_cache
def get_settings() -> TestForgeSettings:
    """Get cached settings instance"""
    return TestForgeSettings()


def configure_logging(level: Optional[str] = None):
    """Configure root logging for test runs and the CLI"""
    level_name = level or get_settings().log_level
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )
