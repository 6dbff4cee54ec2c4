"""Page objects"""

from .base_page import BasePage
from .search_page import SearchPage

__all__ = [
    "BasePage",
    "SearchPage",
]
