"""Utility modules for Hornbook.

Provides:
- text: escape_html for escaping writes
- logger: get_logger for logging
"""

from hornbook.utils.logger import get_logger
from hornbook.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
