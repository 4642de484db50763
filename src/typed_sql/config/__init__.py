"""Configuration management for typed_sql.

Usage:
    >>> from typed_sql.config import get_settings
    >>> settings = get_settings()
    >>> settings.driver, settings.table_prefix
"""

from typed_sql.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
