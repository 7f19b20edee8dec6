"""Utility modules."""

from srtkit.utils.config import Settings, get_settings
from srtkit.utils.files import read_all, write_all
from srtkit.utils.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "read_all",
    "setup_logging",
    "write_all",
]
