"""Utility functions for configuration and logging."""

from orphan_jpeg_cleaner.utils.config import Config
from orphan_jpeg_cleaner.utils.logger import set_package_level, setup_logger

__all__ = ["Config", "set_package_level", "setup_logger"]
