"""
Core utilities for the registry directory.

Provides configuration management and logging functionality.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
]
