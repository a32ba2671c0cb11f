"""
Utility Module for the Document Generator.

This module provides common utilities used across all other modules:
    - Logging configuration
    - File operations
    - Common helpers
"""

from .logger import setup_logger, get_logger
from .helpers import ensure_directory, safe_filename, generate_timestamp

__all__ = [
    'setup_logger',
    'get_logger',
    'ensure_directory',
    'safe_filename',
    'generate_timestamp'
]
