"""
Helper Utilities Module.

Generic helpers shared by the export and CLI layers.

Functions:
    - ensure_directory: Create directory if it doesn't exist
    - generate_timestamp: Generate formatted timestamps
    - safe_filename: Sanitize filenames for filesystem
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Union


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists.

    Returns:
        Path object pointing to the directory.

    Example:
        >>> ensure_directory("outputs")
        PosixPath('outputs')
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def generate_timestamp(format_str: str = "%Y-%m-%d") -> str:
    """
    Generate a formatted timestamp string for the current moment.

    Example:
        >>> generate_timestamp()
        "2026-10-19"
    """
    return datetime.now().strftime(format_str)


def safe_filename(filename: str, replacement: str = "_") -> str:
    """
    Sanitize a filename by replacing characters invalid on common filesystems.

    Document numbers such as "INV/2026/001" are typed freely by users and
    end up in export file names.

    Args:
        filename: Original filename.
        replacement: Character to replace invalid characters with.

    Returns:
        Sanitized filename safe for the filesystem.

    Example:
        >>> safe_filename("faktur-INV/2026/001.pdf")
        "faktur-INV_2026_001.pdf"
    """
    invalid_chars = r'[<>:"/\\|?*\x00-\x1f]'
    sanitized = re.sub(invalid_chars, replacement, filename)

    sanitized = sanitized.strip('. ')

    if not sanitized:
        sanitized = "unnamed"

    return sanitized
