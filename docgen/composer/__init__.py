"""
Composition Module for the Document Generator.

This module provides functionality for:
    - Per-document-type stamp/background configuration
    - Assembly of finished document fragments
    - Standalone page wrappers for capture and printing

Author: Document Tools Team
"""

from .session import DocumentConfig, SessionState
from .composer import DocumentComposer, render_page, render_print_page

__all__ = [
    'DocumentConfig',
    'SessionState',
    'DocumentComposer',
    'render_page',
    'render_print_page',
]
