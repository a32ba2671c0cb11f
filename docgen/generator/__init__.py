"""
Generator Module.

Session-level orchestration of extraction, composition, theming and export.
"""

from .generator import DocumentGenerator

__all__ = ['DocumentGenerator']
