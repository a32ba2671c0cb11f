"""
Presentation Module for the Document Generator.

Addressable preview surfaces holding the finished fragment and the active
background decoration of each document type.
"""

from .surface import PresentationSurface, SurfaceRegistry

__all__ = ['PresentationSurface', 'SurfaceRegistry']
