"""
Business Document Generator - Source Package.

This package contains the composition and export engine for the three
business document types (receipt, invoice, internal memo). Each module
has a single responsibility.

Modules:
    - form_extractor: raw form values to typed document records
    - calculation: line totals, invoice totals and display formatting
    - themes: stamp and background theming
    - presentation: addressable preview surfaces
    - composer: assembly of the finished document fragment
    - export: rasterize-then-paginate PDF export and print fallback
    - generator: per-session orchestration of the above

Architecture:
    Form → Extractor → Calculation → Composer → Surface → Export
                                        ↑
                              Stamp + Background themes
"""

__version__ = "1.0.0"
__author__ = "Document Tools Team"

__all__ = [
    'form_extractor',
    'calculation',
    'themes',
    'presentation',
    'composer',
    'export',
    'generator',
    'utils'
]
