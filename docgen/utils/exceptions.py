"""
Custom Exceptions Module.

This module defines all custom exceptions used throughout the document
generator. Using specific exceptions allows for better error handling
and more informative error messages.

Exception Hierarchy:
    DocumentGeneratorError (base)
    ├── FormError
    │   └── ValidationError
    ├── ThemeError
    │   └── UnknownThemeSelectorError
    ├── SurfaceNotFoundError
    └── ExportError
        ├── EmptySurfaceError
        ├── ExportInProgressError
        ├── CaptureOrAssemblyError
        │   ├── CaptureError
        │   └── PageAssemblyError
        └── PrintError
"""

from typing import Iterable


class DocumentGeneratorError(Exception):
    """
    Base exception for all document generator errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# FORM ERRORS
# =============================================================================

class FormError(DocumentGeneratorError):
    """Base exception for form input errors."""
    pass


class ValidationError(FormError):
    """
    Raised when a required form field is missing or invalid.

    Example:
        >>> raise ValidationError("customer_name", "", "Field is required")
    """

    def __init__(self, field: str, value, reason: str = None):
        message = f"Validation failed for field '{field}'"
        details = {"field": field, "value": value, "reason": reason}
        self.field = field
        super().__init__(message, details)


# =============================================================================
# THEME ERRORS
# =============================================================================

class ThemeError(DocumentGeneratorError):
    """Base exception for stamp and background theming errors."""
    pass


class UnknownThemeSelectorError(ThemeError):
    """
    Raised when a selector outside a closed set is passed.

    This is a programming error: the UI only offers the known values.
    """

    def __init__(self, kind: str, value, allowed: Iterable[str]):
        message = f"Unknown {kind}: '{value}'"
        details = {"kind": kind, "value": value, "allowed": sorted(allowed)}
        super().__init__(message, details)


class SurfaceNotFoundError(DocumentGeneratorError):
    """Raised when a presentation surface identifier is not registered."""

    def __init__(self, surface_id: str):
        message = f"Presentation surface not found: {surface_id}"
        details = {"surface_id": surface_id}
        super().__init__(message, details)


# =============================================================================
# EXPORT ERRORS
# =============================================================================

class ExportError(DocumentGeneratorError):
    """Base exception for export errors."""
    pass


class EmptySurfaceError(ExportError):
    """Raised when export is requested before anything was composed."""

    def __init__(self, surface_id: str):
        message = f"Nothing to export on surface: {surface_id}"
        details = {"surface_id": surface_id}
        super().__init__(message, details)


class ExportInProgressError(ExportError):
    """Raised when an export is started on a control that is already busy."""

    def __init__(self, control_name: str):
        message = f"Export already in progress: {control_name}"
        details = {"control": control_name}
        super().__init__(message, details)


class CaptureOrAssemblyError(ExportError):
    """Base exception for failures the user may recover from via printing."""
    pass


class CaptureError(CaptureOrAssemblyError):
    """Raised when the raster snapshot of a surface fails."""

    def __init__(self, surface_id: str, reason: str = None):
        message = f"Snapshot capture failed for: {surface_id}"
        details = {"surface_id": surface_id, "reason": reason}
        super().__init__(message, details)


class PageAssemblyError(CaptureOrAssemblyError):
    """Raised when embedding the snapshot or saving the PDF fails."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Failed to assemble PDF page: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


class PrintError(ExportError):
    """Raised when the print surface cannot be opened."""

    def __init__(self, surface_id: str, reason: str = None):
        message = f"Failed to open print job for: {surface_id}"
        details = {"surface_id": surface_id, "reason": reason}
        super().__init__(message, details)


__all__ = [
    'DocumentGeneratorError',
    'FormError',
    'ValidationError',
    'ThemeError',
    'UnknownThemeSelectorError',
    'SurfaceNotFoundError',
    'ExportError',
    'EmptySurfaceError',
    'ExportInProgressError',
    'CaptureOrAssemblyError',
    'CaptureError',
    'PageAssemblyError',
    'PrintError',
]
