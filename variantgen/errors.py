"""
Errors raised while generating or removing image variants.
"""

from typing import Optional


class VariantError(Exception):
    """Base class for variant generation errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class TranscodeError(VariantError):
    """Source could not be read or decoded, or the destination could not be written."""


class DirectoryError(VariantError):
    """A destination directory could not be created."""


class DeletionError(VariantError):
    """A variant file exists but could not be deleted."""
