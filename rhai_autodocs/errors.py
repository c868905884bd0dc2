"""Errors raised while generating documentation."""

from __future__ import annotations


class AutodocsError(Exception):
    """Base exception for documentation generation."""

    prefix = ""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"ERROR: {self.prefix}{self.message}"


class PreProcessingError(AutodocsError):
    """Raised when function groups cannot be ordered (e.g., missing index directive)."""

    prefix = "pre-processing error: "


class MetadataError(AutodocsError):
    """Raised when the exported function or module metadata cannot be decoded."""

    prefix = "failed to parse function or module metadata: "
