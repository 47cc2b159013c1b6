"""Custom exceptions for simplestream."""

from typing import Optional


class SimplestreamError(Exception):
    """Base exception for all simplestream operations."""


class ConfigurationError(SimplestreamError):
    """Raised when configuration validation fails."""


class FetchError(SimplestreamError):
    """Raised when the Simplestream document cannot be retrieved."""


class CatalogError(SimplestreamError):
    """Base exception for catalog navigation failures.

    Attributes:
        key: Name of the offending key, or None when no single key applies.
    """

    def __init__(self, key: Optional[str], message: str):
        super().__init__(message)
        self.key = key


class DocumentParseError(CatalogError):
    """Raised when the catalog text is not a well-formed document."""

    def __init__(self, message: str):
        super().__init__(None, message)


class MissingFieldError(CatalogError):
    """Raised when an expected key is absent."""

    def __init__(self, key: str, message: Optional[str] = None):
        super().__init__(key, message or f"{key} is missing")


class TypeMismatchError(CatalogError):
    """Raised when a key is present but holds the wrong type."""

    def __init__(self, key: str, expected: str):
        super().__init__(key, f"{key} is not {expected}")
        self.expected = expected


class EmptyCollectionError(CatalogError):
    """Raised when a keyed collection has no members to resolve against."""

    def __init__(self, key: Optional[str] = None):
        super().__init__(key, f"{key or 'object'} has no members")
