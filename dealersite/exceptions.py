"""
Custom exception hierarchy for dealersite.

Provides structured exception types for the theming pipeline and the
site configuration store, so callers can tell a bad color from a broken
storage backend.
"""


class DealerSiteError(Exception):
    """Base exception for all dealersite errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Color Exceptions
# =============================================================================


class ColorError(DealerSiteError):
    """Base exception for color-related errors."""
    pass


class ColorParseError(ColorError):
    """Raised when a color token cannot be parsed as hex."""

    def __init__(self, value: str, cause: str | None = None):
        details = {"value": value}
        if cause:
            details["cause"] = cause
        super().__init__(f"Invalid hex color: {value!r}", details=details)
        self.value = value


# =============================================================================
# Palette Exceptions
# =============================================================================


class PaletteError(DealerSiteError):
    """Base exception for palette-related errors."""
    pass


class PresetNotFoundError(PaletteError):
    """Raised when a named theme preset does not exist."""

    def __init__(self, name: str, available: list[str] | None = None):
        super().__init__(
            f"Theme preset '{name}' not found",
            details={"name": name, "available": available or []},
        )
        self.name = name


# =============================================================================
# Storage Exceptions
# =============================================================================


class StorageError(DealerSiteError):
    """Base exception for key-value storage errors."""
    pass


class StorageReadError(StorageError):
    """Raised when reading a key from storage fails."""

    def __init__(self, key: str, cause: str):
        super().__init__(
            f"Storage read failed for {key}: {cause}",
            details={"key": key, "cause": cause},
        )
        self.key = key


class StorageWriteError(StorageError):
    """Raised when writing or removing a key in storage fails."""

    def __init__(self, operation: str, key: str, cause: str):
        super().__init__(
            f"Storage {operation} failed for {key}: {cause}",
            details={"operation": operation, "key": key, "cause": cause},
        )
        self.operation = operation
        self.key = key


# =============================================================================
# Config Exceptions
# =============================================================================


class ConfigError(DealerSiteError):
    """Base exception for site configuration errors."""
    pass


class ConfigValidationError(ConfigError):
    """Raised when a site configuration field holds an invalid value."""

    def __init__(self, field: str, message: str):
        super().__init__(
            f"Validation error for '{field}': {message}",
            details={"field": field},
        )
        self.field = field
