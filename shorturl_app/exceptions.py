"""Exceptions raised by the shortcode registry.

Each error kind maps to exactly one boundary response; the HTTP layer
does the translation, the registry only raises.
"""


class RegistryError(Exception):
    """Base exception for all registry errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(RegistryError):
    """Malformed URL or invalid validity value."""


class ConflictError(RegistryError):
    """Requested shortcode is already taken (live or expired)."""


class NotFoundError(RegistryError):
    """No record exists for the shortcode."""


class ExpiredError(RegistryError):
    """Shortcode exists but its validity window has elapsed."""


class CapacityExhaustedError(RegistryError):
    """Code generation ran out of attempts without finding a free code."""
