"""Exceptions for the olarmpy library."""


class OlarmError(Exception):
    """Base exception for olarmpy."""


class OlarmAuthError(OlarmError):
    """Raised when the API key is rejected."""


class OlarmApiError(OlarmError):
    """Raised when an API call returns an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class OlarmConnectionError(OlarmError):
    """Raised when unable to connect to the Olarm API."""


class AreaNotFoundError(OlarmError):
    """Raised when the configured area is missing from a fresh fetch."""

    def __init__(self, area_name: str) -> None:
        super().__init__(f"Area {area_name!r} not found")
        self.area_name = area_name


class OlarmConfigurationError(OlarmError):
    """Raised for invalid configuration (unknown zone, incomplete door setup)."""
