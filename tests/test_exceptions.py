"""Tests for olarmpy exceptions."""

from olarmpy.exceptions import (
    AreaNotFoundError,
    OlarmApiError,
    OlarmAuthError,
    OlarmConfigurationError,
    OlarmConnectionError,
    OlarmError,
)


def test_exception_hierarchy() -> None:
    assert issubclass(OlarmAuthError, OlarmError)
    assert issubclass(OlarmApiError, OlarmError)
    assert issubclass(OlarmConnectionError, OlarmError)
    assert issubclass(AreaNotFoundError, OlarmError)
    assert issubclass(OlarmConfigurationError, OlarmError)


def test_api_error_status_code() -> None:
    err = OlarmApiError("test error", status_code=500)
    assert err.status_code == 500
    assert str(err) == "test error"


def test_api_error_no_status_code() -> None:
    err = OlarmApiError("test error")
    assert err.status_code is None


def test_area_not_found_carries_name() -> None:
    err = AreaNotFoundError("Garage")
    assert err.area_name == "Garage"
    assert "Garage" in str(err)
