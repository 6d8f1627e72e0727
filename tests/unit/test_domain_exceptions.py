"""Tests for domain exceptions (error_code, message, details)."""

from sponsorship.domain.exceptions import (
    AuthenticationException,
    ElementUnavailableException,
    InvalidMnemonicException,
    ResourceNotFoundException,
    SponsorshipException,
    StoreException,
    UserAlreadyExistsException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    exc = SponsorshipException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "SponsorshipException"
    assert exc.details == {}
    assert exc.to_dict() == {"error": "SponsorshipException", "message": "Something failed"}


def test_validation_exception_with_field() -> None:
    exc = ValidationException("Invalid format", field="mail")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.to_dict()["details"] == {"field": "mail"}


def test_invalid_mnemonic_is_a_validation_error() -> None:
    exc = InvalidMnemonicException("pv-999")
    assert isinstance(exc, ValidationException)
    assert exc.message == "invalid mID"
    assert exc.details == {"field": "mid", "mid": "pv-999"}


def test_element_unavailable_messages() -> None:
    assert ElementUnavailableException("pv-1", "taken").message == "element is already taken"
    assert (
        ElementUnavailableException("pv-1", "reserved").message
        == "element is currently reserved"
    )


def test_remaining_error_codes() -> None:
    assert AuthenticationException().error_code == "AUTHENTICATION_ERROR"
    assert AuthenticationException().message == "Not authorized"
    assert ResourceNotFoundException("element", "pv-1").message == "element not found: pv-1"
    assert UserAlreadyExistsException("bob").error_code == "USER_ALREADY_EXISTS"
    assert StoreException("select elements").message == "can't select elements"
