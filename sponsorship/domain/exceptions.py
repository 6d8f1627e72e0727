"""Domain exceptions for the sponsorship application.

Defines exceptions that represent business rule violations and failed
collaborators. Presentation layer maps them to HTTP responses in
exception handlers (see sponsorship.core.exception_handlers).
"""

from typing import Any


class SponsorshipException(Exception):
    """Base exception for all sponsorship application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, mid).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Response body for the error envelope."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(SponsorshipException):
    """Raised when input validation fails (e.g. invalid mnemonic or body)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidMnemonicException(ValidationException):
    """Raised when an element mnemonic is malformed or out of range."""

    def __init__(self, mid: str) -> None:
        super().__init__("invalid mID", field="mid")
        self.details["mid"] = mid


class AuthenticationException(SponsorshipException):
    """Raised when a request carries no valid session or wrong credentials."""

    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(SponsorshipException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str, message: str | None = None) -> None:
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ElementUnavailableException(SponsorshipException):
    """Raised when reserving an element that is already taken or reserved."""

    def __init__(self, mid: str, state: str) -> None:
        message = (
            "element is already taken"
            if state == "taken"
            else "element is currently reserved"
        )
        super().__init__(message, "ELEMENT_UNAVAILABLE", {"mid": mid, "state": state})


class UserAlreadyExistsException(SponsorshipException):
    """Raised when creating a user whose name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__("user already exists", "USER_ALREADY_EXISTS", {"name": name})


class RowMapperException(SponsorshipException):
    """Raised when a record shape does not match the table it is mapped to.

    This is a programming error (wrong shape for a table), never user input,
    so it is reported as an internal error.
    """

    def __init__(self, message: str, table: str) -> None:
        super().__init__(message, "ROW_MAPPER_ERROR", {"table": table})


class StoreException(SponsorshipException):
    """Raised when the relational store fails (unreachable, constraint, etc.)."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"can't {operation}", "STORE_ERROR", {"operation": operation})


class MailDeliveryException(SponsorshipException):
    """Raised when an e-mail could not be handed to the mail relay."""

    def __init__(self, recipient: str, reason: str) -> None:
        super().__init__(
            "can't send e-mail",
            "MAIL_DELIVERY_ERROR",
            {"recipient": recipient, "reason": reason},
        )


class CertificateException(SponsorshipException):
    """Raised when a sponsorship certificate could not be rendered."""

    def __init__(self, mid: str, reason: str) -> None:
        super().__init__(
            "error while creating certificate",
            "CERTIFICATE_ERROR",
            {"mid": mid, "reason": reason},
        )


class TokenSigningException(SponsorshipException):
    """Raised when a session token could not be created."""

    def __init__(self) -> None:
        super().__init__("can't create session", "TOKEN_SIGNING_ERROR")
