from abc import ABC
from typing import ClassVar


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """

    error_type: ClassVar[str] = "bad_request"


class ValidationError(UserError):
    """Raised when user input fails validation."""

    error_type = "validation_error"


class MissingFieldsError(ValidationError):
    """Raised when a request omits required input."""

    error_type = "missing_fields"

    def __init__(self, message: str = "Missing required fields") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when authentication fails."""

    error_type = "authentication_error"

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class InvalidSignatureError(AuthenticationError):
    """Raised when a wallet signature does not verify."""

    error_type = "invalid_signature"

    def __init__(self, message: str = "Invalid signature") -> None:
        super().__init__(message)


class SessionMismatchError(AuthenticationError):
    """Raised when a session token was issued for a different wallet or game."""

    error_type = "session_mismatch"

    def __init__(self, message: str = "Session token does not match the request") -> None:
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Raised when a session token is malformed or fails the integrity check."""

    error_type = "invalid_token"

    def __init__(self, message: str = "Invalid session token") -> None:
        super().__init__(message)


class ExpiredTokenError(AuthenticationError):
    """Raised when a session token is past its expiry."""

    error_type = "expired_token"

    def __init__(self, message: str = "Session token has expired") -> None:
        super().__init__(message)
