# resumehub/core/errors.py
"""
Error taxonomy for the account-and-artifact service.

Every failure the service reports carries a machine-readable code, an HTTP
status for the API layer, and a short human-readable message. Raw storage
errors are translated into one of these before they leave the service.

    ServiceError
        ├── ValidationError      400  missing / malformed input
        ├── DuplicateIdentity    400  email already registered
        ├── InvalidCredentials   400  generic login failure
        ├── NotFound             404  account or stored document
        ├── UnsupportedType      400  upload extension not allowed
        ├── TooLarge             400  upload above the size ceiling
        ├── AuthRequired         401  missing / invalid bearer token (jwt mode)
        ├── Forbidden            403  token does not match the target account
        └── InternalError        500  storage or unexpected failure (opaque)
"""
from fastapi import status


class ServiceError(Exception):
    """Base class; subclasses set the default code, status and message."""

    code = "SERVER_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "server error"

    def __init__(self, message: str | None = None, code: str | None = None):
        self.message = message or self.default_message
        if code:
            self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(ServiceError):
    code = "VALIDATION_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "missing fields"


class DuplicateIdentity(ServiceError):
    code = "EMAIL_EXISTS"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already exists"


class InvalidCredentials(ServiceError):
    # Same code and message for unknown email and wrong password
    code = "INVALID_CREDENTIALS"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class NotFound(ServiceError):
    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UnsupportedType(ServiceError):
    code = "UNSUPPORTED_TYPE"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Only .pdf, .doc and .docx allowed"


class TooLarge(ServiceError):
    code = "TOO_LARGE"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "File too large"


class AuthRequired(ServiceError):
    code = "AUTH_REQUIRED"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class Forbidden(ServiceError):
    code = "FORBIDDEN"
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed to act on this account"


class InternalError(ServiceError):
    pass
