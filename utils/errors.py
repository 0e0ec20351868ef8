from typing import Optional


class AuthServiceError(Exception):
    """Base error rendered to clients as ``{"error": message}``."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthServiceError):
    status_code = 400
    default_message = "Token is required"


class AuthenticationError(AuthServiceError):
    status_code = 401
    default_message = "Invalid Google token"


class VerificationError(AuthenticationError):
    """The identity provider rejected the token, or did not answer in time."""


class ProvisioningError(AuthenticationError):
    """The local user record could not be found or created."""
