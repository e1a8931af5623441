"""Exceptions raised by the User API service."""


class UserAPIError(Exception):
    """Base class for service errors."""


class ConfigError(UserAPIError):
    """Raised when startup settings are invalid."""


class ValidationError(UserAPIError):
    """Raised when a request payload fails validation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
