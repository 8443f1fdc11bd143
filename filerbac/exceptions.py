"""Exception classes for the file RBAC extension."""


class RbacError(Exception):
    """Base exception for all file RBAC errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RbacError):
    """Raised when a configuration file cannot be loaded or parsed."""

    pass


class CredentialsValidationError(RbacError):
    """Raised when a credentials file is loaded but fails validation."""

    def __init__(self, errors: list[str], details: dict | None = None):
        self.errors = list(errors)
        message = f"Credentials configuration is invalid ({len(self.errors)} error(s))"
        super().__init__(message, {"errors": self.errors, **(details or {})})
