"""File based role access control for MQTT broker extensions."""

__version__ = "0.1.0"

from .config import (
    AuthConfig,
    AuthConfigLoader,
    CredentialsValidator,
    ExtensionConfig,
    PasswordType,
)
from .credentials import CredentialsConfiguration
from .exceptions import (
    ConfigurationError,
    CredentialsValidationError,
    RbacError,
)
from .types import ValidationResult

__all__ = [
    "AuthConfig",
    "AuthConfigLoader",
    "ConfigurationError",
    "CredentialsConfiguration",
    "CredentialsValidationError",
    "CredentialsValidator",
    "ExtensionConfig",
    "PasswordType",
    "RbacError",
    "ValidationResult",
]
