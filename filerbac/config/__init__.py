"""Configuration system for the file RBAC extension."""

from .schema import (
    Activity,
    AuthConfig,
    ExtensionConfig,
    PasswordType,
    Permission,
    Qos,
    Retain,
    Role,
    SharedSubscription,
    User,
)

from .loader import (
    AuthConfigLoader,
    CREDENTIALS_FILE,
    EXTENSION_CONFIG_FILE,
)

from .validation import (
    CredentialsValidator,
)

__all__ = [
    # Schema models
    "Activity",
    "AuthConfig",
    "ExtensionConfig",
    "PasswordType",
    "Permission",
    "Qos",
    "Retain",
    "Role",
    "SharedSubscription",
    "User",
    # Loading
    "AuthConfigLoader",
    "CREDENTIALS_FILE",
    "EXTENSION_CONFIG_FILE",
    # Validation
    "CredentialsValidator",
]
