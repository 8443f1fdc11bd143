"""Credentials configuration validation."""

import logging

from ..types import ValidationResult
from .schema import AuthConfig, ExtensionConfig, PasswordType, Permission, Role, User

logger = logging.getLogger(__name__)


class CredentialsValidator:
    """Validates a credentials configuration against the extension settings.

    Every violation is collected instead of stopping at the first one, so a
    broken file can be fixed in a single pass. The only early exit is when
    the file has no roles, or neither users nor a default role.
    """

    @classmethod
    def validate_config(
        cls, extension_config: ExtensionConfig, config: AuthConfig
    ) -> ValidationResult:
        """Validate a credentials configuration.

        Args:
            extension_config: Global extension settings
            config: Parsed credentials configuration

        Returns:
            ValidationResult holding the errors in the order they were found
        """
        errors: list[str] = []

        default_role = config.default_role
        if not default_role and not config.users:
            errors.append("No users or default role found in configuration file")

        if not config.roles:
            errors.append("No roles found in configuration file")

        # Nothing else can be checked without roles and a way to assign them
        if errors:
            logger.debug(f"Credentials configuration is structurally incomplete: {errors}")
            return ValidationResult(errors)

        role_ids = cls._validate_roles(config.roles, errors)

        if default_role and default_role not in role_ids:
            errors.append(f"No role defined for default role '{default_role}'")

        cls._validate_users(extension_config, config.users, role_ids, errors)

        logger.debug(f"Credentials validation finished with {len(errors)} error(s)")
        return ValidationResult(errors)

    @classmethod
    def _validate_roles(cls, roles: list[Role], errors: list[str]) -> set[str]:
        """Validate role definitions and return the identifiers of usable roles."""
        role_ids: set[str] = set()

        for role in roles:
            if not role.id:
                errors.append("A role is missing an ID")
                continue

            if role.id in role_ids:
                errors.append(f"Duplicate ID '{role.id}' for role")
                continue

            role_ids.add(role.id)

            if not role.permissions:
                errors.append(f"Role '{role.id}' is missing permissions")
                continue

            for permission in role.permissions:
                cls._validate_permission(role.id, permission, errors)

        return role_ids

    @classmethod
    def _validate_permission(
        cls, role_id: str, permission: Permission, errors: list[str]
    ) -> None:
        """Record one error per missing permission field."""
        if not permission.topic:
            errors.append(
                f"A permission for role with id '{role_id}' is missing a topic filter"
            )

        if permission.activity is None:
            errors.append(
                f"Invalid value for activity in permission for role with id '{role_id}'"
            )

        if permission.qos is None:
            errors.append(
                f"Invalid value for QoS in permission for role with id '{role_id}'"
            )

        if permission.retain is None:
            errors.append(
                f"Invalid value for retain in permission for role with id '{role_id}'"
            )

        if not permission.shared_group:
            errors.append(
                f"Invalid value for shared group in permission for role with id '{role_id}'"
            )

        if permission.shared_subscription is None:
            errors.append(
                f"Invalid value for shared subscription in permission for role with id '{role_id}'"
            )

    @classmethod
    def _validate_users(
        cls,
        extension_config: ExtensionConfig,
        users: list[User],
        role_ids: set[str],
        errors: list[str],
    ) -> None:
        """Validate user definitions against the known role identifiers."""
        user_names: set[str] = set()
        hashed = extension_config.password_type == PasswordType.HASHED

        for user in users:
            if not user.name:
                errors.append("A user is missing a name")
                continue

            if user.name in user_names:
                errors.append(f"Duplicate name '{user.name}' for user")
                continue

            user_names.add(user.name)

            if not user.password:
                errors.append(f"User '{user.name}' is missing a password")
                continue

            if hashed and not cls._is_hashed_password(user.password):
                errors.append(f"User '{user.name}' has invalid password")
                continue

            if not user.roles:
                errors.append(f"User '{user.name}' is missing roles")
                continue

            for role in user.roles:
                if not role:
                    errors.append(f"Invalid role for user '{user.name}'")
                    continue

                if role not in role_ids:
                    errors.append(f"Unknown role '{role}' for user '{user.name}'")

    @staticmethod
    def _is_hashed_password(password: str) -> bool:
        """Check for a ``salt:hash`` shape. The hash itself is never verified."""
        parts = password.split(":")
        return len(parts) >= 2 and bool(parts[0]) and bool(parts[1])
