"""
Credentials store for the file RBAC extension.

This module ties the loader and validator together: a credentials file only
becomes active once it has passed validation, and a reload that fails keeps
the previously active configuration in place.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from .config import AuthConfig, AuthConfigLoader, CredentialsValidator, ExtensionConfig
from .exceptions import ConfigurationError, CredentialsValidationError

logger = logging.getLogger(__name__)

ReloadCallback = Callable[[AuthConfig], None]


class CredentialsConfiguration:
    """Holds the currently active, validated credentials configuration."""

    def __init__(
        self, extension_home: Path, extension_config: ExtensionConfig | None = None
    ):
        """
        Initialize the credentials store.

        Args:
            extension_home: Directory holding the extension config and credentials files
            extension_config: Extension settings to use instead of loading them from disk
        """
        self.extension_home = Path(extension_home)
        self.extension_config_path, self.credentials_path = (
            AuthConfigLoader.get_default_paths(self.extension_home)
        )
        self._extension_config = extension_config
        self._current_config: AuthConfig | None = None
        self._callbacks: list[ReloadCallback] = []
        self._initialized = False

    @property
    def extension_config(self) -> ExtensionConfig | None:
        return self._extension_config

    @property
    def current_config(self) -> AuthConfig | None:
        return self._current_config

    def add_reload_callback(self, callback: ReloadCallback) -> None:
        """
        Register a callback invoked with every newly activated configuration.

        Args:
            callback: Callable receiving the new AuthConfig
        """
        self._callbacks.append(callback)

    def init(self) -> AuthConfig:
        """
        Load and validate the credentials file for the first time.

        Returns:
            The validated AuthConfig, now active

        Raises:
            ConfigurationError: If a configuration file cannot be loaded
            CredentialsValidationError: If the credentials file is invalid
        """
        if self._extension_config is None:
            self._extension_config = AuthConfigLoader.load_extension_config(
                self.extension_config_path
            )
        self._initialized = True

        config = AuthConfigLoader.load_auth_config(self.credentials_path)
        errors = self._validate(config)
        if errors:
            raise CredentialsValidationError(
                errors, {"path": str(self.credentials_path)}
            )

        self._current_config = config
        logger.info(
            f"Loaded credentials from {self.credentials_path}: "
            f"{len(config.users)} user(s), {len(config.roles)} role(s)"
        )
        return config

    def reload(self) -> bool:
        """
        Re-read the credentials file and activate it if it is valid and changed.

        Returns:
            True if a new configuration was activated
        """
        if not self._initialized:
            raise RuntimeError("Credentials configuration has not been initialized")

        try:
            config = AuthConfigLoader.load_auth_config(self.credentials_path)
        except ConfigurationError as e:
            logger.error(f"Could not reload credentials, keeping previous configuration: {e}")
            return False

        if config == self._current_config:
            logger.debug("Credentials file unchanged, nothing to reload")
            return False

        if self._validate(config):
            logger.warning("Reloaded credentials are invalid, keeping previous configuration")
            return False

        self._current_config = config
        logger.info(f"Reloaded credentials from {self.credentials_path}")

        for callback in self._callbacks:
            callback(config)
        return True

    def _validate(self, config: AuthConfig) -> list[str]:
        result = CredentialsValidator.validate_config(self._extension_config, config)
        for error in result.errors:
            logger.warning(f"Credentials configuration error: {error}")
        return result.errors
