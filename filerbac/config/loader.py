"""Configuration loading and processing."""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .schema import AuthConfig, ExtensionConfig

logger = logging.getLogger(__name__)

EXTENSION_CONFIG_FILE = "extension-config.yaml"
CREDENTIALS_FILE = "credentials.yaml"


class AuthConfigLoader:
    """Loads the extension settings and credentials files."""

    # ${NAME}, ${NAME:-fallback} or ${NAME:?hint}
    ENV_VAR_PATTERN = re.compile(
        r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:(?P<operator>:-|:\?)(?P<argument>[^}]*))?\}"
    )

    @classmethod
    def load_extension_config(cls, config_path: Path) -> ExtensionConfig:
        """Load extension settings from a YAML file.

        The file is optional; defaults are used when it does not exist or is
        empty.

        Args:
            config_path: Path to the extension configuration file

        Returns:
            Validated ExtensionConfig instance

        Raises:
            ConfigurationError: If the file is not valid YAML or has invalid settings
        """
        try:
            with open(config_path) as f:
                raw_config = yaml.safe_load(f)
        except FileNotFoundError:
            logger.info(
                f"Extension configuration file {config_path} not found, using defaults"
            )
            return ExtensionConfig()
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in extension configuration file: {e}"
            ) from e

        if not raw_config:
            return ExtensionConfig()

        if not isinstance(raw_config, dict):
            raise ConfigurationError(
                "Extension configuration file must contain a mapping"
            )

        processed_config = cls._substitute_env_vars(raw_config)

        try:
            return ExtensionConfig(**processed_config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid extension configuration: {e}") from e

    @classmethod
    def load_auth_config(cls, config_path: Path) -> AuthConfig:
        """Load a credentials file.

        Only the shape of the file is checked here. Referential checks are
        left to ``CredentialsValidator`` so that all of them get reported.

        Args:
            config_path: Path to the credentials file

        Returns:
            Parsed AuthConfig instance

        Raises:
            ConfigurationError: If the file cannot be loaded or parsed
        """
        try:
            with open(config_path) as f:
                raw_config = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Credentials file not found: {config_path}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in credentials file: {e}") from e

        if not raw_config:
            raise ConfigurationError("Credentials file is empty")

        if not isinstance(raw_config, dict):
            raise ConfigurationError("Credentials file must contain a mapping")

        processed_config = cls._substitute_env_vars(raw_config)

        try:
            return AuthConfig(**processed_config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid credentials configuration: {e}") from e

    @classmethod
    def _substitute_env_vars(cls, config: Any) -> Any:
        """Expand environment references in every string value of a document.

        ``${NAME}`` must be set, ``${NAME:-fallback}`` falls back to the given
        text and ``${NAME:?hint}`` fails with the hint. Keys are left as is.

        Raises:
            ConfigurationError: If a referenced variable is not set
        """
        if isinstance(config, dict):
            return {key: cls._substitute_env_vars(value) for key, value in config.items()}
        if isinstance(config, list):
            return [cls._substitute_env_vars(item) for item in config]
        if isinstance(config, str):
            return cls.ENV_VAR_PATTERN.sub(cls._env_value, config)
        return config

    @staticmethod
    def _env_value(match: re.Match) -> str:
        name, operator, argument = match.group("name", "operator", "argument")
        value = os.environ.get(name)
        if value is not None:
            return value
        if operator == ":-":
            return argument
        if operator == ":?":
            raise ConfigurationError(
                f"Required environment variable '{name}' not set: {argument}"
            )
        raise ConfigurationError(f"Environment variable '{name}' not set")

    @classmethod
    def get_default_paths(cls, extension_home: Path) -> tuple[Path, Path]:
        """Get the default extension configuration and credentials paths.

        Args:
            extension_home: Extension home directory

        Returns:
            Tuple of (extension config path, credentials path)
        """
        extension_home = Path(extension_home)
        return extension_home / EXTENSION_CONFIG_FILE, extension_home / CREDENTIALS_FILE
