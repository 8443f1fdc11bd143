"""
Command-line interface for the file RBAC extension.

Checks a credentials file the same way the extension does before
activating it, so mistakes can be caught before deployment.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from . import __version__
from .config import (
    AuthConfigLoader,
    CredentialsValidator,
    PasswordType,
)
from .exceptions import ConfigurationError

logger = logging.getLogger("filerbac")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def _configure_logging(debug: bool) -> None:
    debug = debug or bool(os.getenv("FILERBAC_DEBUG"))
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    if debug:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
        )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def handle_validate_command(args_ns) -> int:
    """Handles the 'validate' command."""
    logger.debug("Validate command started.")

    default_config, default_credentials = AuthConfigLoader.get_default_paths(
        Path(args_ns.extension_home)
    )
    config_path = Path(args_ns.config) if args_ns.config else default_config
    credentials_path = (
        Path(args_ns.credentials) if args_ns.credentials else default_credentials
    )

    try:
        extension_config = AuthConfigLoader.load_extension_config(config_path)
        if args_ns.password_type:
            extension_config = extension_config.model_copy(
                update={"password_type": PasswordType[args_ns.password_type]}
            )
        auth_config = AuthConfigLoader.load_auth_config(credentials_path)
    except ConfigurationError as e:
        print(f"❌ {e}")
        return EXIT_CONFIG_ERROR

    result = CredentialsValidator.validate_config(extension_config, auth_config)
    if result.success:
        print(f"✅ Credentials configuration is valid: {credentials_path}")
        return EXIT_OK

    for error in result.errors:
        print(f"❌ {error}")
    print(f"⚠️  Found {len(result.errors)} validation issue(s) in {credentials_path}")
    return EXIT_INVALID


def create_parser():
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="filerbac",
        description="Command-line tools for the file RBAC broker extension.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(
        title="commands", dest="command", required=True, help="Command to execute"
    )

    validate_parser = subparsers.add_parser(
        "validate", help="Validate a credentials configuration file."
    )
    validate_parser.add_argument(
        "--extension-home",
        "-e",
        help="Directory holding the extension configuration files. Default: current directory",
        default=".",
    )
    validate_parser.add_argument(
        "--config",
        "-c",
        help="Path to the extension configuration file. Default: <extension-home>/extension-config.yaml",
        default=None,
    )
    validate_parser.add_argument(
        "--credentials",
        help="Path to the credentials file. Default: <extension-home>/credentials.yaml",
        default=None,
    )
    validate_parser.add_argument(
        "--password-type",
        choices=[t.value for t in PasswordType],
        help="Override the password type from the extension configuration.",
        default=None,
    )
    validate_parser.set_defaults(func=handle_validate_command)

    return parser


def main(argv=None) -> int:
    parser = create_parser()
    args_ns = parser.parse_args(argv)
    _configure_logging(args_ns.debug)
    return args_ns.func(args_ns)


if __name__ == "__main__":
    sys.exit(main())
