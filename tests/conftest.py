"""
Pytest configuration and shared fixtures for the file RBAC tests.
"""

from pathlib import Path

import pytest
import yaml

from filerbac.config import AuthConfig, ExtensionConfig, PasswordType
from tests.helpers import make_role, make_user


@pytest.fixture
def plain_config() -> ExtensionConfig:
    return ExtensionConfig(password_type=PasswordType.PLAIN)


@pytest.fixture
def hashed_config() -> ExtensionConfig:
    return ExtensionConfig(password_type=PasswordType.HASHED)


@pytest.fixture
def minimal_auth_config() -> AuthConfig:
    return AuthConfig(users=[make_user()], roles=[make_role()])


@pytest.fixture
def write_yaml(tmp_path):
    """Write a YAML document into the test directory and return its path."""

    def _write(name: str, data) -> Path:
        path = tmp_path / name
        with open(path, "w") as f:
            yaml.dump(data, f)
        return path

    return _write


@pytest.fixture
def credentials_data() -> dict:
    return {
        "default-role": "guest",
        "users": [
            {"name": "alice", "password": "c2FsdA==:aGFzaA==", "roles": ["admin"]},
            {"name": "bob", "password": "c2FsdA==:b3RoZXI=", "roles": ["guest"]},
        ],
        "roles": [
            {
                "id": "admin",
                "permissions": [{"topic": "#"}],
            },
            {
                "id": "guest",
                "permissions": [
                    {
                        "topic": "public/#",
                        "activity": "SUBSCRIBE",
                        "qos": "ZERO_ONE",
                        "retain": "NOT_RETAINED",
                        "shared-group": "readers",
                        "shared-subscription": "SHARED",
                    }
                ],
            },
        ],
    }
