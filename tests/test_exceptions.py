"""Test cases for file RBAC exceptions."""

from filerbac.exceptions import (
    ConfigurationError,
    CredentialsValidationError,
    RbacError,
)


class TestExceptions:
    """Test exception hierarchy and functionality."""

    def test_base_error(self):
        """Test base RbacError exception."""
        error = RbacError("Test error", {"code": 123})

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.details == {"code": 123}

    def test_base_error_without_details(self):
        """Test RbacError without details."""
        error = RbacError("Test error")

        assert error.details == {}

    def test_configuration_error(self):
        """Test ConfigurationError inheritance."""
        error = ConfigurationError("Bad file")

        assert isinstance(error, RbacError)
        assert str(error) == "Bad file"

    def test_credentials_validation_error(self):
        """Test that validation errors are kept on the exception."""
        error = CredentialsValidationError(
            ["A role is missing an ID", "A user is missing a name"], {"path": "c.yaml"}
        )

        assert isinstance(error, RbacError)
        assert error.errors == ["A role is missing an ID", "A user is missing a name"]
        assert error.details == {
            "errors": ["A role is missing an ID", "A user is missing a name"],
            "path": "c.yaml",
        }
        assert str(error) == "Credentials configuration is invalid (2 error(s))"
