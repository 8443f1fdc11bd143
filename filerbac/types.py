"""Core data types for the file RBAC extension."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a credentials configuration.

    ``errors`` keeps the order in which the checks ran, so an operator can
    work through them top to bottom.
    """

    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when no errors were recorded."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.success
