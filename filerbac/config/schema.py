"""Configuration schema models using Pydantic."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PasswordType(str, Enum):
    """How user passwords are stored in the credentials file."""

    PLAIN = "PLAIN"
    HASHED = "HASHED"


class Activity(str, Enum):
    """MQTT activity a permission applies to."""

    PUBLISH = "PUBLISH"
    SUBSCRIBE = "SUBSCRIBE"
    ALL = "ALL"


class Qos(str, Enum):
    """Quality of service levels a permission applies to."""

    ZERO = "ZERO"
    ONE = "ONE"
    TWO = "TWO"
    ZERO_ONE = "ZERO_ONE"
    ONE_TWO = "ONE_TWO"
    ZERO_TWO = "ZERO_TWO"
    ALL = "ALL"


class Retain(str, Enum):
    """Retained flag a permission applies to."""

    RETAINED = "RETAINED"
    NOT_RETAINED = "NOT_RETAINED"
    ALL = "ALL"


class SharedSubscription(str, Enum):
    """Shared subscription mode a permission applies to."""

    SHARED = "SHARED"
    NOT_SHARED = "NOT_SHARED"
    ALL = "ALL"


def _lenient_enum(enum_cls: type[Enum], value: Any) -> Optional[Enum]:
    """Map a raw value onto ``enum_cls``, returning None when it does not match.

    Unknown values are kept as absent so they surface as validation errors
    instead of aborting the whole load.
    """
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            return None
    return None


class BaseConfigModel(BaseModel):
    """Base model accepting both file aliases and field names.

    YAML reads bare numbers such as `password: 123456` as ints; they are
    kept as strings.
    """

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )


class ExtensionConfig(BaseConfigModel):
    """Global extension settings."""

    password_type: PasswordType = Field(
        PasswordType.HASHED,
        alias="password-type",
        description="Whether user passwords are plain text or salted hashes",
    )
    reload_interval: int = Field(
        60,
        alias="reload-interval",
        description="Seconds between credentials file reloads",
    )
    listener_names: Optional[List[str]] = Field(
        None,
        alias="listener-names",
        description="Listeners the extension applies to, all when unset",
    )

    @field_validator("password_type", mode="before")
    @classmethod
    def validate_password_type(cls, v):
        if isinstance(v, str):
            try:
                return PasswordType[v.strip().upper()]
            except KeyError:
                raise ValueError("Password type must be PLAIN or HASHED") from None
        return v

    @field_validator("reload_interval")
    @classmethod
    def validate_reload_interval(cls, v):
        if v < 1:
            raise ValueError("Reload interval must be at least 1 second")
        return v


class Permission(BaseConfigModel):
    """A single topic permission of a role."""

    topic: Optional[str] = Field(None, description="Topic filter")
    activity: Optional[Activity] = Field(Activity.ALL, description="Allowed activity")
    qos: Optional[Qos] = Field(Qos.ALL, description="Allowed QoS levels")
    retain: Optional[Retain] = Field(Retain.ALL, description="Allowed retain flag")
    shared_group: Optional[str] = Field(
        "#", alias="shared-group", description="Allowed shared subscription group"
    )
    shared_subscription: Optional[SharedSubscription] = Field(
        SharedSubscription.ALL,
        alias="shared-subscription",
        description="Allowed shared subscription mode",
    )

    @field_validator("activity", mode="before")
    @classmethod
    def coerce_activity(cls, v):
        return _lenient_enum(Activity, v)

    @field_validator("qos", mode="before")
    @classmethod
    def coerce_qos(cls, v):
        return _lenient_enum(Qos, v)

    @field_validator("retain", mode="before")
    @classmethod
    def coerce_retain(cls, v):
        return _lenient_enum(Retain, v)

    @field_validator("shared_subscription", mode="before")
    @classmethod
    def coerce_shared_subscription(cls, v):
        return _lenient_enum(SharedSubscription, v)


class Role(BaseConfigModel):
    """Role definition."""

    id: Optional[str] = Field(None, description="Role identifier")
    permissions: Optional[List[Permission]] = Field(
        None, description="Permissions granted by this role"
    )


class User(BaseConfigModel):
    """User definition."""

    name: Optional[str] = Field(None, description="User name")
    password: Optional[str] = Field(None, description="Plain or salt:hash password")
    roles: Optional[List[Optional[str]]] = Field(
        None, description="Identifiers of the roles assigned to this user"
    )


class AuthConfig(BaseConfigModel):
    """Contents of a credentials file."""

    default_role: Optional[str] = Field(
        None,
        alias="default-role",
        description="Role applied to clients not listed as users",
    )
    users: List[User] = Field(default_factory=list, description="User definitions")
    roles: List[Role] = Field(default_factory=list, description="Role definitions")

    @field_validator("users", "roles", mode="before")
    @classmethod
    def empty_section_as_list(cls, v):
        # An empty YAML section parses as None
        return [] if v is None else v
