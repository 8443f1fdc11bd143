"""
Helper utilities for tests.
"""

from filerbac.config import (
    Activity,
    Permission,
    Qos,
    Retain,
    Role,
    SharedSubscription,
    User,
)


def make_permission(**overrides) -> Permission:
    """Build a permission with every field present unless overridden."""
    fields = {
        "topic": "a/b",
        "activity": Activity.SUBSCRIBE,
        "qos": Qos.ONE,
        "retain": Retain.RETAINED,
        "shared_group": "g",
        "shared_subscription": SharedSubscription.NOT_SHARED,
    }
    fields.update(overrides)
    return Permission(**fields)


def make_role(role_id: str | None = "admin", permissions=None) -> Role:
    if permissions is None:
        permissions = [make_permission()]
    return Role(id=role_id, permissions=permissions)


def make_user(
    name: str | None = "alice", password: str | None = "secret", roles=None
) -> User:
    if roles is None:
        roles = ["admin"]
    return User(name=name, password=password, roles=roles)
