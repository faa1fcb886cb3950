"""Test configuration and helpers."""

from uuid import uuid4

from gatehouse.domain.value import Actor, UserId


def make_admin() -> Actor:
    """An administrator caller."""
    return Actor(user_id=UserId(uuid4()), is_admin=True)


def make_member() -> Actor:
    """A signed-in caller without administrator rights."""
    return Actor(user_id=UserId(uuid4()), is_admin=False)
