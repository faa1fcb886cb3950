"""Strongly typed identifiers for Gatehouse domain entities."""

from typing import NewType
from uuid import UUID

InviteId = NewType("InviteId", UUID)
ProfileId = NewType("ProfileId", UUID)
UserId = NewType("UserId", UUID)
