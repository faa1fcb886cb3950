"""Domain services."""

from .base import Service
from .code_generator import CodeGenerator
from .invite_service import InviteService
from .jwt_service import JWTService
from .profile_service import ProfileService

__all__ = [
    "CodeGenerator",
    "InviteService",
    "JWTService",
    "ProfileService",
    "Service",
]
