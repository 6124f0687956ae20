"""Data models for the Entity Manager."""

from entitymgr.models.config import Credentials
from entitymgr.models.token import Token
from entitymgr.models.user import ObjectIdentity, PasswordProfile, UserSpecification

__all__ = [
    # Config models
    "Credentials",
    # Token models
    "Token",
    # User models
    "ObjectIdentity",
    "PasswordProfile",
    "UserSpecification",
]
