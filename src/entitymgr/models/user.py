"""User data models for Microsoft Graph user creation."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PasswordProfile:
    """Password settings for a new user."""

    password: str
    force_change_password_next_sign_in: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "password": self.password,
            "forceChangePasswordNextSignIn": self.force_change_password_next_sign_in,
        }


@dataclass
class ObjectIdentity:
    """Sign-in identity attached to a user."""

    sign_in_type: str
    issuer: str
    issuer_assigned_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "signInType": self.sign_in_type,
            "issuer": self.issuer,
            "issuerAssignedId": self.issuer_assigned_id,
        }


@dataclass
class UserSpecification:
    """Payload for creating a user through Microsoft Graph.

    Directory extension attributes are kept in ``extensions``, keyed by
    their full ``extension_<appId>_<name>`` field name, and merged into the
    payload by ``to_dict``.
    """

    display_name: str
    user_principal_name: str
    password_profile: PasswordProfile
    identities: list[ObjectIdentity]
    account_enabled: bool = True
    extensions: dict[str, str] = field(default_factory=dict)

    def set_extension(self, name: str, value: str) -> None:
        """Set an extension field, overwriting any previous value."""
        self.extensions[name] = value

    def to_dict(self) -> dict[str, Any]:
        """Render the Graph request body.

        Returns:
            Dict[str, Any]: camelCase payload with extension fields merged in
        """
        payload: dict[str, Any] = {
            "accountEnabled": self.account_enabled,
            "displayName": self.display_name,
            "userPrincipalName": self.user_principal_name,
            "passwordProfile": self.password_profile.to_dict(),
            "identities": [identity.to_dict() for identity in self.identities],
        }
        payload.update(self.extensions)
        return payload
