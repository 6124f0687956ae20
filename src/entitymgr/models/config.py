"""Configuration data models for the Entity Manager."""

from dataclasses import dataclass
from typing import Any

from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class Credentials:
    """Client-credentials configuration for Microsoft Graph access."""

    tenant_id: str
    client_id: str
    client_secret: str
    tenant_name: str | None = None
    extension_app_id: str | None = None

    @classmethod
    def from_env_vars(cls, env_vars: dict[str, str]) -> "Credentials":
        """Create Credentials from environment variables.

        Args:
            env_vars: Dictionary of environment variables

        Returns:
            Credentials: Configuration instance

        Raises:
            ValueError: If required environment variables are missing
        """
        tenant_id = env_vars.get("TENANT_ID")
        client_id = env_vars.get("CLIENT_ID")
        client_secret = env_vars.get("CLIENT_SECRET")

        if not tenant_id:
            raise ValueError("Missing TENANT_ID environment variable")
        if not client_id:
            raise ValueError("Missing CLIENT_ID environment variable")
        if not client_secret:
            raise ValueError("Missing CLIENT_SECRET environment variable")

        return cls(
            tenant_id=tenant_id,
            client_id=client_id,
            client_secret=client_secret,
            tenant_name=env_vars.get("TENANT_NAME") or None,
            extension_app_id=env_vars.get("EXTENSION_APP_ID") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert credentials to dictionary format.

        Returns:
            Dict[str, Any]: Configuration as dictionary
        """
        return {
            "tenant_id": self.tenant_id,
            "client_id": self.client_id,
            "client_secret": "***REDACTED***",  # Don't expose secrets
            "tenant_name": self.tenant_name,
            "extension_app_id": self.extension_app_id,
        }

    def require_extension_app_id(self) -> str:
        """Return the extension application id.

        Raises:
            ConfigurationError: If EXTENSION_APP_ID was not configured
        """
        if not self.extension_app_id:
            raise ConfigurationError(
                "EXTENSION_APP_ID not set", variable="EXTENSION_APP_ID"
            )
        return self.extension_app_id
