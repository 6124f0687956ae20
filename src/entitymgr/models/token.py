"""Access token model for the Microsoft identity platform."""

import time
from dataclasses import dataclass, field
from typing import Any

# Seconds subtracted from the token lifetime when checking expiry, capped at
# half the lifetime for short-lived tokens
EXPIRY_SKEW_SECONDS = 60


@dataclass(frozen=True)
class Token:
    """Bearer token returned by the client-credentials grant.

    Fields are kept exactly as received; absent fields are ``None``.
    """

    token_type: str | None
    access_token: str | None
    expires_in: int | None = None
    ext_expires_in: int | None = None
    acquired_at: float = field(default_factory=time.monotonic, compare=False)

    @classmethod
    def from_response(cls, data: Any) -> "Token":
        """Create a Token from a decoded token endpoint response.

        Args:
            data: Decoded JSON body of the token response; anything other than
                an object yields a Token with every field None

        Returns:
            Token: Token instance with the received values
        """
        if not isinstance(data, dict):
            data = {}
        return cls(
            token_type=data.get("token_type"),
            access_token=data.get("access_token"),
            expires_in=data.get("expires_in"),
            ext_expires_in=data.get("ext_expires_in"),
        )

    def authorization_header(self) -> str:
        """Render the value for the Authorization header."""
        return f"{self.token_type} {self.access_token}"

    def is_expired(self, now: float | None = None) -> bool:
        """Check whether the token lifetime has elapsed.

        Args:
            now: Monotonic clock reading to compare against (defaults to now)

        Returns:
            bool: True once ``expires_in`` seconds, less a small skew, have
            passed since the token was acquired
        """
        if not isinstance(self.expires_in, int | float):
            return False
        if now is None:
            now = time.monotonic()
        skew = min(EXPIRY_SKEW_SECONDS, self.expires_in / 2)
        return now - self.acquired_at >= self.expires_in - skew
