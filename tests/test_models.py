"""Tests for data models."""

import pytest

from entitymgr.models.token import EXPIRY_SKEW_SECONDS, Token
from entitymgr.models.user import ObjectIdentity, PasswordProfile, UserSpecification


class TestToken:
    """Test Token model."""

    def test_from_response(self):
        token = Token.from_response(
            {
                "token_type": "Bearer",
                "expires_in": 3599,
                "ext_expires_in": 3600,
                "access_token": "abc",
            }
        )

        assert token.token_type == "Bearer"
        assert token.access_token == "abc"
        assert token.expires_in == 3599
        assert token.ext_expires_in == 3600

    def test_from_response_missing_fields(self):
        token = Token.from_response({"error": "invalid_client"})

        assert token.token_type is None
        assert token.access_token is None
        assert token.authorization_header() == "None None"

    @pytest.mark.parametrize("data", [["x"], "not an object", None])
    def test_from_response_non_object(self, data):
        token = Token.from_response(data)

        assert token.token_type is None
        assert token.access_token is None
        assert token.expires_in is None

    def test_authorization_header(self, token):
        assert token.authorization_header() == "Bearer test_token"

    def test_is_expired(self):
        token = Token("Bearer", "abc", expires_in=3600, acquired_at=1000.0)

        assert not token.is_expired(now=1000.0)
        assert not token.is_expired(now=1000.0 + 3600 - EXPIRY_SKEW_SECONDS - 1)
        assert token.is_expired(now=1000.0 + 3600 - EXPIRY_SKEW_SECONDS)

    def test_short_lifetime_is_not_expired_on_arrival(self):
        token = Token("Bearer", "abc", expires_in=30, acquired_at=1000.0)

        assert not token.is_expired(now=1000.0)
        assert not token.is_expired(now=1014.0)
        assert token.is_expired(now=1015.0)

    def test_short_lifetime_without_clock(self):
        assert not Token("Bearer", "x", expires_in=30).is_expired()

    def test_is_expired_without_lifetime(self):
        token = Token("Bearer", "abc", acquired_at=0.0)

        assert not token.is_expired(now=10**9)


class TestUserSpecification:
    """Test UserSpecification model."""

    def _specification(self):
        return UserSpecification(
            display_name="Ada",
            user_principal_name="ada_example.com#EXT#@contoso.onmicrosoft.com",
            password_profile=PasswordProfile(password="Secret123!"),
            identities=[
                ObjectIdentity(
                    sign_in_type="emailAddress",
                    issuer="contoso.onmicrosoft.com",
                    issuer_assigned_id="ada@example.com",
                )
            ],
        )

    def test_to_dict(self):
        assert self._specification().to_dict() == {
            "accountEnabled": True,
            "displayName": "Ada",
            "userPrincipalName": "ada_example.com#EXT#@contoso.onmicrosoft.com",
            "passwordProfile": {
                "password": "Secret123!",
                "forceChangePasswordNextSignIn": False,
            },
            "identities": [
                {
                    "signInType": "emailAddress",
                    "issuer": "contoso.onmicrosoft.com",
                    "issuerAssignedId": "ada@example.com",
                }
            ],
        }

    def test_extensions_merged_in_insertion_order(self):
        specification = self._specification()
        specification.set_extension("extension_abc_b", "2")
        specification.set_extension("extension_abc_a", "1")

        payload = specification.to_dict()

        assert list(payload)[-2:] == ["extension_abc_b", "extension_abc_a"]
        assert payload["extension_abc_a"] == "1"

    def test_set_extension_overwrites(self):
        specification = self._specification()
        specification.set_extension("extension_abc_a", "1")
        specification.set_extension("extension_abc_a", "2")

        assert specification.extensions == {"extension_abc_a": "2"}
