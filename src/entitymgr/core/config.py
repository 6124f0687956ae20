"""Configuration utilities for Microsoft Graph access."""

import os

import dotenv

from ..models.config import Credentials
from .exceptions import AuthConfigError

# Microsoft identity platform token endpoint, templated on the tenant id
TOKEN_URL_TEMPLATE = "https://login.microsoftonline.com/{tenant}/oauth2/v2.0/token"
GRAPH_SCOPE = "https://graph.microsoft.com/.default"
GRAPH_USERS_URL = "https://graph.microsoft.com/v1.0/users"

API_TIMEOUT = 30  # request timeout in seconds

REQUIRED_ENV_VARS = ("TENANT_ID", "CLIENT_ID", "CLIENT_SECRET")
OPTIONAL_ENV_VARS = ("TENANT_NAME", "EXTENSION_APP_ID")


def check_env_file() -> None:
    """Check if .env file exists and load it."""
    env_path = ".env"
    if os.path.exists(env_path):
        dotenv.load_dotenv(env_path)


def validate_env_var(name: str, value: str | None) -> str:
    """Validate that an environment variable is set and not empty.

    Args:
        name: Environment variable name
        value: Environment variable value

    Returns:
        str: The validated value

    Raises:
        AuthConfigError: If the environment variable is missing or empty
    """
    if not value:
        raise AuthConfigError(f"{name} not set")
    return value


def get_env_config() -> Credentials:
    """Load Graph credentials from the process environment.

    Required variables are checked in order, so the first missing one is
    the one reported.

    Returns:
        Credentials: Loaded credentials

    Raises:
        AuthConfigError: If a required environment variable is missing
    """
    check_env_file()

    values = {name: validate_env_var(name, os.getenv(name)) for name in REQUIRED_ENV_VARS}
    for name in OPTIONAL_ENV_VARS:
        value = os.getenv(name)
        if value:
            values[name] = value

    return Credentials.from_env_vars(values)


def get_token_url(tenant: str) -> str:
    """Get the OAuth token URL for the given tenant."""
    return TOKEN_URL_TEMPLATE.format(tenant=tenant)
