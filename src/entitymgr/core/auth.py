"""Client-credentials token acquisition for Microsoft Graph."""

from ..models.config import Credentials
from ..models.token import Token
from ..utils.logging_utils import get_logger
from ..utils.request_utils import send_json_request
from .config import GRAPH_SCOPE, get_env_config, get_token_url

# Module logger
logger = get_logger(__name__)


def request_token(tenant: str, client_id: str, client_secret: str) -> Token:
    """Exchange client credentials for a bearer token.

    Performs one form-encoded POST to the tenant's token endpoint. The
    response is not validated: whatever the endpoint returns is decoded
    and mapped onto a Token, so an error response yields a Token with
    ``None`` fields.

    Args:
        tenant: Directory (tenant) id
        client_id: Application (client) id
        client_secret: Client secret

    Returns:
        Token: Token built from the decoded response

    Raises:
        requests.exceptions.RequestException: On network failure
        requests.exceptions.JSONDecodeError: If the response is not JSON
    """
    url = get_token_url(tenant)
    logger.info(
        f"Requesting access token for tenant {tenant}",
        extra={"operation": "token_request", "api_endpoint": url},
    )

    data = send_json_request(
        "POST",
        url,
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        data={
            "client_id": client_id,
            "scope": GRAPH_SCOPE,
            "client_secret": client_secret,
            "grant_type": "client_credentials",
        },
        allow_redirects=True,
    )

    token = Token.from_response(data)
    if token.access_token is None:
        logger.warning(
            "Token response did not include an access token",
            extra={"operation": "token_request", "api_endpoint": url},
        )
    else:
        logger.info(
            "Access token obtained",
            extra={"operation": "token_request", "status": "success"},
        )
    return token


def get_access_token(credentials: Credentials | None = None) -> Token:
    """Get a token for the given credentials, loading them from the environment if omitted.

    Raises:
        AuthConfigError: If required environment variables are missing
    """
    if credentials is None:
        credentials = get_env_config()
    return request_token(
        credentials.tenant_id, credentials.client_id, credentials.client_secret
    )
