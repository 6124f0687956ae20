"""Directory operations against the Microsoft Graph users endpoint."""

from typing import Any

from ..core.config import GRAPH_USERS_URL
from ..models.token import Token
from ..models.user import UserSpecification
from ..utils.logging_utils import get_logger, log_operation
from ..utils.request_utils import send_json_request

logger = get_logger(__name__)


@log_operation("list_users")
def list_users(token: Token) -> Any:
    """List all users in the directory.

    Only the first page Graph returns is fetched; ``@odata.nextLink`` is
    left in the body for the operator to see.

    Args:
        token: Bearer token

    Returns:
        Any: Decoded response body, unmodified
    """
    return send_json_request(
        "GET",
        GRAPH_USERS_URL,
        headers={"Authorization": token.authorization_header()},
    )


@log_operation("add_user")
def add_user(token: Token, specification: UserSpecification) -> Any:
    """Create a user from the given specification.

    Args:
        token: Bearer token
        specification: User to create

    Returns:
        Any: Decoded response body, unmodified (error bodies included)
    """
    logger.info(
        f"Creating user {specification.user_principal_name}",
        extra={"operation": "add_user"},
    )
    return send_json_request(
        "POST",
        GRAPH_USERS_URL,
        headers={
            "Authorization": token.authorization_header(),
            "Content-Type": "application/json",
        },
        json=specification.to_dict(),
    )
