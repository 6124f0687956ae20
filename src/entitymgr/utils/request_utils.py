"""Request utilities for pass-through HTTP calls."""

import time
from typing import Any

import requests

from ..core.config import API_TIMEOUT
from .logging_utils import get_logger

USER_AGENT = "EntityManager/1.0 (Microsoft Graph User Management Tool)"

logger = get_logger(__name__)


def send_json_request(
    method: str, url: str, headers: dict[str, str], **kwargs: Any
) -> Any:
    """Send an HTTP request and return the decoded JSON body.

    The status code is not inspected: error bodies are returned to the
    caller just like successful ones. Network errors and undecodable
    bodies propagate unchanged.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        headers: Request headers
        **kwargs: Additional request parameters

    Returns:
        Any: Decoded JSON body

    Raises:
        requests.exceptions.RequestException: On network failure
        requests.exceptions.JSONDecodeError: If the body is not JSON
    """
    headers = {"User-Agent": USER_AGENT, **headers}
    start = time.perf_counter()
    response = requests.request(
        method, url, headers=headers, timeout=API_TIMEOUT, **kwargs
    )
    logger.debug(
        f"HTTP {method.upper()} {url} -> {response.status_code}",
        extra={
            "api_endpoint": url,
            "status_code": response.status_code,
            "duration": time.perf_counter() - start,
        },
    )
    if response.status_code >= 400:
        logger.warning(
            f"{method.upper()} {url} returned status {response.status_code}",
            extra={"api_endpoint": url, "status_code": response.status_code},
        )
    return response.json()
