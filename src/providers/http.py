import logging
from typing import Any

import requests

from src.providers.base import NetworkError

logger = logging.getLogger("spot_prices.http")


def get_json(url: str, params: dict[str, str], timeout_seconds: float | None) -> dict[str, Any]:
    """
    Single GET request returning the decoded JSON body.

    The HTTP status is not checked here: both providers report failures inside
    the JSON body, and those messages are more useful than a bare status code.
    """
    try:
        response = requests.get(url, params=params, timeout=timeout_seconds)
    except requests.RequestException as exc:
        # requests puts the full URL, api keys included, into its messages.
        raise NetworkError(f"Could not reach {url} ({type(exc).__name__})") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise NetworkError(
            f"Invalid JSON from {url} (HTTP {response.status_code})"
        ) from exc

    if not isinstance(payload, dict):
        raise NetworkError(f"Unexpected JSON body from {url} (HTTP {response.status_code})")

    logger.debug("response from %s: HTTP %s", url, response.status_code)
    return payload
