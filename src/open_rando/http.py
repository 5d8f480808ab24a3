"""Shared helpers for outbound HTTP calls."""

import logging
from typing import Any

import requests

from open_rando.exceptions import ProviderError

logger = logging.getLogger(__name__)


def get_json(
    session: requests.Session,
    provider: str,
    url: str,
    *,
    timeout: float,
    params: Any = None,
    headers: dict[str, str] | None = None,
) -> Any:
    """Issue a single GET request and decode its JSON body.

    Args:
        session: Session used for connection pooling.
        provider: Provider name used in error messages.
        url: Absolute URL to fetch.
        timeout: Connect and read timeout in seconds.
        params: Optional query parameters.
        headers: Optional extra request headers.

    Returns:
        The decoded JSON document.

    Raises:
        ProviderError: On transport failure, a non-2xx status or a body
            that is not valid JSON.
    """
    try:
        response = session.get(url, params=params, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise ProviderError(provider, f"request failed: {exc}") from exc

    if not response.ok:
        raise ProviderError(
            provider,
            response.text or f"HTTP {response.status_code}",
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise ProviderError(provider, "response body is not valid JSON") from exc
