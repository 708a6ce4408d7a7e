"""Shared helper for JSON over HTTP calls made with httpx."""

from typing import Any

import httpx

DEFAULT_HTTP_TIMEOUT = 10.0


async def request_json(
    method: str,
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    **kwargs: Any,
) -> Any:
    """Send a request and return the decoded JSON body.

    Args:
        method: HTTP method.
        url: Absolute URL.
        client: Optional shared client; a short-lived one is opened when
            omitted.
        timeout: Timeout used for the short-lived client.
        **kwargs: Passed through to ``httpx.AsyncClient.request``.

    Raises:
        httpx.HTTPError: On transport failures or non-2xx responses.
    """
    if client is not None:
        response = await client.request(method, url, **kwargs)
    else:
        async with httpx.AsyncClient(timeout=timeout) as owned:
            response = await owned.request(method, url, **kwargs)
    response.raise_for_status()
    return response.json()


__all__ = ["request_json", "DEFAULT_HTTP_TIMEOUT"]
