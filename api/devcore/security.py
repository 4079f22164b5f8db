"""Outbound HTTP client factory."""

import httpx

from devcore.config import get_settings


def forge_http_client(
    timeout: float | None = None,
    follow_redirects: bool = False,
    **kwargs,
) -> httpx.AsyncClient:
    if timeout is None:
        timeout = get_settings().notification_timeout_seconds
    return httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=follow_redirects,
        **kwargs,
    )
