"""Owner notifications via the Forge notification service."""

import logging
from typing import Optional

import httpx

from devcore.config import Settings, get_settings
from devcore.notifications import ForgeRequest, NotificationConfigError, NotificationPayload
from devcore.notifications.forge import format_forge
from devcore.security import forge_http_client

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 1200
CONTENT_MAX_LENGTH = 20000


def validate_payload(payload: NotificationPayload) -> NotificationPayload:
    """Return a trimmed copy of the payload or raise NotificationConfigError."""
    title = (payload.title or "").strip()
    content = (payload.content or "").strip()

    if not title:
        raise NotificationConfigError("Notification title is required.", status_code=400)
    if not content:
        raise NotificationConfigError("Notification content is required.", status_code=400)
    if len(title) > TITLE_MAX_LENGTH:
        raise NotificationConfigError(
            f"Notification title must be at most {TITLE_MAX_LENGTH} characters.",
            status_code=400,
        )
    if len(content) > CONTENT_MAX_LENGTH:
        raise NotificationConfigError(
            f"Notification content must be at most {CONTENT_MAX_LENGTH} characters.",
            status_code=400,
        )

    return NotificationPayload(title=title, content=content)


def validate_settings(settings: Settings) -> None:
    if not settings.forge_api_url:
        raise NotificationConfigError("Notification service URL is not configured.")
    if not settings.forge_api_key:
        raise NotificationConfigError("Notification service API key is not configured.")


async def notify_owner(
    payload: NotificationPayload,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> bool:
    """
    Send a notification to the project owner.

    Raises NotificationConfigError for bad input or missing configuration.
    Returns False when the service is unreachable or answers with an error
    status, True otherwise.

    Args:
        payload: Title and content of the notification
        settings: Settings to read; defaults to the current process settings
        client: Optional client to send with; left open after the call
    """
    clean = validate_payload(payload)
    config = settings if settings is not None else get_settings()
    validate_settings(config)

    request = format_forge(clean, config.forge_api_url, config.forge_api_key)

    if client is not None:
        return await _send(client, request)
    async with forge_http_client(timeout=config.notification_timeout_seconds) as owned_client:
        return await _send(owned_client, request)


async def _send(client: httpx.AsyncClient, request: ForgeRequest) -> bool:
    try:
        response = await client.request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            content=request.body,
        )
    except httpx.HTTPError as e:
        logger.warning("Error calling notification service: %s", e, exc_info=True)
        return False

    if not response.is_success:
        logger.warning(
            "Failed to notify owner (%s %s): %s",
            response.status_code,
            response.reason_phrase,
            response.text[:200],
        )
        return False

    logger.debug("Owner notification delivered: %s", request.url)
    return True
