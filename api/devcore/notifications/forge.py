"""Forge WebDevService request formatting."""

import json

from devcore.notifications import ForgeRequest, NotificationPayload

SEND_NOTIFICATION_PATH = "webdevtoken.v1.WebDevService/SendNotification"


def build_endpoint_url(base_url: str) -> str:
    """Join the configured base URL and the fixed RPC path without doubling slashes."""
    return f"{base_url.rstrip('/')}/{SEND_NOTIFICATION_PATH}"


def format_forge(payload: NotificationPayload, base_url: str, api_key: str) -> ForgeRequest:
    """
    Format an owner notification as a Connect-style JSON RPC call.

    The payload is expected to be validated already.
    """
    return ForgeRequest(
        method="POST",
        url=build_endpoint_url(base_url),
        headers={
            "Accept": "application/json",
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Connect-Protocol-Version": "1",
        },
        body=json.dumps({"title": payload.title, "content": payload.content}),
    )
