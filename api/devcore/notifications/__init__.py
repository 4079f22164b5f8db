"""Base types for owner notifications."""

from dataclasses import dataclass


class NotificationConfigError(RuntimeError):
    """Raised before any network call when input or configuration is unusable."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass
class NotificationPayload:
    title: str
    content: str


@dataclass
class ForgeRequest:
    """Represents the HTTP request sent to the Forge notification service."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # JSON string
