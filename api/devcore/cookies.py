"""Session cookie policy.

The `secure` flag follows the client-facing protocol. Behind a reverse proxy
the request itself arrives over plain http, so the proxy's
``X-Forwarded-Proto`` header is consulted as well.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

from fastapi import Request, Response

from devcore.config import get_settings

COOKIE_NAME = "app_session_id"
ONE_YEAR_SECONDS = 60 * 60 * 24 * 365


@dataclass(frozen=True)
class CookieOptions:
    """Keyword arguments for ``Response.set_cookie``."""
    secure: bool
    httponly: bool = True
    path: str = "/"
    samesite: str = "none"

    def as_kwargs(self) -> dict[str, Any]:
        return asdict(self)


def _request_protocol(request: Any) -> str:
    protocol = getattr(request, "protocol", None)
    if protocol is None:
        url = getattr(request, "url", None)
        protocol = getattr(url, "scheme", None)
    return (protocol or "").strip().lower()


def _forwarded_protocols(request: Any) -> list[str]:
    headers = getattr(request, "headers", None)
    if not headers:
        return []

    raw = headers.get("x-forwarded-proto")
    if not raw:
        return []

    # Some servers hand repeated headers over as a list
    values = raw if isinstance(raw, (list, tuple)) else [raw]
    protocols = []
    for value in values:
        protocols.extend(p.strip().lower() for p in str(value).split(",") if p.strip())
    return protocols


def is_secure_request(request: Any) -> bool:
    """
    Decide whether the client reached us over https.

    True when the request's own protocol is https, or when any entry of a
    comma-separated X-Forwarded-Proto header is https.
    """
    if _request_protocol(request) == "https":
        return True
    return "https" in _forwarded_protocols(request)


def get_session_cookie_options(request: Any) -> CookieOptions:
    return CookieOptions(secure=is_secure_request(request))


def _cookie_name() -> str:
    return get_settings().session_cookie_name or COOKIE_NAME


def set_session_cookie(
    response: Response,
    request: Request,
    token: str,
    max_age: Optional[int] = ONE_YEAR_SECONDS,
) -> None:
    options = get_session_cookie_options(request)
    response.set_cookie(
        key=_cookie_name(),
        value=token,
        max_age=max_age,
        **options.as_kwargs(),
    )


def clear_session_cookie(response: Response, request: Request) -> None:
    # Browsers only drop the cookie when path/secure/samesite match the original
    options = get_session_cookie_options(request)
    response.delete_cookie(_cookie_name(), **options.as_kwargs())
