import logging

from fastapi import APIRouter, Depends

from devcore.auth import require_admin_key
from devcore.config import Settings, get_settings
from devcore.notifications import NotificationPayload
from devcore.notifications.notifier import notify_owner
from devcore.response import single_response
from devcore.schemas.notification import NotifyOwnerRequest, NotifyOwnerResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/system", tags=["system"])


@router.post("/notify-owner", summary="Send a notification to the project owner")
async def notify_owner_route(
    body: NotifyOwnerRequest,
    settings: Settings = Depends(get_settings),
    _key=Depends(require_admin_key),
):
    delivered = await notify_owner(
        NotificationPayload(title=body.title, content=body.content),
        settings=settings,
    )
    if not delivered:
        logger.info("Owner notification was not delivered")
    return single_response(NotifyOwnerResult(success=delivered))
