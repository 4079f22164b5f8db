from fastapi import APIRouter, Request, Response

from devcore.cookies import clear_session_cookie
from devcore.response import single_response

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/logout", summary="Clear the session cookie")
async def logout(request: Request, response: Response):
    clear_session_cookie(response, request)
    return single_response({"success": True})
