"""
StaffDesk Backend — Logout Route
==================================

What:  GET /auth/logout clears the auth cookie.
Why:   The admin frontend calls it when the user signs out.

There is no session store: the handler does not check whether the caller
was logged in and always answers with success.
"""

from fastapi import APIRouter, Request, Response

from app.schemas.common import StatusResponse

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get("/logout", response_model=StatusResponse, summary="Clear the auth cookie")
async def logout(request: Request, response: Response) -> StatusResponse:
    response.delete_cookie(request.app.state.settings.auth_cookie_name)
    return StatusResponse(message="Logged out successfully")
