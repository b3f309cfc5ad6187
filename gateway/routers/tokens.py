"""
gateway/routers/tokens.py

POST /updateUserFCMToken endpoint.
Called by the mobile app whenever its FCM registration token is refreshed.
"""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from gateway.schemas import TokenUpdateRequest
from gateway.services.persistence import update_user_token

router = APIRouter()


@router.post("/updateUserFCMToken", response_model=None)
async def update_fcm_token(
    payload: Optional[TokenUpdateRequest] = None,
) -> dict | JSONResponse:
    """Persist a user's FCM token together with an update timestamp."""
    payload = payload or TokenUpdateRequest()

    if not payload.user_id or not payload.token:
        return JSONResponse(
            status_code=400,
            content={"error": "Missing userId or token"},
        )

    try:
        await update_user_token(payload.user_id, payload.token)
    except Exception as exc:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to update FCM token", "details": str(exc)},
        )

    return {"success": True, "message": "FCM token updated successfully"}
