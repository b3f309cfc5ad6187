"""
gateway/routers/interactions.py

POST /handleNotificationClick endpoint.
Records that a user opened or acted on an alert notification.
"""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from gateway.schemas import InteractionRequest
from gateway.services.persistence import log_interaction

router = APIRouter()

DEFAULT_ACTION: str = "click"


@router.post("/handleNotificationClick", response_model=None)
async def handle_notification_click(
    payload: Optional[InteractionRequest] = None,
) -> dict | JSONResponse:
    payload = payload or InteractionRequest()

    if not payload.user_id or not payload.alert_id:
        return JSONResponse(
            status_code=400,
            content={"error": "Missing userId or alertId"},
        )

    try:
        await log_interaction(
            payload.user_id,
            payload.alert_id,
            payload.action or DEFAULT_ACTION,
        )
    except Exception:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to log interaction"},
        )

    return {"success": True, "message": "Interaction logged"}
