"""
gateway/routers/alerts.py

POST /broadcastAlert endpoint.
Manually creates a pending alert. Sending happens asynchronously: the new
document fires the fan-out trigger in dispatcher/main.py.
"""

from typing import Optional

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from dispatcher.constants import ALERT_LEVELS
from gateway.schemas import BroadcastRequest
from gateway.services.persistence import create_alert

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/broadcastAlert", response_model=None)
async def broadcast_alert(
    payload: Optional[BroadcastRequest] = None,
) -> dict | JSONResponse:
    """
    Create an alert document for broadcast.

    Flow:
    1. Reject missing title, message or level
    2. Reject a level outside ALERT_LEVELS
    3. Write the alert in pending status and return its id
    """
    payload = payload or BroadcastRequest()

    if not payload.title or not payload.message or not payload.level:
        return JSONResponse(
            status_code=400,
            content={"error": "Missing required fields: title, message, level"},
        )

    if payload.level not in ALERT_LEVELS:
        logger.warning("broadcast_level_rejected", level=payload.level)
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid level. Must be: info, warning, or severe"},
        )

    try:
        alert_id = await create_alert(
            payload.title,
            payload.message,
            payload.level,
            payload.recipient_groups,
        )
    except Exception as exc:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to create alert", "details": str(exc)},
        )

    logger.info("broadcast_queued", alert_id=alert_id)
    return {
        "success": True,
        "alertId": alert_id,
        "message": "Alert created and notifications are being sent",
    }
