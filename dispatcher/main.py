"""
dispatcher/main.py

Cloud Functions entry point for the alert fan-out.
Fires once per document created in the alerts collection; updates and deletes
never reach it.
"""

import asyncio
from typing import Optional

import structlog
from firebase_functions import firestore_fn

from config import settings
from dispatcher.fanout import dispatch_alert

logger = structlog.get_logger(__name__)


async def _run_dispatch(alert_id: str, data: dict) -> None:
    """Async entrypoint that runs the fan-out and surfaces fatal errors."""
    try:
        await dispatch_alert(alert_id, data)
    except Exception as exc:
        logger.error(
            "alert_dispatch_failed",
            alert_id=alert_id,
            error=str(exc),
        )
        raise


@firestore_fn.on_document_created(document=f"{settings.alerts_collection}/{{alertId}}")
def send_alert_notifications(
    event: firestore_fn.Event[Optional[firestore_fn.DocumentSnapshot]],
) -> None:
    """
    Firestore onCreate trigger for emergency alerts.

    Uses asyncio.run() to bridge the synchronous function runtime with the
    async dispatcher. Exceptions propagate so the platform marks the
    invocation as failed.
    """
    snapshot = event.data
    if snapshot is None:
        logger.warning("alert_snapshot_missing", params=dict(event.params))
        return

    alert_id = event.params.get("alertId", snapshot.id)
    asyncio.run(_run_dispatch(alert_id, snapshot.to_dict() or {}))
