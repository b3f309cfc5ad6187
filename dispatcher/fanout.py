"""
dispatcher/fanout.py

Alert fan-out: validate a new alert document, send one push per channel,
then write the aggregate delivery counts back onto the document once.

Channel sends are independent. A failed send is counted, never retried, and
never stops the other channels.
"""

import asyncio
from typing import Any, Optional

import structlog

from dispatcher.payload import build_messages
from gateway.schemas import AlertRecord, DispatchResult
from gateway.services.notification import send_to_channel
from gateway.services.persistence import mark_alert_delivered

logger = structlog.get_logger(__name__)

_REQUIRED_FIELDS: tuple[str, ...] = ("title", "message", "level")


def is_dispatchable(data: dict[str, Any]) -> bool:
    """True when every required field is present and non-empty."""
    return all(data.get(field) for field in _REQUIRED_FIELDS)


async def dispatch_alert(alert_id: str, data: dict[str, Any]) -> Optional[DispatchResult]:
    """
    Fan a newly created alert out to its channels and record the outcome.

    Returns None without sending or writing anything when the document is
    missing a required field. Errors while building payloads or writing the
    status back propagate to the caller.
    """
    logger.info("alert_received", alert_id=alert_id, level=data.get("level"))

    if not is_dispatchable(data):
        logger.error(
            "alert_invalid",
            alert_id=alert_id,
            missing=[field for field in _REQUIRED_FIELDS if not data.get(field)],
        )
        return None

    alert = AlertRecord.model_validate(data)
    pairs = build_messages(alert_id, alert)

    logger.info(
        "channels_resolved",
        alert_id=alert_id,
        channels=[channel for channel, _ in pairs],
    )

    # Collect one outcome per channel; nothing short-circuits on failure
    outcomes = await asyncio.gather(
        *(send_to_channel(channel, message) for channel, message in pairs),
        return_exceptions=True,
    )

    failed = sum(1 for outcome in outcomes if isinstance(outcome, BaseException))
    result = DispatchResult(sent=len(outcomes) - failed, failed=failed)

    logger.info(
        "alert_dispatch_complete",
        alert_id=alert_id,
        sent=result.sent,
        failed=result.failed,
    )

    await mark_alert_delivered(alert_id, result)
    return result
