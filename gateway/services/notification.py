"""
gateway/services/notification.py

Push delivery through Firebase Cloud Messaging.
Messages are topic-addressed; device-to-topic membership lives in FCM.
"""

import asyncio

import structlog
from firebase_admin import messaging

from db.firebase import get_app

logger = structlog.get_logger(__name__)


async def send_to_channel(channel: str, message: messaging.Message) -> str:
    """
    Send one topic message and return the FCM message id.

    messaging.send blocks on HTTP, so it runs in a worker thread.
    Errors are logged and re-raised; the caller decides how to count them.
    """
    try:
        message_id = await asyncio.to_thread(messaging.send, message, app=get_app())
    except Exception as exc:
        logger.error(
            "channel_send_failed",
            channel=channel,
            error=str(exc),
        )
        raise

    logger.info(
        "channel_send_succeeded",
        channel=channel,
        message_id=message_id,
    )
    return message_id
