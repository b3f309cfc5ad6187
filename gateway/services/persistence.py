"""
gateway/services/persistence.py

Firestore reads and writes for alerts, user tokens and notification interactions.
The Firestore client is synchronous; every call runs in a worker thread so the
client is never bound to a particular event loop.
"""

import asyncio
from typing import Optional

import structlog
from firebase_admin import firestore

from config import settings
from db.firebase import get_firestore
from dispatcher.constants import (
    DEFAULT_RECIPIENT_GROUPS,
    STATUS_DELIVERED,
    STATUS_PENDING,
)
from gateway.schemas import DispatchResult

logger = structlog.get_logger(__name__)


def _mark_alert_delivered(alert_id: str, result: DispatchResult) -> None:
    get_firestore().collection(settings.alerts_collection).document(alert_id).update(
        {
            "notificationsSent": result.sent,
            "notificationsFailed": result.failed,
            "sentAt": firestore.SERVER_TIMESTAMP,
            "status": STATUS_DELIVERED,
        }
    )


async def mark_alert_delivered(alert_id: str, result: DispatchResult) -> None:
    """Write delivery counts and the delivered status back onto the alert."""
    try:
        await asyncio.to_thread(_mark_alert_delivered, alert_id, result)
        logger.info(
            "alert_status_written",
            alert_id=alert_id,
            sent=result.sent,
            failed=result.failed,
        )
    except Exception as exc:
        logger.error(
            "alert_status_write_failed",
            alert_id=alert_id,
            error=str(exc),
        )
        raise


def _update_user_token(user_id: str, token: str) -> None:
    get_firestore().collection(settings.users_collection).document(user_id).update(
        {
            "fcmToken": token,
            "fcmTokenUpdatedAt": firestore.SERVER_TIMESTAMP,
        }
    )


async def update_user_token(user_id: str, token: str) -> None:
    """Store a refreshed FCM registration token on an existing user document."""
    try:
        await asyncio.to_thread(_update_user_token, user_id, token)
        logger.info("fcm_token_updated", user_id=user_id)
    except Exception as exc:
        logger.error(
            "fcm_token_update_failed",
            user_id=user_id,
            error=str(exc),
        )
        raise


def _log_interaction(user_id: str, alert_id: str, action: str) -> None:
    (
        get_firestore()
        .collection(settings.interactions_parent_collection)
        .document(alert_id)
        .collection(settings.interactions_subcollection)
        .add(
            {
                "userId": user_id,
                "alertId": alert_id,
                "action": action,
                "timestamp": firestore.SERVER_TIMESTAMP,
            }
        )
    )


async def log_interaction(user_id: str, alert_id: str, action: str) -> None:
    """Append one interaction record under the alert."""
    try:
        await asyncio.to_thread(_log_interaction, user_id, alert_id, action)
        logger.info(
            "interaction_logged",
            user_id=user_id,
            alert_id=alert_id,
            action=action,
        )
    except Exception as exc:
        logger.error(
            "interaction_log_failed",
            user_id=user_id,
            alert_id=alert_id,
            error=str(exc),
        )
        raise


def _create_alert(document: dict) -> str:
    _, ref = get_firestore().collection(settings.alerts_collection).add(document)
    return ref.id


async def create_alert(
    title: str,
    message: str,
    level: str,
    recipient_groups: Optional[list[str]] = None,
) -> str:
    """
    Create a pending alert document and return its id.

    The create event is what triggers the fan-out dispatcher; nothing is sent here.
    """
    document = {
        "title": title,
        "message": message,
        "level": level,
        "recipientGroups": (
            recipient_groups
            if recipient_groups is not None
            else list(DEFAULT_RECIPIENT_GROUPS)
        ),
        "createdAt": firestore.SERVER_TIMESTAMP,
        "sentBy": settings.default_sender_id,
        "sentByName": settings.broadcast_sender_name,
        "status": STATUS_PENDING,
    }
    try:
        alert_id = await asyncio.to_thread(_create_alert, document)
    except Exception as exc:
        logger.error(
            "alert_create_failed",
            level=level,
            error=str(exc),
        )
        raise

    logger.info("alert_created", alert_id=alert_id, level=level)
    return alert_id
