"""
dispatcher/payload.py

Builds one FCM message per delivery channel.
Every channel carries the same title/body and data fields; only the topic differs.
Level-dependent decoration (priority, color, sound channel, category) comes from
dispatcher/constants.py.
"""

from datetime import datetime, timezone
from typing import Optional

from firebase_admin import messaging

from config import settings
from dispatcher.channels import resolve_channels
from dispatcher.constants import (
    ANDROID_CHANNEL_ALERTS,
    ANDROID_CHANNEL_EMERGENCY,
    ANDROID_ICON,
    APNS_BADGE,
    APNS_CATEGORY_EMERGENCY,
    APNS_CATEGORY_REGULAR,
    COLOR_BLUE,
    DEFAULT_SOUND,
    LEVEL_COLOR,
    LEVEL_PRIORITY,
    LEVEL_SEVERE,
    PRIORITY_NORMAL,
)
from gateway.schemas import AlertRecord


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def build_data(alert_id: str, alert: AlertRecord, generated_at: str) -> dict[str, str]:
    """Structured fields delivered alongside the visible notification."""
    return {
        "alertId": alert_id,
        "level": alert.level,
        "title": alert.title,
        "message": alert.message,
        "timestamp": generated_at,
        "sentBy": alert.sent_by or settings.default_sender_id,
        "sentByName": alert.sent_by_name or settings.default_sender_name,
    }


def build_message(
    channel: str,
    alert_id: str,
    alert: AlertRecord,
    generated_at: str,
) -> messaging.Message:
    """Build the topic message for a single channel."""
    severe = alert.level == LEVEL_SEVERE

    android = messaging.AndroidConfig(
        priority=LEVEL_PRIORITY.get(alert.level, PRIORITY_NORMAL),
        ttl=settings.android_ttl_seconds,
        notification=messaging.AndroidNotification(
            title=alert.title,
            body=alert.message,
            color=LEVEL_COLOR.get(alert.level, COLOR_BLUE),
            icon=ANDROID_ICON,
            sound=DEFAULT_SOUND,
            channel_id=ANDROID_CHANNEL_EMERGENCY if severe else ANDROID_CHANNEL_ALERTS,
            default_sound=True,
            default_vibrate_timings=True,
        ),
    )

    apns = messaging.APNSConfig(
        payload=messaging.APNSPayload(
            aps=messaging.Aps(
                alert=messaging.ApsAlert(title=alert.title, body=alert.message),
                badge=APNS_BADGE,
                sound=DEFAULT_SOUND,
                category=APNS_CATEGORY_EMERGENCY if severe else APNS_CATEGORY_REGULAR,
            ),
        ),
    )

    webpush = messaging.WebpushConfig(
        notification=messaging.WebpushNotification(
            title=alert.title,
            body=alert.message,
            icon=settings.webpush_icon_url,
            badge=settings.webpush_badge_url,
            tag=f"alert-{alert_id}",
            require_interaction=severe,
        ),
        data={"alertId": alert_id, "level": alert.level},
    )

    return messaging.Message(
        topic=channel,
        notification=messaging.Notification(title=alert.title, body=alert.message),
        data=build_data(alert_id, alert, generated_at),
        android=android,
        apns=apns,
        webpush=webpush,
    )


def build_messages(
    alert_id: str,
    alert: AlertRecord,
    now: Optional[datetime] = None,
) -> list[tuple[str, messaging.Message]]:
    """
    Pair every resolved channel with its message.

    All messages share one generation timestamp so clients see a single alert
    regardless of which topics they are subscribed to.
    """
    generated_at = format_timestamp(now or datetime.now(timezone.utc))
    return [
        (channel, build_message(channel, alert_id, alert, generated_at))
        for channel in resolve_channels(alert.recipient_groups)
    ]
