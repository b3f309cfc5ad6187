"""
tests/fixtures.py

Shared test data and helper functions for constructing test payloads.
All tests must use these fixtures instead of hardcoding test values.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from gateway.schemas import AlertRecord

TEST_ALERT_ID: str = "alert_001"
TEST_USER_ID: str = "user_001"
TEST_FCM_TOKEN: str = "fcm-token-abc123"
TEST_NOW: datetime = datetime(2024, 6, 15, 13, 30, 0, 123000, tzinfo=timezone.utc)
TEST_NOW_ISO: str = "2024-06-15T13:30:00.123Z"


def build_alert_data(
    title: Optional[str] = "Flood",
    message: Optional[str] = "Evacuate now",
    level: Optional[str] = "severe",
    recipient_groups: Optional[list[str]] = None,
    sent_by: Optional[str] = None,
    sent_by_name: Optional[str] = None,
) -> dict[str, Any]:
    """Build an emergency_alerts document as Firestore would hand it over."""
    data: dict[str, Any] = {
        "createdAt": TEST_NOW,
        "status": "pending",
    }
    if title is not None:
        data["title"] = title
    if message is not None:
        data["message"] = message
    if level is not None:
        data["level"] = level
    if recipient_groups is not None:
        data["recipientGroups"] = recipient_groups
    if sent_by is not None:
        data["sentBy"] = sent_by
    if sent_by_name is not None:
        data["sentByName"] = sent_by_name
    return data


def build_alert_record(**overrides: Any) -> AlertRecord:
    """Build a validated AlertRecord with sensible defaults for testing."""
    return AlertRecord.model_validate(build_alert_data(**overrides))
