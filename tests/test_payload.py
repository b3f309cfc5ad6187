"""
tests/test_payload.py

Unit tests for dispatcher/payload.py message construction.
"""

from config import settings
from dispatcher.payload import build_message, build_messages, format_timestamp
from tests.fixtures import (
    TEST_ALERT_ID,
    TEST_NOW,
    TEST_NOW_ISO,
    build_alert_record,
)


def test_format_timestamp_uses_millisecond_utc() -> None:
    assert format_timestamp(TEST_NOW) == TEST_NOW_ISO


def test_severe_alert_gets_emergency_decoration() -> None:
    """Severe alerts use the emergency channel, category and require interaction."""
    alert = build_alert_record(level="severe")

    message = build_message("public-channel", TEST_ALERT_ID, alert, TEST_NOW_ISO)

    assert message.topic == "public-channel"
    assert message.android.priority == "high"
    assert message.android.notification.color == "#D32F2F"
    assert message.android.notification.channel_id == "emergency"
    assert message.apns.payload.aps.category == "EMERGENCY_ALERT"
    assert message.webpush.notification.require_interaction is True
    assert message.webpush.notification.tag == f"alert-{TEST_ALERT_ID}"


def test_warning_alert_is_high_priority_regular_category() -> None:
    alert = build_alert_record(level="warning")

    message = build_message("all-channel", TEST_ALERT_ID, alert, TEST_NOW_ISO)

    assert message.android.priority == "high"
    assert message.android.notification.color == "#F57C00"
    assert message.android.notification.channel_id == "alerts"
    assert message.apns.payload.aps.category == "REGULAR_ALERT"
    assert message.webpush.notification.require_interaction is False


def test_unknown_level_falls_back_to_info_decoration() -> None:
    alert = build_alert_record(level="notice")

    message = build_message("all-channel", TEST_ALERT_ID, alert, TEST_NOW_ISO)

    assert message.android.priority == "normal"
    assert message.android.notification.color == "#1976D2"


def test_data_fields_default_attribution() -> None:
    """Missing sentBy/sentByName are filled from settings."""
    alert = build_alert_record(level="info")

    message = build_message("all-channel", TEST_ALERT_ID, alert, TEST_NOW_ISO)

    assert message.data == {
        "alertId": TEST_ALERT_ID,
        "level": "info",
        "title": "Flood",
        "message": "Evacuate now",
        "timestamp": TEST_NOW_ISO,
        "sentBy": settings.default_sender_id,
        "sentByName": settings.default_sender_name,
    }
    assert message.webpush.data == {"alertId": TEST_ALERT_ID, "level": "info"}


def test_data_fields_keep_explicit_attribution() -> None:
    alert = build_alert_record(sent_by="uid_42", sent_by_name="Control Room")

    message = build_message("all-channel", TEST_ALERT_ID, alert, TEST_NOW_ISO)

    assert message.data["sentBy"] == "uid_42"
    assert message.data["sentByName"] == "Control Room"


def test_build_messages_pairs_each_channel_with_its_topic() -> None:
    alert = build_alert_record(recipient_groups=["admins", "Medics"])

    pairs = build_messages(TEST_ALERT_ID, alert, now=TEST_NOW)

    assert [channel for channel, _ in pairs] == [
        "admin-channel",
        "Medics-channel",
        "all-channel",
    ]
    for channel, message in pairs:
        assert message.topic == channel
        assert message.data["timestamp"] == TEST_NOW_ISO
        assert message.notification.title == "Flood"
        assert message.notification.body == "Evacuate now"
