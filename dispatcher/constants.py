"""
dispatcher/constants.py

Alert levels, recipient channel table and per-level push decoration.
All decoration values used by the payload builder must be referenced from this module.
"""

# ── Alert levels ─────────────────────────────────────────────
LEVEL_INFO: str = "info"
LEVEL_WARNING: str = "warning"
LEVEL_SEVERE: str = "severe"
ALERT_LEVELS: tuple[str, ...] = (LEVEL_INFO, LEVEL_WARNING, LEVEL_SEVERE)

# ── Alert status ─────────────────────────────────────────────
STATUS_PENDING: str = "pending"
STATUS_DELIVERED: str = "delivered"

# ── Recipient groups → FCM topics ────────────────────────────
DEFAULT_RECIPIENT_GROUPS: tuple[str, ...] = ("volunteers", "public")
CHANNEL_SUFFIX: str = "-channel"
ALL_CHANNEL: str = "all-channel"
GROUP_CHANNELS: dict[str, str] = {
    "admin": "admin-channel",
    "admins": "admin-channel",
    "volunteer": "volunteer-channel",
    "volunteers": "volunteer-channel",
    "public": "public-channel",
}

# ── Android decoration ───────────────────────────────────────
PRIORITY_HIGH: str = "high"
PRIORITY_NORMAL: str = "normal"
LEVEL_PRIORITY: dict[str, str] = {
    LEVEL_SEVERE: PRIORITY_HIGH,
    LEVEL_WARNING: PRIORITY_HIGH,
    LEVEL_INFO: PRIORITY_NORMAL,
}

COLOR_RED: str = "#D32F2F"
COLOR_ORANGE: str = "#F57C00"
COLOR_BLUE: str = "#1976D2"
LEVEL_COLOR: dict[str, str] = {
    LEVEL_SEVERE: COLOR_RED,
    LEVEL_WARNING: COLOR_ORANGE,
    LEVEL_INFO: COLOR_BLUE,
}

ANDROID_ICON: str = "ic_launcher_foreground"
ANDROID_CHANNEL_EMERGENCY: str = "emergency"
ANDROID_CHANNEL_ALERTS: str = "alerts"
DEFAULT_SOUND: str = "default"

# ── APNs decoration ──────────────────────────────────────────
APNS_BADGE: int = 1
APNS_CATEGORY_EMERGENCY: str = "EMERGENCY_ALERT"
APNS_CATEGORY_REGULAR: str = "REGULAR_ALERT"
