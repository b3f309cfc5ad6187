"""
dispatcher/channels.py

Maps an alert's recipient groups to the FCM topics it is sent to.
Topic membership is managed by the mobile clients, not by this service.
"""

from typing import Iterable, Optional

from dispatcher.constants import (
    ALL_CHANNEL,
    CHANNEL_SUFFIX,
    DEFAULT_RECIPIENT_GROUPS,
    GROUP_CHANNELS,
)


def channel_for_group(group: str) -> str:
    """Resolve one recipient group label; unknown labels pass through verbatim."""
    return GROUP_CHANNELS.get(group.lower(), f"{group}{CHANNEL_SUFFIX}")


def resolve_channels(recipient_groups: Optional[Iterable[str]]) -> list[str]:
    """
    Resolve recipient groups to the ordered list of delivery channels.

    Absent or empty groups fall back to DEFAULT_RECIPIENT_GROUPS.
    ALL_CHANNEL is always appended, whatever the targeting.
    """
    groups = list(recipient_groups or [])
    if not groups:
        groups = list(DEFAULT_RECIPIENT_GROUPS)

    channels = [channel_for_group(group) for group in groups]
    channels.append(ALL_CHANNEL)
    return channels
