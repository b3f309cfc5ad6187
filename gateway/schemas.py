"""
gateway/schemas.py

Pydantic data models shared by the gateway and the dispatcher.
- AlertRecord: an emergency_alerts document as read by the dispatcher
- DispatchResult: delivery counts written back after a fan-out
- TokenUpdateRequest / InteractionRequest / BroadcastRequest: HTTP request bodies

Request body fields are all optional; handlers decide what counts as missing.
Wire names are camelCase to match the mobile clients.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AlertRecord(BaseModel):
    """Fields of an alert document needed to build push payloads."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    message: str
    level: str  # "info" | "warning" | "severe"
    recipient_groups: Optional[list[str]] = Field(default=None, alias="recipientGroups")
    sent_by: Optional[str] = Field(default=None, alias="sentBy")
    sent_by_name: Optional[str] = Field(default=None, alias="sentByName")


class DispatchResult(BaseModel):
    """Aggregate outcome of one alert fan-out."""

    sent: int
    failed: int


class TokenUpdateRequest(BaseModel):
    """Body of POST /updateUserFCMToken."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    token: Optional[str] = None


class InteractionRequest(BaseModel):
    """Body of POST /handleNotificationClick."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    alert_id: Optional[str] = Field(default=None, alias="alertId")
    action: Optional[str] = None


class BroadcastRequest(BaseModel):
    """Body of POST /broadcastAlert."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    message: Optional[str] = None
    level: Optional[str] = None
    recipient_groups: Optional[list[str]] = Field(default=None, alias="recipientGroups")
