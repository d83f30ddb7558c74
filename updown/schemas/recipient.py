"""Recipient (alert channel) schemas."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .common import ResponseModel


class RecipientType(str, Enum):
    """Kinds of alert channel."""
    EMAIL = "email"
    SMS = "sms"
    WEBHOOK = "webhook"
    SLACK_COMPATIBLE = "slack_compatible"
    MSTEAMS = "msteams"


class Recipient(ResponseModel):
    """An alert recipient as returned by the API."""
    id: str = ""
    type: Optional[str] = None
    name: Optional[str] = None
    value: Optional[str] = None


class RecipientItem(BaseModel):
    """Payload for creating a recipient."""
    type: RecipientType
    value: str  # email address, phone number or URL
    name: Optional[str] = None  # label, webhooks only
    selected: Optional[bool] = None  # True = enable on all existing checks
