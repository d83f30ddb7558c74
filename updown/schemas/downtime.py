"""Downtime schemas."""
from typing import Optional

from .common import ResponseModel


class Downtime(ResponseModel):
    """A past outage of a check."""
    error: Optional[str] = None
    started_at: Optional[str] = None
    ended_at: Optional[str] = None
    duration: Optional[int] = None  # seconds
