"""Monitoring node schemas."""
from typing import Dict, List, Optional

from .common import ResponseModel


class Node(ResponseModel):
    """A monitoring location."""
    ip: Optional[str] = None
    ip6: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None


# Keyed by location code (lan, fra, ...)
Nodes = Dict[str, Node]

IPs = List[str]
