"""Check schemas for the checks API."""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .common import ResponseModel

PULSE = "pulse"
TCP = "tcp"
TCPS = "tcps"
TCP_KINDS = (TCP, TCPS)

# Field defaults applied by the kind-specific constructors
PULSE_DEFAULTS = {"apdex_t": 0.5, "enabled": True, "published": False}
TCP_DEFAULTS = {"period": 60, "apdex_t": 0.5, "enabled": True, "published": False}


def tcp_kind_for_url(url: str) -> str:
    """Return "tcps" for tcps:// URLs and "tcp" for anything else."""
    if url.startswith("tcps://"):
        return TCPS
    return TCP


class SSL(ResponseModel):
    """Certificate state of an HTTPS check."""
    tested_at: Optional[str] = None
    valid: Optional[bool] = None
    error: Optional[str] = None


class Check(ResponseModel):
    """A check as returned by the API."""
    token: str = ""
    url: Optional[str] = None
    alias: Optional[str] = None
    type: Optional[str] = None  # http, https, icmp, tcp, tcps, pulse
    last_status: Optional[int] = None
    uptime: Optional[float] = None
    down: Optional[bool] = None
    down_since: Optional[str] = None
    error: Optional[str] = None
    period: Optional[int] = None
    apdex_t: Optional[float] = None
    enabled: Optional[bool] = None
    published: Optional[bool] = None
    last_check_at: Optional[str] = None
    next_check_at: Optional[str] = None
    favicon_url: Optional[str] = None
    ssl: Optional[SSL] = None
    string_match: Optional[str] = None
    mute_until: Optional[str] = None
    disabled_locations: List[str] = Field(default_factory=list)
    custom_headers: Dict[str, str] = Field(default_factory=dict)
    http_verb: Optional[str] = None
    http_body: Optional[str] = None
    recipients: List[str] = Field(default_factory=list)  # recipient IDs
    pulse_url: Optional[str] = None


class CheckItem(BaseModel):
    """Payload for creating or updating a check.
    
    Unset fields are left out of the request body, so an update only touches
    what was given.
    """
    url: Optional[str] = None
    alias: Optional[str] = None
    type: Optional[str] = None
    period: Optional[int] = None
    apdex_t: Optional[float] = None
    enabled: Optional[bool] = None
    published: Optional[bool] = None
    mute_until: Optional[str] = None
    string_match: Optional[str] = None
    disabled_locations: Optional[List[str]] = None
    custom_headers: Optional[Dict[str, str]] = None
    http_verb: Optional[str] = None
    http_body: Optional[str] = None
    recipients: Optional[List[str]] = None  # recipient IDs
    
    @classmethod
    def http(cls, url: str, **fields) -> "CheckItem":
        """Payload for an HTTP(S) check; the server infers the type."""
        return cls(url=url, **fields)
    
    @classmethod
    def pulse(cls, period: int, **fields) -> "CheckItem":
        """Payload for a pulse (heartbeat) check.
        
        The type is always "pulse" and any url is dropped, since pulse checks
        are pinged by the monitored job instead of probed.
        """
        fields.pop("url", None)
        fields.pop("type", None)
        return cls(type=PULSE, period=period, **{**PULSE_DEFAULTS, **fields})
    
    @classmethod
    def tcp(cls, url: str, **fields) -> "CheckItem":
        """Payload for a TCP check, typed from the URL scheme."""
        fields.pop("type", None)
        return cls(url=url, type=tcp_kind_for_url(url), **{**TCP_DEFAULTS, **fields})
