"""Status page schemas."""
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import ResponseModel


class StatusPage(ResponseModel):
    """A status page as returned by the API."""
    token: str = ""
    url: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[str] = None  # public, protected, private
    access_key: Optional[str] = None
    checks: List[str] = Field(default_factory=list)


class StatusPageItem(BaseModel):
    """Payload for creating or updating a status page.
    
    checks is always sent, so an update built without it replaces the
    page's checks with an empty list. Pass the current tokens to keep them.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[str] = None
    checks: List[str] = Field(default_factory=list)  # check tokens, always sent
