"""Recipient service."""
from typing import List, Tuple

import httpx

from ..schemas import Recipient, RecipientItem
from ..utils.url_utils import join_path
from .base import BaseService


class RecipientService(BaseService):
    """Service for alert recipients."""
    
    async def list(self) -> Tuple[List[Recipient], httpx.Response]:
        """List all recipients."""
        recipients, response = await self.client.request("GET", "recipients", into=List[Recipient])
        return recipients or [], response
    
    async def add(self, item: RecipientItem) -> Tuple[Recipient, httpx.Response]:
        """Create a recipient."""
        return await self.client.request("POST", "recipients", item, into=Recipient)
    
    async def remove(self, recipient_id: str) -> Tuple[bool, httpx.Response]:
        """Delete a recipient by its ID."""
        return await self._delete(join_path("recipients", recipient_id), f"recipient {recipient_id}")
