"""Status page service."""
from typing import List, Tuple

import httpx

from ..schemas import StatusPage, StatusPageItem
from ..utils.url_utils import join_path
from .base import BaseService


class StatusPageService(BaseService):
    """Service for status pages."""
    
    async def list(self) -> Tuple[List[StatusPage], httpx.Response]:
        """List all status pages."""
        pages, response = await self.client.request("GET", "status_pages", into=List[StatusPage])
        return pages or [], response
    
    async def add(self, item: StatusPageItem) -> Tuple[StatusPage, httpx.Response]:
        """Create a status page."""
        return await self.client.request("POST", "status_pages", item, into=StatusPage)
    
    async def update(self, token: str, item: StatusPageItem) -> Tuple[StatusPage, httpx.Response]:
        """Update a status page by its token."""
        return await self.client.request("PUT", join_path("status_pages", token), item, into=StatusPage)
    
    async def remove(self, token: str) -> Tuple[bool, httpx.Response]:
        """Delete a status page by its token."""
        return await self._delete(join_path("status_pages", token), f"status page {token}")
