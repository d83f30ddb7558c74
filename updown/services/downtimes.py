"""Downtime service."""
from typing import List, Tuple

import httpx

from ..schemas import Downtime
from ..utils.url_utils import join_path
from .base import BaseService


class DowntimeService(BaseService):
    """Service for a check's downtime history."""
    
    async def list(self, token: str, page: int = 1) -> Tuple[List[Downtime], httpx.Response]:
        """List downtimes of a check, one page at a time (pages start at 1)."""
        path = join_path("checks", token, "downtimes")
        downtimes, response = await self.client.request(
            "GET", path, into=List[Downtime], params={"page": max(1, page)}
        )
        return downtimes or [], response
