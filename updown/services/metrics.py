"""Metric service."""
from typing import Dict, Tuple

import httpx

from ..schemas import Metric
from ..utils.url_utils import join_path
from .base import BaseService


class MetricService(BaseService):
    """Service for a check's apdex and request statistics."""
    
    async def list(
        self, token: str, group: str = "", from_: str = "", to: str = ""
    ) -> Tuple[Dict[str, Metric], httpx.Response]:
        """Get metrics of a check.
        
        Args:
            token: Check token.
            group: Grouping dimension ("host" or "time").
            from_: Start of the range, any format the API accepts.
            to: End of the range.
        
        Blank from/to are still sent, as empty values.
        """
        params = {"group": group, "from": from_, "to": to}
        path = join_path("checks", token, "metrics")
        metrics, response = await self.client.request("GET", path, into=Dict[str, Metric], params=params)
        return metrics or {}, response
