"""Node service."""
from typing import Dict, List, Tuple

import httpx

from ..schemas import Node
from .base import BaseService


class NodeService(BaseService):
    """Service for the monitoring locations."""
    
    async def list(self) -> Tuple[Dict[str, Node], httpx.Response]:
        """List monitoring nodes keyed by location code."""
        nodes, response = await self.client.request("GET", "nodes", into=Dict[str, Node])
        return nodes or {}, response
    
    async def list_ipv4(self) -> Tuple[List[str], httpx.Response]:
        """List the IPv4 addresses used by all nodes."""
        return await self._list_ips("nodes/ipv4")
    
    async def list_ipv6(self) -> Tuple[List[str], httpx.Response]:
        """List the IPv6 addresses used by all nodes."""
        return await self._list_ips("nodes/ipv6")
    
    async def _list_ips(self, path: str) -> Tuple[List[str], httpx.Response]:
        ips, response = await self.client.request("GET", path, into=List[str])
        return ips or [], response
