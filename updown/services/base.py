"""Shared base for resource services."""
import logging
from typing import TYPE_CHECKING, Tuple

import httpx

from ..errors import NotDeletedError
from ..schemas import DeleteResult

if TYPE_CHECKING:
    from ..client import Client

logger = logging.getLogger(__name__)


class BaseService:
    """A resource service bound to a Client."""
    
    def __init__(self, client: "Client"):
        self.client = client
    
    async def _delete(self, path: str, resource: str) -> Tuple[bool, httpx.Response]:
        """DELETE a resource, raising NotDeletedError unless the API confirms it."""
        result, response = await self.client.request("DELETE", path, into=DeleteResult)
        if result is None or not result.deleted:
            logger.warning(f"{resource} not deleted (status {response.status_code})")
            raise NotDeletedError(resource, response)
        return True, response
