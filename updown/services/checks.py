"""Check service, including alias to token resolution."""
import logging
import threading
from typing import Dict, List, Tuple

import httpx

from ..errors import AliasNotFoundError, CheckKindMismatchError
from ..schemas import Check, CheckItem, PULSE, TCP_KINDS
from ..utils.url_utils import join_path
from .base import BaseService

logger = logging.getLogger(__name__)


class CheckService(BaseService):
    """Service for the checks endpoints.
    
    Keeps an alias -> token cache that fills on lookup misses only. Adding,
    updating or removing checks does not touch it; call clear_alias_cache()
    to force a fresh listing.
    """
    
    def __init__(self, client):
        super().__init__(client)
        self._alias_tokens: Dict[str, str] = {}
        self._alias_lock = threading.Lock()
    
    async def list(self) -> Tuple[List[Check], httpx.Response]:
        """List all checks."""
        checks, response = await self.client.request("GET", "checks", into=List[Check])
        return checks or [], response
    
    async def get(self, token: str) -> Tuple[Check, httpx.Response]:
        """Get a check by its token."""
        return await self.client.request("GET", join_path("checks", token), into=Check)
    
    async def add(self, item: CheckItem) -> Tuple[Check, httpx.Response]:
        """Create a check."""
        return await self.client.request("POST", "checks", item, into=Check)
    
    async def update(self, token: str, item: CheckItem) -> Tuple[Check, httpx.Response]:
        """Update a check by its token."""
        return await self.client.request("PUT", join_path("checks", token), item, into=Check)
    
    async def remove(self, token: str) -> Tuple[bool, httpx.Response]:
        """Delete a check by its token."""
        return await self._delete(join_path("checks", token), f"check {token}")
    
    async def token_for_alias(self, alias: str) -> str:
        """Resolve a check alias to its token.
        
        Cached aliases are answered without a request. A miss lists all
        checks, records every alias seen, and raises AliasNotFoundError if
        the alias is still unknown.
        """
        with self._alias_lock:
            token = self._alias_tokens.get(alias)
        if token is not None:
            return token
        
        checks, _ = await self.list()
        with self._alias_lock:
            for check in checks:
                if check.alias:
                    self._alias_tokens[check.alias] = check.token
            token = self._alias_tokens.get(alias)
            cached = len(self._alias_tokens)
        logger.info(f"Alias cache refreshed: {cached} aliases known")
        
        if token is None:
            raise AliasNotFoundError(alias)
        return token
    
    def clear_alias_cache(self):
        """Forget every cached alias."""
        with self._alias_lock:
            self._alias_tokens.clear()
    
    async def get_kind(self, token: str, *kinds: str) -> Tuple[Check, httpx.Response]:
        """Get a check and verify its type is one of kinds."""
        check, response = await self.get(token)
        if check.type not in kinds:
            raise CheckKindMismatchError(token, check.type, kinds)
        if check.type == PULSE and not check.pulse_url:
            check.pulse_url = f"{self.client.base_url}{join_path('checks', check.token or token, 'pulse')}"
        return check, response
    
    async def get_pulse(self, token: str) -> Tuple[Check, httpx.Response]:
        """Get a pulse check, failing if the token is another kind."""
        return await self.get_kind(token, PULSE)
    
    async def get_tcp(self, token: str) -> Tuple[Check, httpx.Response]:
        """Get a TCP or TCPS check, failing if the token is another kind."""
        return await self.get_kind(token, *TCP_KINDS)
