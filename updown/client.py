"""HTTP client for the updown.io API."""
import logging
from functools import lru_cache
from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable

import httpx
import pydantic
from pydantic import BaseModel, TypeAdapter

from .config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, Settings, settings as default_settings
from .errors import (
    DEFAULT_ERROR_MESSAGE,
    RequestBuildError,
    ResponseDecodeError,
    TransportError,
    error_for_status,
)
from .services import (
    CheckService,
    DowntimeService,
    MetricService,
    NodeService,
    RecipientService,
    StatusPageService,
)
from .utils.url_utils import validate_relative_path

logger = logging.getLogger(__name__)


@runtime_checkable
class RawSink(Protocol):
    """Destination that receives the raw response body."""

    def write(self, data: bytes) -> Any:
        ...


def is_raw_sink(into: Any) -> bool:
    """True for sink instances; classes with a write method are decode targets."""
    return not isinstance(into, type) and isinstance(into, RawSink)


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def check_response(response: httpx.Response) -> None:
    """Raise an APIError if the response status is outside 2xx.

    The message comes from the JSON body's "error" (or "message") key and
    falls back to a generic one when the body is empty or not JSON.
    """
    if 200 <= response.status_code < 300:
        return

    message = DEFAULT_ERROR_MESSAGE
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        message = str(data.get("error") or data.get("message") or message)

    error_cls = error_for_status(response.status_code)
    error = error_cls(response, message)
    logger.warning(f"API error: {error}")
    raise error


class Client:
    """Client for the updown.io API.

    Each resource is reached through a service attribute (client.check,
    client.recipient, ...). All calls return a (result, response) tuple, or
    raise an UpdownError subclass.

    Args:
        api_key: updown.io API key.
        http_client: Optional httpx.AsyncClient to send requests with. When
            omitted the client creates and owns one.
        base_url: API root, "/" is appended if missing.
        user_agent: Value of the User-Agent header.
        timeout: Timeout in seconds for the default HTTP client.
    """

    def __init__(
        self,
        api_key: str,
        http_client: Optional[httpx.AsyncClient] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.user_agent = user_agent
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

        self.check = CheckService(self)
        self.downtime = DowntimeService(self)
        self.metric = MetricService(self)
        self.node = NodeService(self)
        self.recipient = RecipientService(self)
        self.status_page = StatusPageService(self)

    @classmethod
    def from_settings(
        cls,
        config: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "Client":
        """Create a client from UPDOWN_* settings."""
        config = config or default_settings
        return cls(
            config.api_key,
            http_client,
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout=config.timeout_seconds,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, value: str):
        if not value.endswith("/"):
            value += "/"
        self._base_url = value

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    # ------------------------------------------------------------------
    # Request pipeline
    # ------------------------------------------------------------------

    def build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Request:
        """Build an authenticated request for a path relative to base_url.

        A non-None body is sent as JSON. Pydantic models are dumped without
        their unset (None) fields. params are added to the query string,
        empty values included.
        """
        try:
            validate_relative_path(path)
            url = httpx.URL(self.base_url).join(path)
        except (ValueError, httpx.InvalidURL) as e:
            raise RequestBuildError(f"invalid request path {path!r}: {e}") from e

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
            "X-API-KEY": self.api_key,
        }
        try:
            if isinstance(body, BaseModel):
                body = body.model_dump(mode="json", exclude_none=True)
            return self._http.build_request(method, url, json=body, params=params, headers=headers)
        except (TypeError, ValueError) as e:
            raise RequestBuildError(f"cannot serialize request: {e}") from e

    async def execute(self, request: httpx.Request, into: Any = None) -> Tuple[Any, httpx.Response]:
        """Send a request and decode its response.

        `into` selects what happens to a successful body:

        - a RawSink instance receives the raw bytes and is returned as value
        - a type (model, List[Model], Dict[str, Model], ...) is validated
          from the JSON body; an empty body gives None
        - None skips decoding

        Non-2xx responses raise APIError. The response body is always read
        and closed before returning.
        """
        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self._http.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"{request.method} {request.url}: {e}") from e
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        check_response(response)

        if into is None:
            return None, response

        if is_raw_sink(into):
            into.write(response.content)
            return into, response

        if not response.content.strip():
            return None, response

        try:
            value = _adapter(into).validate_json(response.content)
        except pydantic.ValidationError as e:
            raise ResponseDecodeError(
                f"cannot decode response of {request.method} {request.url}: {e}"
            ) from e
        return value, response

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        into: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Any, httpx.Response]:
        """Build and execute a request in one call."""
        request = self.build_request(method, path, body, params)
        return await self.execute(request, into)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self):
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
