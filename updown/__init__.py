"""Python client for the updown.io monitoring API."""
__version__ = "0.3.0"

from .client import Client, RawSink
from .errors import (
    UpdownError,
    TransportError,
    RequestBuildError,
    ResponseDecodeError,
    APIError,
    AuthError,
    NotFoundError,
    ValidationError,
    RateLimitError,
    NotDeletedError,
    AliasNotFoundError,
    CheckKindMismatchError,
)
from .schemas import (
    Check,
    CheckItem,
    SSL,
    Downtime,
    Metric,
    MetricsResponse,
    Node,
    Nodes,
    IPs,
    Recipient,
    RecipientItem,
    RecipientType,
    StatusPage,
    StatusPageItem,
    tcp_kind_for_url,
)

__all__ = [
    "__version__",
    "Client",
    "RawSink",
    "UpdownError",
    "TransportError",
    "RequestBuildError",
    "ResponseDecodeError",
    "APIError",
    "AuthError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "NotDeletedError",
    "AliasNotFoundError",
    "CheckKindMismatchError",
    "Check",
    "CheckItem",
    "SSL",
    "Downtime",
    "Metric",
    "MetricsResponse",
    "Node",
    "Nodes",
    "IPs",
    "Recipient",
    "RecipientItem",
    "RecipientType",
    "StatusPage",
    "StatusPageItem",
    "tcp_kind_for_url",
]
