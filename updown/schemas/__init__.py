"""Pydantic schemas for API payloads and responses."""
from .check import (
    Check,
    CheckItem,
    SSL,
    PULSE,
    TCP,
    TCPS,
    TCP_KINDS,
    tcp_kind_for_url,
)
from .common import DeleteResult, ResponseModel
from .downtime import Downtime
from .metric import (
    Metric,
    MetricRequests,
    MetricTimings,
    MetricsResponse,
    ResponseTimeBuckets,
)
from .node import Node, Nodes, IPs
from .recipient import Recipient, RecipientItem, RecipientType
from .status_page import StatusPage, StatusPageItem

__all__ = [
    "Check",
    "CheckItem",
    "SSL",
    "PULSE",
    "TCP",
    "TCPS",
    "TCP_KINDS",
    "tcp_kind_for_url",
    "DeleteResult",
    "ResponseModel",
    "Downtime",
    "Metric",
    "MetricRequests",
    "MetricTimings",
    "MetricsResponse",
    "ResponseTimeBuckets",
    "Node",
    "Nodes",
    "IPs",
    "Recipient",
    "RecipientItem",
    "RecipientType",
    "StatusPage",
    "StatusPageItem",
]
