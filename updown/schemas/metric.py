"""Metric schemas for per-location check statistics."""
from typing import Dict, Optional

from pydantic import Field

from .common import ResponseModel


class ResponseTimeBuckets(ResponseModel):
    """Request counts below each response time threshold (ms)."""
    under125: Optional[int] = None
    under250: Optional[int] = None
    under500: Optional[int] = None
    under1000: Optional[int] = None
    under2000: Optional[int] = None
    under4000: Optional[int] = None


class MetricRequests(ResponseModel):
    """Request counters for a metrics group."""
    samples: int = 0
    failures: int = 0
    satisfied: int = 0
    tolerated: int = 0
    by_response_time: Optional[ResponseTimeBuckets] = None


class MetricTimings(ResponseModel):
    """Average timings (ms) of each request phase."""
    redirect: Optional[int] = None
    namelookup: Optional[int] = None
    connection: Optional[int] = None
    handshake: Optional[int] = None
    response: Optional[int] = None
    total: Optional[int] = None


class Metric(ResponseModel):
    """Apdex and request statistics for one group."""
    apdex: Optional[float] = None
    requests: MetricRequests = Field(default_factory=MetricRequests)
    timings: Optional[MetricTimings] = None


# Keyed by location code or host, depending on the requested grouping
MetricsResponse = Dict[str, Metric]
