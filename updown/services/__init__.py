"""Resource services of the updown client."""
from .checks import CheckService
from .downtimes import DowntimeService
from .metrics import MetricService
from .nodes import NodeService
from .recipients import RecipientService
from .status_pages import StatusPageService

__all__ = [
    "CheckService",
    "DowntimeService",
    "MetricService",
    "NodeService",
    "RecipientService",
    "StatusPageService",
]
