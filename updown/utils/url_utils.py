"""Helpers for building API paths relative to the base URL."""
import re
from typing import Any
from urllib.parse import quote, urlsplit

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def validate_relative_path(path: str) -> str:
    """Check that path is a relative URL reference.
    
    Raises ValueError for absolute URLs, a colon in the first path segment
    (parsed as a missing scheme), and malformed percent escapes.
    """
    if _BAD_ESCAPE.search(path):
        raise ValueError(f"invalid URL escape in {path!r}")
    if path.startswith(":"):
        raise ValueError(f"missing protocol scheme in {path!r}")
    
    parts = urlsplit(path)
    if parts.scheme or parts.netloc:
        raise ValueError(f"expected a relative path, got {path!r}")
    
    first_segment = parts.path.split("/", 1)[0]
    if ":" in first_segment:
        raise ValueError(f"first path segment in {path!r} cannot contain a colon")
    return path


def join_path(*segments: Any) -> str:
    """Join path segments, percent-encoding each one."""
    return "/".join(quote(str(segment), safe="") for segment in segments)

