"""URL and timestamp helpers shared by the registry and the API layer."""

import math
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlsplit


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_z(dt: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with milliseconds and a Z suffix."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def is_valid_url(url: Any) -> bool:
    """
    Check that a URL is absolute: it needs a scheme and an authority,
    and the port (if any) must parse.
    """
    if not isinstance(url, str) or not url or url != url.strip():
        return False
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc) and bool(parts.hostname)


def is_positive_number(value: Any) -> bool:
    # bool is an int subclass, but True is not "1 minute"
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value > 0
