from __future__ import annotations

from typing import Any
from urllib.parse import quote


def sanitize_host(host: str) -> str:
    """Normalize a backend address by removing trailing slashes."""
    host = host.strip()
    if not host:
        raise ValueError("A backend address is required")
    return host.rstrip("/")


def join_path(*segments: Any) -> str:
    """Build an absolute request path, percent-encoding every segment."""
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)
