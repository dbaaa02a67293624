from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import orjson
from pydantic import BaseModel


def to_payload(body: Any) -> Any:
    """Return a JSON-compatible payload for ``body``.

    Pydantic models are dumped in JSON mode; everything else is passed
    through untouched and left to orjson.
    """
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json")
    return body


def encode(body: Any) -> bytes:
    return orjson.dumps(to_payload(body))


def decode(content: bytes) -> Any:
    return orjson.loads(content)


def declared_id(body: Any) -> Any:
    """Return the ``id`` field a payload declares, or ``None``."""
    payload = to_payload(body)
    if isinstance(payload, Mapping):
        return payload.get("id")
    return None
