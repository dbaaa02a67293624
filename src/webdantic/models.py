from __future__ import annotations

from pydantic import BaseModel


class RequestCounts(BaseModel):
    read: int
    write: int


class DatabaseUsage(BaseModel):
    """Usage summary reported by the backend for a single database."""

    size: int | float
    requests: RequestCounts
