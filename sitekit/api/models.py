from __future__ import annotations

from pydantic import BaseModel


class LinksResponse(BaseModel):
    """Absolute URLs built for a path from the current request."""
    asset: str
    url: str


class RequestKindResponse(BaseModel):
    """How the current request was classified."""
    is_json: bool
    is_ajax: bool
