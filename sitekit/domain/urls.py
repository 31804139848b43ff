from __future__ import annotations

from ..config import get_default_scheme_from_env
from .request import RequestContext

__all__ = ["base_url", "asset", "url"]

STORAGE_PREFIX = "/storage/"


def base_url(context: RequestContext) -> str:
    """Return scheme://host for the request.

    The default scheme applies only when the context has none; an empty host
    is passed through unchanged.
    """
    scheme = context.scheme if context.scheme is not None else get_default_scheme_from_env()
    return f"{scheme}://{context.host}"


def asset(context: RequestContext, path: str = "") -> str:
    """Absolute URL of a public asset; leading slashes of `path` are dropped."""
    return base_url(context) + "/" + path.lstrip("/")


def url(context: RequestContext, path: str = "") -> str:
    """Absolute URL of a file under the public storage prefix."""
    return base_url(context) + STORAGE_PREFIX + path
