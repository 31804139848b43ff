from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from starlette.requests import Request

__all__ = [
    "RequestContext",
    "is_json_request",
    "is_ajax_request",
]

# CGI variables that carry headers without the HTTP_ prefix.
_CGI_HEADERS = {"CONTENT_TYPE": "content-type", "CONTENT_LENGTH": "content-length"}


class RequestContext(BaseModel):
    """What the helpers need to know about the current request.

    Header names are stored lower-cased so lookups are case-insensitive.
    """

    model_config = ConfigDict(frozen=True)

    scheme: Optional[str] = None
    host: str = ""
    headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("headers")
    @classmethod
    def _lower_names(cls, v: dict[str, str]) -> dict[str, str]:
        return {name.lower(): value for name, value in v.items()}

    def header(self, name: str, default: str | None = None) -> str | None:
        return self.headers.get(name.lower(), default)

    @classmethod
    def from_request(cls, request: Request) -> RequestContext:
        """Build a context from a Starlette/FastAPI request."""
        return cls(
            scheme=request.url.scheme or None,
            host=request.headers.get("host", ""),
            headers=dict(request.headers),
        )

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> RequestContext:
        """Build a context from a CGI/WSGI-style environ.

        A present REQUEST_SCHEME wins over wsgi.url_scheme, even when empty.
        HTTP_X_REQUESTED_WITH becomes the x-requested-with header.
        """
        headers: dict[str, str] = {}
        for key, value in environ.items():
            if key.startswith("HTTP_"):
                headers[key[5:].replace("_", "-").lower()] = value
            elif key in _CGI_HEADERS:
                headers[_CGI_HEADERS[key]] = value
        return cls(
            scheme=(
                environ["REQUEST_SCHEME"]
                if "REQUEST_SCHEME" in environ
                else environ.get("wsgi.url_scheme")
            ),
            host=environ.get("HTTP_HOST", ""),
            headers=headers,
        )


def is_json_request(context: RequestContext) -> bool:
    """True when the Accept header mentions application/json anywhere."""
    accept = context.header("accept") or ""
    return "application/json" in accept


def is_ajax_request(context: RequestContext) -> bool:
    """True when X-Requested-With is XMLHttpRequest (any case)."""
    requested_with = context.header("x-requested-with")
    return requested_with is not None and requested_with.lower() == "xmlhttprequest"
