from __future__ import annotations

import html
import re
from typing import Protocol

from starlette.responses import HTMLResponse, JSONResponse, Response

from ..domain.request import RequestContext, is_ajax_request, is_json_request

__all__ = [
    "HaltResponse",
    "ErrorReporter",
    "ErrorRenderer",
]


class HaltResponse(Exception):
    """Stop the current handler and send `response` instead.

    The app registers an exception handler that returns the carried response.
    """

    def __init__(self, response: Response) -> None:
        super().__init__(response.status_code)
        self.response = response


class ErrorReporter(Protocol):
    def render(self, status_code: int, title: str, detail: str) -> Response: ...


_PAGE = """<!doctype html>
<html>
<head><title>{status} {title}</title></head>
<body>
<h1>{status} {title}</h1>
<p>{detail}</p>
</body>
</html>
"""


def _error_code(title: str) -> str:
    """Machine code for a status title: "Internal Server Error" -> "internal_server_error"."""
    return re.sub(r"[^a-z0-9]+", "_", title.lower()).strip("_")


class ErrorRenderer:
    """Default reporter: JSON for JSON/AJAX clients, an HTML page otherwise."""

    def __init__(self, context: RequestContext | None = None) -> None:
        self.context = context

    def wants_json(self) -> bool:
        if self.context is None:
            return False
        return is_json_request(self.context) or is_ajax_request(self.context)

    def render(self, status_code: int, title: str, detail: str) -> Response:
        if self.wants_json():
            return JSONResponse(
                status_code=status_code,
                content={"error_code": _error_code(title), "error_message": detail},
            )
        body = _PAGE.format(
            status=status_code,
            title=html.escape(title),
            detail=html.escape(detail),
        )
        return HTMLResponse(content=body, status_code=status_code)
