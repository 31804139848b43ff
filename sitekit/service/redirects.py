from __future__ import annotations

from collections.abc import Mapping
from typing import NoReturn

from starlette.responses import Response

from ..domain.request import RequestContext
from ..logging_conf import get_logger
from .errors import ErrorRenderer, ErrorReporter, HaltResponse

__all__ = ["redirect"]

logger = get_logger("service.redirects")


def _set_header(response: Response, name: str, value: str) -> None:
    """Set one header, refusing anything that would split the header block."""
    name, value = str(name), str(value)
    if any(c in name or c in value for c in "\r\n"):
        raise ValueError(f"Header may not contain more than a single header: {name!r}")
    response.headers[name] = value


def redirect(
    url: str,
    status: int = 302,
    headers: Mapping[str, str] | None = None,
    *,
    reporter: ErrorReporter | None = None,
    context: RequestContext | None = None,
) -> NoReturn:
    """Redirect to `url` and stop the current handler.

    Sets each extra header, then the status code, then Location. Always raises
    HaltResponse: with the redirect on success, or with whatever `reporter`
    renders for a 500 if emitting the headers fails. Without a reporter an
    ErrorRenderer for `context` is used.
    """
    try:
        response = Response()
        for name, value in (headers or {}).items():
            _set_header(response, name, value)
        response.status_code = status
        _set_header(response, "Location", url)
    except Exception as exc:
        logger.exception(
            "redirect.error",
            extra={"event": "redirect_error", "location": url, "status_code": status},
        )
        reporter = reporter or ErrorRenderer(context)
        raise HaltResponse(reporter.render(500, "Internal Server Error", str(exc))) from exc

    logger.info(
        "redirect",
        extra={"event": "redirect", "location": url, "status_code": status},
    )
    raise HaltResponse(response)
