from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse

from ..domain.forms import method
from ..domain.request import RequestContext, is_ajax_request, is_json_request
from ..domain.urls import asset, url
from ..logging_conf import get_logger
from ..service.errors import ErrorRenderer
from ..service.redirects import redirect
from .models import LinksResponse, RequestKindResponse

router = APIRouter()
logger = get_logger("api")


def get_request_context(request: Request) -> RequestContext:
    """Dependency turning the incoming request into a RequestContext."""
    return RequestContext.from_request(request)


@router.get(
    "/links",
    response_model=LinksResponse,
    summary="Build asset and storage URLs for a path",
)
async def links(
    path: str = Query("", description="Path relative to the web root or storage"),
    context: RequestContext = Depends(get_request_context),
) -> LinksResponse:
    """Return the asset URL and the storage URL for `path`."""
    return LinksResponse(asset=asset(context, path), url=url(context, path))


@router.get(
    "/request-kind",
    response_model=RequestKindResponse,
    summary="Classify the request as JSON and/or AJAX",
)
async def request_kind(
    context: RequestContext = Depends(get_request_context),
) -> RequestKindResponse:
    return RequestKindResponse(
        is_json=is_json_request(context),
        is_ajax=is_ajax_request(context),
    )


@router.get(
    "/forms/method-field",
    response_class=HTMLResponse,
    summary="Hidden input for form method spoofing",
)
async def method_field(method_name: str = Query(..., alias="method", min_length=1)) -> HTMLResponse:
    return HTMLResponse(content=method(method_name))


@router.get("/redirect", summary="Redirect to a local path")
async def go(
    to: str = Query(..., description="Local path starting with a single '/'"),
    status_code: int = Query(302, alias="status", description="Redirect status, 300..399"),
    context: RequestContext = Depends(get_request_context),
):
    """Redirect to `to`; only same-site paths are accepted."""
    if not to.startswith("/") or to.startswith("//"):
        logger.warning(
            "redirect.rejected",
            extra={"event": "redirect_rejected", "location": to},
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error_code": "malformed_request",
                "error_message": "to must be a local path starting with '/'",
            },
        )
    if not 300 <= status_code <= 399:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error_code": "malformed_request",
                "error_message": "status must be a redirect status (300..399)",
            },
        )
    redirect(to, status_code, reporter=ErrorRenderer(context), context=context)
