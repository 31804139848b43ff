"""FastAPI app factory wiring the helpers into real requests."""
from __future__ import annotations

import time
from collections.abc import Callable
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from sitekit.api import router as api_router
from sitekit.config import get_app_version_from_env
from sitekit.domain.request import RequestContext, is_ajax_request, is_json_request
from sitekit.logging_conf import get_logger, setup_logging
from sitekit.service.errors import HaltResponse

setup_logging()
logger = get_logger("sitekit")


def create_app() -> FastAPI:
    app = FastAPI(
        title="sitekit",
        version=get_app_version_from_env(),
    )

    @app.exception_handler(HaltResponse)
    async def _halt(request: Request, exc: HaltResponse) -> Response:
        logger.info(
            "request.halted",
            extra={
                "event": "request_halted",
                "status_code": exc.response.status_code,
                "request_id": getattr(request.state, "request_id", None),
            },
        )
        return exc.response

    @app.middleware("http")
    async def track_request(request: Request, call_next: Callable[[Request], Response]):
        """Tag each request with an id and log how sitekit classified and answered it.

        The start event carries the JSON/AJAX classification the error renderer
        will use; the end event carries the Location of any redirect.
        """
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id
        context = RequestContext.from_request(request)

        start = time.perf_counter()
        logger.info(
            "request.start",
            extra={
                "event": "request_start",
                "method": request.method,
                "path": request.url.path,
                "host": context.host,
                "is_json": is_json_request(context),
                "is_ajax": is_ajax_request(context),
                "request_id": request_id,
            },
        )
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request.error",
                extra={"event": "request_error", "path": request.url.path, "request_id": request_id},
            )
            raise

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                "status_code": response.status_code,
                "location": response.headers.get("location"),
                "elapsed_ms": round((time.perf_counter() - start) * 1000.0, 2),
                "request_id": request_id,
            },
        )
        return response

    @app.get("/health", summary="Liveness check")
    async def health() -> JSONResponse:
        return JSONResponse(content={"ok": True})

    app.include_router(api_router)

    return app


# ASGI entrypoint: `uvicorn sitekit.main:app --port 8000`
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
