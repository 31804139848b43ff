"""Path and request helpers for a web application.

The helpers are re-exported here so callers can write
`from sitekit import asset, storage_path, redirect`.
"""
from importlib.metadata import PackageNotFoundError, version

from .domain.forms import method
from .domain.paths import (
    app_path,
    asset_path,
    base_path,
    cache_path,
    components_path,
    config_path,
    controller_path,
    database_path,
    framework_path,
    http_path,
    lang_path,
    lib_path,
    log_path,
    middleware_path,
    model_path,
    public_path,
    routes_path,
    session_path,
    storage_path,
    view_path,
)
from .domain.request import RequestContext, is_ajax_request, is_json_request
from .domain.urls import asset, url
from .service import ErrorRenderer, ErrorReporter, HaltResponse, redirect

try:
    __version__ = version("sitekit")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "RequestContext",
    "ErrorRenderer",
    "ErrorReporter",
    "HaltResponse",
    "asset",
    "url",
    "redirect",
    "is_json_request",
    "is_ajax_request",
    "method",
    "base_path",
    "config_path",
    "storage_path",
    "app_path",
    "http_path",
    "controller_path",
    "middleware_path",
    "model_path",
    "public_path",
    "asset_path",
    "view_path",
    "components_path",
    "lang_path",
    "routes_path",
    "framework_path",
    "cache_path",
    "session_path",
    "log_path",
    "lib_path",
    "database_path",
]
