from __future__ import annotations

import os
from types import MappingProxyType

__all__ = [
    "LAYOUT",
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

DEFAULT_LEVELS = 2

# Directory layout of the application, relative to base_path().
LAYOUT = MappingProxyType(
    {
        "config": "/config",
        "storage": "/storage",
        "app": "/app",
        "http": "/app/Http",
        "controller": "/app/Http/Controllers",
        "middleware": "/app/Http/Middleware",
        "model": "/app/Models",
        "public": "/public",
        "asset": "/public",
        "view": "/resources/views/",
        "components": "/resources/views/components",
        "lang": "/lang",
        "routes": "/routes",
        "framework": "/storage/framework",
        "cache": "/storage/framework/.cache",
        "session": "/storage/framework/sessions",
        "log": "/storage/logs",
        "lib": "/lib",
        "database": "/database",
    }
)

_HERE = os.path.dirname(os.path.abspath(__file__))


def base_path(levels: int = DEFAULT_LEVELS) -> str:
    """Return the directory `levels` parents above this module's directory.

    Mirrors `dirname(dir, levels)`: climbing past the filesystem root stays
    at the root.

    Raises:
        ValueError: if levels is lower than 1.
    """
    if levels < 1:
        raise ValueError("levels must be >= 1")
    p = _HERE
    for _ in range(levels):
        parent = os.path.dirname(p)
        if parent == p:
            break
        p = parent
    return p


def config_path() -> str:
    return base_path() + "/config"


def storage_path() -> str:
    return base_path() + "/storage"


def app_path() -> str:
    return base_path() + "/app"


def http_path() -> str:
    return app_path() + "/Http"


def controller_path() -> str:
    return http_path() + "/Controllers"


def middleware_path() -> str:
    return http_path() + "/Middleware"


def model_path() -> str:
    return app_path() + "/Models"


def public_path() -> str:
    """Web root served to clients."""
    return base_path() + "/public"


def asset_path() -> str:
    """Same directory as public_path(); kept for callers using the asset name."""
    return base_path() + "/public"


def view_path() -> str:
    # Trailing slash is part of the layout contract.
    return base_path() + "/resources/views/"


def components_path() -> str:
    return view_path().rstrip("/") + "/components"


def lang_path() -> str:
    return base_path() + "/lang"


def routes_path() -> str:
    return base_path() + "/routes"


def framework_path() -> str:
    return storage_path() + "/framework"


def cache_path() -> str:
    return framework_path() + "/.cache"


def session_path() -> str:
    return framework_path() + "/sessions"


def log_path() -> str:
    return storage_path() + "/logs"


def lib_path() -> str:
    return base_path() + "/lib"


def database_path() -> str:
    return base_path() + "/database"
