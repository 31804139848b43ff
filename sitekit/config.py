"""Environment-driven settings.

Each setting is read on call so tests can monkeypatch the environment.
"""
from __future__ import annotations

import os

__all__ = ["get_default_scheme_from_env", "get_app_version_from_env"]

_SCHEMES = {"http", "https"}


def get_default_scheme_from_env() -> str:
    """Return DEFAULT_SCHEME from environment, defaulting to "http".

    Used when a request context carries no scheme.
    """
    val = os.getenv("DEFAULT_SCHEME", "http").strip().lower()
    if val not in _SCHEMES:
        raise ValueError("DEFAULT_SCHEME must be http or https")
    return val


def get_app_version_from_env() -> str:
    return os.getenv("APP_VERSION", "0.1.0")
