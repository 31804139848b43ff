"""Shared pytest fixtures for sitekit."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from sitekit.domain.request import RequestContext
from sitekit.main import create_app


@pytest.fixture
def make_context():
    """Factory for request contexts; headers are optional."""

    def _make(scheme: str | None = None, host: str = "example.test", **headers: str) -> RequestContext:
        return RequestContext(
            scheme=scheme,
            host=host,
            headers={k.replace("_", "-"): v for k, v in headers.items()},
        )

    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEFAULT_SCHEME", raising=False)


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(), follow_redirects=False)
