from __future__ import annotations

import pytest

from sitekit.domain.urls import asset, base_url, url


def test_asset_strips_leading_slashes(make_context) -> None:
    ctx = make_context(scheme="https", host="h.test")
    assert asset(ctx, "/x/y") == "https://h.test/x/y"
    assert asset(ctx, "///x/y") == "https://h.test/x/y"
    assert asset(ctx, "x/y") == "https://h.test/x/y"


def test_asset_without_path_is_site_root(make_context) -> None:
    assert asset(make_context(scheme="https", host="h.test")) == "https://h.test/"


def test_url_prefixes_storage_and_defaults_to_http(make_context) -> None:
    ctx = make_context(host="h.test")
    assert url(ctx, "f.png") == "http://h.test/storage/f.png"


def test_url_keeps_path_untrimmed(make_context) -> None:
    ctx = make_context(scheme="http", host="h.test")
    assert url(ctx, "/f.png") == "http://h.test/storage//f.png"


def test_empty_host_propagates(make_context) -> None:
    assert base_url(make_context(host="")) == "http://"


def test_empty_scheme_is_not_replaced(make_context) -> None:
    assert base_url(make_context(scheme="", host="h.test")) == "://h.test"


def test_default_scheme_from_env(make_context, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_SCHEME", "https")
    assert asset(make_context(host="h.test"), "a.css") == "https://h.test/a.css"


def test_invalid_default_scheme_rejected(make_context, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_SCHEME", "gopher")
    with pytest.raises(ValueError):
        url(make_context(host="h.test"), "f.png")
