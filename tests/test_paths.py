"""Tests for sitekit.domain.paths: the application directory layout."""

from __future__ import annotations

import os

import pytest

from sitekit.domain import paths
from sitekit.domain.paths import LAYOUT, base_path

MODULE_DIR = os.path.dirname(os.path.abspath(paths.__file__))


def test_default_anchor_is_two_levels_up() -> None:
    assert base_path() == base_path(2)
    assert base_path() == os.path.dirname(os.path.dirname(MODULE_DIR))


def test_levels_climb_towards_root() -> None:
    one, two, three = base_path(1), base_path(2), base_path(3)
    assert one == os.path.dirname(MODULE_DIR)
    assert two == os.path.dirname(one)
    assert three == os.path.dirname(two)
    assert len(one) > len(two) > len(three)


def test_climbing_past_root_stays_at_root() -> None:
    root = os.path.abspath(os.sep)
    assert base_path(500) == root


@pytest.mark.parametrize("levels", [0, -1])
def test_levels_below_one_rejected(levels: int) -> None:
    with pytest.raises(ValueError):
        base_path(levels)


@pytest.mark.parametrize("name", sorted(LAYOUT))
def test_every_path_function_matches_layout(name: str) -> None:
    fn = getattr(paths, f"{name}_path")
    assert fn() == base_path() + LAYOUT[name]


def test_layout_literals() -> None:
    root = base_path()
    assert paths.controller_path() == root + "/app/Http/Controllers"
    assert paths.middleware_path() == root + "/app/Http/Middleware"
    assert paths.model_path() == root + "/app/Models"
    assert paths.view_path() == root + "/resources/views/"
    assert paths.cache_path() == root + "/storage/framework/.cache"
    assert paths.session_path() == root + "/storage/framework/sessions"
    assert paths.log_path() == root + "/storage/logs"


def test_components_path_has_no_double_slash() -> None:
    assert "//" not in paths.components_path()
    assert paths.components_path().startswith(paths.view_path())


def test_asset_path_aliases_public_path() -> None:
    assert paths.asset_path() == paths.public_path()


def test_layout_is_read_only() -> None:
    with pytest.raises(TypeError):
        LAYOUT["config"] = "/elsewhere"  # type: ignore[index]
