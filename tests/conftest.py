"""Pytest configuration for the ezlist test suite."""

from __future__ import annotations

import contextlib
from types import ModuleType
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:  # pragma: no cover - typing hints for wx fixtures
    import wx


def _destroy_top_windows(wx: ModuleType) -> None:
    """Hide and destroy any lingering top-level windows."""

    for window in list(wx.GetTopLevelWindows()):
        if not window:
            continue
        with contextlib.suppress(Exception):
            window.Hide()
            window.Destroy()


@pytest.fixture(scope="session")
def _wx_session_app(request: pytest.FixtureRequest, xvfb: None) -> tuple[ModuleType, wx.App]:
    """Create a shared ``wx.App`` guarded by the xvfb fixture."""

    wx = pytest.importorskip("wx")
    app = wx.App()

    def _finalise() -> None:
        _destroy_top_windows(wx)
        with contextlib.suppress(Exception):
            app.Destroy()

    request.addfinalizer(_finalise)
    return wx, app


@pytest.fixture
def wx_app(_wx_session_app: tuple[ModuleType, wx.App]) -> wx.App:
    """Return the shared ``wx.App`` with top-level windows cleaned up per test."""

    wx, app = _wx_session_app
    _destroy_top_windows(wx)
    yield app
    _destroy_top_windows(wx)
