"""Pytest configuration for GUI test suite."""

from pathlib import Path

import pytest

_GUI_DIR = Path(__file__).resolve().parent


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark every test in this package with ``gui`` so ``-m "not gui"`` skips them."""
    for item in items:
        if _GUI_DIR in Path(str(item.fspath)).resolve().parents:
            item.add_marker(pytest.mark.gui)
