"""Shared fixtures: a headless QApplication for the widget tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """One QApplication per test session; Qt allows only a single instance."""

    app = QApplication.instance() or QApplication([])
    yield app
