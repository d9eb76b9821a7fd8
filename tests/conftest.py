"""Shared pytest fixtures."""

import pytest
from PySide6.QtCore import QCoreApplication

from chromaspace.core.collection import ColorCollection
from chromaspace.core.config import EditorConfig


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Single Qt application instance for signal delivery."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def collection():
    """Collection holding only the initial grey point."""
    return ColorCollection(EditorConfig())


@pytest.fixture
def black_white(collection):
    """Collection with a black and a white user point."""
    collection.set_rgb(ColorCollection.INITIAL_ID, (0, 0, 0))
    collection.add_point((255, 255, 255))
    return collection
