"""
Shared fixtures for the test suite.
"""

import pytest

from responsive_images.models import ResolvedSource
from responsive_images.utils.logger import EngineLogger


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Start every test with a fresh, silent logger."""
    monkeypatch.setenv("RESPONSIVE_IMAGES_DEBUG_LEVEL", "NONE")
    monkeypatch.setenv("RESPONSIVE_IMAGES_LOG_TO_FILE", "false")
    EngineLogger.reset()
    yield
    EngineLogger.reset()


@pytest.fixture
def width_resolver():
    """Resolver serving `img-<width>.jpg` at exactly the requested size."""
    def resolve(spec):
        width = spec.effective_width()
        return ResolvedSource(
            url=f"https://cdn.example.com/img-{width}.jpg",
            width=width,
            height=spec.effective_height() or width,
        )
    return resolve
