"""
Shared pytest fixtures for boxlayout tests.
"""

import pytest
from pubsub.core import Publisher

from boxlayout import Box, LayoutConfig, LayoutMaker, Rect


@pytest.fixture
def box():
    """Factory fixture for creating boxes."""

    def make_box(width=0, height=0, x=0, y=0, name=""):
        return Box(Rect(x, y, width, height), name=name)

    return make_box


@pytest.fixture
def mock_view():
    """Factory fixture for host elements that only expose a frame."""

    class MockView:
        def __init__(self, frame=None):
            self.frame = frame if frame is not None else Rect()

    return MockView


@pytest.fixture
def standard_bounds():
    """Standard 300x100 bounds for layout tests."""
    return Rect(0, 0, 300, 100)


@pytest.fixture
def offset_bounds():
    """Bounds that do not start at the origin."""
    return Rect(20, 40, 200, 120)


@pytest.fixture
def bus():
    """An event bus isolated from the global pubsub publisher."""
    return Publisher()


@pytest.fixture
def quiet_config():
    """Configuration with event publishing disabled."""
    return LayoutConfig(publish_events=False, debug=False)


@pytest.fixture
def make(standard_bounds, bus):
    """A maker over the standard bounds publishing on an isolated bus."""
    return LayoutMaker(standard_bounds, bus=bus, config=LayoutConfig(debug=False))


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast unit tests")
