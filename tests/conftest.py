import pytest
from PySide6.QtCore import QCoreApplication

from congruencelab.model.triangle import Triangle


def right_triangle(x: float, y: float, leg_v: float, leg_h: float) -> Triangle:
    """Right angle at vertex 1 = (x, y); vertex 0 above it, vertex 2 to its right."""
    return Triangle.from_coordinates([(x, y - leg_v), (x, y), (x + leg_h, y)])


@pytest.fixture(scope="session")
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def subject() -> Triangle:
    # v0=(100, 180), v1=(100, 300), v2=(260, 300); sides 120 / 160 / 200
    return right_triangle(100, 300, 120, 160)


@pytest.fixture
def reference() -> Triangle:
    return right_triangle(500, 300, 120, 160)
