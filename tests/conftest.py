"""
Shared fixtures for MagicCircle tests.

Qt runs on the offscreen platform; user settings are redirected to a
temporary HOME so tests never touch ~/.mgc.
"""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from mgc.core.surface import DrawingSurface
from mgc.geom.hexagram import Point


class RecordingSurface(DrawingSurface):
    """DrawingSurface en memoria: guarda lo que está 'dibujado' ahora mismo."""

    def __init__(self):
        self.dot = None
        self.polygons = []
        self.circles = []
        self.calls = []

    def draw_dot(self, center, radius):
        self.calls.append("dot")
        self.dot = (center, radius)

    def draw_polygon_outline(self, points):
        self.calls.append("polygon")
        self.polygons.append(tuple(points))

    def draw_circle_outline(self, center, radius):
        self.calls.append("circle")
        self.circles.append((center, radius))

    def clear_transient_shapes(self):
        self.calls.append("clear")
        self.polygons.clear()
        self.circles.clear()

    def clear_all(self):
        self.clear_transient_shapes()
        self.dot = None


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for key in list(os.environ):
        if key.startswith("MGC_"):
            monkeypatch.delenv(key, raising=False)
    yield home
    # apply_project_settings escribe os.environ directo: no dejar MGC_* colgando.
    # monkeypatch.delenv registraría el valor filtrado y lo restauraría al final.
    for key in [k for k in os.environ if k.startswith("MGC_")]:
        os.environ.pop(key, None)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def center():
    return Point(100.0, 100.0)
