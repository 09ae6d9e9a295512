"""SceneSurface item bookkeeping on a real QGraphicsScene."""

import pytest
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsEllipseItem, QGraphicsPolygonItem, QGraphicsScene

from mgc.core.session import InteractionSession
from mgc.geom.hexagram import Point
from mgc.ui.scene_surface import SceneSurface


@pytest.fixture
def scene(qapp):
    return QGraphicsScene()


@pytest.fixture
def scene_surface(scene):
    return SceneSurface(scene)


def test_dot_is_filled_and_replaced(scene, scene_surface):
    scene_surface.draw_dot(Point(10.0, 20.0), 3)
    first = scene_surface.dot_item()
    assert isinstance(first, QGraphicsEllipseItem)
    assert first.rect().center().x() == pytest.approx(10.0)
    assert first.rect().width() == pytest.approx(6.0)
    assert first.brush().style() != Qt.NoBrush

    scene_surface.draw_dot(Point(50.0, 60.0), 3)
    assert len(scene.items()) == 1
    assert scene_surface.dot_item().rect().center().y() == pytest.approx(60.0)


def test_outlines_have_no_fill(scene, scene_surface):
    scene_surface.draw_polygon_outline([Point(0, 0), Point(10, 0), Point(5, 8)])
    scene_surface.draw_circle_outline(Point(0, 0), 25.0)
    poly, circle = scene_surface.transient_items()

    assert isinstance(poly, QGraphicsPolygonItem)
    assert poly.polygon().count() == 3
    assert poly.brush().style() == Qt.NoBrush
    assert circle.brush().style() == Qt.NoBrush
    assert circle.rect().width() == pytest.approx(50.0)
    assert len(scene.items()) == 2


def test_clear_transient_keeps_dot(scene, scene_surface):
    scene_surface.draw_dot(Point(0, 0), 3)
    scene_surface.draw_circle_outline(Point(0, 0), 5.0)
    scene_surface.clear_transient_shapes()
    assert scene_surface.transient_items() == []
    assert scene.items() == [scene_surface.dot_item()]

    scene_surface.clear_all()
    assert scene.items() == []
    assert scene_surface.dot_item() is None


def test_style_applies_to_existing_items(scene_surface):
    scene_surface.draw_circle_outline(Point(0, 0), 5.0)
    scene_surface.set_style(color=QColor(255, 0, 0), stroke_width=6)
    (circle,) = scene_surface.transient_items()
    assert circle.pen().color() == QColor(255, 0, 0)
    assert circle.pen().widthF() == pytest.approx(6.0)
    assert scene_surface.stroke_width() == pytest.approx(6.0)


def test_session_cycle_on_scene(scene, scene_surface):
    s = InteractionSession(scene_surface)
    s.press(100, 100)
    for x in range(110, 210, 10):
        s.drag(x, 100)
    # Dot + 2 triángulos + círculo, nunca acumulados.
    assert len(scene.items()) == 4
    s.release(200, 100)
    assert scene.items() == [scene_surface.dot_item()]
