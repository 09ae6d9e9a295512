"""Hexagram geometry: triangle vertices, radius and validation."""

import math

import pytest

from mgc.geom import (
    HEXAGRAM_PHASE,
    Point,
    as_point,
    compute_hexagram,
    compute_radius,
    compute_triangle_vertices,
)
from mgc.utils.errors import MgcError, MgcValidationError

CASES = [
    (Point(100.0, 100.0), Point(200.0, 100.0)),
    (Point(0.0, 0.0), Point(-3.0, 4.0)),
    (Point(-250.5, 40.25), Point(12.0, -310.0)),
    (Point(400.0, 250.0), Point(400.0, 251.0)),
]


def _angle(p, c):
    return math.atan2(p.y - c.y, p.x - c.x)


def _angle_diff(a, b):
    d = (a - b) % (2 * math.pi)
    return min(d, 2 * math.pi - d)


def assert_point_close(p, q, tol=1e-9):
    assert p.x == pytest.approx(q.x, abs=tol)
    assert p.y == pytest.approx(q.y, abs=tol)


@pytest.mark.parametrize("c, p", CASES)
def test_vertices_lie_on_circumradius(c, p):
    r = p.distance_to(c)
    for v in compute_triangle_vertices(p, c, 0.0):
        assert v.distance_to(c) == pytest.approx(r, rel=1e-12, abs=1e-9)


@pytest.mark.parametrize("c, p", CASES)
def test_vertices_are_120_degrees_apart(c, p):
    a, b, d = compute_triangle_vertices(p, c, 0.0)
    sep = 2 * math.pi / 3
    assert _angle_diff(_angle(a, c), _angle(b, c)) == pytest.approx(sep, abs=1e-9)
    assert _angle_diff(_angle(b, c), _angle(d, c)) == pytest.approx(sep, abs=1e-9)
    assert _angle_diff(_angle(d, c), _angle(a, c)) == pytest.approx(sep, abs=1e-9)


@pytest.mark.parametrize("c, p", CASES)
def test_triangle_is_equilateral(c, p):
    a, b, d = compute_triangle_vertices(p, c, 0.0)
    side = a.distance_to(b)
    assert b.distance_to(d) == pytest.approx(side, rel=1e-9)
    assert d.distance_to(a) == pytest.approx(side, rel=1e-9)
    assert side == pytest.approx(math.sqrt(3) * p.distance_to(c), rel=1e-9)


@pytest.mark.parametrize("c, p", CASES)
def test_first_vertex_follows_cursor(c, p):
    first = compute_triangle_vertices(p, c, 0.0)[0]
    assert_point_close(first, p)


@pytest.mark.parametrize("c, p", CASES)
def test_second_triangle_is_first_rotated_60_degrees(c, p):
    geom = compute_hexagram(p, c)
    assert HEXAGRAM_PHASE == pytest.approx(math.pi / 3)
    for va, vb in zip(geom.triangle_a, geom.triangle_b):
        assert_point_close(va.rotated_about(c, math.pi / 3), vb)


@pytest.mark.parametrize("c, p", CASES)
def test_centroid_is_center(c, p):
    for tri in compute_hexagram(p, c).triangles():
        cx = sum(v.x for v in tri) / 3
        cy = sum(v.y for v in tri) / 3
        assert_point_close(Point(cx, cy), c)


def test_concrete_scenario():
    c = Point(100.0, 100.0)
    p = Point(200.0, 100.0)
    geom = compute_hexagram(p, c)

    assert geom.radius == pytest.approx(100.0)
    a0, a1, a2 = geom.triangle_a
    assert_point_close(a0, Point(200.0, 100.0))
    assert_point_close(a1, Point(50.0, 100.0 + 50.0 * math.sqrt(3)))
    assert_point_close(a2, Point(50.0, 100.0 - 50.0 * math.sqrt(3)))
    assert a1.y == pytest.approx(186.6, abs=0.01)
    assert a2.y == pytest.approx(13.4, abs=0.01)

    b0, b1, b2 = geom.triangle_b
    assert_point_close(b0, Point(150.0, 100.0 + 50.0 * math.sqrt(3)))
    assert_point_close(b1, Point(0.0, 100.0))
    assert_point_close(b2, Point(150.0, 100.0 - 50.0 * math.sqrt(3)))


def test_degenerate_cursor_on_center():
    c = Point(42.0, -7.5)
    geom = compute_hexagram(c, c)
    assert geom.radius == 0.0
    for tri in geom.triangles():
        for v in tri:
            assert_point_close(v, c)


def test_radius_is_euclidean_distance():
    assert compute_radius(Point(3.0, 4.0), Point(0.0, 0.0)) == 5.0
    assert compute_radius(Point(0.0, 0.0), Point(3.0, 4.0)) == 5.0
    assert compute_radius(Point(1.5, 1.5), Point(1.5, 1.5)) == 0.0


def test_phase_offset_rotates_all_vertices():
    c = Point(10.0, 10.0)
    p = Point(20.0, 10.0)
    base = compute_triangle_vertices(p, c, 0.0)
    turned = compute_triangle_vertices(p, c, math.pi / 2)
    for v0, v1 in zip(base, turned):
        assert_point_close(v0.rotated_about(c, math.pi / 2), v1)


def test_as_point_accepts_numeric_strings_and_ints():
    assert as_point(1, "2.5") == Point(1.0, 2.5)


@pytest.mark.parametrize(
    "x, y",
    [
        (float("nan"), 0.0),
        (0.0, float("inf")),
        (-float("inf"), 1.0),
        ("abc", 1.0),
        (None, 1.0),
    ],
)
def test_as_point_rejects_non_finite(x, y):
    with pytest.raises(MgcValidationError):
        as_point(x, y)


def test_validation_error_is_project_error():
    assert issubclass(MgcValidationError, MgcError)


def test_point_is_immutable_and_iterable():
    p = Point(1.0, 2.0)
    assert tuple(p) == (1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 5.0
