from __future__ import annotations

import math
from decimal import Decimal

import numpy as np
import pytest

from scanpath.exceptions import GeometryValueError, ZeroMagnitudeError
from scanpath.geometry import Angle, Micrometre, Point, Vector, Volt


def test_create() -> None:
    v = Vector[Micrometre].create(1.0, 2.0, 3.0)
    assert v == Vector(1.0, 2.0, 3.0)
    x, y, z = v
    assert (x, y, z) == (1.0, 2.0, 3.0)
    assert v.as_tuple() == (1.0, 2.0, 3.0)
    assert str(v) == '(1, 2, 3)'


def test_units_are_markers_only() -> None:
    with pytest.raises(TypeError):
        Volt()
    assert Vector[Volt](1, 2, 3) == Vector[Micrometre](1, 2, 3)


def test_magnitude() -> None:
    assert Vector(3.0, 4.0, 12.0).magnitude == pytest.approx(13.0)
    assert Vector(0, 0, 0).magnitude == 0


def test_spherical_round_trip() -> None:
    v = Vector.create_spherical(2.0, Angle.from_degrees(60), Angle.from_degrees(30))
    assert v.magnitude == pytest.approx(2.0)
    assert v.inclination.degrees == pytest.approx(60)
    assert v.azimuth.degrees == pytest.approx(30)


def test_azimuth_is_measured_from_x_axis() -> None:
    on_x = Vector.create_spherical(1, Angle.from_degrees(90), Angle.from_degrees(0))
    on_y = Vector.create_spherical(1, Angle.from_degrees(90), Angle.from_degrees(90))
    assert on_x.azimuth.degrees == pytest.approx(0)
    assert on_y.azimuth.degrees == pytest.approx(90)
    assert Vector(0.0, -1.0, 0.0).azimuth.degrees == pytest.approx(-90)
    assert Vector(-1.0, 0.0, 0.0).azimuth.degrees == pytest.approx(180)


def test_inclination() -> None:
    assert Vector(0.0, 0.0, 5.0).inclination.radians == 0
    assert Vector(1.0, 0.0, 0.0).inclination.radians == pytest.approx(math.pi / 2)
    assert Vector(0.0, 0.0, -2.0).inclination.radians == pytest.approx(math.pi)


def test_zero_vector_is_a_domain_error() -> None:
    zero = Vector(0.0, 0.0, 0.0)
    with pytest.raises(ZeroMagnitudeError):
        zero.unit()
    with pytest.raises(ZeroMagnitudeError):
        zero.inclination
    with pytest.raises(ZeroMagnitudeError):
        zero.azimuth
    with pytest.raises(ZeroMagnitudeError):
        Vector(Decimal(0), Decimal(0), Decimal(0)).azimuth
    with pytest.raises(GeometryValueError):
        zero.angle(Vector(1.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        zero.unit()


def test_angle_between() -> None:
    x = Vector(1.0, 0.0, 0.0)
    y = Vector(0.0, 1.0, 0.0)
    assert x.angle(y).radians == pytest.approx(math.pi / 2)
    assert x.angle(-x).radians == pytest.approx(math.pi)
    assert x.angle(x).radians == 0


def test_angle_near_parallel_is_never_nan() -> None:
    v1 = Vector(0.1, 0.2, 0.3)
    for eps in (0.0, 1e-15, 1e-12, -1e-14):
        v2 = Vector(0.1, 0.2, 0.3 + eps)
        angle = v1.angle(v2).radians
        assert not math.isnan(angle)
        assert 0 <= angle < 1e-5
        antiparallel = v1.angle(-v2).radians
        assert not math.isnan(antiparallel)
        assert antiparallel == pytest.approx(math.pi, abs=1e-5)


def test_dot_and_cross() -> None:
    x = Vector(1.0, 0.0, 0.0)
    y = Vector(0.0, 1.0, 0.0)
    assert x.dot(y) == 0
    assert x @ Vector(2.0, 3.0, 4.0) == 2.0
    assert x.cross(y) == Vector(0.0, 0.0, 1.0)
    assert y.cross(x) == Vector(0.0, 0.0, -1.0)
    assert Vector(1, 2, 3).dot(Vector(4, 5, 6)) == 32


def test_arithmetic() -> None:
    a = Vector(1, 2, 3)
    b = Vector(4, 5, 6)
    assert a + b == Vector(5, 7, 9)
    assert b - a == Vector(3, 3, 3)
    assert a * 2 == Vector(2, 4, 6)
    assert 2 * a == Vector(2, 4, 6)
    assert b / 2 == Vector(2.0, 2.5, 3.0)
    assert -a == Vector(-1, -2, -3)
    with pytest.raises(TypeError):
        a * b
    with pytest.raises(TypeError):
        a + 1


def test_decimal_components_stay_exact() -> None:
    a = Vector(Decimal('0.1'), Decimal('0.2'), Decimal('0'))
    b = a + a + a
    assert b == Vector(Decimal('0.3'), Decimal('0.6'), Decimal('0'))
    assert a.magnitude == pytest.approx(math.sqrt(0.05))


def test_unit() -> None:
    u = Vector(0.0, 3.0, 4.0).unit()
    np.testing.assert_allclose(u.to_array(), [0.0, 0.6, 0.8])
    assert u.magnitude == pytest.approx(1.0)


def test_with_component() -> None:
    v = Vector(1, 2, 3)
    assert v.with_x(7) == Vector(7, 2, 3)
    assert v.with_y(7) == Vector(1, 7, 3)
    assert v.with_z(7) == Vector(1, 2, 7)
    assert v == Vector(1, 2, 3)


def test_mapping_helpers() -> None:
    a = Vector(1, 2, 3)
    b = Vector(10, 20, 30)
    assert a.map(lambda c: c * 10) == b
    assert a.map2(lambda p, q: q - p, b) == Vector(9, 18, 27)
    assert a.mapi(lambda i, c: i) == Vector(0, 1, 2)
    assert a.mapi2(lambda i, p, q: i * (p + q), b) == Vector(0, 22, 66)
    assert a.map_each(lambda t: t[::-1]) == Vector(3, 2, 1)
    assert a.map_each2(lambda s, t: (s[0], t[1], s[2]), b) == Vector(1, 20, 3)


def test_between_points() -> None:
    p1 = Point.create(1.0, 1.0, 1.0)
    p2 = Point.create(2.0, 3.0, 4.0)
    assert Vector.between(p1, p2) == Vector(1.0, 2.0, 3.0)
    assert Vector.of_point(p2) == Vector(2.0, 3.0, 4.0)


def test_to_array() -> None:
    arr = Vector(Decimal('1.5'), 2, 3.0).to_array()
    assert arr.dtype == float
    np.testing.assert_array_equal(arr, [1.5, 2.0, 3.0])


def test_path_coordinates_mix_with_floats() -> None:
    from scanpath.path import Path, Plane

    path = Path.create(Point.origin(), (10, 10), (5, 5), Plane.XY)
    d = path.coordinates_at_index(4) - path.origin
    assert d == Vector(Decimal(5), Decimal(5), Decimal(0))

    assert d * 0.5 == Vector(Decimal('2.5'), Decimal('2.5'), Decimal(0))
    assert 0.5 * d == d * 0.5
    assert d / 2.0 == Vector(Decimal('2.5'), Decimal('2.5'), Decimal(0))
    assert (d + Vector(0.1, 0.0, 0.0)).x == Decimal('5.1')
    assert d.dot(Vector(1.0, 2.0, 0.0)) == 15
    assert d.cross(Vector(0.0, 0.0, 1.0)) == Vector(5, -5, 0)
    assert d.angle(Vector(1.0, 0.0, 0.0)).degrees == pytest.approx(45)
