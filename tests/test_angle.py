from __future__ import annotations

import math
from contextlib import nullcontext
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Type

import pytest

from scanpath.exceptions import GeometryValueError
from scanpath.geometry import Angle, AngleUnit
from tests.utils import InstanceAutoTracker


def test_conversion() -> None:
    assert Angle.from_degrees(90).radians == pytest.approx(math.pi / 2)
    assert Angle.from_radians(math.pi).degrees == pytest.approx(180)
    assert Angle.from_degrees(45).to_degrees() == 45.0
    assert Angle.from_radians(1.0).to_radians() == 1.0


def test_unit_is_kept() -> None:
    assert Angle.from_degrees(10).unit is AngleUnit.DEGREES
    assert Angle.from_radians(1).unit is AngleUnit.RADIANS
    assert Angle.from_radians(7).bound().unit is AngleUnit.RADIANS


@dataclass
class BoundTestCase(InstanceAutoTracker):
    degrees: float
    returns: Optional[float] = None
    raises: Optional[Type[Exception]] = None


BoundTestCase(0, returns=0)
BoundTestCase(180, returns=180)
BoundTestCase(-180, returns=180)
BoundTestCase(179.5, returns=179.5)
BoundTestCase(-179.5, returns=-179.5)
BoundTestCase(190, returns=-170)
BoundTestCase(-190, returns=170)
BoundTestCase(359, returns=-1)
BoundTestCase(540, returns=180)
BoundTestCase(-540, returns=180)
BoundTestCase(720, returns=0)
BoundTestCase(1_000_000, returns=-80)
BoundTestCase(float('inf'), raises=GeometryValueError)
BoundTestCase(float('nan'), raises=GeometryValueError)


@pytest.mark.parametrize('test_case', BoundTestCase.INSTANCES)
def test_bound_degrees(test_case) -> None:
    c = test_case
    with pytest.raises(r) if (r := c.raises) else nullcontext():
        assert Angle.from_degrees(c.degrees).bound().degrees == c.returns


def test_bound_range_and_equivalence() -> None:
    for d in range(-1000, 1000, 7):
        bounded = Angle.from_degrees(d).bound().degrees
        assert -180 < bounded <= 180
        assert (d - bounded) % 360 == 0


def test_bound_radians() -> None:
    assert Angle.from_radians(-math.pi).bound().radians == math.pi
    assert Angle.from_radians(math.pi).bound().radians == math.pi
    assert Angle.from_radians(2 * math.pi).bound().radians == 0
    assert Angle.from_radians(3 * math.pi / 2).bound().radians == pytest.approx(-math.pi / 2)
    assert Angle.from_radians(-3 * math.pi / 2).bound().radians == pytest.approx(math.pi / 2)


def test_bound_never_nan() -> None:
    for r in (1e300, -1e300, 1e17, -1e17, 12345.678, -math.pi - 1e-15):
        bounded = Angle.from_radians(r).bound().radians
        assert not math.isnan(bounded)
        assert -math.pi < bounded <= math.pi


def test_equality_compares_magnitude() -> None:
    """An angle and its mirror image compare equal."""
    assert Angle.from_degrees(90) == Angle.from_degrees(-90)
    assert Angle.from_degrees(450) == Angle.from_degrees(90)
    assert Angle.from_degrees(360) == Angle.from_degrees(0)
    assert Angle.from_radians(2 * math.pi) == Angle.from_degrees(0)
    assert Angle.from_degrees(10) != Angle.from_degrees(20)
    assert Angle.from_degrees(10) != 10


def test_hash_follows_equality() -> None:
    angles = {Angle.from_degrees(90), Angle.from_degrees(-90), Angle.from_degrees(450)}
    assert len(angles) == 1


def test_ordering() -> None:
    assert Angle.from_degrees(10) < Angle.from_degrees(-20)
    assert Angle.from_degrees(350) < Angle.from_degrees(20)
    assert Angle.from_degrees(180) >= Angle.from_degrees(-179)
    unsorted = [Angle.from_degrees(d) for d in (-30, 5, 200, 90)]
    assert [a.degrees for a in sorted(unsorted)] == [5, -30, 90, 200]


def test_arithmetic_goes_through_degrees() -> None:
    total = Angle.from_radians(math.pi) + Angle.from_degrees(90)
    assert total.unit is AngleUnit.DEGREES
    assert total.degrees == pytest.approx(270)

    difference = Angle.from_radians(math.pi / 2) - Angle.from_radians(math.pi / 4)
    assert difference.unit is AngleUnit.DEGREES
    assert difference.degrees == pytest.approx(45)

    assert (Angle.from_degrees(30) * 2).degrees == 60
    assert (2 * Angle.from_degrees(30)).degrees == 60
    assert (Angle.from_degrees(30) / 3).degrees == 10
    assert (-Angle.from_degrees(30)).degrees == -30


def test_arithmetic_with_decimal_scalar() -> None:
    assert (Angle.from_degrees(30) * Decimal(2)).degrees == 60
    assert (Decimal(2) * Angle.from_degrees(30)).degrees == 60
    assert (Angle.from_degrees(30) / Decimal('0.5')).degrees == 60


def test_arithmetic_type_errors() -> None:
    with pytest.raises(TypeError):
        Angle.from_degrees(30) * Angle.from_degrees(2)
    with pytest.raises(TypeError):
        Angle.from_degrees(30) + 2


def test_repr() -> None:
    assert repr(Angle.from_degrees(90)) == 'Angle(90.0 deg)'
    assert repr(Angle.from_radians(1)) == 'Angle(1.0 rad)'
