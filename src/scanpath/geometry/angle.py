from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from functools import total_ordering
from numbers import Real

from typing_extensions import Self

from scanpath.exceptions import GeometryValueError
from scanpath.typing import float_deg, float_rad


class AngleUnit(Enum):
    DEGREES = 'deg'
    RADIANS = 'rad'


def _wrap(value: float, half_turn: float) -> float:
    """Reduce `value` into (-half_turn, half_turn] with a single floor."""
    if value == -half_turn:
        return half_turn
    if abs(value) <= half_turn:
        return value
    if not math.isfinite(value):
        raise GeometryValueError(f'Cannot bound a non-finite angle: {value}')
    full_turn = 2 * half_turn
    wrapped = value + full_turn * math.floor((half_turn - value) / full_turn)
    if not -half_turn < wrapped <= half_turn:
        # round-off at the open end, or the product above lost all precision
        wrapped = math.fmod(value, full_turn)
        if wrapped > half_turn:
            wrapped -= full_turn
        elif wrapped <= -half_turn:
            wrapped += full_turn
    return wrapped


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class Angle:
    """A rotation, stored in the unit it was created with.

    Do not instantiate directly, use `Angle.from_degrees` or
    `Angle.from_radians`. Values are only converted when they are read.

    Note that equality, hashing and ordering compare the *magnitude* of the
    bounded angle, `abs(angle.bound().radians)`. This means that an angle and
    its mirror image compare equal: `Angle.from_degrees(90) ==
    Angle.from_degrees(-90)`. Compare `bound().radians` yourself if the
    direction of rotation matters.

    Arithmetic with `+`, `-`, `*` and `/` is always carried out in degrees and
    returns a degree-valued angle, also when both operands were created in
    radians. Radian-only calculations therefore pay for two conversions.
    """

    _value: float
    _unit: AngleUnit

    @classmethod
    def from_degrees(cls, degrees: float_deg) -> Self:
        """Create an angle from a value in degrees."""
        return cls(float(degrees), AngleUnit.DEGREES)

    @classmethod
    def from_radians(cls, radians: float_rad) -> Self:
        """Create an angle from a value in radians."""
        return cls(float(radians), AngleUnit.RADIANS)

    @property
    def unit(self) -> AngleUnit:
        """Unit the angle was created with."""
        return self._unit

    @property
    def degrees(self) -> float_deg:
        """Value of the angle in degrees."""
        if self._unit is AngleUnit.DEGREES:
            return self._value
        return math.degrees(self._value)

    @property
    def radians(self) -> float_rad:
        """Value of the angle in radians."""
        if self._unit is AngleUnit.RADIANS:
            return self._value
        return math.radians(self._value)

    def to_degrees(self) -> float_deg:
        return self.degrees

    def to_radians(self) -> float_rad:
        return self.radians

    def bound(self) -> Angle:
        """Return the equivalent angle in the interval (-180, 180] degrees,
        i.e. (-pi, pi] radians.

        The reduction is done in the unit the angle was created with, so
        `Angle.from_degrees(540).bound().degrees == 180.0` exactly.
        """
        if self._unit is AngleUnit.DEGREES:
            return Angle(_wrap(self._value, 180.0), AngleUnit.DEGREES)
        return Angle(_wrap(self._value, math.pi), AngleUnit.RADIANS)

    def _magnitude(self) -> float:
        return abs(self.bound().radians)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._magnitude() == other._magnitude()

    def __lt__(self, other) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._magnitude() < other._magnitude()

    def __hash__(self) -> int:
        return hash(self._magnitude())

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._value} {self._unit.value})'

    def __add__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_degrees(self.degrees + other.degrees)

    def __sub__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_degrees(self.degrees - other.degrees)

    def __mul__(self, scalar: float) -> Angle:
        if not isinstance(scalar, (Real, Decimal)):
            return NotImplemented
        return Angle.from_degrees(self.degrees * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Angle:
        if not isinstance(scalar, (Real, Decimal)):
            return NotImplemented
        return Angle.from_degrees(self.degrees / float(scalar))

    def __neg__(self) -> Angle:
        return Angle.from_degrees(-self.degrees)
