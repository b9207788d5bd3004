from __future__ import annotations

import math
from dataclasses import dataclass, replace
from decimal import Decimal
from numbers import Number
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, Tuple

import numpy as np
from typing_extensions import Self

from scanpath.exceptions import ZeroMagnitudeError
from scanpath.geometry.angle import Angle
from scanpath.geometry.units import U
from scanpath.utils.native import as_decimal

if TYPE_CHECKING:
    from scanpath.geometry.point import Point


def clamp_unit_interval(value: float) -> float:
    """Clip `value` to [-1, 1] so rounding never takes `acos` out of its
    domain."""
    return max(-1.0, min(1.0, value))


def _align(a, b):
    """Convert a float operand to `Decimal` when the other one is a
    `Decimal`, so exact and float values can be mixed."""
    if isinstance(a, Decimal) and not isinstance(b, Decimal):
        return a, as_decimal(b)
    if isinstance(b, Decimal) and not isinstance(a, Decimal):
        return as_decimal(a), b
    return a, b


def _add(a, b):
    a, b = _align(a, b)
    return a + b


def _sub(a, b):
    a, b = _align(a, b)
    return a - b


def _mul(a, b):
    a, b = _align(a, b)
    return a * b


def _div(a, b):
    a, b = _align(a, b)
    return a / b


@dataclass(frozen=True)
class Vector(Generic[U]):
    """A displacement in 3D space with components in the unit `U`.

    The unit is a type parameter only, e.g. `Vector[Micrometre]`, it is not
    stored on the instance. Components can be floats, or `Decimal` when
    exact base-10 arithmetic is needed; spherical quantities are always
    computed in floating point.
    """

    x: Any
    y: Any
    z: Any

    def __str__(self) -> str:
        return f'({self.x:g}, {self.y:g}, {self.z:g})'

    def __iter__(self) -> Iterator:
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def create(cls, x, y, z) -> Self:
        """Create a vector from Cartesian components."""
        return cls(x, y, z)

    @classmethod
    def create_spherical(cls, radius, inclination: Angle, azimuth: Angle) -> Self:
        """Create a vector from spherical co-ordinates (physics convention).

        Parameters
        ----------
        radius : float
            Length of the vector.
        inclination : Angle
            Angle measured from the +z axis.
        azimuth : Angle
            Angle in the xy plane measured from the +x axis towards +y.
        """
        radius = float(radius)
        theta = inclination.radians
        phi = azimuth.radians
        return cls(
            radius * math.sin(theta) * math.cos(phi),
            radius * math.sin(theta) * math.sin(phi),
            radius * math.cos(theta),
        )

    @classmethod
    def between(cls, source: Point[U], destination: Point[U]) -> Vector[U]:
        """Vector that moves `source` onto `destination`."""
        return destination - source

    @classmethod
    def of_point(cls, point: Point[U]) -> Vector[U]:
        """Position vector of `point` relative to the origin."""
        return point.to_vector()

    def as_tuple(self) -> Tuple[Any, Any, Any]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        """Return the components as a float numpy array of shape (3,)."""
        return np.array([float(c) for c in self], dtype=float)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    @property
    def inclination(self) -> Angle:
        """Spherical inclination, the angle from the +z axis."""
        magnitude = self.magnitude
        if magnitude == 0:
            raise ZeroMagnitudeError('The inclination of a zero-length vector is undefined')
        return Angle.from_radians(math.acos(clamp_unit_interval(float(self.z) / magnitude)))

    @property
    def azimuth(self) -> Angle:
        """Spherical azimuth, measured from the +x axis towards +y.

        Raises `ZeroMagnitudeError` for the zero vector.
        """
        if self.x == 0 and self.y == 0 and self.z == 0:
            raise ZeroMagnitudeError('The azimuth of a zero-length vector is undefined')
        return Angle.from_radians(math.atan2(float(self.y), float(self.x)))

    def dot(self, other: Vector[U]) -> Any:
        return _mul(self.x, other.x) + _mul(self.y, other.y) + _mul(self.z, other.z)

    def cross(self, other: Vector[U]) -> Vector[U]:
        return Vector(
            _mul(self.y, other.z) - _mul(self.z, other.y),
            _mul(self.z, other.x) - _mul(self.x, other.z),
            _mul(self.x, other.y) - _mul(self.y, other.x),
        )

    def unit(self) -> Vector[U]:
        """Vector of length 1 in the same direction, with float components.

        Raises `ZeroMagnitudeError` for the zero vector.
        """
        magnitude = self.magnitude
        if magnitude == 0:
            raise ZeroMagnitudeError('Cannot normalize a zero-length vector')
        return self.map(lambda c: float(c) / magnitude)

    def angle(self, other: Vector) -> Angle:
        """Angle between this vector and `other`, in [0, pi] radians."""
        magnitudes = self.magnitude * other.magnitude
        if magnitudes == 0:
            raise ZeroMagnitudeError('The angle with a zero-length vector is undefined')
        dot = sum(float(a) * float(b) for a, b in zip(self, other))
        cosine = clamp_unit_interval(dot / magnitudes)
        return Angle.from_radians(math.acos(cosine))

    def with_x(self, x) -> Vector[U]:
        return replace(self, x=x)

    def with_y(self, y) -> Vector[U]:
        return replace(self, y=y)

    def with_z(self, z) -> Vector[U]:
        return replace(self, z=z)

    def map(self, mapper: Callable[[Any], Any]) -> Vector:
        """Apply `mapper` to each component."""
        return Vector(mapper(self.x), mapper(self.y), mapper(self.z))

    def map2(self, mapper: Callable[[Any, Any], Any], other: Vector) -> Vector:
        """Apply `mapper` pairwise to the components of this vector and
        `other`."""
        return Vector(mapper(self.x, other.x), mapper(self.y, other.y), mapper(self.z, other.z))

    def mapi(self, mapper: Callable[[int, Any], Any]) -> Vector:
        """Like `map`, but `mapper` also receives the axis index (x: 0, y: 1,
        z: 2)."""
        return Vector(mapper(0, self.x), mapper(1, self.y), mapper(2, self.z))

    def mapi2(self, mapper: Callable[[int, Any, Any], Any], other: Vector) -> Vector:
        """Like `map2`, but `mapper` also receives the axis index."""
        return Vector(
            mapper(0, self.x, other.x),
            mapper(1, self.y, other.y),
            mapper(2, self.z, other.z),
        )

    def map_each(self, mapper: Callable[[tuple], tuple]) -> Vector:
        """Apply `mapper` to the (x, y, z) tuple, it must return a new
        tuple."""
        x, y, z = mapper(self.as_tuple())
        return Vector(x, y, z)

    def map_each2(self, mapper: Callable[[tuple, tuple], tuple], other: Vector) -> Vector:
        x, y, z = mapper(self.as_tuple(), other.as_tuple())
        return Vector(x, y, z)

    def __add__(self, other: Vector[U]) -> Vector[U]:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.map2(_add, other)

    def __sub__(self, other: Vector[U]) -> Vector[U]:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.map2(_sub, other)

    def __mul__(self, scalar) -> Vector[U]:
        if not isinstance(scalar, Number):
            return NotImplemented
        return self.map(lambda c: _mul(c, scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar) -> Vector[U]:
        if not isinstance(scalar, Number):
            return NotImplemented
        return self.map(lambda c: _div(c, scalar))

    def __matmul__(self, other: Vector[U]) -> Any:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __neg__(self) -> Vector[U]:
        return self.map(lambda c: -c)
