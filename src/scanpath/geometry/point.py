from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Tuple

from typing_extensions import Self

from scanpath.geometry.angle import Angle
from scanpath.geometry.units import Micrometre, U, Volt
from scanpath.geometry.vector import Vector


@dataclass(frozen=True)
class Point(Generic[U]):
    """A location in 3D space, stored as its position vector from the
    origin.

    Points and vectors share their structure, the difference is what they
    mean: subtracting two points gives the `Vector` between them, and a
    vector can be added to a point to move it.
    """

    _vector: Vector[U]

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(x={self.x!r}, y={self.y!r}, z={self.z!r})'

    def __str__(self) -> str:
        return str(self._vector)

    def __iter__(self) -> Iterator:
        return iter(self._vector)

    @classmethod
    def create(cls, x, y, z) -> Self:
        """Create a point from Cartesian co-ordinates."""
        return cls(Vector(x, y, z))

    @classmethod
    def from_vector(cls, vector: Vector[U]) -> Self:
        return cls(vector)

    @classmethod
    def origin(cls) -> Self:
        """The point (0, 0, 0)."""
        return cls(Vector(0.0, 0.0, 0.0))

    def to_vector(self) -> Vector[U]:
        """Position vector of this point."""
        return self._vector

    def as_tuple(self) -> Tuple[Any, Any, Any]:
        return self._vector.as_tuple()

    @property
    def x(self) -> Any:
        return self._vector.x

    @property
    def y(self) -> Any:
        return self._vector.y

    @property
    def z(self) -> Any:
        return self._vector.z

    @property
    def radius(self) -> float:
        """Spherical radius, the distance from the origin."""
        return self._vector.magnitude

    @property
    def inclination(self) -> Angle:
        return self._vector.inclination

    @property
    def azimuth(self) -> Angle:
        return self._vector.azimuth

    def with_radius(self, radius) -> Point[U]:
        """Move the point along its position vector to distance `radius`.

        Inclination and azimuth are recomputed from the current Cartesian
        co-ordinates, so repeated spherical updates accumulate round-off.
        The origin has no inclination and raises `ZeroMagnitudeError`.
        """
        return Point(Vector.create_spherical(radius, self.inclination, self.azimuth))

    def with_inclination(self, inclination: Angle) -> Point[U]:
        return Point(Vector.create_spherical(self.radius, inclination, self.azimuth))

    def with_azimuth(self, azimuth: Angle) -> Point[U]:
        return Point(Vector.create_spherical(self.radius, self.inclination, azimuth))

    def with_x(self, x) -> Point[U]:
        return Point(self._vector.with_x(x))

    def with_y(self, y) -> Point[U]:
        return Point(self._vector.with_y(y))

    def with_z(self, z) -> Point[U]:
        return Point(self._vector.with_z(z))

    def map(self, mapper: Callable[[Any], Any]) -> Point:
        return Point(self._vector.map(mapper))

    def map2(self, mapper: Callable[[Any, Any], Any], other: Point) -> Point:
        return Point(self._vector.map2(mapper, other._vector))

    def mapi(self, mapper: Callable[[int, Any], Any]) -> Point:
        return Point(self._vector.mapi(mapper))

    def mapi2(self, mapper: Callable[[int, Any, Any], Any], other: Point) -> Point:
        return Point(self._vector.mapi2(mapper, other._vector))

    def map_each(self, mapper: Callable[[tuple], tuple]) -> Point:
        return Point(self._vector.map_each(mapper))

    def map_each2(self, mapper: Callable[[tuple, tuple], tuple], other: Point) -> Point:
        return Point(self._vector.map_each2(mapper, other._vector))

    def reverse_parity(self) -> Point[U]:
        """Mirror the point through the origin."""
        return self.map(lambda c: -c)

    def midpoint(self, other: Point[U]) -> Point[U]:
        return Point((self._vector + other._vector) / 2)

    def __sub__(self, other):
        if isinstance(other, Point):
            return self._vector - other._vector
        if isinstance(other, Vector):
            return Point(self._vector - other)
        return NotImplemented

    def __add__(self, other: Vector[U]) -> Point[U]:
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self._vector + other)


MicrometrePoint = Point[Micrometre]
VoltagePoint = Point[Volt]
