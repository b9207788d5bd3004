from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np
from typing_extensions import Self

from scanpath import config
from scanpath.exceptions import PathConfigurationError, PathIndexError
from scanpath.geometry.point import Point
from scanpath.geometry.units import Micrometre
from scanpath.path.patterns import (
    check_count,
    count_raster_steps,
    count_steps,
    flyback_step,
    grid_indices,
    raster_indices,
    snake_indices,
)
from scanpath.typing import AnyDecimal, AnyPath, IndexPair, decimal_um
from scanpath.utils.native import as_decimal

logger = logging.getLogger(__name__)

DecimalPair = Tuple[decimal_um, decimal_um]
AnyPair = Tuple[AnyDecimal, AnyDecimal]


class Plane(Enum):
    """The two axes addressed by the (a, b) indices of a path."""

    XY = 'XY'
    XZ = 'XZ'
    YZ = 'YZ'

    @classmethod
    def from_any(cls, plane: Union[Plane, str]) -> Plane:
        if isinstance(plane, Plane):
            return plane
        try:
            return cls(str(plane).upper())
        except ValueError:
            raise PathConfigurationError(
                f'Unknown plane {plane!r}, must be one of {[p.value for p in cls]}'
            ) from None


def _decimal_pair(value, name: str) -> DecimalPair:
    try:
        a, b = value
    except (TypeError, ValueError):
        raise PathConfigurationError(f'{name} must be a pair, got {value!r}') from None
    pair = as_decimal(a), as_decimal(b)
    if not all(v.is_finite() for v in pair):
        raise PathConfigurationError(f'{name} must be finite, got {value!r}')
    return pair


def _as_index(value) -> int:
    try:
        index = int(value)
    except (TypeError, ValueError, OverflowError):
        raise PathConfigurationError(f'Path index must be an integer, got {value!r}') from None
    if index != value:
        raise PathConfigurationError(f'Path index must be an integer, got {value!r}')
    return index


def _as_origin(origin) -> Point[Micrometre]:
    if not isinstance(origin, Point):
        origin = Point.create(*origin)
    return origin.map(as_decimal)


def _positive_grid_size(grid_size: DecimalPair) -> DecimalPair:
    for g in grid_size:
        if g <= 0:
            raise PathConfigurationError(f'Grid size must be positive, got {g}')
    return grid_size


def _default_skip() -> Decimal:
    return as_decimal(config.defaults.path['flyback_skip'])


@dataclass(frozen=True, repr=False)
class Path:
    """An ordered sequence of lattice indices to visit during a scan.

    Use the `create*` class methods to build a path. Index pair `(a, b)` is
    mapped to the world co-ordinate `origin + (a * scale[0], b * scale[1])`
    along the two axes of `plane`; the third co-ordinate stays at the
    origin's value. Co-ordinates are `Decimal` micrometres.

    Paths are immutable, `repeat_first_point` and `repeat_last_point` return
    new paths.
    """

    indices: Tuple[IndexPair, ...]
    origin: Point[Micrometre]
    scale: DecimalPair
    plane: Plane

    def __post_init__(self):
        indices = tuple((_as_index(a), _as_index(b)) for a, b in self.indices)
        if not indices:
            raise PathConfigurationError('A path must contain at least one point')
        if any(a < 0 or b < 0 for a, b in indices):
            raise PathConfigurationError('Path indices must not be negative')
        object.__setattr__(self, 'indices', indices)
        object.__setattr__(self, 'origin', _as_origin(self.origin))
        object.__setattr__(self, 'scale', _decimal_pair(self.scale, 'Scale'))
        object.__setattr__(self, 'plane', Plane.from_any(self.plane))

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}(points={len(self)}, origin={self.origin}, '
            f'scale=({self.scale[0]}, {self.scale[1]}), plane={self.plane.value})'
        )

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[IndexPair]:
        return iter(self.indices)

    @classmethod
    def _from_pattern(
        cls,
        pattern: str,
        indices: Iterable[IndexPair],
        origin,
        scale: DecimalPair,
        plane: Optional[Union[Plane, str]],
    ) -> Self:
        if plane is None:
            plane = config.defaults.path['plane']
        path = cls(tuple(indices), origin, scale, plane)
        logger.debug('Created %s path with %d points: %r', pattern, len(path), path)
        return path

    @classmethod
    def create(
        cls,
        origin,
        grid_size: AnyPair,
        step_size: AnyPair,
        plane: Optional[Union[Plane, str]] = None,
    ) -> Self:
        """Grid path from `step_size`, both edges of the grid included.

        Parameters
        ----------
        origin : Point or tuple
            World co-ordinate of index (0, 0), in micrometres.
        grid_size : tuple
            Extent of the grid along the two axes of `plane`, in micrometres.
        step_size : tuple
            Distance between neighbouring points along each axis, in micrometres.
        plane : Plane or str
            Plane of the grid, defaults to `config.defaults.path['plane']`.

        Returns
        -------
        path : Path
            `(round(gx / sx) + 1) * (round(gy / sy) + 1)` points, x outer and
            y inner, both ascending.
        """
        gx, gy = _decimal_pair(grid_size, 'Grid size')
        sx, sy = _decimal_pair(step_size, 'Step size')
        nx = count_steps(gx, sx) + 1
        ny = count_steps(gy, sy) + 1
        return cls._from_pattern('grid', grid_indices(nx, ny), origin, (sx, sy), plane)

    @classmethod
    def create_by_number_of_points(
        cls,
        origin,
        grid_size: AnyPair,
        number_of_points: Tuple[int, int],
        plane: Optional[Union[Plane, str]] = None,
    ) -> Self:
        """Grid path of `nx * ny` points, the far edge of the grid excluded.

        The step size is `grid_size / number_of_points` along each axis.
        """
        gx, gy = _positive_grid_size(_decimal_pair(grid_size, 'Grid size'))
        nx, ny = (check_count(n) for n in number_of_points)
        scale = (gx / nx, gy / ny)
        return cls._from_pattern('grid', grid_indices(nx, ny), origin, scale, plane)

    @classmethod
    def create_snake(
        cls,
        origin,
        grid_size: AnyPair,
        step_size: AnyPair,
        plane: Optional[Union[Plane, str]] = None,
    ) -> Self:
        """Same points as `Path.create`, but y runs backwards on odd x so
        there is no long move back between rows."""
        gx, gy = _decimal_pair(grid_size, 'Grid size')
        sx, sy = _decimal_pair(step_size, 'Step size')
        nx = count_steps(gx, sx) + 1
        ny = count_steps(gy, sy) + 1
        return cls._from_pattern('snake', snake_indices(nx, ny), origin, (sx, sy), plane)

    @classmethod
    def create_snake_by_number_of_points(
        cls,
        origin,
        grid_size: AnyPair,
        number_of_points: Tuple[int, int],
        plane: Optional[Union[Plane, str]] = None,
    ) -> Self:
        """Same points as `Path.create_by_number_of_points`, visited as a
        snake."""
        gx, gy = _positive_grid_size(_decimal_pair(grid_size, 'Grid size'))
        nx, ny = (check_count(n) for n in number_of_points)
        scale = (gx / nx, gy / ny)
        return cls._from_pattern('snake', snake_indices(nx, ny), origin, scale, plane)

    @classmethod
    def create_raster(
        cls,
        origin,
        grid_size: AnyPair,
        step_size: AnyPair,
        plane: Optional[Union[Plane, str]] = None,
        skip: Optional[AnyDecimal] = None,
    ) -> Self:
        """Raster path: every row is imaged in +x, preceded by a flyback.

        Parameters
        ----------
        origin, grid_size, step_size, plane
            As in `Path.create`. The number of steps is rounded down,
            `floor(g / s)` per axis, and the far edge is excluded.
        skip : Decimal
            Distance in micrometres between flyback points, defaults to
            `config.defaults.path['flyback_skip']`. The flyback stride is
            `floor(skip / sx)` lattice steps, at least 1.
        """
        gx, gy = _decimal_pair(grid_size, 'Grid size')
        sx, sy = _decimal_pair(step_size, 'Step size')
        nx = count_raster_steps(gx, sx)
        ny = count_raster_steps(gy, sy)
        skip = _default_skip() if skip is None else as_decimal(skip)
        flyback = flyback_step(skip, sx)
        return cls._from_pattern(
            'raster', raster_indices(nx, ny, flyback), origin, (sx, sy), plane
        )

    @classmethod
    def create_raster_by_number_of_points(
        cls,
        origin,
        grid_size: AnyPair,
        number_of_points: Tuple[int, int],
        plane: Optional[Union[Plane, str]] = None,
        skip: Optional[AnyDecimal] = None,
    ) -> Self:
        """Raster path of `nx` points per row and `ny` rows.

        The flyback stride is scaled from the number of points:
        `floor(nx * skip / gx)`, at least 1.
        """
        gx, gy = _positive_grid_size(_decimal_pair(grid_size, 'Grid size'))
        nx, ny = (check_count(n) for n in number_of_points)
        skip = _default_skip() if skip is None else as_decimal(skip)
        flyback = flyback_step(nx * skip / gx, Decimal(1))
        scale = (gx / nx, gy / ny)
        return cls._from_pattern(
            'raster', raster_indices(nx, ny, flyback), origin, scale, plane
        )

    @classmethod
    def create_square(
        cls, origin, grid_size: AnyDecimal, step_size: AnyDecimal, plane=None
    ) -> Self:
        return cls.create(origin, (grid_size, grid_size), (step_size, step_size), plane)

    @classmethod
    def create_square_by_number_of_points(
        cls, origin, grid_size: AnyDecimal, number_of_points: int, plane=None
    ) -> Self:
        return cls.create_by_number_of_points(
            origin, (grid_size, grid_size), (number_of_points, number_of_points), plane
        )

    @classmethod
    def create_square_snake(
        cls, origin, grid_size: AnyDecimal, step_size: AnyDecimal, plane=None
    ) -> Self:
        return cls.create_snake(origin, (grid_size, grid_size), (step_size, step_size), plane)

    @classmethod
    def create_square_snake_by_number_of_points(
        cls, origin, grid_size: AnyDecimal, number_of_points: int, plane=None
    ) -> Self:
        return cls.create_snake_by_number_of_points(
            origin, (grid_size, grid_size), (number_of_points, number_of_points), plane
        )

    @classmethod
    def create_square_raster(
        cls, origin, grid_size: AnyDecimal, step_size: AnyDecimal, plane=None, skip=None
    ) -> Self:
        return cls.create_raster(
            origin, (grid_size, grid_size), (step_size, step_size), plane, skip
        )

    @classmethod
    def create_square_raster_by_number_of_points(
        cls, origin, grid_size: AnyDecimal, number_of_points: int, plane=None, skip=None
    ) -> Self:
        return cls.create_raster_by_number_of_points(
            origin, (grid_size, grid_size), (number_of_points, number_of_points), plane, skip
        )

    def points(self) -> List[IndexPair]:
        """All index pairs in visiting order."""
        return list(self.indices)

    def point_at_index(self, i: int) -> IndexPair:
        """Index pair visited at position `i`, for 0 <= i < len(path).

        Negative positions are not counted from the end, they raise
        `PathIndexError` like any other position outside the path.
        """
        if not 0 <= i < len(self.indices):
            raise PathIndexError(f'Position {i} is outside of the path (0..{len(self) - 1})')
        return self.indices[i]

    def coordinate_for_point(self, point: IndexPair) -> Point[Micrometre]:
        """World co-ordinate of the index pair `point`."""
        a, b = point
        da, db = self.scale
        x0, y0, z0 = self.origin
        if self.plane is Plane.XY:
            return Point.create(x0 + a * da, y0 + b * db, z0)
        elif self.plane is Plane.XZ:
            return Point.create(x0 + a * da, y0, z0 + b * db)
        else:
            return Point.create(x0, y0 + a * da, z0 + b * db)

    def coordinates_at_index(self, i: int) -> Point[Micrometre]:
        """World co-ordinate visited at position `i`."""
        return self.coordinate_for_point(self.point_at_index(i))

    def coordinates(self) -> List[Point[Micrometre]]:
        """World co-ordinates of all points in visiting order."""
        return [self.coordinate_for_point(p) for p in self.indices]

    def extent(self) -> Tuple[Point[Micrometre], Point[Micrometre]]:
        """Lowest and highest world co-ordinate corners covered by the path."""
        columns = list(zip(*self.coordinates()))
        lower = Point.create(*(min(c) for c in columns))
        upper = Point.create(*(max(c) for c in columns))
        return lower, upper

    def repeat_first_point(self) -> Path:
        """New path that visits the first point twice before continuing."""
        return replace(self, indices=(self.indices[0],) + self.indices)

    def repeat_last_point(self) -> Path:
        """New path that visits the last point twice at the end."""
        return replace(self, indices=self.indices + (self.indices[-1],))

    def to_array(self) -> np.ndarray:
        """Index pairs as an integer array of shape (n, 2)."""
        return np.array(self.indices, dtype=int).reshape(-1, 2)

    def to_dict(self) -> dict:
        from scanpath.path.io import path_to_dict

        return path_to_dict(self)

    @classmethod
    def from_dict(cls, d: dict) -> Self:
        from scanpath.path.io import path_from_dict

        return path_from_dict(d, cls=cls)

    def save(self, filename: Optional[AnyPath] = None) -> None:
        """Write the path to a yaml file, see `scanpath.path.io.save_path`."""
        from scanpath.path.io import save_path

        save_path(self, filename)

    @classmethod
    def load(cls, filename: Optional[AnyPath] = None) -> Self:
        from scanpath.path.io import load_path

        return load_path(filename, cls=cls)

    def plot(self, ax=None):
        """Simple plot of the world co-ordinates in the path plane."""
        from scanpath.path.io import plot_path

        return plot_path(self, ax=ax)
