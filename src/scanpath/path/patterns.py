"""Index sequences for the scan patterns.

Each pattern is a generator of `(a, b)` lattice indices in visiting order;
`scanpath.path.Path` materializes them. The step counting helpers turn a
grid size and step size (micrometres, `Decimal`) into numbers of lattice
points.
"""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Integral
from typing import Iterator

from scanpath.exceptions import PathConfigurationError
from scanpath.typing import IndexPair


def check_count(n: int, name: str = 'number of points') -> int:
    """Raise `PathConfigurationError` unless `n` is a positive integer."""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise PathConfigurationError(f'The {name} must be an integer, got {n!r}')
    if n < 1:
        raise PathConfigurationError(f'The {name} must be at least 1, got {n}')
    return int(n)


def check_step_size(grid_size: Decimal, step_size: Decimal) -> None:
    if not (grid_size.is_finite() and step_size.is_finite()):
        raise PathConfigurationError(
            f'Grid and step size must be finite, got {grid_size} and {step_size}'
        )
    if step_size <= 0:
        raise PathConfigurationError(f'Step size must be positive, got {step_size}')
    if grid_size < 0:
        raise PathConfigurationError(f'Grid size must not be negative, got {grid_size}')


def count_steps(grid_size: Decimal, step_size: Decimal) -> int:
    """Number of steps of `step_size` that fit the grid, rounded half to
    even."""
    check_step_size(grid_size, step_size)
    return int(round(grid_size / step_size))


def count_raster_steps(grid_size: Decimal, step_size: Decimal) -> int:
    """Number of steps of `step_size` that fit the grid, rounded down.

    A raster cannot recover from overshooting the grid, so partial steps
    are dropped. At least one step must fit.
    """
    check_step_size(grid_size, step_size)
    steps = math.floor(grid_size / step_size)
    if steps < 1:
        raise PathConfigurationError(
            f'Grid size {grid_size} is smaller than a single step of {step_size}'
        )
    return steps


def flyback_step(skip: Decimal, step_size: Decimal) -> int:
    """Stride of the flyback in lattice units: how many steps of
    `step_size` fit in `skip`, at least 1."""
    check_step_size(Decimal(0), step_size)
    if not skip.is_finite() or skip <= 0:
        raise PathConfigurationError(f'Flyback skip must be positive, got {skip}')
    return max(1, math.floor(skip / step_size))


def grid_indices(nx: int, ny: int) -> Iterator[IndexPair]:
    """Visit `nx` x `ny` lattice points, x outer, y inner, both ascending."""
    for x in range(nx):
        for y in range(ny):
            yield x, y


def snake_indices(nx: int, ny: int) -> Iterator[IndexPair]:
    """Like `grid_indices`, but y runs backwards on odd x."""
    for x in range(nx):
        ys = range(ny) if x % 2 == 0 else range(ny - 1, -1, -1)
        for y in ys:
            yield x, y


def raster_indices(nx: int, ny: int, flyback: int = 1) -> Iterator[IndexPair]:
    """Visit rows of `nx` points along x, one row per y, always in +x.

    Every row after the first starts with a flyback: x counts down from
    `nx - flyback` to `flyback` in strides of `flyback`, on the new row,
    before the row is imaged from x = 0. Imaging points can coincide with
    flyback points.
    """
    check_count(flyback, 'flyback step')
    for y in range(ny):
        if y > 0:
            for x in range(nx - flyback, flyback - 1, -flyback):
                yield x, y
        for x in range(nx):
            yield x, y
