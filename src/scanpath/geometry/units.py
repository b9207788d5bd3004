from __future__ import annotations

from typing import TypeVar


class Unit:
    """Marker for the physical unit of a `Vector` or `Point`.

    Units only exist for the type checker: `Vector[Micrometre]` and
    `Vector[Volt]` are the same class at runtime, and no unit is stored on
    the instances. Subclass `Unit` to declare a new unit.
    """

    symbol: str = ''

    def __init__(self):
        raise TypeError(f'{self.__class__.__name__} is a unit marker and cannot be instantiated')


class Micrometre(Unit):
    symbol = 'um'


class Metre(Unit):
    symbol = 'm'


class Volt(Unit):
    symbol = 'V'


class Dimensionless(Unit):
    symbol = ''


U = TypeVar('U', bound=Unit)
