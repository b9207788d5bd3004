from __future__ import annotations

from .angle import Angle, AngleUnit
from .point import MicrometrePoint, Point, VoltagePoint
from .units import Dimensionless, Metre, Micrometre, Unit, Volt
from .vector import Vector
