from __future__ import annotations

from .version import __description__, __title__, __version__
from .geometry import Angle, Micrometre, Point, Vector, Volt
from .path import Path, Plane
