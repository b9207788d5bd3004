from __future__ import annotations

from .path import Path, Plane
from .patterns import grid_indices, raster_indices, snake_indices
