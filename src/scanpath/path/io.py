from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Type

import matplotlib.pyplot as plt
import numpy as np
import yaml

from scanpath import config
from scanpath.geometry.point import Point
from scanpath.typing import AnyPath
from scanpath.utils.yaml import PathDumper

if TYPE_CHECKING:
    from scanpath.path.path import Path

logger = logging.getLogger(__name__)

_plane_axes = {
    'XY': (0, 1),
    'XZ': (0, 2),
    'YZ': (1, 2),
}


def path_to_dict(path: Path) -> dict:
    """Plain-data representation of `path`; decimals are kept exact as
    strings."""
    return {
        'indices': [list(p) for p in path.indices],
        'origin': [str(c) for c in path.origin],
        'scale': [str(s) for s in path.scale],
        'plane': path.plane.value,
    }


def path_from_dict(d: dict, cls: Optional[Type[Path]] = None) -> Path:
    """Inverse of `path_to_dict`."""
    if cls is None:
        from scanpath.path.path import Path as cls

    return cls(
        indices=tuple(tuple(p) for p in d['indices']),
        origin=Point.create(*d['origin']),
        scale=tuple(d['scale']),
        plane=d['plane'],
    )


def save_path(path: Path, filename: Optional[AnyPath] = None) -> None:
    """Save `path` as yaml.

    filename : str
        Output file. Defaults to `config.defaults.io['filename']`.
    """
    if not filename:
        filename = config.defaults.io['filename']

    d = path_to_dict(path)
    d['indices'] = path.to_array()

    with open(filename, 'w') as f:
        yaml.dump(d, stream=f, Dumper=PathDumper, sort_keys=False)

    logger.info('Wrote path with %d points to %s', len(path), filename)


def load_path(filename: Optional[AnyPath] = None, cls: Optional[Type[Path]] = None) -> Path:
    """Load a path written by `save_path`."""
    if not filename:
        filename = config.defaults.io['filename']

    with open(filename) as f:
        d = yaml.safe_load(f)

    path = path_from_dict(d, cls=cls)
    logger.info('Read path with %d points from %s', len(path), filename)
    return path


def plot_path(path: Path, ax: Optional[plt.Axes] = None) -> plt.Axes:
    """Scatter plot of the world co-ordinates of `path`, labelled with the
    visiting order and connected in that order."""
    if ax is None:
        ax = plt.gca()

    i, j = _plane_axes[path.plane.value]
    coords = np.array([[float(c) for c in p] for p in path.coordinates()])
    u, v = coords[:, i], coords[:, j]

    ax.plot(u, v, color='lightgray', zorder=0)
    ax.scatter(u, v, marker='.', color='red')
    for n, (a, b) in enumerate(zip(u, v)):
        ax.text(a, b, s=f' {n}')

    labels = path.plane.value.lower()
    ax.set_aspect('equal')
    ax.set_title(f'Scan path ({len(path)} points)')
    ax.set_xlabel(f'{labels[0]} (μm)')
    ax.set_ylabel(f'{labels[1]} (μm)')
    return ax
