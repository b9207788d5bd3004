from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

import yaml

from scanpath.typing import AnyPath

logger = logging.getLogger(__name__)

_defaults_yaml = 'defaults.yaml'
_environment_variable = 'SCANPATH_CONFIG'


def nested_update(d: dict, u: Mapping) -> dict:
    """Nested dictionary update, updates `d` with `u`"""
    for k, v in u.items():
        if isinstance(v, Mapping):
            d[k] = nested_update(d.get(k, {}), v)
        else:
            d[k] = v
    return d


class ConfigObject:
    """Namespace for configuration (maps dict items to attributes)."""

    def __init__(self, mapping: dict, name: str = 'config', location: Optional[AnyPath] = None):
        super().__init__()
        self.name = name
        self.location = location
        self.mapping = {}
        self.update(mapping)

    def __repr__(self):
        return f"{self.__class__.__name__}('{self.name}')"

    def __getitem__(self, item):
        return self.mapping[item]

    @classmethod
    def from_file(cls, path: AnyPath):
        """Read configuration from yaml file, returns namespace."""
        with open(path) as f:
            mapping = yaml.safe_load(f) or {}
        return cls(mapping, name=Path(path).stem, location=path)

    def update_from_file(self, path: AnyPath) -> None:
        """Update configuration from yaml file."""
        with open(path) as f:
            self.update(yaml.safe_load(f) or {})
        self.location = path

    def update(self, mapping: Mapping):
        for key, value in mapping.items():
            if isinstance(value, Mapping):
                try:
                    nested_update(getattr(self, key), value)
                except AttributeError:
                    setattr(self, key, dict(value))
            else:
                setattr(self, key, value)
        nested_update(self.mapping, mapping)


def load_defaults(path: Optional[AnyPath] = None) -> ConfigObject:
    """Load the bundled defaults, then merge the user file on top.

    The user file is `path` if given, otherwise the file named by the
    `SCANPATH_CONFIG` environment variable, if set.
    """
    global defaults

    defaults = ConfigObject.from_file(Path(__file__).parent / _defaults_yaml)

    if path is None:
        path = os.environ.get(_environment_variable)

    if path:
        logger.debug('Updating defaults from %s', path)
        defaults.update_from_file(path)

    return defaults


defaults: ConfigObject = None

load_defaults()
