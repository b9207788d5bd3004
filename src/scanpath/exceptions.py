from __future__ import annotations


class ScanPathError(Exception):
    pass


class GeometryValueError(ScanPathError, ValueError):
    pass


class ZeroMagnitudeError(GeometryValueError):
    pass


class PathConfigurationError(ScanPathError, ValueError):
    pass


class PathIndexError(ScanPathError, IndexError):
    pass
