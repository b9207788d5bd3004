from __future__ import annotations

import numpy as np
import yaml


def _array_representer(dumper: yaml.Dumper, array: np.ndarray) -> yaml.nodes.SequenceNode:
    """Write (n, 2) index arrays with one `- [a, b]` pair per line."""
    if array.ndim != 2:
        return dumper.represent_list(array.tolist())
    rows = []
    for row in array.tolist():
        node = dumper.represent_list(row)
        node.flow_style = True
        rows.append(node)
    return yaml.SequenceNode(tag='tag:yaml.org,2002:seq', value=rows, flow_style=False)


class PathDumper(yaml.SafeDumper):
    """Safe yaml Dumper that keeps index pairs of a path compact."""


PathDumper.add_representer(np.ndarray, _array_representer)
