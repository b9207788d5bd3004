from __future__ import annotations

import os
from decimal import Decimal
from typing import Tuple, Union

from typing_extensions import Annotated

AnyPath = Union[str, os.PathLike]
AnyDecimal = Union[Decimal, int, float, str]
float_deg = Annotated[float, 'Angle expressed in degrees']
float_rad = Annotated[float, 'Angle expressed in radians']
decimal_um = Annotated[Decimal, 'Length expressed in micrometres']
IndexPair = Tuple[int, int]
