from __future__ import annotations

from decimal import Decimal
from typing import Union, overload

import numpy as np

AnyNumber = Union[int, float, np.floating, np.integer]
NativeNumber = Union[int, float]


@overload
def native(x: np.floating) -> float: ...
@overload
def native(x: np.integer) -> int: ...
@overload
def native(x: float) -> float: ...
@overload
def native(x: int) -> int: ...


def native(x: AnyNumber) -> NativeNumber:
    """Convert numpy scalars to the respective built-in number type, leave
    built-in numbers alone."""
    return x.item() if hasattr(x, 'item') else x


def as_decimal(x: Union[AnyNumber, Decimal, str]) -> Decimal:
    """Convert `x` to a `Decimal` through its shortest string form.

    Going through `str` means `0.1` becomes `Decimal('0.1')` instead of the
    exact binary value `Decimal(0.1)` = 0.1000000000000000055511151231...
    """
    if isinstance(x, Decimal):
        return x
    x = native(x)
    if isinstance(x, int):
        return Decimal(x)
    return Decimal(str(x))
