from __future__ import annotations

from typing import ClassVar

from typing_extensions import Self


class InstanceAutoTracker:
    """Track cls instances: useful for @pytest.mark.parametrize dataclasses"""

    INSTANCES: ClassVar[list]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.INSTANCES: list[Self] = []

    def __post_init__(self) -> None:
        self.__class__.INSTANCES.append(self)
