"""
SI prefix selection and magnitude formatting.

    >>> select_unit(0.00314).format(0.00314, "Sv", 3)
    '3.140 mSv'
"""
from __future__ import annotations
from enum import Enum
from typing import List


class MeasurementUnit(Enum):
    """SI prefixes in ascending order. Value is (symbol, scale)."""
    FEMTO = ("f", 1e-15)
    PICO = ("p", 1e-12)
    NANO = ("n", 1e-9)
    MICRO = ("µ", 1e-6)
    MILLI = ("m", 1e-3)
    BASE = ("", 1.0)
    KILO = ("k", 1e3)
    MEGA = ("M", 1e6)
    GIGA = ("G", 1e9)
    TERA = ("T", 1e12)
    PETA = ("P", 1e15)
    EXA = ("E", 1e18)
    ZETTA = ("Z", 1e21)
    YOTTA = ("Y", 1e24)

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def scale(self) -> float:
        return self.value[1]

    def process(self, value: float) -> float:
        """Express `value` in this unit."""
        return value / self.scale

    def format(self, value: float, unit_suffix: str, decimal_places: int) -> str:
        """
        Render `value` in this unit, e.g. "3.140 mSv".

        The sign is dropped: negative values are shown as their absolute value.
        """
        return f"{self.process(abs(value)):.{decimal_places}f} {self.symbol}{unit_suffix}"


_UNITS: List[MeasurementUnit] = list(MeasurementUnit)


def select_unit(value: float) -> MeasurementUnit:
    """
    Pick the largest prefix whose scale is <= value.

    Values below the smallest scale use FEMTO and YOTTA takes everything at or
    above its own scale. Lower bounds are inclusive, so 1000.0 is KILO.
    """
    for i, unit in enumerate(_UNITS):
        if (
            (i == 0 and value < unit.scale)
            or i + 1 >= len(_UNITS)
            or unit.scale <= value < _UNITS[i + 1].scale
        ):
            return unit
    return MeasurementUnit.BASE


def format_magnitude(value: float, unit_suffix: str = "Sv", decimal_places: int = 3) -> str:
    """Select a prefix for the sign-stripped value and render it."""
    return select_unit(abs(value)).format(value, unit_suffix, decimal_places)
