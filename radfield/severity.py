"""
Severity bands used to colour the exposure grid.

Bands are half-open intervals ordered by lower bound and looked up with a
single scan of SEVERITY_BANDS.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum

BASELINE = 0.000_000_100  # 100 nSv/h background radiation


class Severity(Enum):
    FAINT = 1
    LOW = 2
    MODERATE = 3
    HIGH = 4
    SEVERE = 5
    EXTREME = 6


@dataclass(frozen=True)
class SeverityBand:
    """
    Magnitude interval mapped to a display colour.

    Attributes:
        severity: Band identifier
        lower: Lower bound (Sv/h)
        upper: Upper bound (Sv/h)
        lower_inclusive: Whether `lower` itself belongs to the band
        upper_inclusive: Whether `upper` itself belongs to the band
        color: Matplotlib colour string
    """
    severity: Severity
    lower: float
    upper: float
    lower_inclusive: bool
    upper_inclusive: bool
    color: str

    def contains(self, magnitude: float) -> bool:
        above = magnitude >= self.lower if self.lower_inclusive else magnitude > self.lower
        below = magnitude <= self.upper if self.upper_inclusive else magnitude < self.upper
        return above and below


SEVERITY_BANDS = (
    SeverityBand(Severity.FAINT, -math.inf, BASELINE, True, True, "#90ee90"),
    SeverityBand(Severity.LOW, BASELINE, 0.000_01, False, False, "#a0a0a0"),
    # 10 uSv/h
    SeverityBand(Severity.MODERATE, 0.000_01, 0.001, True, False, "#ffff00"),
    # 1 mSv/h
    SeverityBand(Severity.HIGH, 0.001, 0.1, True, False, "#ffa500"),
    # 100 mSv/h
    SeverityBand(Severity.SEVERE, 0.1, 10.0, True, False, "#ff0000"),
    # 10 Sv/h
    SeverityBand(Severity.EXTREME, 10.0, math.inf, True, True, "#8b0000"),
)


def classify_severity(magnitude: float) -> SeverityBand:
    """Find the band holding `magnitude`. NaN falls into the last band."""
    for band in SEVERITY_BANDS:
        if band.contains(magnitude):
            return band
    return SEVERITY_BANDS[-1]


def get_severity_color(magnitude: float) -> str:
    """Display colour for an exposure magnitude."""
    return classify_severity(magnitude).color
