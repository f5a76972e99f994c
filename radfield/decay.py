"""
Radiation decay estimation.

The game decays stored radiation by a fixed rate once per decay step
(every 20 ticks). The estimate simply replays that process.
"""
from __future__ import annotations

from .config import check_decay_rate

MIN_MAGNITUDE = 0.000_010  # 10 uSv/h, radiation below this is dropped
TICKS_PER_STEP = 20
TICKS_PER_SECOND = 20


def decay_time(decay_rate: float, magnitude: float) -> int:
    """
    Approximate number of ticks until `magnitude` decays to MIN_MAGNITUDE.

    Args:
        decay_rate: Fraction of magnitude kept per decay step, in (0, 1)
        magnitude: Starting magnitude in Sv/h

    Returns:
        Tick count (a multiple of TICKS_PER_STEP, 0 if already at the floor)

    Raises:
        ConfigurationError: if decay_rate is outside (0, 1)
    """
    decay_rate = check_decay_rate("decay_rate", decay_rate)

    ticks = 0
    while magnitude > MIN_MAGNITUDE:
        magnitude *= decay_rate
        ticks += TICKS_PER_STEP

    return ticks


def ticks_to_hms(ticks: int) -> str:
    """Format a tick count as HH:MM:SS of real time."""
    total_seconds = int(ticks) // TICKS_PER_SECOND
    seconds = total_seconds % 60
    minutes = (total_seconds // 60) % 60
    hours = total_seconds // 3600
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
