"""
Previewer configuration.

All settings are supplied by the caller; nothing is read from the environment.
Values are checked once, when the configuration is built, so that the field
model never sees an out-of-range decay rate.
"""
from __future__ import annotations
from dataclasses import dataclass


class ConfigurationError(ValueError):
    """A configuration value is outside its allowed range."""


def check_decay_rate(name: str, rate: float) -> float:
    """
    Validate a per-step decay rate.

    Args:
        name: Setting name used in the error message
        rate: Fraction of magnitude kept per decay step

    Returns:
        The rate as a float

    Raises:
        ConfigurationError: if rate is not strictly between 0 and 1
    """
    rate = float(rate)
    if not 0.0 < rate < 1.0:
        raise ConfigurationError(f"{name} must be in (0, 1), got {rate}")
    return rate


@dataclass
class PreviewConfig:
    """Configuration parameters for the radiation previewer."""

    # Decay
    source_decay_rate: float = 0.9995  # Per-step decay at the source block
    target_decay_rate: float = 0.9995  # Per-step decay on exposed entities

    # Grid
    rows: int = 100
    columns: int = 100
    cell_size: float = 1.0  # Blocks between cells
    min_cell_size: float = 1.0
    max_cell_size: float = 128.0

    # Display
    unit_suffix: str = "Sv"
    popup_decimal_places: int = 3

    # Logging
    enable_verbose_logging: bool = False

    def __post_init__(self):
        self.source_decay_rate = check_decay_rate("source_decay_rate", self.source_decay_rate)
        self.target_decay_rate = check_decay_rate("target_decay_rate", self.target_decay_rate)

        if self.rows < 1 or self.columns < 1:
            raise ConfigurationError(
                f"Grid must have at least one row and column, got {self.rows}x{self.columns}"
            )
        if not 0.0 < self.min_cell_size <= self.max_cell_size:
            raise ConfigurationError(
                f"Invalid cell size range [{self.min_cell_size}, {self.max_cell_size}]"
            )
        self.cell_size = self.clamp_cell_size(self.cell_size, strict=True)

        if self.popup_decimal_places < 0:
            raise ConfigurationError(
                f"popup_decimal_places must be non-negative, got {self.popup_decimal_places}"
            )

    def clamp_cell_size(self, cell_size: float, strict: bool = False) -> float:
        """
        Bring a cell size into the allowed range.

        With `strict`, an out-of-range value raises instead of being clamped.
        """
        cell_size = float(cell_size)
        if self.min_cell_size <= cell_size <= self.max_cell_size:
            return cell_size
        if strict:
            raise ConfigurationError(
                f"cell_size must be in [{self.min_cell_size}, {self.max_cell_size}], got {cell_size}"
            )
        return min(max(cell_size, self.min_cell_size), self.max_cell_size)

    def decay_rate(self, is_source: bool) -> float:
        """Decay rate for a source block or for an exposed target."""
        return self.source_decay_rate if is_source else self.target_decay_rate
