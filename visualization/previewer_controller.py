"""
Previewer Controller Module

Holds the editable previewer parameters, turns user input into a radiation
source and keeps the exposure grid in sync with it. The controller has no
GUI dependency so it can be driven from tests as well as from the app.
"""
from __future__ import annotations

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import math
import numpy as np
from typing import List, Optional

from radfield.config import PreviewConfig
from radfield.decay import MIN_MAGNITUDE, decay_time, ticks_to_hms
from radfield.field import GridCell, grid_2d, grid_magnitudes
from radfield.severity import BASELINE
from radfield.source import RadiationSource, RadioactiveMaterial
from radfield.units import select_unit


def parse_non_negative(text: str) -> Optional[float]:
    """Parse a finite, non-negative number from a text field, or None."""
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


class PreviewController:
    """
    Controls the radiation source parameters and the generated grid.

    Every accepted parameter change rebuilds the source and regenerates the
    grid. Rejected input leaves the previous state untouched.
    """

    def __init__(self, config: Optional[PreviewConfig] = None):
        """
        Initialize controller.

        Args:
            config: Previewer configuration (uses defaults if None)
        """
        self.config = config or PreviewConfig()

        self.source = RadiationSource()
        self.magnitude_text: str = ""

        self.selected_material = RadioactiveMaterial.NONE
        self.material_mass_text: str = ""
        self.material_mass: float = 0.0

        self.cell_size: float = self.config.cell_size

        self.grid: Optional[List[List[GridCell]]] = None
        self.n_regenerations: int = 0

    def _log(self, message: str, level: str = "INFO"):
        """Conditional logging."""
        if self.config.enable_verbose_logging:
            prefix = {"INFO": "ℹ️ ", "WARN": "⚠️ ", "ERROR": "❌", "SUCCESS": "✅"}
            print(f"{prefix.get(level, '')} {message}")

    # ─── Parameter edits ───────────────────────────────────────────────

    def set_magnitude_text(self, text: str) -> bool:
        """
        Apply the source magnitude field (Sv/h).

        Returns:
            True if the grid was regenerated
        """
        if text == self.magnitude_text:
            return False
        self.magnitude_text = text

        magnitude = parse_non_negative(text)
        if magnitude is None:
            self._log(f"Ignoring invalid source magnitude {text!r}", "WARN")
            return False

        self.source = self.source.with_magnitude(magnitude)
        self.regenerate()
        return True

    def set_material_mass_text(self, text: str) -> bool:
        """
        Apply the material amount field (mB).

        Returns:
            True if the grid was regenerated
        """
        self.material_mass_text = text

        mass = parse_non_negative(text)
        if mass is None:
            self._log(f"Ignoring invalid material amount {text!r}", "WARN")
            return False
        if mass == self.material_mass:
            return False

        self.material_mass = mass
        self._apply_material()
        return True

    def select_material(self, material: RadioactiveMaterial) -> bool:
        """
        Change the radioactive material.

        Returns:
            True if the grid was regenerated
        """
        if material == self.selected_material:
            return False

        self.selected_material = material
        self._apply_material()
        return True

    def set_cell_size(self, cell_size: float) -> bool:
        """
        Change the distance between grid cells (clamped to the slider range).

        Returns:
            True if the grid was regenerated
        """
        cell_size = self.config.clamp_cell_size(cell_size)
        if cell_size == self.cell_size and self.grid is not None:
            return False

        self.cell_size = cell_size
        self.regenerate()
        return True

    def _apply_material(self):
        magnitude = self.selected_material.magnitude_for(self.material_mass)
        self.source = self.source.with_magnitude(magnitude)
        self._log(f"{self.selected_material.display_name} x {self.material_mass:g} mB "
                  f"-> {magnitude:g} Sv/h")
        self.regenerate()

    # ─── Grid ──────────────────────────────────────────────────────────

    def regenerate(self) -> List[List[GridCell]]:
        """Rebuild the exposure grid from the current source and cell size."""
        self.grid = grid_2d(
            self.source,
            self.config.rows,
            self.config.columns,
            self.cell_size
        )
        self.n_regenerations += 1
        self._log(f"Regenerated {self.config.rows + 1}x{self.config.columns + 1} grid "
                  f"for {self.source!r}, cell size {self.cell_size:g}")
        return self.grid

    def magnitudes(self) -> Optional[np.ndarray]:
        """Current grid magnitudes, or None before the first regeneration."""
        if self.grid is None:
            return None
        return grid_magnitudes(self.grid)

    def cell_at(self, row: int, col: int) -> Optional[GridCell]:
        """Get the cell at (row, col), or None if there is no such cell."""
        if self.grid is None:
            return None
        if not (0 <= row < len(self.grid) and 0 <= col < len(self.grid[row])):
            return None
        return self.grid[row][col]

    def describe_cell(self, row: int, col: int) -> List[str]:
        """
        Popup text for one cell.

        Lines:
            - position [x, y, z]
            - formatted exposure, or background radiation when at baseline
            - time to decay to MIN_MAGNITUDE for exposed targets, when above it
        """
        cell = self.cell_at(row, col)
        if cell is None:
            return []

        suffix = self.config.unit_suffix
        places = self.config.popup_decimal_places

        x, y, z = cell.pos
        lines = [f"[{x:g}, {y:g}, {z:g}]"]

        if cell.magnitude > BASELINE:
            lines.append(select_unit(cell.magnitude).format(cell.magnitude, suffix, places))
            if cell.magnitude > MIN_MAGNITUDE:
                ticks = decay_time(self.config.decay_rate(is_source=False), cell.magnitude)
                floor = select_unit(MIN_MAGNITUDE).format(MIN_MAGNITUDE, suffix, 0)
                lines.append(f"Time to decay to {floor}/h: {ticks_to_hms(ticks)} ({ticks} ticks)")
        else:
            background = select_unit(BASELINE).format(BASELINE, suffix, places)
            lines.append(f"Background Radiation ({background})")

        return lines
