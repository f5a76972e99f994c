"""
Grid Panel Module

Draws the exposure grid as severity-coloured tiles on a matplotlib axes and
maps clicks on the axes back to grid cells.
"""
from __future__ import annotations

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import math
import numpy as np
from matplotlib.axes import Axes
from matplotlib.colors import to_rgb
from matplotlib.patches import Patch
from typing import Optional, Tuple

from radfield.severity import SEVERITY_BANDS, get_severity_color
from radfield.units import format_magnitude


def severity_image(magnitudes: np.ndarray) -> np.ndarray:
    """
    Convert a (n_rows, n_columns) magnitude array to an RGB image.

    Rows run along the image's horizontal axis and columns down its vertical
    axis, so the result has shape (n_columns, n_rows, 3).
    """
    n_rows, n_cols = magnitudes.shape
    image = np.zeros((n_cols, n_rows, 3), dtype=np.float64)
    for row in range(n_rows):
        for col in range(n_cols):
            image[col, row] = to_rgb(get_severity_color(magnitudes[row, col]))
    return image


class GridPanel:
    """Panel showing one exposure grid."""

    def __init__(self, ax: Axes, title: str = "Radiation Exposure"):
        """
        Initialize panel.

        Args:
            ax: Matplotlib axes to draw on
            title: Panel title
        """
        self.ax = ax
        self.title = title
        self.shape: Optional[Tuple[int, int]] = None

    def clear(self):
        """Clear the panel."""
        self.ax.clear()
        self.ax.set_title(self.title, fontsize=10, fontweight='bold')
        self.shape = None

    def update(self, magnitudes: Optional[np.ndarray], show_legend: bool = True):
        """
        Redraw the grid.

        Args:
            magnitudes: (n_rows, n_columns) exposure array, or None for no grid
            show_legend: Draw the severity band legend
        """
        self.clear()

        if magnitudes is None:
            self.ax.text(0.5, 0.5, 'No grid generated', ha='center', va='center',
                         transform=self.ax.transAxes, fontsize=12)
            self.ax.set_axis_off()
            return

        n_rows, n_cols = magnitudes.shape
        self.shape = (n_rows, n_cols)

        self.ax.imshow(
            severity_image(magnitudes),
            origin='upper',
            interpolation='nearest',
            extent=[0, n_rows, n_cols, 0]
        )

        # Tile outlines
        self.ax.vlines(np.arange(n_rows + 1), 0, n_cols, colors='black', linewidth=0.5)
        self.ax.hlines(np.arange(n_cols + 1), 0, n_rows, colors='black', linewidth=0.5)

        self.ax.set_xlim(0, n_rows)
        self.ax.set_ylim(n_cols, 0)
        self.ax.set_aspect('equal')
        self.ax.set_xticks([])
        self.ax.set_yticks([])

        if show_legend:
            handles = [
                Patch(facecolor=band.color, edgecolor='black',
                      label=self._band_label(band.lower, band.upper))
                for band in SEVERITY_BANDS
            ]
            self.ax.legend(handles=handles, loc='upper left', bbox_to_anchor=(1.01, 1.0),
                           fontsize=8, title='Sv/h', title_fontsize=8)

    @staticmethod
    def _band_label(lower: float, upper: float) -> str:
        if math.isinf(lower):
            return f"≤ {format_magnitude(upper, 'Sv', 0)}"
        if math.isinf(upper):
            return f"≥ {format_magnitude(lower, 'Sv', 0)}"
        return f"{format_magnitude(lower, 'Sv', 0)} – {format_magnitude(upper, 'Sv', 0)}"

    def cell_from_point(self, xdata: Optional[float], ydata: Optional[float]) -> Optional[Tuple[int, int]]:
        """
        Map axes data coordinates to a (row, col) grid index.

        Returns:
            (row, col), or None if the point is outside the grid
        """
        if self.shape is None or xdata is None or ydata is None:
            return None

        row = int(math.floor(xdata))
        col = int(math.floor(ydata))
        n_rows, n_cols = self.shape
        if not (0 <= row < n_rows and 0 <= col < n_cols):
            return None
        return row, col
