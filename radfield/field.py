"""
Radiation exposure field around a single point source.

Exposure follows the inverse square law:
    E(p) = S / max(1, ||p - S_pos||^2)

The clamp keeps the field finite at the source and treats everything within
one block of it as receiving the full source magnitude.
"""
from __future__ import annotations
import numpy as np
from typing import List
from dataclasses import dataclass

from .source import RadiationSource


@dataclass(frozen=True, eq=False)
class GridCell:
    """A grid position and the exposure (Sv/h) it receives from one source."""
    pos: np.ndarray
    magnitude: float


def compute_exposure_magnitude(source: RadiationSource, point: np.ndarray) -> float:
    """
    Exposure (Sv/h) received at `point` from `source`.

    Args:
        source: Radiation source
        point: Destination position [x, y, z]

    Returns:
        Exposure magnitude at the destination
    """
    diff = np.asarray(point, dtype=np.float64) - source.pos
    dist_sq = float(np.dot(diff, diff))
    return source.magnitude / max(1.0, dist_sq)


def grid_2d(
    source: RadiationSource,
    rows: int,
    columns: int,
    cell_size: float
) -> List[List[GridCell]]:
    """
    Generate a 2D grid of exposure values around `source`.

    The grid has (rows + 1) x (columns + 1) cells on the source's Y plane.
    Row and column are swapped relative to world X/Z so that -Z is up/north
    and -X is left/west when the grid is drawn.

    Args:
        source: Radiation source the grid is centred on
        rows: Number of row steps
        columns: Number of column steps
        cell_size: World distance between neighbouring cells

    Returns:
        Row-major list of rows, each a list of GridCell
    """
    p = source.pos
    origin = np.array([
        p[0] - columns * cell_size,
        p[1],
        p[2] - rows * cell_size,
    ])
    center = (p + origin) / 2.0

    grid = []
    for row in range(rows + 1):
        cells = []
        for col in range(columns + 1):
            pos = np.array([
                center[2] + row * cell_size,
                origin[1],
                center[0] + col * cell_size,
            ])
            cells.append(GridCell(pos=pos, magnitude=compute_exposure_magnitude(source, pos)))
        grid.append(cells)

    return grid


def grid_magnitudes(grid: List[List[GridCell]]) -> np.ndarray:
    """Get cell magnitudes as a (n_rows, n_columns) array."""
    if not grid:
        return np.zeros((0, 0))
    return np.array([[cell.magnitude for cell in row] for row in grid], dtype=np.float64)
