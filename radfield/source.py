"""
Radiation source and radioactive material definitions.

A source is a point in 3D world space with a magnitude in Sieverts/hour.
Materials carry a yield constant (Sv per mB) so that a source can be derived
from an amount of material instead of a raw magnitude.
"""
from __future__ import annotations
import numpy as np
from typing import Sequence
from dataclasses import dataclass, field
from enum import Enum


class RadioactiveMaterial(Enum):
    """
    Radioactive materials available in the previewer.

    Each member's value is (display name, yield in Sv/mB).
    Spent waste behaves the same as basic nuclear waste.
    """
    NONE = ("None", 0.0)
    NUCLEAR_WASTE = ("Nuclear Waste", 0.010)
    PLUTONIUM = ("Plutonium", 0.020)
    POLONIUM = ("Polonium", 0.050)

    @property
    def display_name(self) -> str:
        return self.value[0]

    @property
    def yield_per_mb(self) -> float:
        return self.value[1]

    def magnitude_for(self, mass_mb: float) -> float:
        """Source magnitude (Sv/h) produced by `mass_mb` millibuckets."""
        return self.yield_per_mb * mass_mb

    @classmethod
    def from_display_name(cls, name: str) -> RadioactiveMaterial:
        for material in cls:
            if material.display_name == name:
                return material
        raise ValueError(f"Unknown radioactive material: {name!r}")


@dataclass(frozen=True, eq=False)
class RadiationSource:
    """
    Point radiation source.

    Attributes:
        pos: World position [x, y, z] (read-only array)
        magnitude: Exposure at the source, in Sv/h (non-negative)
    """
    pos: np.ndarray = field(default_factory=lambda: np.zeros(3))
    magnitude: float = 0.0

    def __post_init__(self):
        pos = np.array(self.pos, dtype=np.float64)
        if pos.shape != (3,):
            raise ValueError(f"Source position must be [x, y, z], got shape {pos.shape}")
        pos.setflags(write=False)
        object.__setattr__(self, "pos", pos)

        magnitude = float(self.magnitude)
        if magnitude < 0:
            raise ValueError(f"Source magnitude must be non-negative, got {magnitude}")
        object.__setattr__(self, "magnitude", magnitude)

    @classmethod
    def from_material(
        cls,
        material: RadioactiveMaterial,
        mass_mb: float,
        pos: Sequence[float] = (0.0, 0.0, 0.0)
    ) -> RadiationSource:
        """Create a source whose magnitude is derived from a material amount."""
        return cls(pos=np.asarray(pos), magnitude=material.magnitude_for(mass_mb))

    def with_magnitude(self, magnitude: float) -> RadiationSource:
        """Return a copy of this source at the same position with a new magnitude."""
        return RadiationSource(pos=self.pos, magnitude=magnitude)

    def __repr__(self) -> str:
        x, y, z = self.pos
        return f"RadiationSource(pos=[{x:.2f}, {y:.2f}, {z:.2f}], magnitude={self.magnitude:.6g})"
