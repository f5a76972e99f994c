"""Core module for the radiation field previewer."""

from .source import RadioactiveMaterial, RadiationSource
from .field import GridCell, compute_exposure_magnitude, grid_2d, grid_magnitudes
from .decay import MIN_MAGNITUDE, TICKS_PER_STEP, decay_time, ticks_to_hms
from .severity import (
    BASELINE,
    Severity,
    SeverityBand,
    SEVERITY_BANDS,
    classify_severity,
    get_severity_color,
)
from .units import MeasurementUnit, select_unit, format_magnitude
from .config import ConfigurationError, PreviewConfig, check_decay_rate

__all__ = [
    # Sources and materials
    "RadioactiveMaterial",
    "RadiationSource",
    # Field model
    "GridCell",
    "compute_exposure_magnitude",
    "grid_2d",
    "grid_magnitudes",
    # Decay
    "MIN_MAGNITUDE",
    "TICKS_PER_STEP",
    "decay_time",
    "ticks_to_hms",
    # Severity bands
    "BASELINE",
    "Severity",
    "SeverityBand",
    "SEVERITY_BANDS",
    "classify_severity",
    "get_severity_color",
    # Units
    "MeasurementUnit",
    "select_unit",
    "format_magnitude",
    # Configuration
    "ConfigurationError",
    "PreviewConfig",
    "check_decay_rate",
]
