"""
Interactive Visualization Module for the Radiation Field Previewer

This module provides the GUI application that draws the exposure grid
around a single radiation source and shows per-cell details.
"""

__version__ = "1.0.0"
