"""
Radiation Previewer Application

GUI for previewing the radiation field around a single source.
Combines Tkinter for controls and Matplotlib for the grid.
"""
from __future__ import annotations

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import tkinter as tk
from tkinter import ttk
import matplotlib.pyplot as plt
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure
from typing import Optional

from radfield.config import PreviewConfig
from radfield.source import RadioactiveMaterial
from visualization.previewer_controller import PreviewController
from visualization.grid_panel import GridPanel


class RadiationPreviewerApp:
    """
    Interactive radiation previewer.

    Features:
    - Source magnitude entry (Sv/h)
    - Material selection and amount (mB)
    - Cell size slider
    - Click a tile to see its exposure and decay time
    """

    def __init__(self, root: tk.Tk, config: Optional[PreviewConfig] = None):
        """Initialize the application."""
        self.root = root
        self.root.title("Mekanism Radiation Previewer")
        self.root.geometry("900x760")
        self.root.minsize(300, 220)

        self.root.protocol("WM_DELETE_WINDOW", self._safe_exit)

        self.controller = PreviewController(config)
        self.popup: Optional[tk.Toplevel] = None

        self._create_control_panel()
        self._create_visualization_area()
        self._create_status_bar()

        self.controller.regenerate()
        self._update_visualization()

    def _create_control_panel(self):
        """Create settings panel at top."""
        control_frame = ttk.Frame(self.root, padding="5")
        control_frame.pack(side=tk.TOP, fill=tk.X)

        ttk.Label(control_frame, text="Radiation Source (Sv): ").pack(side=tk.LEFT)
        self.magnitude_var = tk.StringVar(value=self.controller.magnitude_text)
        magnitude_entry = ttk.Entry(control_frame, width=8, textvariable=self.magnitude_var)
        magnitude_entry.pack(side=tk.LEFT, padx=(0, 10))
        magnitude_entry.bind("<FocusOut>", self._on_magnitude_entered)
        magnitude_entry.bind("<Return>", self._on_magnitude_entered)

        ttk.Label(control_frame, text="Cell Size").pack(side=tk.LEFT)
        self.cell_size_var = tk.DoubleVar(value=self.controller.cell_size)
        tk.Scale(
            control_frame,
            from_=self.controller.config.min_cell_size,
            to=self.controller.config.max_cell_size,
            orient=tk.HORIZONTAL,
            resolution=1.0,
            length=150,
            variable=self.cell_size_var,
            command=self._on_cell_size_changed
        ).pack(side=tk.LEFT, padx=(0, 10))

        ttk.Label(control_frame, text="Radioactive Material (mB): ").pack(side=tk.LEFT)
        self.mass_var = tk.StringVar(value=self.controller.material_mass_text)
        mass_entry = ttk.Entry(control_frame, width=8, textvariable=self.mass_var)
        mass_entry.pack(side=tk.LEFT, padx=(0, 10))
        mass_entry.bind("<FocusOut>", self._on_mass_entered)
        mass_entry.bind("<Return>", self._on_mass_entered)

        self.material_var = tk.StringVar(value=self.controller.selected_material.display_name)
        material_box = ttk.Combobox(
            control_frame,
            state="readonly",
            width=14,
            textvariable=self.material_var,
            values=[material.display_name for material in RadioactiveMaterial]
        )
        material_box.pack(side=tk.LEFT)
        material_box.bind("<<ComboboxSelected>>", self._on_material_selected)
        ttk.Label(control_frame, text="Radioactive Material").pack(side=tk.LEFT, padx=5)

    def _create_visualization_area(self):
        """Create matplotlib canvas."""
        self.figure = Figure(figsize=(8, 6.5), dpi=100)
        ax = self.figure.add_subplot(111)
        self.figure.subplots_adjust(left=0.02, right=0.8, top=0.95, bottom=0.02)
        self.panel = GridPanel(ax)

        self.canvas = FigureCanvasTkAgg(self.figure, master=self.root)
        self.canvas.get_tk_widget().pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self.canvas.mpl_connect("button_press_event", self._on_canvas_click)

    def _create_status_bar(self):
        """Create status bar at bottom."""
        self.status_bar = ttk.Label(self.root, text="Ready", relief=tk.SUNKEN, anchor=tk.W)
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)

    # ─── Event handlers ────────────────────────────────────────────────

    def _on_magnitude_entered(self, event=None):
        text = self.magnitude_var.get()
        if self.controller.set_magnitude_text(text):
            self._update_visualization()
        elif text.strip():
            self._set_status(f"Source magnitude unchanged ({text!r})", "gray")

    def _on_mass_entered(self, event=None):
        text = self.mass_var.get()
        if self.controller.set_material_mass_text(text):
            self._update_visualization()
        elif text.strip():
            self._set_status(f"Material amount unchanged ({text!r})", "gray")

    def _on_material_selected(self, event=None):
        material = RadioactiveMaterial.from_display_name(self.material_var.get())
        if self.controller.select_material(material):
            self._update_visualization()

    def _on_cell_size_changed(self, value):
        if self.controller.set_cell_size(float(value)):
            self._update_visualization()

    def _on_canvas_click(self, event):
        if event.inaxes is not self.panel.ax:
            return
        cell = self.panel.cell_from_point(event.xdata, event.ydata)
        if cell is None:
            return
        self._show_cell_popup(*cell)

    # ─── Display ───────────────────────────────────────────────────────

    def _show_cell_popup(self, row: int, col: int):
        """Show cell details next to the mouse pointer."""
        self._close_popup()

        lines = self.controller.describe_cell(row, col)
        if not lines:
            return

        self.popup = tk.Toplevel(self.root)
        self.popup.wm_overrideredirect(True)
        self.popup.geometry(f"+{self.root.winfo_pointerx() + 10}+{self.root.winfo_pointery() + 10}")

        frame = ttk.Frame(self.popup, padding="6", relief=tk.SOLID, borderwidth=1)
        frame.pack(fill=tk.BOTH, expand=True)
        for line in lines:
            ttk.Label(frame, text=line).pack(anchor=tk.W)

        self.popup.bind("<FocusOut>", lambda e: self._close_popup())
        self.popup.bind("<Escape>", lambda e: self._close_popup())
        self.popup.focus_set()

    def _close_popup(self):
        if self.popup is not None:
            self.popup.destroy()
            self.popup = None

    def _update_visualization(self):
        """Redraw the grid from the controller state."""
        self._close_popup()
        self.panel.update(self.controller.magnitudes())
        self.canvas.draw_idle()

        source = self.controller.source
        self._set_status(
            f"{source.magnitude:g} Sv/h source, cell size {self.controller.cell_size:g}, "
            f"{self.controller.selected_material.display_name}"
        )

    def _set_status(self, message: str, color: str = "black"):
        """Update status bar message."""
        self.status_bar.config(text=message, foreground=color)

    def _safe_exit(self):
        """Safely exit the application."""
        try:
            self._close_popup()
            plt.close('all')
            self.root.quit()
            self.root.destroy()
        except tk.TclError as e:
            # Window already gone
            print(f"Error during cleanup: {e}")

    def run(self):
        """Start the application main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    root = tk.Tk()
    app = RadiationPreviewerApp(root)
    app.run()


if __name__ == "__main__":
    main()
