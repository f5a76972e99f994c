"""
Previewer controller tests: input handling, regeneration and popup text.
"""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from radfield.config import PreviewConfig
from radfield.decay import decay_time, ticks_to_hms
from radfield.source import RadioactiveMaterial
from visualization.previewer_controller import PreviewController, parse_non_negative


def test_parse_non_negative():
    assert parse_non_negative("1.5") == 1.5
    assert parse_non_negative(" 2 ") == 2.0
    assert parse_non_negative("1e-3") == 0.001
    assert parse_non_negative("") is None
    assert parse_non_negative("abc") is None
    assert parse_non_negative("-3") is None
    assert parse_non_negative("nan") is None
    assert parse_non_negative("inf") is None


def test_no_grid_before_first_change():
    controller = PreviewController()
    assert controller.grid is None
    assert controller.magnitudes() is None
    assert controller.cell_at(0, 0) is None
    assert controller.describe_cell(0, 0) == []


def test_magnitude_text_regenerates_grid():
    controller = PreviewController()

    assert controller.set_magnitude_text("1.0"), "valid magnitude should regenerate"
    assert controller.source.magnitude == 1.0
    assert controller.magnitudes().shape == (101, 101)
    assert controller.n_regenerations == 1

    # Unchanged text is ignored
    assert not controller.set_magnitude_text("1.0")
    assert controller.n_regenerations == 1


@pytest.mark.parametrize("text", ["abc", "-3", "nan"])
def test_invalid_magnitude_text_keeps_previous_source(text):
    controller = PreviewController()
    controller.set_magnitude_text("2")

    assert not controller.set_magnitude_text(text)
    assert controller.source.magnitude == 2.0
    assert controller.n_regenerations == 1


def test_material_and_mass_set_magnitude():
    controller = PreviewController()

    # No mass yet: magnitude stays zero
    assert controller.select_material(RadioactiveMaterial.PLUTONIUM)
    assert controller.source.magnitude == 0.0

    assert controller.set_material_mass_text("100")
    assert controller.source.magnitude == pytest.approx(2.0)

    # Same mass again does nothing
    assert not controller.set_material_mass_text("100")

    assert controller.select_material(RadioactiveMaterial.POLONIUM)
    assert controller.source.magnitude == pytest.approx(5.0)

    assert not controller.select_material(RadioactiveMaterial.POLONIUM)
    assert not controller.set_material_mass_text("lots")
    assert controller.source.magnitude == pytest.approx(5.0)


def test_cell_size_is_clamped_and_regenerates():
    controller = PreviewController()
    controller.set_magnitude_text("1")

    assert controller.set_cell_size(500.0)
    assert controller.cell_size == 128.0

    assert not controller.set_cell_size(128.0)

    assert controller.set_cell_size(4.0)
    center = controller.cell_at(50, 50)
    corner = controller.cell_at(0, 0)
    assert corner.pos[0] == pytest.approx(-200.0)
    assert center.magnitude == 1.0


def test_small_grid_from_config():
    config = PreviewConfig(rows=4, columns=6)
    controller = PreviewController(config)
    controller.set_magnitude_text("1")
    assert controller.magnitudes().shape == (5, 7)
    assert controller.cell_at(5, 0) is None
    assert controller.cell_at(0, 7) is None
    assert controller.cell_at(-1, 0) is None


def test_describe_cell_at_source():
    controller = PreviewController()
    controller.set_magnitude_text("1")

    lines = controller.describe_cell(50, 50)
    ticks = decay_time(0.9995, 1.0)

    assert lines[0] == "[0, 0, 0]"
    assert lines[1] == "1.000 Sv"
    assert lines[2] == f"Time to decay to 10 µSv/h: {ticks_to_hms(ticks)} ({ticks} ticks)"


def test_describe_cell_uses_target_decay_rate():
    config = PreviewConfig(source_decay_rate=0.9995, target_decay_rate=0.5)
    controller = PreviewController(config)
    controller.set_magnitude_text("1e-4")

    lines = controller.describe_cell(50, 50)
    assert lines[2].endswith("(80 ticks)")


def test_describe_cell_between_baseline_and_floor():
    controller = PreviewController()
    controller.set_magnitude_text("0.000005")

    lines = controller.describe_cell(50, 50)
    assert lines == ["[0, 0, 0]", "5.000 µSv"]


def test_describe_background_cell():
    controller = PreviewController()
    controller.set_magnitude_text("0.0001")

    # Corner is 50 blocks off on both axes: 1e-4 / 5000 = 2e-8 Sv/h
    lines = controller.describe_cell(0, 0)
    assert lines == ["[-50, 0, -50]", "Background Radiation (100.000 nSv)"]


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
