"""
Decay time estimation and configuration validation tests.
"""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from radfield.config import ConfigurationError, PreviewConfig, check_decay_rate
from radfield.decay import MIN_MAGNITUDE, TICKS_PER_STEP, decay_time, ticks_to_hms


def test_decay_time_at_floor_is_zero():
    assert decay_time(0.9995, MIN_MAGNITUDE) == 0
    assert decay_time(0.9995, 1e-5) == 0
    assert decay_time(0.9995, 0.0) == 0


def test_decay_time_small_example():
    # 1e-4 -> 5e-5 -> 2.5e-5 -> 1.25e-5 -> 6.25e-6
    assert decay_time(0.5, 1e-4) == 4 * TICKS_PER_STEP


def test_decay_time_positive_multiple_of_step():
    ticks = decay_time(0.9995, 1.0)
    assert ticks > 0
    assert ticks % 20 == 0

    # ln(1e-5) / ln(0.9995) is a little over 23020 steps
    assert 23000 * 20 <= ticks <= 23050 * 20


def test_decay_time_monotonic_in_magnitude():
    magnitudes = [2e-5, 1e-4, 1e-3, 0.05, 1.0, 12.0, 500.0]
    ticks = [decay_time(0.9995, m) for m in magnitudes]
    for a, b in zip(ticks, ticks[1:]):
        assert a <= b, f"Decay time should not shrink: {ticks}"
    assert ticks[0] < ticks[-1]


@pytest.mark.parametrize("rate", [0.0, 1.0, 1.5, -0.2])
def test_decay_time_rejects_rate_outside_unit_interval(rate):
    with pytest.raises(ConfigurationError):
        decay_time(rate, 1.0)


def test_ticks_to_hms():
    assert ticks_to_hms(0) == "00:00:00"
    assert ticks_to_hms(19) == "00:00:00"
    assert ticks_to_hms(20) == "00:00:01"
    assert ticks_to_hms(20 * 3661) == "01:01:01"
    assert ticks_to_hms(20 * 100 * 3600) == "100:00:00"


def test_default_config():
    config = PreviewConfig()
    assert config.source_decay_rate == 0.9995
    assert config.target_decay_rate == 0.9995
    assert config.rows == 100
    assert config.columns == 100
    assert config.cell_size == 1.0
    assert config.decay_rate(is_source=True) == config.source_decay_rate


def test_config_selects_decay_rate():
    config = PreviewConfig(source_decay_rate=0.9, target_decay_rate=0.99)
    assert config.decay_rate(is_source=True) == 0.9
    assert config.decay_rate(is_source=False) == 0.99


@pytest.mark.parametrize("kwargs", [
    {"source_decay_rate": 1.0},
    {"target_decay_rate": 0.0},
    {"target_decay_rate": 2.0},
    {"rows": 0},
    {"columns": -5},
    {"cell_size": 0.5},
    {"cell_size": 200.0},
    {"min_cell_size": 10.0, "max_cell_size": 5.0},
    {"popup_decimal_places": -1},
])
def test_config_rejects_out_of_range_values(kwargs):
    with pytest.raises(ConfigurationError):
        PreviewConfig(**kwargs)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        check_decay_rate("source_decay_rate", 1.0)
    assert check_decay_rate("rate", 0.5) == 0.5


def test_clamp_cell_size():
    config = PreviewConfig()
    assert config.clamp_cell_size(0.1) == 1.0
    assert config.clamp_cell_size(64.0) == 64.0
    assert config.clamp_cell_size(1000.0) == 128.0


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
