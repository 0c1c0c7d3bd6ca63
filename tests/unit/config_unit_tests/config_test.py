# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Unit Tests for Simulation Configuration
"""

import dataclasses

import pytest

from iduffing.config import (
    COMPARISON_FILENAME,
    F_HIGH,
    F_LOW,
    QUEUE_CAPACITY,
    SimulationConfig,
    format_forcing,
    single_filename,
)


class TestConstants:
    def test_comparison_amplitudes(self):
        assert F_LOW == 0.24
        assert F_HIGH == 0.35

    def test_queue_capacity(self):
        assert QUEUE_CAPACITY == 400

    def test_comparison_filename(self):
        assert COMPARISON_FILENAME == "iduff_comp.pdf"


class TestSimulationConfig:
    """Test defaults, derived values and validation."""

    def test_defaults(self):
        config = SimulationConfig()
        assert config.F == 0.24
        assert config.x0 == 0.0
        assert config.y0 == 0.0
        assert config.t == 100
        assert config.dt_steps == 1000
        assert config.comp is False
        assert config.queue_capacity == 400

    def test_derived_values(self):
        config = SimulationConfig(t=3, dt_steps=250)
        assert config.dt == pytest.approx(0.004)
        assert config.n_steps == 750

    def test_zero_duration(self):
        assert SimulationConfig(t=0).n_steps == 0

    @pytest.mark.parametrize(
        "kwargs, match",
        [
            ({"t": -1}, "non-negative"),
            ({"dt_steps": 0}, "dt_steps"),
            ({"queue_capacity": 0}, "capacity"),
        ],
    )
    def test_validation(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            SimulationConfig(**kwargs)

    def test_frozen(self):
        config = SimulationConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.F = 0.5


class TestFormatting:
    """Test the forcing amplitude text used in titles and file names."""

    @pytest.mark.parametrize(
        "F, expected",
        [(0.24, "0.24"), (0.35, "0.35"), (1.0, "1"), (0.0, "0"), (-0.5, "-0.5"), (2.125, "2.125")],
    )
    def test_format_forcing(self, F, expected):
        assert format_forcing(F) == expected

    def test_single_filename(self):
        assert single_filename(0.24) == "iduff_F0.24.pdf"
        assert single_filename(1.0) == "iduff_F1.pdf"
