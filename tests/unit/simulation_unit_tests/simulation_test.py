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
Unit Tests for Simulation Runs

Tests the single and comparison modes end to end, short of rendering.
"""

import threading
from itertools import islice

import numpy as np
import pytest

from iduffing.config import SimulationConfig
from iduffing.integration.euler_stream import euler_points
from iduffing.simulation import run, simulate_comparison, simulate_single
from iduffing.types.trajectories import points_to_array


def euler_threads_alive():
    return [t for t in threading.enumerate() if t.name.startswith("euler-") and t.is_alive()]


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def short_config():
    """One simulated second at 100 steps per second."""
    return SimulationConfig(t=1, dt_steps=100)


# ============================================================================
# Single Mode
# ============================================================================


class TestSingle:
    def test_result_fields(self, short_config):
        result = simulate_single(short_config)

        assert list(result["series"]) == ["F=0.24"]
        assert result["title"] == "Poincare Section F=0.24"
        assert result["filename"] == "iduff_F0.24.pdf"
        assert result["n_steps"] == 100
        assert result["blowup"] is False

    def test_series_shape_and_first_point(self):
        config = SimulationConfig(x0=0.5, y0=-0.25, t=2, dt_steps=50)
        series = simulate_single(config)["series"]["F=0.24"]

        assert series.shape == (100, 2)
        np.testing.assert_array_equal(series[0], [0.5, -0.25])

    def test_matches_euler_stream(self):
        config = SimulationConfig(F=0.3, x0=0.1, t=2, dt_steps=200)
        series = simulate_single(config)["series"]["F=0.3"]

        expected = points_to_array(list(islice(euler_points(0.1, 0.0, 0.3, config.dt), 400)))
        np.testing.assert_array_equal(series, expected)

    def test_custom_forcing_labels(self):
        result = simulate_single(SimulationConfig(F=1.0, t=1, dt_steps=10))
        assert list(result["series"]) == ["F=1"]
        assert result["filename"] == "iduff_F1.pdf"

    def test_zero_duration(self):
        result = simulate_single(SimulationConfig(t=0))
        assert result["series"]["F=0.24"].shape == (0, 2)
        assert result["blowup"] is False

    def test_generator_stopped(self, short_config):
        simulate_single(short_config)
        assert euler_threads_alive() == []

    @pytest.mark.filterwarnings("ignore::RuntimeWarning")
    def test_blowup_reported(self):
        result = simulate_single(SimulationConfig(x0=1e200, t=1, dt_steps=10))
        assert result["blowup"] is True


# ============================================================================
# Comparison Mode
# ============================================================================


class TestComparison:
    def test_result_fields(self, short_config):
        result = simulate_comparison(short_config)

        assert list(result["series"]) == ["F=0.24", "F=0.35"]
        assert result["title"] == "Poincare Section F=0.24 vs F=0.35"
        assert result["filename"] == "iduff_comp.pdf"
        assert result["n_steps"] == 100

    def test_user_forcing_ignored(self):
        result = simulate_comparison(SimulationConfig(F=0.9, t=1, dt_steps=20, comp=True))
        assert list(result["series"]) == ["F=0.24", "F=0.35"]

    def test_series_aligned(self):
        config = SimulationConfig(x0=0.2, y0=0.1, t=3, dt_steps=100, comp=True)
        series = simulate_comparison(config)["series"]

        low = points_to_array(list(islice(euler_points(0.2, 0.1, 0.24, config.dt), 300)))
        high = points_to_array(list(islice(euler_points(0.2, 0.1, 0.35, config.dt), 300)))
        np.testing.assert_array_equal(series["F=0.24"], low)
        np.testing.assert_array_equal(series["F=0.35"], high)

    def test_small_queue(self):
        """Backpressure with a tiny queue does not change the result."""
        small = simulate_comparison(SimulationConfig(t=1, dt_steps=500, queue_capacity=1))
        large = simulate_comparison(SimulationConfig(t=1, dt_steps=500))
        for label in small["series"]:
            np.testing.assert_array_equal(small["series"][label], large["series"][label])

    def test_generators_stopped(self, short_config):
        simulate_comparison(short_config)
        assert euler_threads_alive() == []


class TestRun:
    def test_dispatch_single(self, short_config):
        assert run(short_config)["filename"] == "iduff_F0.24.pdf"

    def test_dispatch_comparison(self):
        assert run(SimulationConfig(t=1, dt_steps=10, comp=True))["filename"] == "iduff_comp.pdf"
