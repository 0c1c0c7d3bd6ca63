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
Unit Tests for the Inverted Duffing Oscillator

Tests the symbolic definition, the compiled vector field and the
unforced equilibria.
"""

import math

import numpy as np
import pytest
import sympy as sp

from iduffing.systems.inverted_duffing import InvertedDuffingOscillator


@pytest.fixture
def system():
    return InvertedDuffingOscillator(F=0.24)


class TestVectorField:
    """Test numerical evaluation of the field."""

    def test_origin_at_t0(self, system):
        """At the origin only the forcing term remains."""
        dx, dy = system(0.0, 0.0, 0.0)
        assert dx == 0.0
        assert dy == pytest.approx(0.24)

    @pytest.mark.parametrize(
        "x, y, t",
        [(0.5, -0.3, 1.0), (-1.5, 2.0, 3.7), (1.0, 0.0, math.pi)],
    )
    def test_matches_closed_form(self, system, x, y, t):
        """dx = y, dy = F cos t - 0.5 y + x - x³."""
        dx, dy = system(x, y, t)
        assert dx == pytest.approx(y)
        assert dy == pytest.approx(0.24 * math.cos(t) - 0.5 * y + x - x**3)

    def test_custom_damping(self):
        """Damping coefficient enters the velocity equation."""
        system = InvertedDuffingOscillator(F=0.0, damping=1.0)
        _, dy = system(0.0, 2.0, 0.0)
        assert dy == pytest.approx(-2.0)

    def test_returns_float64(self, system):
        dx, dy = system(0.1, 0.2, 0.3)
        assert isinstance(dx, np.float64)
        assert isinstance(dy, np.float64)

    @pytest.mark.filterwarnings("ignore::RuntimeWarning")
    def test_overflow_propagates(self, system):
        """Overflow yields non-finite values instead of raising."""
        _, dy = system(1e200, 0.0, 0.0)
        assert np.isinf(dy)

    def test_repr(self, system):
        assert repr(system) == "InvertedDuffingOscillator(F=0.24, damping=0.5)"


class TestSymbolic:
    """Test the symbolic definition."""

    def test_symbolic_dynamics(self, system):
        f = system.get_symbolic_dynamics()
        assert f.shape == (2, 1)
        assert f[0] == system._y
        assert f[1].has(sp.cos(system._t))

    def test_substituted_dynamics(self, system):
        f = system.get_symbolic_dynamics(substitute=True)
        assert not f[1].has(system._F)
        assert not f[1].has(system._delta)

    def test_parameters(self, system):
        assert system.parameters[system._F] == 0.24
        assert system.parameters[system._delta] == 0.5


class TestEquilibria:
    """Test unforced equilibria."""

    def test_three_equilibria(self, system):
        eqs = system.equilibria()
        assert len(eqs) == 3
        np.testing.assert_allclose(np.array(eqs), [[-1.0, 0.0], [0.0, 0.0], [1.0, 0.0]])

    def test_independent_of_forcing(self):
        low = InvertedDuffingOscillator(F=0.24).equilibria()
        high = InvertedDuffingOscillator(F=0.35).equilibria()
        np.testing.assert_allclose(np.array(low), np.array(high))

    def test_equilibria_are_fixed_points(self, system):
        """The unforced field vanishes at every equilibrium."""
        unforced = InvertedDuffingOscillator(F=0.0)
        for eq in system.equilibria():
            dx, dy = unforced(eq[0], eq[1], 0.0)
            assert dx == pytest.approx(0.0, abs=1e-12)
            assert dy == pytest.approx(0.0, abs=1e-12)
