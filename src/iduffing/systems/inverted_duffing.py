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
Inverted Duffing Oscillator - Symbolic Vector Field

Defines the forced, damped inverted Duffing oscillator as a first-order
system and compiles it to a NumPy callable for fast scalar evaluation.
"""

from typing import Dict, List, Tuple

import numpy as np
import sympy as sp

from iduffing.config import DAMPING


class InvertedDuffingOscillator:
    """
    Inverted Duffing oscillator with periodic forcing.

    Physical System:
    ---------------
    A unit mass in the double-well potential V(x) = -x²/2 + x⁴/4 with
    linear viscous damping and a cosine drive of unit frequency. The
    "inverted" sign convention makes the linear term destabilizing at the
    origin, so the unforced system is bistable.

    State Space:
    -----------
    State: [x, y]
        - x: Position
        - y: Velocity, y = dx/dt

    Time t enters only through the forcing term, so the field is
    non-autonomous and t must be supplied on every evaluation.

    Dynamics:
    --------
        ẋ = y
        ẏ = F·cos(t) - δ·y + x - x³

    Or as a second-order ODE:
        ẍ + δẋ - x + x³ = F·cos(t)

    Parameters:
    ----------
    F : float
        Forcing amplitude. F = 0.24 gives a period-1 orbit around one well,
        F = 0.35 a chaotic attractor visiting both wells.
    damping : float, default=0.5
        Damping coefficient δ.

    Equilibria:
    ----------
    For the unforced system (F = 0):
        [0, 0]   (saddle, unstable)
        [±1, 0]  (stable foci for 0 < δ < 2√2)

    Numerical Notes:
    ---------------
    The compiled field evaluates with NumPy float64 arithmetic, so an
    overflow produces inf/nan instead of raising. Non-finite values
    propagate unchanged.

    Examples
    --------
    >>> system = InvertedDuffingOscillator(F=0.24)
    >>> dx, dy = system(0.0, 0.0, 0.0)
    >>> float(dx), float(dy)
    (0.0, 0.24)
    >>> system.equilibria()
    [array([-1.,  0.]), array([0., 0.]), array([1., 0.])]
    """

    def __init__(self, F: float, damping: float = DAMPING):
        self.F = float(F)
        self.damping = float(damping)
        self.define_system(self.F, self.damping)
        self._f_numpy = sp.lambdify(
            (self._x, self._y, self._t),
            list(self._f_sym.subs(self.parameters)),
            modules="numpy",
        )

    def define_system(self, F_val: float, damping_val: float):
        x, y, t = sp.symbols("x y t", real=True)
        F, delta = sp.symbols("F delta", real=True)

        self.parameters: Dict[sp.Symbol, float] = {
            F: F_val,
            delta: damping_val,
        }

        self._x, self._y, self._t = x, y, t
        self._F, self._delta = F, delta
        self.state_vars = [x, y]

        dx = y
        dy = F * sp.cos(t) - delta * y + x - x**3

        self._f_sym = sp.Matrix([dx, dy])

    def __call__(self, x: float, y: float, t: float) -> Tuple[np.float64, np.float64]:
        """
        Evaluate the vector field at (x, y, t).

        Returns
        -------
        Tuple[np.float64, np.float64]
            (dx/dt, dy/dt)
        """
        dx, dy = self._f_numpy(np.float64(x), np.float64(y), np.float64(t))
        return np.float64(dx), np.float64(dy)

    def get_symbolic_dynamics(self, substitute: bool = False) -> sp.Matrix:
        """
        Symbolic right-hand side [ẋ, ẏ].

        Parameters
        ----------
        substitute : bool
            If True, replace F and δ by their numeric values
        """
        if substitute:
            return self._f_sym.subs(self.parameters)
        return self._f_sym

    def equilibria(self) -> List[np.ndarray]:
        """
        Real equilibria of the unforced system (F = 0), sorted by x.

        Returns
        -------
        List[np.ndarray]
            Each entry has shape (2,)
        """
        unforced = self._f_sym.subs({self._F: 0, self._delta: self.damping})
        solutions = sp.solve(list(unforced), [self._x, self._y], dict=True)

        points = []
        for sol in solutions:
            x_eq, y_eq = sol[self._x], sol[self._y]
            if x_eq.is_real and y_eq.is_real:
                points.append(np.array([float(x_eq), float(y_eq)]))

        return sorted(points, key=lambda p: p[0])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(F={self.F}, damping={self.damping})"


__all__ = [
    "InvertedDuffingOscillator",
]
