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
Simulation Configuration

Holds the run parameters and the fixed constants of the inverted Duffing
experiments.

Constants
---------
F_LOW, F_HIGH : float
    Forcing amplitudes compared in comparison mode
DAMPING : float
    Damping coefficient of the oscillator
QUEUE_CAPACITY : int
    Default bound on points buffered between a generator and the sampler
FIGURE_WIDTH, FIGURE_HEIGHT : int
    Exported figure size in pixels

Usage
-----
>>> config = SimulationConfig(F=0.3, t=50, dt_steps=500)
>>> config.dt
0.002
>>> config.n_steps
25000
"""

from dataclasses import dataclass

import numpy as np

# ============================================================================
# Constants
# ============================================================================

F_LOW = 0.24
F_HIGH = 0.35

DAMPING = 0.5

QUEUE_CAPACITY = 400

FIGURE_WIDTH = 600
FIGURE_HEIGHT = 400

COMPARISON_FILENAME = "iduff_comp.pdf"


def format_forcing(F: float) -> str:
    """
    Shortest decimal text that round-trips F, without a trailing ".0".

    Examples
    --------
    >>> format_forcing(0.24)
    '0.24'
    >>> format_forcing(1.0)
    '1'
    >>> format_forcing(-0.5)
    '-0.5'
    """
    return np.format_float_positional(float(F), unique=True, trim="-")


def single_filename(F: float) -> str:
    """Output file name for a single-run plot, e.g. ``iduff_F0.24.pdf``."""
    return f"iduff_F{format_forcing(F)}.pdf"


# ============================================================================
# Configuration
# ============================================================================


@dataclass(frozen=True)
class SimulationConfig:
    """
    Parameters for one simulation run.

    Attributes
    ----------
    F : float
        Forcing amplitude (ignored when comp is True)
    x0 : float
        Initial position
    y0 : float
        Initial velocity
    t : int
        Simulated duration in seconds
    dt_steps : int
        Steps per second; the Euler step is 1/dt_steps
    comp : bool
        Compare F_LOW and F_HIGH instead of running F
    queue_capacity : int
        Bound on buffered points per generator
    output_dir : str
        Directory the figure is written to

    Raises
    ------
    ValueError
        If t < 0, dt_steps < 1 or queue_capacity < 1
    """

    F: float = F_LOW
    x0: float = 0.0
    y0: float = 0.0
    t: int = 100
    dt_steps: int = 1000
    comp: bool = False
    queue_capacity: int = QUEUE_CAPACITY
    output_dir: str = "."

    def __post_init__(self):
        if self.t < 0:
            raise ValueError(f"Duration t must be non-negative, got {self.t}")
        if self.dt_steps < 1:
            raise ValueError(
                f"Step resolution dt_steps must be at least 1, got {self.dt_steps}"
            )
        if self.queue_capacity < 1:
            raise ValueError(
                f"Queue capacity must be at least 1, got {self.queue_capacity}"
            )

    @property
    def dt(self) -> float:
        """Euler time step, 1/dt_steps."""
        return 1.0 / self.dt_steps

    @property
    def n_steps(self) -> int:
        """Number of points sampled per trajectory, t * dt_steps."""
        return self.t * self.dt_steps


__all__ = [
    "F_LOW",
    "F_HIGH",
    "DAMPING",
    "QUEUE_CAPACITY",
    "FIGURE_WIDTH",
    "FIGURE_HEIGHT",
    "COMPARISON_FILENAME",
    "format_forcing",
    "single_filename",
    "SimulationConfig",
]
