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
iduffing - Inverted Duffing Oscillator Simulation
=================================================

Explicit Euler integration of the forced inverted Duffing oscillator

    ẋ = y
    ẏ = F·cos(t) - 0.5·y + x - x³

streamed through bounded queues and rendered as phase-plane plots.

>>> from iduffing import SimulationConfig, run, PhasePortraitPlotter
>>>
>>> result = run(SimulationConfig(F=0.35, t=100, dt_steps=1000))
>>> PhasePortraitPlotter().render(result)

Authors
-------
Gil Benezer

License
-------
GNU Affero General Public License v3.0
"""

from .config import F_HIGH, F_LOW, QUEUE_CAPACITY, SimulationConfig
from .integration import TrajectoryGenerator, euler_points, start
from .sampling import collect, collect_paired
from .simulation import run, simulate_comparison, simulate_single
from .systems import InvertedDuffingOscillator
from .types import Point, SimulationResult, Trajectory
from .visualization import PhasePortraitPlotter, RendererError

__version__ = "0.1.0"

__all__ = [
    "F_LOW",
    "F_HIGH",
    "QUEUE_CAPACITY",
    "SimulationConfig",
    "InvertedDuffingOscillator",
    "TrajectoryGenerator",
    "euler_points",
    "start",
    "collect",
    "collect_paired",
    "run",
    "simulate_single",
    "simulate_comparison",
    "Point",
    "Trajectory",
    "SimulationResult",
    "PhasePortraitPlotter",
    "RendererError",
]
