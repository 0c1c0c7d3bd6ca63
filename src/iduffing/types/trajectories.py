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
Trajectory and Result Types

Defines the data structures that flow from the trajectory generator to the
sampler and on to the renderer:
- Points (phase-plane samples with a divergence marker)
- Trajectories (finite, ordered lists of points)
- Point sources (anything the sampler can pull from)
- Generator statistics and simulation results

Shape Convention
----------------
Trajectories are lists in generation order. When handed to the renderer
they are converted to time-major arrays of shape (n_steps, 2), where
column 0 is x and column 1 is y = dx/dt.

Usage
-----
>>> from iduffing.types.trajectories import Point, points_to_array
>>>
>>> points = [Point(0.0, 0.0), Point(0.0, 0.00024)]
>>> points_to_array(points).shape
(2, 2)
"""

from typing import Dict, List, NamedTuple, Optional, Sequence

import numpy as np
from typing_extensions import Protocol, TypedDict, runtime_checkable

# ============================================================================
# Point and Trajectory Types
# ============================================================================


class Point(NamedTuple):
    """
    Single phase-plane sample (x, y).

    Attributes
    ----------
    x : float
        Position
    y : float
        Velocity dx/dt
    blowup : bool
        True if x or y is non-finite (the integration has diverged).
        Once set, the generator keeps it set for every later point.

    Examples
    --------
    >>> p = Point(0.0, 0.00024)
    >>> p.x, p.y, p.blowup
    (0.0, 0.00024, False)
    """

    x: float
    y: float
    blowup: bool = False


Trajectory = List[Point]
"""
Finite, ordered sequence of points.

Index order equals generation order: trajectory[i] is the state after i
Euler steps, trajectory[0] is the initial condition.
"""


@runtime_checkable
class PointSource(Protocol):
    """
    Anything the sampler can pull points from one at a time.

    Implemented by TrajectoryGenerator. Blocks until a point is available
    (or the timeout expires).
    """

    def get(self, timeout: Optional[float] = None) -> Point:
        ...


# ============================================================================
# Result Types
# ============================================================================


class GeneratorStats(TypedDict):
    """
    Production statistics for a trajectory generator.

    Attributes
    ----------
    produced : int
        Points pushed into the queue so far
    consumed : int
        Points pulled from the queue so far
    buffered : int
        Points currently waiting in the queue (approximate)
    capacity : int
        Queue capacity
    running : bool
        Whether the producer thread is alive
    blowup : bool
        Whether a non-finite point has been produced
    """

    produced: int
    consumed: int
    buffered: int
    capacity: int
    running: bool
    blowup: bool


class SimulationResult(TypedDict):
    """
    Sampled trajectories ready for rendering.

    Attributes
    ----------
    series : Dict[str, np.ndarray]
        Label -> trajectory array of shape (n_steps, 2), in plot order
    title : str
        Figure title
    filename : str
        Output file name (no directory)
    n_steps : int
        Number of points in each series
    blowup : bool
        Whether any series diverged

    Examples
    --------
    >>> result = run(SimulationConfig(t=1, dt_steps=100))
    >>> result["series"]["F=0.24"].shape
    (100, 2)
    >>> result["filename"]
    'iduff_F0.24.pdf'
    """

    series: Dict[str, np.ndarray]
    title: str
    filename: str
    n_steps: int
    blowup: bool


# ============================================================================
# Helpers
# ============================================================================


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """
    Convert points to a (n, 2) float array, dropping the blowup marker.

    Parameters
    ----------
    points : Sequence[Point]
        Points in generation order

    Returns
    -------
    np.ndarray
        Array of shape (n, 2); shape (0, 2) for an empty sequence
    """
    if len(points) == 0:
        return np.empty((0, 2), dtype=float)
    return np.array([(p.x, p.y) for p in points], dtype=float)


__all__ = [
    "Point",
    "Trajectory",
    "PointSource",
    "GeneratorStats",
    "SimulationResult",
    "points_to_array",
]
