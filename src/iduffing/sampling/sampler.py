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
Trajectory Sampler

Pulls a fixed number of points from unbounded point sources and assembles
them into finite trajectories for plotting.

The sampler never cancels a source: after collecting n points it simply
stops pulling. Stopping a TrajectoryGenerator is the caller's job (use it
as a context manager).
"""

import logging
from typing import Iterator, Tuple, Union

import numpy as np

from iduffing.types.core import StepCount
from iduffing.types.trajectories import Point, PointSource, Trajectory

logger = logging.getLogger(__name__)

Source = Union[PointSource, Iterator[Point]]


def _validate_count(n: StepCount) -> int:
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"Number of points must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"Number of points must be non-negative, got {n}")
    return int(n)


def _puller(source: Source):
    if isinstance(source, PointSource):
        return source.get
    iterator = iter(source)
    return lambda: next(iterator)


def collect(source: Source, n: StepCount) -> Trajectory:
    """
    Pull exactly n points from source, in generation order.

    Parameters
    ----------
    source : PointSource or Iterator[Point]
        TrajectoryGenerator (or anything with get()) or a point iterator
        such as euler_points()
    n : int
        Number of points, >= 0

    Returns
    -------
    Trajectory
        List of n points; empty for n = 0

    Raises
    ------
    TypeError
        If n is not an integer
    ValueError
        If n is negative

    Examples
    --------
    >>> with start(0.0, 0.0, F=0.24, dt=1e-3) as generator:
    ...     trajectory = collect(generator, 100_000)
    >>> len(trajectory)
    100000
    >>> trajectory[0]
    Point(x=0.0, y=0.0, blowup=False)
    """
    n = _validate_count(n)
    pull = _puller(source)

    trajectory = [pull() for _ in range(n)]

    logger.debug("Collected %d points", n)
    return trajectory


def collect_paired(low: Source, high: Source, n: StepCount) -> Tuple[Trajectory, Trajectory]:
    """
    Pull n points from each of two sources in lockstep.

    Point i of each returned trajectory is the i-th point of its own
    source. Pulls alternate low, high per index.

    Parameters
    ----------
    low, high : PointSource or Iterator[Point]
        The two sources (e.g. F = 0.24 and F = 0.35 generators)
    n : int
        Number of points per trajectory, >= 0

    Returns
    -------
    Tuple[Trajectory, Trajectory]
        (low_trajectory, high_trajectory), each of length n

    Raises
    ------
    TypeError
        If n is not an integer
    ValueError
        If n is negative
    """
    n = _validate_count(n)
    pull_low = _puller(low)
    pull_high = _puller(high)

    low_trajectory: Trajectory = []
    high_trajectory: Trajectory = []
    for _ in range(n):
        low_trajectory.append(pull_low())
        high_trajectory.append(pull_high())

    logger.debug("Collected %d paired points", n)
    return low_trajectory, high_trajectory


__all__ = [
    "collect",
    "collect_paired",
]
