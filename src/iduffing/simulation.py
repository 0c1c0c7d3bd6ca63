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
Simulation Runs

Wires the trajectory generators to the sampler for the two run modes:

- single: one trajectory for the configured forcing amplitude F
- comparison: F_LOW and F_HIGH from the same initial condition, sampled in
  lockstep (the configured F is ignored)

Each run starts its generators in a ``with`` block, so the producer
threads are stopped as soon as the required number of points has been
collected.
"""

import logging

from iduffing.config import (
    COMPARISON_FILENAME,
    F_HIGH,
    F_LOW,
    SimulationConfig,
    format_forcing,
    single_filename,
)
from iduffing.integration.euler_stream import TrajectoryGenerator
from iduffing.sampling.sampler import collect, collect_paired
from iduffing.types.trajectories import SimulationResult, Trajectory, points_to_array

logger = logging.getLogger(__name__)


def _label(F: float) -> str:
    return f"F={format_forcing(F)}"


def _diverged(trajectory: Trajectory) -> bool:
    # The marker is sticky, so the last point tells for the whole run.
    return bool(trajectory) and trajectory[-1].blowup


def simulate_single(config: SimulationConfig) -> SimulationResult:
    """
    Sample one trajectory for config.F.

    Parameters
    ----------
    config : SimulationConfig
        Run parameters

    Returns
    -------
    SimulationResult
        One series labeled 'F=<F>', titled 'Poincare Section F=<F>',
        file name 'iduff_F<F>.pdf'
    """
    logger.debug("Simulating F=%s for %d steps", config.F, config.n_steps)

    with TrajectoryGenerator(
        config.x0, config.y0, config.F, config.dt, capacity=config.queue_capacity
    ) as generator:
        trajectory = collect(generator, config.n_steps)

    label = _label(config.F)
    return {
        "series": {label: points_to_array(trajectory)},
        "title": f"Poincare Section {label}",
        "filename": single_filename(config.F),
        "n_steps": config.n_steps,
        "blowup": _diverged(trajectory),
    }


def simulate_comparison(config: SimulationConfig) -> SimulationResult:
    """
    Sample F_LOW and F_HIGH trajectories concurrently.

    Both generators run on their own threads; the sampler pulls one point
    from each per index, so point i of both series is the state after i
    steps.

    Parameters
    ----------
    config : SimulationConfig
        Run parameters (config.F is ignored)

    Returns
    -------
    SimulationResult
        Series 'F=0.24' and 'F=0.35', titled
        'Poincare Section F=0.24 vs F=0.35', file name 'iduff_comp.pdf'
    """
    logger.debug(
        "Simulating comparison F=%s vs F=%s for %d steps", F_LOW, F_HIGH, config.n_steps
    )

    with TrajectoryGenerator(
        config.x0, config.y0, F_LOW, config.dt, capacity=config.queue_capacity
    ) as low, TrajectoryGenerator(
        config.x0, config.y0, F_HIGH, config.dt, capacity=config.queue_capacity
    ) as high:
        low_trajectory, high_trajectory = collect_paired(low, high, config.n_steps)

    low_label, high_label = _label(F_LOW), _label(F_HIGH)
    return {
        "series": {
            low_label: points_to_array(low_trajectory),
            high_label: points_to_array(high_trajectory),
        },
        "title": f"Poincare Section {low_label} vs {high_label}",
        "filename": COMPARISON_FILENAME,
        "n_steps": config.n_steps,
        "blowup": _diverged(low_trajectory) or _diverged(high_trajectory),
    }


def run(config: SimulationConfig) -> SimulationResult:
    """Run the mode selected by config.comp."""
    if config.comp:
        return simulate_comparison(config)
    return simulate_single(config)


__all__ = [
    "simulate_single",
    "simulate_comparison",
    "run",
]
