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
Command-Line Interface

Simulates the inverted Duffing oscillator and writes a phase-plane PDF.

Usage
-----
    iduffing -F 0.3 -x0 0.5 -t 200 -dt 1000
    iduffing -comp --output-dir figures

Flags follow the single-dash style of the original tool:

    -F      forcing amplitude (default 0.24)
    -x0     initial position (default 0)
    -y0     initial velocity dx/dt (default 0)
    -t      simulated seconds (default 100)
    -dt     steps per second (default 1000)
    -comp   compare F=0.24 and F=0.35 (ignores -F)
"""

import argparse
import logging
import sys
from typing import List, Optional

from iduffing.config import F_HIGH, F_LOW, QUEUE_CAPACITY, SimulationConfig
from iduffing.simulation import run
from iduffing.systems.inverted_duffing import InvertedDuffingOscillator
from iduffing.visualization.phase_portrait import PhasePortraitPlotter, RendererError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iduffing",
        description=(
            "Integrate the forced inverted Duffing oscillator with explicit Euler "
            "steps and plot y = dx/dt against x."
        ),
    )
    parser.add_argument("-F", type=float, default=F_LOW, help="Constant F (forcing amplitude)")
    parser.add_argument("-x0", type=float, default=0.0, help="Initial value for x")
    parser.add_argument("-y0", type=float, default=0.0, help="Initial value for y (dx/dt)")
    parser.add_argument("-t", type=int, default=100, help="Number of seconds")
    parser.add_argument(
        "-dt",
        type=int,
        default=1000,
        help="Step resolution (-dt 10 gives 10 steps per second)",
    )
    parser.add_argument(
        "-comp",
        action="store_true",
        help=f"Compare F={F_LOW} and F={F_HIGH}",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for the PDF (default: current directory)",
    )
    parser.add_argument(
        "--queue-size",
        type=int,
        default=QUEUE_CAPACITY,
        help=f"Points buffered per generator (default: {QUEUE_CAPACITY})",
    )
    parser.add_argument(
        "--equilibria",
        action="store_true",
        help="Mark the equilibria of the unforced system",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line tool.

    Returns
    -------
    int
        0 on success, 1 if the figure could not be rendered. Invalid
        arguments exit with status 2 through argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SimulationConfig(
            F=args.F,
            x0=args.x0,
            y0=args.y0,
            t=args.t,
            dt_steps=args.dt,
            comp=args.comp,
            queue_capacity=args.queue_size,
            output_dir=args.output_dir,
        )
    except ValueError as e:
        parser.error(str(e))

    result = run(config)
    if result["blowup"]:
        logger.warning("Trajectory diverged to non-finite values")

    equilibria = None
    if args.equilibria:
        equilibria = InvertedDuffingOscillator(config.F).equilibria()

    try:
        path = PhasePortraitPlotter().render(result, config.output_dir, equilibria=equilibria)
    except RendererError as e:
        logger.error("%s", e)
        return 1

    logger.info("Wrote %s (%d points per series)", path, result["n_steps"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
