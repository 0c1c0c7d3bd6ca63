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
Visual Test Suite for Inverted Duffing Phase Portraits

Generates HTML files for visual inspection of simulated trajectories.
Run this script to create a gallery of plots.

Usage:
    python visual_test_phase_portrait.py

Output:
    Creates HTML files in ./visual_tests/phase_portrait/
"""

from pathlib import Path

from iduffing.config import SimulationConfig
from iduffing.simulation import run
from iduffing.systems.inverted_duffing import InvertedDuffingOscillator
from iduffing.visualization.phase_portrait import PhasePortraitPlotter


def setup_output_directory():
    """Create output directory for visual tests."""
    output_dir = Path("visual_tests/phase_portrait")
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def visual_1_period_one_orbit(output_dir):
    """Visual 1: F=0.24 settles on a period-1 orbit around one well."""
    print("Generating Visual 1: F=0.24 orbit...")

    result = run(SimulationConfig(F=0.24, t=100, dt_steps=1000))
    fig = PhasePortraitPlotter().plot_2d(
        result["series"], title=result["title"], show_start_end=True
    )

    fig.write_html(output_dir / "01_period_one_orbit.html")
    print("  ✓ Saved: 01_period_one_orbit.html")


def visual_2_chaotic_attractor(output_dir):
    """Visual 2: F=0.35 wanders between both wells."""
    print("Generating Visual 2: F=0.35 attractor...")

    result = run(SimulationConfig(F=0.35, t=300, dt_steps=1000))
    equilibria = InvertedDuffingOscillator(0.35).equilibria()
    fig = PhasePortraitPlotter().plot_2d(
        result["series"], title=result["title"], equilibria=equilibria
    )

    fig.write_html(output_dir / "02_chaotic_attractor.html")
    print("  ✓ Saved: 02_chaotic_attractor.html")


def visual_3_comparison(output_dir):
    """Visual 3: Both forcing amplitudes from the origin."""
    print("Generating Visual 3: comparison...")

    result = run(SimulationConfig(t=100, dt_steps=1000, comp=True))
    fig = PhasePortraitPlotter(theme="publication").plot_2d(
        result["series"], title=result["title"]
    )

    fig.write_html(output_dir / "03_comparison.html")
    print("  ✓ Saved: 03_comparison.html")


def visual_4_coarse_step(output_dir):
    """Visual 4: Coarse step (dt=0.1) against the default resolution."""
    print("Generating Visual 4: step resolution...")

    coarse = run(SimulationConfig(F=0.24, t=100, dt_steps=10))
    fine = run(SimulationConfig(F=0.24, t=100, dt_steps=1000))
    fig = PhasePortraitPlotter().plot_2d(
        {
            "dt=0.1": coarse["series"]["F=0.24"],
            "dt=0.001": fine["series"]["F=0.24"],
        },
        title="Visual 4: Euler Step Resolution (F=0.24)",
    )

    fig.write_html(output_dir / "04_coarse_step.html")
    print("  ✓ Saved: 04_coarse_step.html")


def main():
    output_dir = setup_output_directory()

    visual_1_period_one_orbit(output_dir)
    visual_2_chaotic_attractor(output_dir)
    visual_3_comparison(output_dir)
    visual_4_coarse_step(output_dir)

    print(f"\nAll visual tests written to {output_dir.resolve()}")


if __name__ == "__main__":
    main()
