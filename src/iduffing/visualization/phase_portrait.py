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
Phase Portrait Plotter - Phase-Plane Rendering and Export

Plotly-based rendering of one or more (x, y) trajectories in the phase plane,
and export of the figure to PDF (or any format kaleido supports).

Main Class
----------
PhasePortraitPlotter : Phase-plane visualization
    plot_2d() : Figure with one line per labeled series
    save() : Write a figure to disk
    render() : plot_2d() + save() for a SimulationResult

Usage
-----
>>> plotter = PhasePortraitPlotter()
>>> fig = plotter.plot_2d(
...     {"F=0.24": low, "F=0.35": high},
...     title="Poincare Section F=0.24 vs F=0.35",
... )
>>> plotter.save(fig, "iduff_comp.pdf")
"""

from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

import numpy as np
import plotly.graph_objects as go

from iduffing.config import FIGURE_HEIGHT, FIGURE_WIDTH
from iduffing.types.trajectories import SimulationResult
from iduffing.visualization.themes import ColorSchemes, PlotThemes


class RendererError(RuntimeError):
    """Raised when a figure cannot be built or written."""


class PhasePortraitPlotter:
    """
    Phase-plane visualization for oscillator trajectories.

    Attributes
    ----------
    theme : str or dict
        Theme applied to every figure (see PlotThemes)

    Examples
    --------
    Single trajectory:

    >>> plotter = PhasePortraitPlotter()
    >>> fig = plotter.plot_2d({"F=0.24": x}, title="Poincare Section F=0.24")

    With the unforced equilibria marked:

    >>> fig = plotter.plot_2d(
    ...     {"F=0.35": x},
    ...     equilibria=InvertedDuffingOscillator(0.35).equilibria(),
    ... )
    """

    def __init__(self, theme: Union[str, dict] = "default"):
        self.theme = theme

    # =========================================================================
    # Main Plotting Methods
    # =========================================================================

    def plot_2d(
        self,
        series: Union[Mapping[str, np.ndarray], np.ndarray],
        title: str = "Phase Portrait",
        state_names: Tuple[str, str] = ("X", "Y=dx/dt"),
        color_scheme: Optional[str] = None,
        equilibria: Optional[List[np.ndarray]] = None,
        show_start_end: bool = False,
        showlegend: Optional[bool] = None,
    ) -> go.Figure:
        """
        Create a 2D phase portrait (y vs x).

        Parameters
        ----------
        series : Mapping[str, np.ndarray] or np.ndarray
            Label -> trajectory of shape (T, 2), drawn in mapping order.
            A bare array is drawn as a single unlabeled trajectory.
        title : str
            Plot title
        state_names : Tuple[str, str]
            Horizontal and vertical axis titles
        color_scheme : Optional[str]
            Palette name; by default 'single' for one series, 'comparison'
            for two, 'plotly' otherwise
        equilibria : Optional[List[np.ndarray]]
            Points of shape (2,) to mark with an x
        show_start_end : bool
            Mark the first (green circle) and last (red square) point of
            each series
        showlegend : Optional[bool]
            Defaults to True when more than one series is drawn

        Returns
        -------
        go.Figure
            Plotly figure

        Raises
        ------
        ValueError
            If a series is not of shape (T, 2), or no series is given
        """
        if isinstance(series, np.ndarray):
            series = {"Trajectory": series}

        arrays: Dict[str, np.ndarray] = {}
        for label, x in series.items():
            x_np = np.asarray(x, dtype=float)
            if x_np.ndim != 2 or x_np.shape[-1] != 2:
                raise ValueError(
                    f"plot_2d requires trajectories of shape (T, 2), "
                    f"got {x_np.shape} for '{label}'"
                )
            arrays[label] = x_np

        if not arrays:
            raise ValueError("plot_2d requires at least one series")

        if color_scheme is None:
            color_scheme = {1: "single", 2: "comparison"}.get(len(arrays), "plotly")
        colors = ColorSchemes.get_colors(color_scheme, len(arrays))

        if showlegend is None:
            showlegend = len(arrays) > 1

        fig = go.Figure()

        for (label, x_traj), color in zip(arrays.items(), colors):
            fig.add_trace(
                go.Scatter(
                    x=x_traj[:, 0],
                    y=x_traj[:, 1],
                    mode="lines",
                    name=label,
                    line=dict(color=color),
                )
            )

            if show_start_end and len(x_traj) > 0:
                self._add_start_end_markers(fig, x_traj)

        if equilibria is not None:
            self._add_equilibria_markers(fig, equilibria)

        fig.update_layout(
            title=title,
            xaxis_title=state_names[0],
            yaxis_title=state_names[1],
            width=FIGURE_WIDTH,
            height=FIGURE_HEIGHT,
            showlegend=showlegend,
        )

        return PlotThemes.apply_theme(fig, self.theme)

    def save(
        self,
        fig: go.Figure,
        path: Union[str, Path],
        width: int = FIGURE_WIDTH,
        height: int = FIGURE_HEIGHT,
    ) -> Path:
        """
        Write a figure to disk; the format follows the file extension.

        Parameters
        ----------
        fig : go.Figure
            Figure to export
        path : str or Path
            Destination (e.g. 'iduff_F0.24.pdf')
        width, height : int
            Image size in pixels

        Returns
        -------
        Path
            The written path

        Raises
        ------
        RendererError
            If the image cannot be written (missing kaleido/Chrome, bad
            directory, ...)
        """
        path = Path(path)
        try:
            fig.write_image(str(path), width=width, height=height)
        except Exception as e:
            raise RendererError(f"Could not write figure to {path}: {e}") from e
        return path

    def render(
        self,
        result: SimulationResult,
        output_dir: Union[str, Path] = ".",
        equilibria: Optional[List[np.ndarray]] = None,
    ) -> Path:
        """
        Plot a simulation result and write it to output_dir/result['filename'].

        Parameters
        ----------
        result : SimulationResult
            Output of iduffing.simulation.run()
        output_dir : str or Path
            Destination directory (must exist)
        equilibria : Optional[List[np.ndarray]]
            Points to mark, see plot_2d()

        Returns
        -------
        Path
            The written path

        Raises
        ------
        RendererError
            If the figure cannot be built or written
        """
        try:
            fig = self.plot_2d(
                result["series"],
                title=result["title"],
                equilibria=equilibria,
            )
        except (ValueError, TypeError) as e:
            raise RendererError(f"Could not build figure '{result['title']}': {e}") from e

        return self.save(fig, Path(output_dir) / result["filename"])

    # =========================================================================
    # Helper Methods (Internal)
    # =========================================================================

    def _add_start_end_markers(self, fig: go.Figure, x_traj: np.ndarray) -> None:
        fig.add_trace(
            go.Scatter(
                x=[x_traj[0, 0]],
                y=[x_traj[0, 1]],
                mode="markers",
                name="Start",
                marker=dict(color="green", size=8, symbol="circle"),
                showlegend=False,
            )
        )
        fig.add_trace(
            go.Scatter(
                x=[x_traj[-1, 0]],
                y=[x_traj[-1, 1]],
                mode="markers",
                name="End",
                marker=dict(color="red", size=8, symbol="square"),
                showlegend=False,
            )
        )

    def _add_equilibria_markers(self, fig: go.Figure, equilibria: List[np.ndarray]) -> None:
        """
        Add markers for equilibrium points.

        Parameters
        ----------
        fig : go.Figure
            Figure to add markers to
        equilibria : List[np.ndarray]
            Equilibrium points, each shape (2,)
        """
        if not equilibria:
            return

        fig.add_trace(
            go.Scatter(
                x=[eq[0] for eq in equilibria],
                y=[eq[1] for eq in equilibria],
                mode="markers",
                name="Equilibria",
                marker=dict(color="black", size=10, symbol="x"),
                showlegend=False,
            )
        )


__all__ = [
    "PhasePortraitPlotter",
    "RendererError",
]
