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
Plotting Themes and Color Schemes

Color palettes and layout presets for phase-plane figures.

Main Classes
------------
ColorSchemes : Color palette definitions
    SINGLE : Line color for a single trajectory
    COMPARISON : Red/blue pair for F_LOW vs F_HIGH
    PLOTLY : Default Plotly colors, for any other number of series

PlotThemes : Layout presets
    DEFAULT : Plain white figure for PDF export
    PUBLICATION : Serif fonts, simple_white template
    DARK : Dark mode, for interactive viewing

Usage
-----
>>> colors = ColorSchemes.get_colors("comparison", n_colors=2)
>>> fig = PlotThemes.apply_theme(fig, theme="publication")
"""

from typing import List, Optional, Union

import plotly.graph_objects as go


class ColorSchemes:
    """
    Predefined color palettes for phase-plane plots.

    Attributes
    ----------
    SINGLE : List[str]
        Black, for a single trajectory
    COMPARISON : List[str]
        Red then blue: low forcing, high forcing
    PLOTLY : List[str]
        Default Plotly color sequence (10 colors)
    """

    SINGLE = ["#000000"]

    COMPARISON = [
        "#FF0000",  # Red (F_LOW)
        "#0000FF",  # Blue (F_HIGH)
    ]

    PLOTLY = [
        "#636EFA",  # Blue
        "#EF553B",  # Red
        "#00CC96",  # Green
        "#AB63FA",  # Purple
        "#FFA15A",  # Orange
        "#19D3F3",  # Cyan
        "#FF6692",  # Pink
        "#B6E880",  # Light green
        "#FF97FF",  # Light purple
        "#FECB52",  # Yellow
    ]

    @staticmethod
    def get_colors(scheme: str = "plotly", n_colors: Optional[int] = None) -> List[str]:
        """
        Get a color palette, cycling it if more colors are requested.

        Parameters
        ----------
        scheme : str
            'single', 'comparison' or 'plotly' (case-insensitive)
        n_colors : Optional[int]
            Number of colors; None returns the palette as defined

        Returns
        -------
        List[str]
            Hex color codes

        Raises
        ------
        ValueError
            If scheme is unknown

        Examples
        --------
        >>> ColorSchemes.get_colors("comparison")
        ['#FF0000', '#0000FF']
        >>> ColorSchemes.get_colors("single", n_colors=2)
        ['#000000', '#000000']
        """
        schemes = {
            "single": ColorSchemes.SINGLE,
            "comparison": ColorSchemes.COMPARISON,
            "plotly": ColorSchemes.PLOTLY,
        }
        key = scheme.lower()
        if key not in schemes:
            raise ValueError(
                f"Unknown color scheme '{scheme}'. Available: {list(schemes.keys())}"
            )

        palette = schemes[key]
        if n_colors is None:
            return list(palette)
        return [palette[i % len(palette)] for i in range(n_colors)]


class PlotThemes:
    """
    Layout presets combining template, fonts and line width.

    Long Euler trajectories hold 10⁵ points or more, so the presets use
    thin lines.

    Attributes
    ----------
    DEFAULT : dict
        White background, sans-serif, 1px lines
    PUBLICATION : dict
        simple_white template, serif fonts
    DARK : dict
        plotly_dark template
    """

    DEFAULT = {
        "template": "plotly_white",
        "font_family": "Arial, sans-serif",
        "font_size": 12,
        "line_width": 1,
    }

    PUBLICATION = {
        "template": "simple_white",
        "font_family": "Times New Roman, serif",
        "font_size": 14,
        "line_width": 1,
        "showlegend": True,
    }

    DARK = {
        "template": "plotly_dark",
        "font_family": "Arial, sans-serif",
        "font_size": 12,
        "line_width": 1,
    }

    @staticmethod
    def apply_theme(fig: go.Figure, theme: Union[str, dict] = "default") -> go.Figure:
        """
        Apply a theme to a Plotly figure in place.

        Parameters
        ----------
        fig : go.Figure
            Figure to style
        theme : str or dict
            'default', 'publication', 'dark', or a custom theme dictionary
            with any of the keys template, font_family, font_size,
            line_width, showlegend

        Returns
        -------
        go.Figure
            The same figure, styled

        Raises
        ------
        ValueError
            If the theme name is unknown
        TypeError
            If theme is neither str nor dict
        """
        if isinstance(theme, str):
            themes = {
                "default": PlotThemes.DEFAULT,
                "publication": PlotThemes.PUBLICATION,
                "dark": PlotThemes.DARK,
            }
            key = theme.lower()
            if key not in themes:
                raise ValueError(
                    f"Unknown theme '{theme}'. Available: default, publication, dark"
                )
            config = themes[key]
        elif isinstance(theme, dict):
            config = theme
        else:
            raise TypeError("theme must be str or dict")

        if "template" in config:
            fig.update_layout(template=config["template"])

        font = {}
        if "font_family" in config:
            font["family"] = config["font_family"]
        if "font_size" in config:
            font["size"] = config["font_size"]
        if font:
            fig.update_layout(font=font)

        if "showlegend" in config:
            fig.update_layout(showlegend=config["showlegend"])

        if "line_width" in config:
            fig.update_traces(line_width=config["line_width"], selector=dict(mode="lines"))

        return fig


__all__ = [
    "ColorSchemes",
    "PlotThemes",
]
