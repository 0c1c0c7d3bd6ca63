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
Unit Tests for Plotting Themes and Color Schemes
"""

import plotly.graph_objects as go
import pytest

from iduffing.visualization.themes import ColorSchemes, PlotThemes


@pytest.fixture
def line_figure():
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=[0, 1], y=[0, 1], mode="lines", line=dict(width=3)))
    return fig


class TestColorSchemes:
    def test_comparison_palette(self):
        assert ColorSchemes.get_colors("comparison") == ["#FF0000", "#0000FF"]

    def test_case_insensitive(self):
        assert ColorSchemes.get_colors("SINGLE") == ["#000000"]

    def test_cycling(self):
        colors = ColorSchemes.get_colors("comparison", n_colors=3)
        assert colors == ["#FF0000", "#0000FF", "#FF0000"]

    def test_returns_copy(self):
        colors = ColorSchemes.get_colors("plotly")
        colors.append("#FFFFFF")
        assert len(ColorSchemes.PLOTLY) == 10

    def test_unknown_scheme(self):
        with pytest.raises(ValueError, match="Unknown color scheme"):
            ColorSchemes.get_colors("rainbow")


class TestPlotThemes:
    def test_default_theme(self, line_figure):
        fig = PlotThemes.apply_theme(line_figure)
        assert fig.layout.font.size == 12
        assert fig.data[0].line.width == 1

    def test_custom_theme(self, line_figure):
        fig = PlotThemes.apply_theme(line_figure, {"font_size": 20, "showlegend": False})
        assert fig.layout.font.size == 20
        assert fig.layout.showlegend is False
        assert fig.data[0].line.width == 3

    def test_unknown_theme(self, line_figure):
        with pytest.raises(ValueError, match="Unknown theme"):
            PlotThemes.apply_theme(line_figure, "neon")

    def test_invalid_theme_type(self, line_figure):
        with pytest.raises(TypeError):
            PlotThemes.apply_theme(line_figure, 42)
