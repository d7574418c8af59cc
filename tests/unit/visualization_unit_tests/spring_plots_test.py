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
Unit Tests for Spring Plotter

Tests step response curves, preset comparison and the bounce to damping
ratio map.
"""

import numpy as np
import plotly.graph_objects as go
import pytest

from perceptual_spring.core.parameter_mapper import compute_spring_parameters
from perceptual_spring.presets import BOUNCE_RANGE, PRESETS
from perceptual_spring.types.spring import SpringPreset
from perceptual_spring.visualization import PlotThemes, SpringPlotter

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def plotter():
    """Create default spring plotter."""
    return SpringPlotter()


@pytest.fixture
def bouncy():
    """500 ms, 30% bounce."""
    return compute_spring_parameters(500, 0.3)


# ============================================================================
# Initialization Tests
# ============================================================================


class TestInitialization:
    """Test SpringPlotter initialization."""

    def test_default_initialization(self):
        """Default theme is 'default'."""
        assert SpringPlotter().default_theme == "default"

    def test_theme_initialization(self):
        """Custom default theme is stored."""
        assert SpringPlotter(default_theme="dark").default_theme == "dark"

    def test_list_available_themes(self):
        """Available themes."""
        assert SpringPlotter.list_available_themes() == ["default", "publication", "dark"]
        assert SpringPlotter.list_available_themes() == list(PlotThemes.THEME_NAMES)


# ============================================================================
# plot_step_response Tests
# ============================================================================


class TestPlotStepResponse:
    """Test plot_step_response method."""

    def test_basic_step_response(self, plotter, bouncy):
        """Response and target traces."""
        fig = plotter.plot_step_response(bouncy, 500)

        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 2
        assert len(fig.data[0].x) == 201
        assert fig.data[0].x[-1] == pytest.approx(1.0)
        assert list(fig.data[1].y) == [1.0, 1.0]

    def test_target_line_keeps_width(self, plotter, bouncy):
        """Theme line width applies to the response, not the target."""
        fig = plotter.plot_step_response(bouncy, 500)
        assert fig.data[0].line.width == 2
        assert fig.data[1].line.width == 1
        assert fig.data[1].line.dash == "dash"

    def test_fixed_y_range(self, plotter, bouncy):
        """Displacement axis spans 0 to 1.2."""
        fig = plotter.plot_step_response(bouncy, 500)
        assert tuple(fig.layout.yaxis.range) == (0.0, 1.2)

    def test_no_playhead_by_default(self, plotter, bouncy):
        """No playhead without current_time."""
        fig = plotter.plot_step_response(bouncy, 500)
        assert len(fig.layout.shapes) == 0

    def test_playhead(self, plotter, bouncy):
        """current_time draws a vertical line."""
        fig = plotter.plot_step_response(bouncy, 500, current_time=0.25)
        assert len(fig.layout.shapes) == 1
        assert fig.layout.shapes[0].x0 == pytest.approx(0.25)

    def test_playhead_clamped(self, plotter, bouncy):
        """Playhead past the end sits on the last sample."""
        fig = plotter.plot_step_response(bouncy, 500, current_time=10.0)
        assert fig.layout.shapes[0].x0 == pytest.approx(1.0)

    def test_metrics_annotation(self, plotter, bouncy):
        """show_metrics adds an annotation."""
        fig = plotter.plot_step_response(bouncy, 500, show_metrics=True)
        assert len(fig.layout.annotations) == 1
        assert "Overshoot" in fig.layout.annotations[0].text

    def test_custom_num_points(self, plotter, bouncy):
        """num_points controls curve resolution."""
        fig = plotter.plot_step_response(bouncy, 500, num_points=51)
        assert len(fig.data[0].y) == 51

    def test_dark_theme(self, plotter, bouncy):
        """Dark theme uses the spring palette and dark background."""
        fig = plotter.plot_step_response(bouncy, 500, theme="dark")
        assert fig.data[0].line.color.upper() == "#00FF88"
        assert fig.layout.paper_bgcolor.upper() == "#0A0A0A"

    def test_invalid_theme(self, plotter, bouncy):
        """Unknown themes raise."""
        with pytest.raises(ValueError, match="Unknown theme"):
            plotter.plot_step_response(bouncy, 500, theme="neon")


# ============================================================================
# plot_preset_comparison Tests
# ============================================================================


class TestPlotPresetComparison:
    """Test plot_preset_comparison method."""

    def test_all_presets(self, plotter):
        """One trace per built-in preset."""
        fig = plotter.plot_preset_comparison()
        assert len(fig.data) == len(PRESETS)
        assert fig.data[0].name.startswith("Snappy")

    def test_curves_span_own_duration(self, plotter):
        """Each curve covers two of its own durations."""
        fig = plotter.plot_preset_comparison()
        ends = [trace.x[-1] for trace in fig.data]
        assert ends == pytest.approx([0.6, 1.0, 1.4, 1.0])

    def test_custom_presets(self, plotter):
        """Caller-supplied presets."""
        presets = [SpringPreset("A", 400.0, 0.2), SpringPreset("B", 400.0, -0.5)]
        fig = plotter.plot_preset_comparison(presets, theme="publication")
        assert len(fig.data) == 2

    def test_target_line(self, plotter):
        """Settled value is marked with a horizontal line."""
        fig = plotter.plot_preset_comparison()
        assert len(fig.layout.shapes) == 1

    def test_empty_presets(self, plotter):
        """Empty preset list is rejected."""
        with pytest.raises(ValueError, match="at least one preset"):
            plotter.plot_preset_comparison([])


# ============================================================================
# plot_damping_map Tests
# ============================================================================


class TestPlotDampingMap:
    """Test plot_damping_map method."""

    def test_basic_map(self, plotter):
        """Single trace from zeta = 2 down to the 60% bounce value."""
        fig = plotter.plot_damping_map()
        assert len(fig.data) == 1

        assert (fig.data[0].x[0], fig.data[0].x[-1]) == pytest.approx(BOUNCE_RANGE)
        zetas = np.asarray(fig.data[0].y)
        assert len(zetas) == 200
        assert zetas[0] == pytest.approx(2.0)
        assert zetas[-1] == pytest.approx(compute_spring_parameters(500, 0.6).zeta)
        assert np.all(np.diff(zetas) <= 0)

    def test_critical_marker(self, plotter):
        """Critical damping line is annotated."""
        fig = plotter.plot_damping_map()
        assert len(fig.layout.shapes) == 1
        assert fig.layout.annotations[0].text == "Critical damping"

    def test_invalid_points(self, plotter):
        """num_points must be at least 2."""
        with pytest.raises(ValueError, match="num_points"):
            plotter.plot_damping_map(num_points=1)

    def test_invalid_range(self, plotter):
        """Range must be non-empty."""
        with pytest.raises(ValueError, match="bounce_range"):
            plotter.plot_damping_map(bounce_range=(0.5, 0.5))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
