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
Spring Plotter - Step Response Visualizations

Interactive Plotly-based figures for perceptual springs.

Main Class
----------
SpringPlotter : Spring response visualization
    plot_step_response() : Response curve with target line and playhead
    plot_preset_comparison() : One response curve per preset
    plot_damping_map() : Damping ratio as a function of bounce

Usage
-----
>>> from perceptual_spring.visualization import SpringPlotter
>>>
>>> plotter = SpringPlotter(default_theme='dark')
>>> params = compute_spring_parameters(500, 0.3)
>>> fig = plotter.plot_step_response(params, 500, current_time=0.25)
>>> fig.show()
"""

import warnings
from typing import Iterable, List, Optional, Tuple

import numpy as np
import plotly.graph_objects as go

from perceptual_spring.analysis.step_analysis import analyze_step_response
from perceptual_spring.core.parameter_mapper import compute_spring_parameters
from perceptual_spring.core.sampling import DEFAULT_NUM_POINTS, sample_step_response
from perceptual_spring.presets import BOUNCE_RANGE, DISPLAY_MAX, PLAYBACK_SPAN, PRESETS
from perceptual_spring.types.spring import SpringParameters, SpringPreset
from perceptual_spring.visualization.themes import ColorSchemes, PlotThemes


class SpringPlotter:
    """
    Spring step response visualization.

    Attributes
    ----------
    default_theme : str
        Theme applied when a plotting call does not name one

    Examples
    --------
    >>> plotter = SpringPlotter()
    >>> fig = plotter.plot_preset_comparison(theme='publication')
    >>> fig.write_html('presets.html')
    """

    def __init__(self, default_theme: str = "default"):
        """
        Initialize spring plotter.

        Parameters
        ----------
        default_theme : str
            'default', 'publication' or 'dark'
        """
        self.default_theme = default_theme

    # =========================================================================
    # Main Plotting Methods
    # =========================================================================

    def plot_step_response(
        self,
        params: SpringParameters,
        duration_millis: float,
        current_time: Optional[float] = None,
        num_points: int = DEFAULT_NUM_POINTS,
        show_metrics: bool = False,
        title: str = "Spring Step Response",
        theme: Optional[str] = None,
    ) -> go.Figure:
        """
        Plot the response curve over the playback span.

        The y axis is fixed to [0, DISPLAY_MAX] so curves for different
        settings line up; a dashed line marks the settled value 1.

        Parameters
        ----------
        params : SpringParameters
            Spring coefficients
        duration_millis : float
            Nominal duration [ms]; the curve covers PLAYBACK_SPAN durations
        current_time : Optional[float]
            Playhead time [s]; drawn as a vertical line, clamped to the span
        num_points : int
            Samples along the curve
        show_metrics : bool
            If True, annotate measured overshoot, peak and settling time
        title : str
            Plot title
        theme : Optional[str]
            Theme name, None for ``default_theme``

        Returns
        -------
        go.Figure
            Figure with the response trace and the target trace
        """
        theme = theme or self.default_theme
        colors = self._colors(theme, 1)

        traj = sample_step_response(params, duration_millis, num_points=num_points, span=PLAYBACK_SPAN)
        t, y = traj["t"], traj["y"]

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=t,
                y=y,
                mode="lines",
                name=f"ζ={params.zeta:.3f}, ωₙ={params.omega_n:.2f}",
                line=dict(color=colors[0], width=2),
            )
        )
        fig.add_trace(
            go.Scatter(
                x=[t[0], t[-1]],
                y=[1.0, 1.0],
                mode="lines",
                name="Target",
                line=dict(color="gray", width=1, dash="dash"),
            )
        )

        if current_time is not None:
            playhead = min(max(current_time, 0.0), float(t[-1]))
            fig.add_vline(x=playhead, line_width=2, line_color=colors[0])

        if show_metrics:
            # Short spans often end before settling; the annotation just omits it
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", UserWarning)
                chars = analyze_step_response(t, y)
            metrics_text = "<b>Response:</b><br>"
            metrics_text += f"Overshoot: {chars['overshoot']:.1%}<br>"
            metrics_text += f"Peak: {chars['peak_value']:.3f} @ {chars['peak_time']:.3f} s<br>"
            if chars["settling_time"] is not None:
                metrics_text += f"Settling Time: {chars['settling_time']:.3f} s"
            fig.add_annotation(
                text=metrics_text,
                xref="paper",
                yref="paper",
                x=0.98,
                y=0.02,
                xanchor="right",
                yanchor="bottom",
                showarrow=False,
                bordercolor="gray",
                borderwidth=1,
            )

        fig.update_layout(
            title=title,
            xaxis_title="Time (s)",
            yaxis_title="Displacement",
            yaxis_range=[0.0, DISPLAY_MAX],
            width=800,
            height=400,
            showlegend=True,
        )

        return PlotThemes.apply_theme(fig, theme=theme)

    def plot_preset_comparison(
        self,
        presets: Optional[Iterable[SpringPreset]] = None,
        num_points: int = DEFAULT_NUM_POINTS,
        title: str = "Preset Comparison",
        theme: Optional[str] = None,
    ) -> go.Figure:
        """
        Overlay the step responses of several presets.

        Each curve spans PLAYBACK_SPAN of its own duration, so longer presets
        reach further along the time axis.

        Parameters
        ----------
        presets : Optional[Iterable[SpringPreset]]
            Presets to compare, default all built-in presets
        num_points : int
            Samples per curve
        title : str
            Plot title
        theme : Optional[str]
            Theme name, None for ``default_theme``

        Returns
        -------
        go.Figure
            One trace per preset

        Raises
        ------
        ValueError
            If presets is empty
        """
        theme = theme or self.default_theme
        preset_list: List[SpringPreset] = list(PRESETS.values()) if presets is None else list(presets)
        if not preset_list:
            raise ValueError("presets must contain at least one preset")

        colors = self._colors(theme, len(preset_list))
        fig = go.Figure()

        for preset, color in zip(preset_list, colors):
            params = compute_spring_parameters(preset.duration_millis, preset.bounce)
            traj = sample_step_response(
                params, preset.duration_millis, num_points=num_points, span=PLAYBACK_SPAN
            )
            fig.add_trace(
                go.Scatter(
                    x=traj["t"],
                    y=traj["y"],
                    mode="lines",
                    name=f"{preset.name} ({preset.duration_millis:g} ms, {preset.bounce:.0%})",
                    line=dict(color=color, width=2),
                )
            )

        fig.add_hline(y=1.0, line_dash="dash", line_color="gray")
        fig.update_layout(
            title=title,
            xaxis_title="Time (s)",
            yaxis_title="Displacement",
            yaxis_range=[0.0, DISPLAY_MAX],
            width=800,
            height=400,
            showlegend=True,
        )

        return PlotThemes.apply_theme(fig, theme=theme)

    def plot_damping_map(
        self,
        bounce_range: Tuple[float, float] = BOUNCE_RANGE,
        num_points: int = 200,
        title: str = "Bounce to Damping Ratio",
        theme: Optional[str] = None,
    ) -> go.Figure:
        """
        Plot ζ against bounce across a range of bounce values.

        Duration does not affect ζ, so a single curve describes the mapping.
        A dashed line marks critical damping (ζ = 1).

        Parameters
        ----------
        bounce_range : Tuple[float, float]
            (min, max) bounce, default ``BOUNCE_RANGE``
        num_points : int
            Samples along the bounce axis, at least 2
        title : str
            Plot title
        theme : Optional[str]
            Theme name, None for ``default_theme``

        Returns
        -------
        go.Figure
            Single-trace figure

        Raises
        ------
        ValueError
            If num_points < 2 or the range is empty
        """
        if num_points < 2:
            raise ValueError(f"num_points must be at least 2, got {num_points}")
        low, high = bounce_range
        if not low < high:
            raise ValueError(f"bounce_range must satisfy min < max, got {bounce_range}")

        theme = theme or self.default_theme
        colors = self._colors(theme, 1)

        bounces = np.linspace(low, high, num_points)
        # Duration has no effect on zeta
        zetas = [compute_spring_parameters(1000.0, b).zeta for b in bounces]

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=bounces,
                y=zetas,
                mode="lines",
                name="ζ(bounce)",
                line=dict(color=colors[0], width=2),
            )
        )
        fig.add_hline(
            y=1.0,
            line_dash="dash",
            line_color="gray",
            annotation_text="Critical damping",
            annotation_position="top right",
        )
        fig.update_layout(
            title=title,
            xaxis_title="Bounce",
            yaxis_title="Damping ratio ζ",
            width=800,
            height=400,
        )

        return PlotThemes.apply_theme(fig, theme=theme)

    # =========================================================================
    # Helper Methods (Internal)
    # =========================================================================

    @staticmethod
    def _colors(theme, n_colors: int) -> List[str]:
        if isinstance(theme, dict):
            scheme = theme.get("color_scheme", "plotly")
        else:
            scheme = PlotThemes.get_theme(theme).get("color_scheme", "plotly")
        return ColorSchemes.get_colors(scheme, n_colors=n_colors)

    @staticmethod
    def list_available_themes() -> List[str]:
        """List available plot themes."""
        return list(PlotThemes.THEME_NAMES)


__all__ = [
    "SpringPlotter",
]
