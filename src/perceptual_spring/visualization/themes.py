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

Color palettes and figure styling for spring response plots.

Main Classes
------------
ColorSchemes : Color palette definitions
    PLOTLY : Default Plotly colors
    COLORBLIND_SAFE : Wong palette (colorblind accessible)
    SPRING : Neon-on-dark preview palette

PlotThemes : Complete theme configurations
    DEFAULT : Standard Plotly white theme
    PUBLICATION : Publication-ready styling
    DARK : Dark preview styling

Usage
-----
>>> from perceptual_spring.visualization.themes import ColorSchemes, PlotThemes
>>>
>>> colors = ColorSchemes.get_colors('spring', n_colors=4)
>>> fig = PlotThemes.apply_theme(fig, theme='dark')
"""

from typing import List, Optional

import plotly.graph_objects as go


class ColorSchemes:
    """
    Predefined color palettes for plotting.

    Attributes
    ----------
    PLOTLY : List[str]
        Default Plotly color sequence (10 colors)
    COLORBLIND_SAFE : List[str]
        Wong palette - colorblind accessible (8 colors)
    SPRING : List[str]
        Preview palette, accent green first (4 colors)
    """

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

    COLORBLIND_SAFE = [
        "#0173B2",  # Blue
        "#DE8F05",  # Orange
        "#029E73",  # Green
        "#CC78BC",  # Pink
        "#CA9161",  # Tan
        "#949494",  # Gray
        "#ECE133",  # Yellow
        "#56B4E9",  # Sky blue
    ]

    SPRING = [
        "#00FF88",  # Accent green
        "#19D3F3",  # Cyan
        "#FFA15A",  # Orange
        "#FF6692",  # Pink
    ]

    @staticmethod
    def get_colors(scheme: str = "plotly", n_colors: Optional[int] = None) -> List[str]:
        """
        Get color palette by name.

        Parameters
        ----------
        scheme : str
            'plotly', 'colorblind_safe' (alias 'wong') or 'spring'
        n_colors : Optional[int]
            Number of colors needed; cycles through the palette when more
            than available

        Returns
        -------
        List[str]
            List of hex color codes

        Raises
        ------
        ValueError
            If scheme name is not recognized
        """
        scheme_lower = scheme.lower().replace("-", "_").replace(" ", "_")

        if scheme_lower == "plotly":
            palette = ColorSchemes.PLOTLY
        elif scheme_lower in ["colorblind_safe", "wong"]:
            palette = ColorSchemes.COLORBLIND_SAFE
        elif scheme_lower == "spring":
            palette = ColorSchemes.SPRING
        else:
            raise ValueError(
                f"Unknown color scheme '{scheme}'. Available: plotly, colorblind_safe, spring"
            )

        if n_colors is None:
            return palette.copy()
        return [palette[i % len(palette)] for i in range(n_colors)]


class PlotThemes:
    """
    Complete plotting theme configurations.

    Attributes
    ----------
    DEFAULT : dict
        Standard Plotly white theme
    PUBLICATION : dict
        Clean, high-contrast styling
    DARK : dict
        Dark preview styling with the spring accent palette
    THEME_NAMES : tuple
        Names accepted by ``get_theme``

    Examples
    --------
    >>> fig = PlotThemes.apply_theme(fig, theme='publication')
    >>>
    >>> custom = PlotThemes.DEFAULT.copy()
    >>> custom['font_size'] = 16
    >>> fig = PlotThemes.apply_theme(fig, theme=custom)
    """

    DEFAULT = {
        "color_scheme": "plotly",
        "template": "plotly_white",
        "font_family": "Arial, sans-serif",
        "font_size": 12,
        "line_width": 2,
    }

    PUBLICATION = {
        "color_scheme": "colorblind_safe",
        "template": "simple_white",
        "font_family": "Times New Roman, serif",
        "font_size": 14,
        "line_width": 2.5,
        "showlegend": True,
    }

    DARK = {
        "color_scheme": "spring",
        "template": "plotly_dark",
        "font_family": "Arial, sans-serif",
        "font_size": 12,
        "line_width": 3,
        "paper_bgcolor": "#0A0A0A",
        "plot_bgcolor": "#1A1A1A",
    }

    THEME_NAMES = ("default", "publication", "dark")

    @staticmethod
    def get_theme(theme: str) -> dict:
        """
        Look up a theme configuration by name.

        Raises
        ------
        ValueError
            If theme name is not recognized
        """
        themes = {
            "default": PlotThemes.DEFAULT,
            "publication": PlotThemes.PUBLICATION,
            "dark": PlotThemes.DARK,
        }
        theme_lower = theme.lower()
        if theme_lower not in themes:
            raise ValueError(
                f"Unknown theme '{theme}'. Available: {', '.join(PlotThemes.THEME_NAMES)}"
            )
        return themes[theme_lower]

    @staticmethod
    def apply_theme(fig: go.Figure, theme="default") -> go.Figure:
        """
        Apply complete theme to Plotly figure.

        Parameters
        ----------
        fig : go.Figure
            Plotly figure to style
        theme : str or dict
            Theme name ('default', 'publication', 'dark') or custom theme
            dictionary

        Returns
        -------
        go.Figure
            Styled figure

        Raises
        ------
        ValueError
            If theme name is not recognized
        TypeError
            If theme is neither str nor dict
        """
        if isinstance(theme, str):
            config = PlotThemes.get_theme(theme)
        elif isinstance(theme, dict):
            config = theme
        else:
            raise TypeError("theme must be str or dict")

        if "template" in config:
            fig.update_layout(template=config["template"])

        if "font_family" in config or "font_size" in config:
            font = {}
            if "font_family" in config:
                font["family"] = config["font_family"]
            if "font_size" in config:
                font["size"] = config["font_size"]
            fig.update_layout(font=font)

        if "paper_bgcolor" in config:
            fig.update_layout(paper_bgcolor=config["paper_bgcolor"])
        if "plot_bgcolor" in config:
            fig.update_layout(plot_bgcolor=config["plot_bgcolor"])

        if "showlegend" in config:
            fig.update_layout(showlegend=config["showlegend"])

        if "line_width" in config:
            for trace in fig.data:
                # Dashed reference lines keep their own width
                if hasattr(trace, "line") and not trace.line.dash:
                    trace.line.width = config["line_width"]

        return fig


__all__ = [
    "ColorSchemes",
    "PlotThemes",
]
