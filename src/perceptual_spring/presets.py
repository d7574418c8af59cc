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
Spring Presets and Configuration

Named perceptual settings, the nominal control ranges and the default
sampling configuration shared by playback and plotting.

Usage
-----
>>> from perceptual_spring.presets import get_preset, list_presets
>>>
>>> list_presets()
['Snappy', 'Bouncy', 'Extra Bouncy', 'No Bounce']
>>> get_preset('bouncy')
SpringPreset(name='Bouncy', duration_millis=500.0, bounce=0.3)
"""

from typing import Dict, List, Tuple

from typing_extensions import TypedDict

from perceptual_spring.core.sampling import DEFAULT_NUM_POINTS, DEFAULT_SPAN
from perceptual_spring.types.spring import SpringPreset

# ============================================================================
# Nominal Ranges
# ============================================================================

DURATION_RANGE_MILLIS: Tuple[float, float] = (200.0, 1000.0)
"""Nominal duration control range [ms]."""

BOUNCE_RANGE: Tuple[float, float] = (-1.0, 0.6)
"""Nominal bounce control range."""

PLAYBACK_SPAN = DEFAULT_SPAN
"""Playback covers this many durations to show settling."""

DISPLAY_MAX = 1.2
"""Upper bound of the displacement axis in previews."""


# ============================================================================
# Presets
# ============================================================================

PRESETS: Dict[str, SpringPreset] = {
    preset.name: preset
    for preset in (
        SpringPreset("Snappy", 300.0, 0.1),
        SpringPreset("Bouncy", 500.0, 0.3),
        SpringPreset("Extra Bouncy", 700.0, 0.5),
        SpringPreset("No Bounce", 500.0, 0.0),
    )
}

DEFAULT_PRESET = "Bouncy"


def list_presets() -> List[str]:
    """Preset names in display order."""
    return list(PRESETS)


def get_preset(name: str) -> SpringPreset:
    """
    Look up a preset by name.

    Matching ignores case and treats hyphens/underscores as spaces, so
    'extra_bouncy' and 'Extra Bouncy' are the same preset.

    Parameters
    ----------
    name : str
        Preset name

    Returns
    -------
    SpringPreset
        The matching preset

    Raises
    ------
    ValueError
        If no preset matches
    """
    key = name.lower().replace("-", " ").replace("_", " ").strip()
    for preset_name, preset in PRESETS.items():
        if preset_name.lower() == key:
            return preset

    raise ValueError(
        f"Unknown preset '{name}'. Available: {', '.join(list_presets())}"
    )


# ============================================================================
# Sampling Configuration
# ============================================================================


class SamplingConfig(TypedDict, total=False):
    """
    Response sampling configuration.

    Attributes
    ----------
    num_points : int
        Samples per curve, including both endpoints
    span : float
        Multiple of the duration covered by the curve
    """

    num_points: int
    span: float


DEFAULT_SAMPLING_CONFIG: SamplingConfig = {
    "num_points": DEFAULT_NUM_POINTS,
    "span": DEFAULT_SPAN,
}


__all__ = [
    "DURATION_RANGE_MILLIS",
    "BOUNCE_RANGE",
    "PLAYBACK_SPAN",
    "DISPLAY_MAX",
    "PRESETS",
    "DEFAULT_PRESET",
    "list_presets",
    "get_preset",
    "SamplingConfig",
    "DEFAULT_SAMPLING_CONFIG",
]
