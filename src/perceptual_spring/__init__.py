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
Perceptual Spring
=================

Map a perceptual spring description (duration, bounce) onto the damping
ratio and natural frequency of a unit-mass oscillator, and evaluate its
step response.

>>> from perceptual_spring import compute_spring_parameters, step_response
>>>
>>> params = compute_spring_parameters(500, 0.3)
>>> y = step_response(0.2, params.zeta, params.omega_n)

Subpackages
-----------
core : parameter mapping, step response evaluation, sampling
types : SpringParameters and result types
analysis : measured/predicted response characteristics
visualization : Plotly figures (imported on demand)

Modules
-------
presets : named presets and nominal control ranges
playback : SpringPlayback timeline

Authors
-------
Gil Benezer

License
-------
GNU Affero General Public License v3.0
"""

from .core import (
    compute_spring_parameters,
    sample_step_response,
    spring_spec,
    step_response,
    step_response_array,
)
from .playback import SpringPlayback
from .presets import PRESETS, get_preset, list_presets
from .types import SpringParameters, SpringPreset, SpringSpec

__version__ = "0.1.0"

__all__ = [
    "compute_spring_parameters",
    "step_response",
    "step_response_array",
    "sample_step_response",
    "spring_spec",
    "SpringParameters",
    "SpringPreset",
    "SpringSpec",
    "SpringPlayback",
    "PRESETS",
    "get_preset",
    "list_presets",
]
