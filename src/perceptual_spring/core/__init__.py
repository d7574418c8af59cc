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
Spring Core
===========

Pure functions mapping perceptual controls to physical coefficients and
evaluating the resulting step response.

Parameter Mapping
-----------------
>>> from perceptual_spring.core import compute_spring_parameters, spring_spec
>>>
>>> params = compute_spring_parameters(500, 0.3)
>>> spec = spring_spec(500, bounce=0.3)

Step Response
-------------
>>> from perceptual_spring.core import step_response, sample_step_response
>>>
>>> y = step_response(0.1, params.zeta, params.omega_n)
>>> traj = sample_step_response(params, 500)

Authors
-------
Gil Benezer

License
-------
GNU Affero General Public License v3.0
"""

from .parameter_mapper import (
    MAX_OVERDAMPING,
    MAX_OVERSHOOT,
    MIN_DURATION_MILLIS,
    MIN_OVERSHOOT,
    bounce_for_damping_ratio,
    compute_spring_parameters,
    overshoot_for_damping_ratio,
    spring_spec,
)
from .sampling import (
    DEFAULT_NUM_POINTS,
    DEFAULT_SPAN,
    sample_step_response,
    sample_times,
)
from .step_response import (
    MAX_DAMPING_FACTOR,
    step_response,
    step_response_array,
)

__all__ = [
    # Parameter mapping
    "MIN_DURATION_MILLIS",
    "MIN_OVERSHOOT",
    "MAX_OVERSHOOT",
    "MAX_OVERDAMPING",
    "compute_spring_parameters",
    "overshoot_for_damping_ratio",
    "bounce_for_damping_ratio",
    "spring_spec",
    # Step response
    "MAX_DAMPING_FACTOR",
    "step_response",
    "step_response_array",
    # Sampling
    "DEFAULT_NUM_POINTS",
    "DEFAULT_SPAN",
    "sample_times",
    "sample_step_response",
]
