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
Step Response Sampling

Evenly spaced sampling of the step response over a multiple of the nominal
duration, the way a response curve or a playback preview consumes it.
"""

import numpy as np

from perceptual_spring.core.parameter_mapper import MIN_DURATION_MILLIS
from perceptual_spring.core.step_response import step_response_array
from perceptual_spring.types.spring import SpringParameters, StepResponseTrajectory

DEFAULT_NUM_POINTS = 201
DEFAULT_SPAN = 2.0


def sample_times(
    duration_millis: float,
    num_points: int = DEFAULT_NUM_POINTS,
    span: float = DEFAULT_SPAN,
) -> np.ndarray:
    """
    Evenly spaced times over ``[0, span * duration]``.

    Parameters
    ----------
    duration_millis : float
        Nominal duration [ms], floored at 1 ms like the parameter mapper
    num_points : int
        Number of samples including both endpoints, at least 2
    span : float
        Multiple of the duration to cover, must be positive

    Returns
    -------
    np.ndarray
        Times [s], shape (num_points,)

    Raises
    ------
    ValueError
        If num_points < 2 or span <= 0
    """
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")
    if span <= 0:
        raise ValueError(f"span must be positive, got {span}")

    duration_sec = max(duration_millis, MIN_DURATION_MILLIS) / 1000.0
    return np.linspace(0.0, span * duration_sec, num_points)


def sample_step_response(
    params: SpringParameters,
    duration_millis: float,
    num_points: int = DEFAULT_NUM_POINTS,
    span: float = DEFAULT_SPAN,
) -> StepResponseTrajectory:
    """
    Sample the step response of ``params`` over ``span`` durations.

    The default of 201 points over twice the duration reproduces the
    200-segment preview curve.

    Parameters
    ----------
    params : SpringParameters
        Spring coefficients, usually from ``compute_spring_parameters``
    duration_millis : float
        Nominal duration [ms] that sets the time axis
    num_points : int
        Number of samples, default 201
    span : float
        Multiple of the duration to cover, default 2.0

    Returns
    -------
    StepResponseTrajectory
        Sample times, displacements and the parameters used

    Raises
    ------
    ValueError
        If num_points < 2 or span <= 0

    Examples
    --------
    >>> params = compute_spring_parameters(500, 0.3)
    >>> traj = sample_step_response(params, 500)
    >>> traj['t'][-1]
    1.0
    >>> traj['y'].max() > 1.0
    True
    """
    t = sample_times(duration_millis, num_points=num_points, span=span)
    y = step_response_array(t, params.zeta, params.omega_n)

    return StepResponseTrajectory(
        t=t,
        y=y,
        zeta=params.zeta,
        omega_n=params.omega_n,
        duration_sec=max(duration_millis, MIN_DURATION_MILLIS) / 1000.0,
    )


__all__ = [
    "DEFAULT_NUM_POINTS",
    "DEFAULT_SPAN",
    "sample_times",
    "sample_step_response",
]
