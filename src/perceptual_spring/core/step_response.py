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
Step Response Evaluation

Closed-form unit-step response of the unit-mass second-order system

    y'' + 2ζωₙ y' + ωₙ² y = ωₙ² u(t),   y(0) = y'(0) = 0,   y(∞) = 1

Underdamped (0 ≤ ζ < 1), exact:
    y(t) = 1 - e^(-ζωₙt) [cos(ωd t) + (ζ/√(1-ζ²)) sin(ωd t)]
    ωd   = ωₙ√(1 - ζ²)

Critically/overdamped (ζ ≥ 1), single-exponential approximation:
    y(t) = 1 - e^(-(ωₙ/min(ζ, 3)) t)

The ζ ≥ 1 branch is intentionally not the exact two-root solution;
consumers depend on its shape. ``perceptual_spring.analysis`` provides the
exact response for comparison.

Both evaluators are pure and thread-safe. Non-finite inputs are outside the
contract.
"""

import math

import numpy as np

MAX_DAMPING_FACTOR = 3.0
"""Ceiling on ζ in the approximated branch; keeps the decay rate ωₙ/ζ from collapsing."""


def step_response(t: float, zeta: float, omega_n: float) -> float:
    """
    Evaluate the unit-step response at a single time.

    Parameters
    ----------
    t : float
        Time since the step [s]. t ≤ 0 returns exactly 0.
    zeta : float
        Damping ratio
    omega_n : float
        Natural frequency [rad/s], must be > 0

    Returns
    -------
    float
        Displacement, 0 at rest and 1 when settled

    Examples
    --------
    >>> step_response(0.0, 0.358, 12.566)
    0.0
    >>> round(step_response(10.0, 1.0, 12.566), 6)
    1.0
    """
    if t <= 0.0:
        return 0.0

    if 0.0 <= zeta < 1.0:
        a = math.sqrt(1.0 - zeta * zeta)
        omega_d = omega_n * a
        exp_term = math.exp(-zeta * omega_n * t)
        return 1.0 - exp_term * (math.cos(omega_d * t) + (zeta / a) * math.sin(omega_d * t))

    factor = min(zeta, MAX_DAMPING_FACTOR)
    return 1.0 - math.exp(-(omega_n / factor) * t)


def step_response_array(t, zeta: float, omega_n: float) -> np.ndarray:
    """
    Vectorized ``step_response`` over an array of times.

    Applies the same branch policy element-wise; agrees with the scalar
    evaluator to floating-point rounding.

    Parameters
    ----------
    t : array_like
        Times [s], any shape
    zeta : float
        Damping ratio
    omega_n : float
        Natural frequency [rad/s]

    Returns
    -------
    np.ndarray
        Displacements, same shape as ``t``, float64

    Examples
    --------
    >>> t = np.linspace(0, 1, 5)
    >>> y = step_response_array(t, 0.358, 12.566)
    >>> y[0]
    0.0
    """
    t_arr = np.asarray(t, dtype=np.float64)
    t_pos = np.where(t_arr > 0.0, t_arr, 0.0)

    if 0.0 <= zeta < 1.0:
        a = math.sqrt(1.0 - zeta * zeta)
        omega_d = omega_n * a
        exp_term = np.exp(-zeta * omega_n * t_pos)
        y = 1.0 - exp_term * (np.cos(omega_d * t_pos) + (zeta / a) * np.sin(omega_d * t_pos))
    else:
        factor = min(zeta, MAX_DAMPING_FACTOR)
        y = 1.0 - np.exp(-(omega_n / factor) * t_pos)

    return np.where(t_arr > 0.0, y, 0.0)


__all__ = [
    "MAX_DAMPING_FACTOR",
    "step_response",
    "step_response_array",
]
