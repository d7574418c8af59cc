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
Spring Types

Value and result types for the perceptual spring model:
- SpringParameters: physical coefficients (ζ, ωₙ) of a unit-mass oscillator
- SpringSpec: animation-library form (damping ratio, stiffness)
- StepResponseTrajectory: sampled step response
- StepResponseCharacteristics: rise/peak/overshoot/settling metrics
- SpringPreset: named (duration, bounce) pair

Mathematical Background
-----------------------
Unit-mass damped harmonic oscillator driven by a unit step:

    y'' + 2ζωₙ y' + ωₙ² y = ωₙ² u(t),   y(0) = y'(0) = 0

    Stiffness:          k = ωₙ²         (m = 1)
    Damping:            c = 2ζωₙ        (m = 1)
    Damped frequency:   ωd = ωₙ√(1 - ζ²)  (ζ < 1)

Regimes:
    ζ < 1: underdamped (oscillates, overshoots)
    ζ = 1: critically damped
    ζ > 1: overdamped

Usage
-----
>>> from perceptual_spring.types import SpringParameters
>>>
>>> params = SpringParameters(zeta=0.358, omega_n=12.566)
>>> params.stiffness
157.90...
>>> params.regime
'underdamped'
"""

import math
from dataclasses import dataclass
from typing import Literal, NamedTuple, Optional

import numpy as np
from typing_extensions import TypedDict

DampingRegime = Literal["underdamped", "critically_damped", "overdamped"]
"""Qualitative damping regime of a second-order system."""

CRITICAL_DAMPING_TOLERANCE = 1e-9


@dataclass(frozen=True)
class SpringParameters:
    """
    Physical coefficients of a unit-mass damped harmonic oscillator.

    Immutable value type: two instances with equal fields compare equal
    and hash identically. Recomputed from scratch whenever the perceptual
    inputs change, never mutated.

    Attributes
    ----------
    zeta : float
        Damping ratio ζ [-]. Strictly positive when produced by
        ``compute_spring_parameters``.
    omega_n : float
        Natural frequency ωₙ [rad/s]. Strictly positive when produced by
        ``compute_spring_parameters``.

    Examples
    --------
    >>> params = SpringParameters(zeta=1.0, omega_n=4 * math.pi)
    >>> params.is_oscillatory
    False
    >>> params == SpringParameters(1.0, 4 * math.pi)
    True
    """

    zeta: float
    omega_n: float

    @property
    def stiffness(self) -> float:
        """Spring constant k = ωₙ² for unit mass [N/m]."""
        return self.omega_n * self.omega_n

    @property
    def damping_coefficient(self) -> float:
        """Damping coefficient c = 2ζωₙ for unit mass [N·s/m]."""
        return 2.0 * self.zeta * self.omega_n

    @property
    def omega_d(self) -> float:
        """Damped frequency ωd = ωₙ√(1 - ζ²) [rad/s], 0 when ζ ≥ 1."""
        if 0.0 <= self.zeta < 1.0:
            return self.omega_n * math.sqrt(1.0 - self.zeta * self.zeta)
        return 0.0

    @property
    def is_oscillatory(self) -> bool:
        """True for the underdamped branch (0 ≤ ζ < 1)."""
        return 0.0 <= self.zeta < 1.0

    @property
    def regime(self) -> DampingRegime:
        """Damping regime classification."""
        if abs(self.zeta - 1.0) < CRITICAL_DAMPING_TOLERANCE:
            return "critically_damped"
        if self.zeta < 1.0:
            return "underdamped"
        return "overdamped"


class SpringSpec(TypedDict):
    """
    Spring description in the form animation libraries consume.

    Fields
    ------
    damping_ratio : float
        Damping ratio ζ
    stiffness : float
        Stiffness ωₙ² (unit mass)
    visibility_threshold : Optional[float]
        Distance below which the animation is considered settled,
        None to let the animation library choose

    Examples
    --------
    >>> spec: SpringSpec = spring_spec(500, bounce=0.3)
    >>> spec['stiffness']  # (2π / 0.5)²
    157.91...
    """

    damping_ratio: float
    stiffness: float
    visibility_threshold: Optional[float]


class StepResponseTrajectory(TypedDict):
    """
    Sampled unit-step response.

    Fields
    ------
    t : np.ndarray
        Sample times [s], shape (T,), starting at 0
    y : np.ndarray
        Displacement at each sample, shape (T,)
    zeta : float
        Damping ratio used
    omega_n : float
        Natural frequency used [rad/s]
    duration_sec : float
        Nominal duration the samples were spread over (before span) [s]
    """

    t: np.ndarray
    y: np.ndarray
    zeta: float
    omega_n: float
    duration_sec: float


class StepResponseCharacteristics(TypedDict, total=False):
    """
    Step response performance metrics.

    Attributes
    ----------
    rise_time : Optional[float]
        10% to 90% rise time [s]
    peak_time : Optional[float]
        Time of the maximum displacement [s]
    peak_value : float
        Maximum displacement
    overshoot : float
        Peak excess above the reference, as a fraction (0.3 = 30%)
    settling_time : Optional[float]
        Time after which the response stays within the settling band [s]
    steady_state_error : float
        Reference minus final value

    Examples
    --------
    >>> chars = analyze_step_response(traj['t'], traj['y'])
    >>> print(f"Overshoot: {chars['overshoot']:.1%}")
    """

    rise_time: Optional[float]
    peak_time: Optional[float]
    peak_value: float
    overshoot: float
    settling_time: Optional[float]
    steady_state_error: float


class SpringPreset(NamedTuple):
    """Named perceptual spring setting."""

    name: str
    duration_millis: float
    bounce: float


__all__ = [
    "DampingRegime",
    "CRITICAL_DAMPING_TOLERANCE",
    "SpringParameters",
    "SpringSpec",
    "StepResponseTrajectory",
    "StepResponseCharacteristics",
    "SpringPreset",
]
