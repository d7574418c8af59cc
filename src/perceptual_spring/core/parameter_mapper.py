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
Perceptual Parameter Mapping

Pure stateless functions converting perceptual spring controls into
physical coefficients of a unit-mass damped harmonic oscillator.

**Perceptual controls:**
- duration [ms]: how long one natural period takes
- bounce: < 0 heavier/slower, 0 critical, > 0 fractional overshoot

**Physical coefficients:**
- natural frequency ωₙ [rad/s]
- damping ratio ζ [-]

Mathematical Background
-----------------------
Duration maps inversely onto natural frequency:
    ωₙ = 2π / T,   T = max(duration, 1 ms)

Positive bounce is read as a target peak overshoot Mp and the classic
second-order overshoot formula is inverted:
    Mp = exp(-ζπ / √(1 - ζ²))
    ζ  = -ln(Mp) / √(π² + ln²(Mp))

Non-positive bounce selects an overdamping fraction:
    ζ = 1 + clamp(-bounce, 0, 1)    ∈ [1, 2]

All inputs are clamped into a safe domain, so every function here is total
over finite floats. Non-finite inputs are outside the contract and may
propagate NaN/inf; callers validate before calling.

Usage
-----
>>> from perceptual_spring.core import compute_spring_parameters
>>>
>>> params = compute_spring_parameters(500, 0.3)
>>> print(f"ζ = {params.zeta:.3f}, ωₙ = {params.omega_n:.3f}")
ζ = 0.358, ωₙ = 12.566
"""

import math
from typing import Optional

from perceptual_spring.types.spring import SpringParameters, SpringSpec

MIN_DURATION_MILLIS = 1.0
"""Duration floor; keeps ωₙ finite and positive."""

MIN_OVERSHOOT = 1e-3
"""Lower overshoot clamp; avoids ln(0)."""

MAX_OVERSHOOT = 0.99
"""Upper overshoot clamp; avoids ln(≥1) driving ζ to zero or negative."""

MAX_OVERDAMPING = 1.0
"""Upper bound of the overdamping fraction taken from negative bounce."""


def _clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)


def compute_spring_parameters(duration_millis: float, bounce: float) -> SpringParameters:
    """
    Convert perceptual (duration, bounce) into physical (ζ, ωₙ).

    Parameters
    ----------
    duration_millis : float
        Nominal duration in milliseconds. Values below 1 ms are floored
        to 1 ms.
    bounce : float
        Perceptual bounce:
        - bounce ≤ 0: overdamping fraction, -bounce clamped to [0, 1],
          giving ζ ∈ [1, 2]
        - bounce > 0: target overshoot fraction, clamped to [1e-3, 0.99],
          giving ζ ∈ (0, 1)

    Returns
    -------
    SpringParameters
        Damping ratio and natural frequency

    Examples
    --------
    >>> compute_spring_parameters(500, 0.0)
    SpringParameters(zeta=1.0, omega_n=12.566370614359172)
    >>> compute_spring_parameters(1, -5).zeta
    2.0
    """
    duration_sec = max(duration_millis, MIN_DURATION_MILLIS) / 1000.0
    omega_n = 2.0 * math.pi / duration_sec

    if bounce <= 0:
        overdamping = _clamp(-bounce, 0.0, MAX_OVERDAMPING)
        zeta = 1.0 + overdamping
    else:
        peak_overshoot = _clamp(bounce, MIN_OVERSHOOT, MAX_OVERSHOOT)
        ln_mp = math.log(peak_overshoot)
        zeta = -ln_mp / math.sqrt(math.pi * math.pi + ln_mp * ln_mp)

    return SpringParameters(zeta=zeta, omega_n=omega_n)


def overshoot_for_damping_ratio(zeta: float) -> float:
    """
    Peak overshoot fraction of the underdamped step response.

    Forward form of the formula ``compute_spring_parameters`` inverts:
        Mp = exp(-ζπ / √(1 - ζ²))

    Parameters
    ----------
    zeta : float
        Damping ratio

    Returns
    -------
    float
        Overshoot fraction; 0.0 for ζ ≥ 1 (no overshoot) and 1.0 for ζ = 0

    Examples
    --------
    >>> params = compute_spring_parameters(500, 0.3)
    >>> round(overshoot_for_damping_ratio(params.zeta), 6)
    0.3
    """
    if 0.0 <= zeta < 1.0:
        return math.exp(-zeta * math.pi / math.sqrt(1.0 - zeta * zeta))
    return 0.0


def bounce_for_damping_ratio(zeta: float) -> float:
    """
    Perceptual bounce that maps back onto the given damping ratio.

    Inverse of the bounce branch of ``compute_spring_parameters``; only
    ζ values reachable by the mapper round-trip exactly.

    Parameters
    ----------
    zeta : float
        Damping ratio

    Returns
    -------
    float
        Overshoot fraction for ζ < 1, or -(ζ - 1) clamped to [-1, 0]
        for ζ ≥ 1
    """
    if zeta < 1.0:
        return overshoot_for_damping_ratio(zeta)
    return -_clamp(zeta - 1.0, 0.0, MAX_OVERDAMPING)


def spring_spec(
    duration_millis: float,
    bounce: float = 0.0,
    visibility_threshold: Optional[float] = None,
) -> SpringSpec:
    """
    Build an animation-library spring description from perceptual controls.

    Parameters
    ----------
    duration_millis : float
        Nominal duration in milliseconds
    bounce : float
        Perceptual bounce, default 0 (critically damped)
    visibility_threshold : Optional[float]
        Settle threshold forwarded unchanged

    Returns
    -------
    SpringSpec
        damping_ratio = ζ, stiffness = ωₙ² (unit mass)

    Examples
    --------
    >>> spec = spring_spec(500, bounce=-0.5)
    >>> spec['damping_ratio']
    1.5
    """
    params = compute_spring_parameters(duration_millis, bounce)
    return SpringSpec(
        damping_ratio=params.zeta,
        stiffness=params.stiffness,
        visibility_threshold=visibility_threshold,
    )


__all__ = [
    "MIN_DURATION_MILLIS",
    "MIN_OVERSHOOT",
    "MAX_OVERSHOOT",
    "MAX_OVERDAMPING",
    "compute_spring_parameters",
    "overshoot_for_damping_ratio",
    "bounce_for_damping_ratio",
    "spring_spec",
]
