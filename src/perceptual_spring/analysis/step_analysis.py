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
Step Response Analysis

Performance metrics for spring step responses, measured from samples or
predicted in closed form, and a comparison against the exact second-order
response.

**Measured (from samples):**
- Rise time: 10% to 90% of the reference
- Peak time/value, overshoot
- Settling time: stays within a band around the reference until the end
- Steady-state error: reference minus final sample

**Predicted (closed form):**
    Underdamped (0 ≤ ζ < 1):
        tp = π / ωd
        Mp = exp(-ζπ / √(1 - ζ²))
        ts ≈ 4 / (ζωₙ)            (2% criterion)
        tr = (π - β) / ωd,  β = atan2(ωd, ζωₙ)   (time to first reach 1)

    Approximated branch (ζ ≥ 1), first order with rate r = ωₙ / min(ζ, 3):
        tr = ln(9) / r            (10% to 90%)
        ts = ln(50) / r           (2% criterion)

**Exact reference:**
    G(s) = ωₙ² / (s² + 2ζωₙs + ωₙ²), evaluated with scipy.signal.step.
    In the underdamped branch it matches ``step_response`` to rounding;
    for ζ ≥ 1 it measures how far the single-exponential approximation
    departs from the true overdamped response.

Usage
-----
>>> from perceptual_spring.analysis import analyze_step_response, predict_characteristics
>>>
>>> params = compute_spring_parameters(500, 0.3)
>>> traj = sample_step_response(params, 500, num_points=2001)
>>> measured = analyze_step_response(traj['t'], traj['y'])
>>> predicted = predict_characteristics(params)
>>> print(f"{measured['overshoot']:.3f} vs {predicted['overshoot']:.3f}")
0.300 vs 0.300
"""

import math
import warnings

import numpy as np
from scipy import signal

from perceptual_spring.core.parameter_mapper import overshoot_for_damping_ratio
from perceptual_spring.core.step_response import MAX_DAMPING_FACTOR, step_response_array
from perceptual_spring.types.spring import SpringParameters, StepResponseCharacteristics

DEFAULT_SETTLING_BAND = 0.02


# ============================================================================
# Measured Characteristics
# ============================================================================


def analyze_step_response(
    t,
    y,
    reference: float = 1.0,
    settling_band: float = DEFAULT_SETTLING_BAND,
) -> StepResponseCharacteristics:
    """
    Measure step response characteristics from samples.

    Parameters
    ----------
    t : array_like
        Sample times [s], shape (T,), increasing
    y : array_like
        Displacements, shape (T,)
    reference : float
        Final value the response should settle to, default 1.0
    settling_band : float
        Settling tolerance as a fraction of the reference, default 0.02

    Returns
    -------
    StepResponseCharacteristics
        Measured metrics; rise_time/settling_time are None when the
        response never reaches the thresholds within the samples

    Raises
    ------
    ValueError
        If t and y differ in shape, are not 1-D, or hold fewer than two
        samples, or if reference is zero

    Warns
    -----
    UserWarning
        If the response has not settled by the last sample

    Examples
    --------
    >>> traj = sample_step_response(compute_spring_parameters(500, 0.0), 500)
    >>> chars = analyze_step_response(traj['t'], traj['y'])
    >>> chars['overshoot']
    0.0
    """
    t_np = np.asarray(t, dtype=np.float64)
    y_np = np.asarray(y, dtype=np.float64)

    if t_np.shape != y_np.shape:
        raise ValueError(
            f"t and y must have the same shape, got {t_np.shape} and {y_np.shape}"
        )
    if t_np.ndim != 1 or t_np.size < 2:
        raise ValueError(f"Expected 1-D samples with at least 2 points, got shape {t_np.shape}")
    if reference == 0:
        raise ValueError("reference must be non-zero")

    peak_idx = int(np.argmax(y_np))
    peak_value = float(y_np[peak_idx])
    overshoot = max((peak_value - reference) / reference, 0.0)

    # Rise time (10% to 90%)
    idx_10 = np.where(y_np >= 0.1 * reference)[0]
    idx_90 = np.where(y_np >= 0.9 * reference)[0]
    if len(idx_10) > 0 and len(idx_90) > 0:
        rise_time = float(t_np[idx_90[0]] - t_np[idx_10[0]])
    else:
        rise_time = None

    # Settling time: first sample after the last excursion outside the band
    outside = np.abs(y_np - reference) > settling_band * abs(reference)
    if not np.any(outside):
        settling_time = float(t_np[0])
    elif outside[-1]:
        settling_time = None
        warnings.warn(
            f"Response has not settled within {settling_band:.1%} of {reference} "
            f"by t={t_np[-1]:.3f}s; sample a longer span",
            UserWarning,
            stacklevel=2,
        )
    else:
        settling_time = float(t_np[np.where(outside)[0][-1] + 1])

    return StepResponseCharacteristics(
        rise_time=rise_time,
        peak_time=float(t_np[peak_idx]),
        peak_value=peak_value,
        overshoot=overshoot,
        settling_time=settling_time,
        steady_state_error=float(reference - y_np[-1]),
    )


# ============================================================================
# Predicted Characteristics
# ============================================================================


def predict_characteristics(params: SpringParameters) -> StepResponseCharacteristics:
    """
    Closed-form step response characteristics of the evaluated model.

    Parameters
    ----------
    params : SpringParameters
        Spring coefficients

    Returns
    -------
    StepResponseCharacteristics
        Predicted metrics; peak_time is inf when the response never peaks

    Notes
    -----
    For ζ ≥ 1 the prediction follows the single-exponential approximation
    ``step_response`` evaluates, not the exact overdamped response.
    For the underdamped branch rise_time is the 0-100% rise time.
    """
    zeta, omega_n = params.zeta, params.omega_n

    if 0.0 <= zeta < 1.0:
        omega_d = omega_n * math.sqrt(1.0 - zeta * zeta)
        beta = math.atan2(omega_d, zeta * omega_n)
        overshoot = overshoot_for_damping_ratio(zeta)
        settling_time = 4.0 / (zeta * omega_n) if zeta > 0 else math.inf
        return StepResponseCharacteristics(
            rise_time=(math.pi - beta) / omega_d,
            peak_time=math.pi / omega_d,
            peak_value=1.0 + overshoot,
            overshoot=overshoot,
            settling_time=settling_time,
            steady_state_error=0.0,
        )

    rate = omega_n / min(zeta, MAX_DAMPING_FACTOR)
    return StepResponseCharacteristics(
        rise_time=math.log(9.0) / rate,
        peak_time=math.inf,
        peak_value=1.0,
        overshoot=0.0,
        settling_time=math.log(50.0) / rate,
        steady_state_error=0.0,
    )


# ============================================================================
# Exact Reference Response
# ============================================================================


def exact_step_response(params: SpringParameters, t) -> np.ndarray:
    """
    Exact unit-step response of ωₙ² / (s² + 2ζωₙs + ωₙ²).

    Parameters
    ----------
    params : SpringParameters
        Spring coefficients
    t : array_like
        Evenly spaced times starting at 0 [s], shape (T,)

    Returns
    -------
    np.ndarray
        Exact displacements, shape (T,)
    """
    t_np = np.asarray(t, dtype=np.float64)
    omega_sq = params.omega_n * params.omega_n
    system = signal.lti([omega_sq], [1.0, 2.0 * params.zeta * params.omega_n, omega_sq])
    _, y = signal.step(system, T=t_np)
    return np.asarray(y, dtype=np.float64)


def approximation_error(params: SpringParameters, t) -> float:
    """
    Largest absolute gap between ``step_response`` and the exact response.

    Zero up to rounding in the underdamped branch; for ζ ≥ 1 it reports the
    cost of the single-exponential approximation over ``t``.

    Parameters
    ----------
    params : SpringParameters
        Spring coefficients
    t : array_like
        Evenly spaced times starting at 0 [s]

    Returns
    -------
    float
        max |approximate - exact|
    """
    t_np = np.asarray(t, dtype=np.float64)
    approx = step_response_array(t_np, params.zeta, params.omega_n)
    exact = exact_step_response(params, t_np)
    return float(np.max(np.abs(approx - exact)))


__all__ = [
    "DEFAULT_SETTLING_BAND",
    "analyze_step_response",
    "predict_characteristics",
    "exact_step_response",
    "approximation_error",
]
