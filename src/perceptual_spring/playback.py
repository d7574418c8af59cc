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
Spring Playback

Holds the current perceptual controls, keeps the physical parameters in
sync with them and produces (time, displacement) frames for a driver that
advances over wall-clock time.

Usage
-----
>>> from perceptual_spring.playback import SpringPlayback
>>>
>>> playback = SpringPlayback(duration_millis=500, bounce=0.3)
>>> for t, y in playback.frames():
...     box.x = track_width * y
>>>
>>> playback.apply_preset('No Bounce')
>>> playback.params.zeta
1.0
"""

import math
import warnings
from typing import Iterator, Tuple, Union

from perceptual_spring.core.parameter_mapper import MIN_DURATION_MILLIS, compute_spring_parameters
from perceptual_spring.core.step_response import step_response
from perceptual_spring.presets import (
    BOUNCE_RANGE,
    DEFAULT_PRESET,
    DURATION_RANGE_MILLIS,
    PLAYBACK_SPAN,
    get_preset,
)
from perceptual_spring.types.spring import SpringParameters, SpringPreset


class SpringPlayback:
    """
    Playback timeline for a perceptual spring.

    Setting ``duration_millis`` or ``bounce`` recomputes ``params`` from
    scratch. Values outside the nominal control ranges are accepted (the
    mapper clamps them) but reported with a UserWarning.

    Not safe for concurrent mutation.

    Parameters
    ----------
    duration_millis : float
        Nominal duration [ms], default 500
    bounce : float
        Perceptual bounce, default 0.3
    frame_rate : float
        Frames per second yielded by ``frames()``, default 60

    Raises
    ------
    ValueError
        If frame_rate is not positive
    """

    def __init__(
        self,
        duration_millis: float = 500.0,
        bounce: float = 0.3,
        frame_rate: float = 60.0,
    ):
        if frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {frame_rate}")

        self.frame_rate = frame_rate
        self._duration_millis = duration_millis
        self._bounce = bounce
        self._check_range("duration_millis", duration_millis, DURATION_RANGE_MILLIS)
        self._check_range("bounce", bounce, BOUNCE_RANGE)
        self._params = compute_spring_parameters(duration_millis, bounce)

    @classmethod
    def from_preset(cls, name: str = DEFAULT_PRESET, frame_rate: float = 60.0) -> "SpringPlayback":
        """Create a playback initialized from a named preset."""
        preset = get_preset(name)
        return cls(preset.duration_millis, preset.bounce, frame_rate=frame_rate)

    # =========================================================================
    # Controls
    # =========================================================================

    @property
    def duration_millis(self) -> float:
        """Nominal duration [ms]."""
        return self._duration_millis

    @duration_millis.setter
    def duration_millis(self, value: float) -> None:
        self._check_range("duration_millis", value, DURATION_RANGE_MILLIS)
        self._duration_millis = value
        self._recompute()

    @property
    def bounce(self) -> float:
        """Perceptual bounce."""
        return self._bounce

    @bounce.setter
    def bounce(self, value: float) -> None:
        self._check_range("bounce", value, BOUNCE_RANGE)
        self._bounce = value
        self._recompute()

    @property
    def params(self) -> SpringParameters:
        """Physical parameters for the current controls."""
        return self._params

    def apply_preset(self, preset: Union[str, SpringPreset]) -> SpringParameters:
        """
        Set both controls from a preset and return the new parameters.

        Parameters
        ----------
        preset : str or SpringPreset
            Preset name (see ``list_presets()``) or preset instance
        """
        if isinstance(preset, str):
            preset = get_preset(preset)
        self._check_range("duration_millis", preset.duration_millis, DURATION_RANGE_MILLIS)
        self._check_range("bounce", preset.bounce, BOUNCE_RANGE)
        self._duration_millis = preset.duration_millis
        self._bounce = preset.bounce
        self._recompute()
        return self._params

    # =========================================================================
    # Timeline
    # =========================================================================

    @property
    def duration_sec(self) -> float:
        """Duration [s] after the mapper's 1 ms floor."""
        return max(self._duration_millis, MIN_DURATION_MILLIS) / 1000.0

    @property
    def total_duration(self) -> float:
        """Length of one playback [s], covering PLAYBACK_SPAN durations."""
        return PLAYBACK_SPAN * self.duration_sec

    def position_at(self, t: float) -> float:
        """Displacement at time t [s]."""
        return step_response(t, self._params.zeta, self._params.omega_n)

    def progress(self, t: float) -> float:
        """Fraction of the playback elapsed at time t, clamped to [0, 1]."""
        return min(max(t / self.total_duration, 0.0), 1.0)

    def frame_times(self) -> Iterator[float]:
        """
        Frame timestamps from 0 to ``total_duration`` inclusive.

        Spacing is 1 / frame_rate; the final frame lands exactly on
        ``total_duration`` even when it is not a whole number of frames.
        """
        total = self.total_duration
        n_frames = int(math.floor(total * self.frame_rate + 1e-9))
        t = 0.0
        for i in range(n_frames + 1):
            t = i / self.frame_rate
            yield t
        if t < total:
            yield total

    def frames(self) -> Iterator[Tuple[float, float]]:
        """Yield (t, displacement) pairs for one playback."""
        zeta, omega_n = self._params.zeta, self._params.omega_n
        for t in self.frame_times():
            yield t, step_response(t, zeta, omega_n)

    # =========================================================================
    # Helpers (Internal)
    # =========================================================================

    def _recompute(self) -> None:
        self._params = compute_spring_parameters(self._duration_millis, self._bounce)

    @staticmethod
    def _check_range(name: str, value: float, bounds: Tuple[float, float]) -> None:
        lower, upper = bounds
        if not lower <= value <= upper:
            warnings.warn(
                f"{name}={value} is outside the nominal range [{lower}, {upper}]",
                UserWarning,
                stacklevel=3,
            )

    def __repr__(self) -> str:
        return (
            f"SpringPlayback(duration_millis={self._duration_millis}, "
            f"bounce={self._bounce}, frame_rate={self.frame_rate})"
        )


__all__ = [
    "SpringPlayback",
]
