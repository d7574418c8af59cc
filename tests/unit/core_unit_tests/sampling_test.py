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
Unit Tests for Step Response Sampling
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from perceptual_spring.core.parameter_mapper import compute_spring_parameters
from perceptual_spring.core.sampling import (
    DEFAULT_NUM_POINTS,
    sample_step_response,
    sample_times,
)
from perceptual_spring.core.step_response import step_response


@pytest.fixture
def bouncy():
    """500 ms, 30% bounce."""
    return compute_spring_parameters(500, 0.3)


class TestSampleTimes:
    """Test sample_times."""

    def test_default_span_covers_two_durations(self):
        """Default span is twice the duration."""
        t = sample_times(500)
        assert t[0] == 0.0
        assert t[-1] == pytest.approx(1.0)
        assert len(t) == DEFAULT_NUM_POINTS

    def test_even_spacing(self):
        """Samples are evenly spaced."""
        t = sample_times(300, num_points=61, span=1.0)
        assert_allclose(np.diff(t), 0.3 / 60)

    def test_duration_floor(self):
        """Non-positive durations use the 1 ms floor."""
        assert sample_times(0, num_points=3)[-1] == pytest.approx(0.002)

    @pytest.mark.parametrize("num_points", [1, 0, -5])
    def test_too_few_points(self, num_points):
        """Fewer than two samples is rejected."""
        with pytest.raises(ValueError, match="num_points"):
            sample_times(500, num_points=num_points)

    @pytest.mark.parametrize("span", [0.0, -1.0])
    def test_non_positive_span(self, span):
        """Span must be positive."""
        with pytest.raises(ValueError, match="span"):
            sample_times(500, span=span)


class TestSampleStepResponse:
    """Test sample_step_response."""

    def test_trajectory_fields(self, bouncy):
        """Trajectory carries samples and parameters."""
        traj = sample_step_response(bouncy, 500)

        assert traj["t"].shape == traj["y"].shape == (DEFAULT_NUM_POINTS,)
        assert traj["zeta"] == bouncy.zeta
        assert traj["omega_n"] == bouncy.omega_n
        assert traj["duration_sec"] == pytest.approx(0.5)

    def test_values_match_evaluator(self, bouncy):
        """Samples equal the scalar evaluator at each time."""
        traj = sample_step_response(bouncy, 500, num_points=41)
        expected = [step_response(t, bouncy.zeta, bouncy.omega_n) for t in traj["t"]]
        assert_allclose(traj["y"], expected, rtol=1e-12, atol=1e-14)

    def test_bouncy_curve_overshoots(self, bouncy):
        """Preview of a bouncy spring rises above 1 and starts at 0."""
        traj = sample_step_response(bouncy, 500)
        assert traj["y"][0] == 0.0
        assert traj["y"].max() > 1.0
        assert traj["y"].max() < 1.31

    def test_invalid_arguments(self, bouncy):
        """Validation is delegated to sample_times."""
        with pytest.raises(ValueError):
            sample_step_response(bouncy, 500, num_points=1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
