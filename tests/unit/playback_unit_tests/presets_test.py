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
Unit Tests for Spring Presets and Configuration
"""

import pytest

from perceptual_spring.core.parameter_mapper import compute_spring_parameters
from perceptual_spring.presets import (
    BOUNCE_RANGE,
    DEFAULT_PRESET,
    DEFAULT_SAMPLING_CONFIG,
    DISPLAY_MAX,
    DURATION_RANGE_MILLIS,
    PLAYBACK_SPAN,
    PRESETS,
    get_preset,
    list_presets,
)
from perceptual_spring.types.spring import SpringPreset


class TestPresets:
    """Built-in presets."""

    def test_names_in_order(self):
        """Presets are listed in display order."""
        assert list_presets() == ["Snappy", "Bouncy", "Extra Bouncy", "No Bounce"]

    @pytest.mark.parametrize(
        "name, duration, bounce",
        [
            ("Snappy", 300.0, 0.1),
            ("Bouncy", 500.0, 0.3),
            ("Extra Bouncy", 700.0, 0.5),
            ("No Bounce", 500.0, 0.0),
        ],
    )
    def test_preset_values(self, name, duration, bounce):
        """Each preset carries its duration and bounce."""
        preset = PRESETS[name]
        assert preset == SpringPreset(name, duration, bounce)

    def test_default_preset_exists(self):
        """Default preset is Bouncy."""
        assert DEFAULT_PRESET == "Bouncy"
        assert DEFAULT_PRESET in PRESETS

    def test_no_bounce_is_critical(self):
        """'No Bounce' maps to critical damping."""
        preset = get_preset("No Bounce")
        assert compute_spring_parameters(preset.duration_millis, preset.bounce).zeta == 1.0

    def test_bouncy_presets_oscillate(self):
        """Presets with positive bounce are underdamped."""
        for name in ["Snappy", "Bouncy", "Extra Bouncy"]:
            preset = get_preset(name)
            params = compute_spring_parameters(preset.duration_millis, preset.bounce)
            assert params.is_oscillatory


class TestGetPreset:
    """Preset lookup."""

    @pytest.mark.parametrize("name", ["Extra Bouncy", "extra bouncy", "EXTRA_BOUNCY", "extra-bouncy"])
    def test_name_normalization(self, name):
        """Lookup ignores case and separators."""
        assert get_preset(name).name == "Extra Bouncy"

    def test_unknown_preset(self):
        """Unknown names list the available presets."""
        with pytest.raises(ValueError, match="Unknown preset 'Wobbly'.*Snappy"):
            get_preset("Wobbly")


class TestConfiguration:
    """Ranges and sampling defaults."""

    def test_nominal_ranges(self):
        """Nominal control ranges."""
        assert DURATION_RANGE_MILLIS == (200.0, 1000.0)
        assert BOUNCE_RANGE == (-1.0, 0.6)

    def test_display_defaults(self):
        """Playback spans two durations on a 0..1.2 axis."""
        assert PLAYBACK_SPAN == 2.0
        assert DISPLAY_MAX == 1.2

    def test_default_sampling_config(self):
        """201 samples over two durations."""
        assert DEFAULT_SAMPLING_CONFIG == {"num_points": 201, "span": 2.0}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
