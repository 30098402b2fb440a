"""
Widget-free UI helpers: slider scaling, value formatting and the FOV trace
ring buffer.
"""

import numpy as np
import pytest

from fov.config import FIELDS, ControlType, GForceProfile, field_descriptor
from ui.canvases import TraceBuffer
from ui.settings_form import format_value, from_slider, to_slider


class TestSliderScaling:

    @pytest.mark.parametrize("descriptor", [d for d in FIELDS if d.control is ControlType.SLIDER],
                             ids=lambda d: d.name)
    def test_bounds_survive_round_trip(self, descriptor):
        for bound in (descriptor.minimum, descriptor.maximum):
            assert from_slider(descriptor, to_slider(descriptor, bound)) == pytest.approx(bound)

    def test_two_decimal_field(self):
        descriptor = field_descriptor("g_force_factor_multiplier")
        assert to_slider(descriptor, 0.05) == 5
        assert from_slider(descriptor, 7) == pytest.approx(0.07)

    def test_whole_number_field(self):
        descriptor = field_descriptor("max_speed")
        assert to_slider(descriptor, 299.6) == 300


class TestFormatting:

    def test_slider_precision(self):
        assert format_value(field_descriptor("smoothing_factor"), 0.1) == "0.10"
        assert format_value(field_descriptor("min_fov"), 56.0) == "56"

    def test_checkbox(self):
        assert format_value(field_descriptor("g_force_enabled"), True) == "On"

    def test_choice(self):
        assert format_value(field_descriptor("g_force_profile"), GForceProfile.DIRECTIONAL) == "Directional"


class TestTraceBuffer:

    def test_partial_fill(self):
        buf = TraceBuffer(5)
        buf.append(0.0, 80.0)
        buf.append(0.1, 81.0)
        t, y = buf.arrays()
        np.testing.assert_allclose(t, [0.0, 0.1])
        np.testing.assert_allclose(y, [80.0, 81.0])
        assert len(buf) == 2

    def test_wraps_oldest_first(self):
        buf = TraceBuffer(3)
        for i in range(5):
            buf.append(float(i), 80.0 + i)
        t, y = buf.arrays()
        np.testing.assert_allclose(t, [2.0, 3.0, 4.0])
        np.testing.assert_allclose(y, [82.0, 83.0, 84.0])
        assert len(buf) == 3

    def test_clear(self):
        buf = TraceBuffer(3)
        buf.append(0.0, 80.0)
        buf.clear()
        t, _ = buf.arrays()
        assert t.size == 0
