"""Tests for gamma encoding and the front buffer layout."""

import math

import numpy as np
import pytest

from phongtracer.renderer.tone_mapping import (
    GAMMA, encode_back_buffer, encode_channel, gamma_decode, gamma_encode,
)


class TestGamma:

    @pytest.mark.parametrize("linear", [0.0, 0.01, 0.18, 0.25, 0.5, 0.73, 0.99, 1.0])
    def test_round_trip(self, linear):
        assert gamma_decode(gamma_encode(linear)) == pytest.approx(linear, abs=1e-4)

    def test_encode_is_power(self):
        assert gamma_encode(0.3) == pytest.approx(0.3 ** GAMMA)


class TestEncodeChannel:

    def test_extremes(self):
        assert encode_channel(0.0) == 0
        assert encode_channel(1.0) == 255

    def test_rounds_to_nearest(self):
        assert encode_channel(0.3) == int(math.floor(0.3 ** 2.2 * 255 + 0.5))
        assert encode_channel(0.8) == int(math.floor(0.8 ** 2.2 * 255 + 0.5))

    def test_out_of_range_is_clipped(self):
        assert encode_channel(3.0) == 255
        assert encode_channel(-1.0) == 0
        assert encode_channel(1e30) == 255
        assert encode_channel(1e300) == 255
        assert encode_channel(float("inf")) == 255
        assert encode_channel(float("-inf")) == 0

    def test_nan_is_black(self):
        assert encode_channel(float("nan")) == 0


class TestEncodeBackBuffer:

    def test_swaps_red_and_blue(self):
        back = np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float32)
        front = encode_back_buffer(back, 1, 1)
        assert front.dtype == np.uint8
        assert list(front) == [0, 0, 255, 255]

    def test_green_stays(self):
        back = np.array([0.0, 1.0, 0.0, 0.0], dtype=np.float32)
        assert list(encode_back_buffer(back, 1, 1)) == [0, 255, 0, 255]

    def test_pixels_keep_position(self):
        back = np.zeros(2 * 2 * 4, dtype=np.float32)
        back[(1 * 2 + 0) * 4 + 2] = 1.0  # blue at x=0, y=1
        front = encode_back_buffer(back, 2, 2)
        assert list(front[8:12]) == [255, 0, 0, 255]
        assert list(front[0:3]) == [0, 0, 0]

    def test_blown_out_channels_stay_white(self):
        back = np.array([np.inf, 1e30, 0.5, 0.0], dtype=np.float32)
        front = encode_back_buffer(back, 1, 1)
        assert list(front[1:]) == [255, 255, 255]
        assert front[0] == encode_channel(0.5)

    def test_alpha_always_opaque(self):
        front = encode_back_buffer(np.zeros(3 * 2 * 4, dtype=np.float32), 3, 2)
        assert np.all(front[3::4] == 255)

    def test_size_mismatch(self):
        with pytest.raises(ValueError):
            encode_back_buffer(np.zeros(7, dtype=np.float32), 1, 2)
