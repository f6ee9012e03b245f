"""Unit tests for accumulation averaging, gamma correction and quantization."""

import numpy as np

from renderer.tone_mapping import tone_map, tone_map_channel


class TestToneMapChannel:
    def test_full_white_maps_to_255(self):
        for n in (1, 4, 50, 100):
            assert tone_map_channel(1.0 * n, n) == 255

    def test_black_maps_to_zero(self):
        assert tone_map_channel(0.0, 10) == 0

    def test_gamma_two(self):
        # 0.25 averaged, sqrt gives 0.5, times 256
        assert tone_map_channel(1.0, 4) == 128

    def test_over_bright_is_clamped(self):
        assert tone_map_channel(40.0, 4) == 255

    def test_nan_maps_to_zero(self):
        assert tone_map_channel(float("nan"), 4) == 0


class TestToneMapBuffer:
    def test_white_buffer(self):
        samples = 16
        accumulation = np.full((3, 5, 3), float(samples))
        pixels = tone_map(accumulation, samples)
        assert pixels.dtype == np.uint8
        assert pixels.shape == (3 * 5 * 4,)
        assert np.all(pixels == 255)

    def test_layout_and_alpha(self):
        accumulation = np.zeros((2, 2, 3))
        accumulation[0, 1] = (4.0, 1.0, 0.0)  # top row, second column
        pixels = tone_map(accumulation, 4)
        assert list(pixels[4:8]) == [255, 128, 0, 255]
        assert list(pixels[0:4]) == [0, 0, 0, 255]
        assert np.all(pixels[3::4] == 255)

    def test_matches_scalar_version(self, rng):
        samples = 7
        values = np.array([[[rng.uniform(0, 9) for _ in range(3)] for _ in range(4)]
                           for _ in range(3)])
        pixels = tone_map(values, samples).reshape(3, 4, 4)
        for row in range(3):
            for col in range(4):
                for ch in range(3):
                    assert pixels[row, col, ch] == tone_map_channel(values[row, col, ch], samples)
