"""Tests for the colour space decoders in aco_draw.spaces."""

import struct
import types

import pytest
from aco_draw import registry
from aco_draw.core.errors import ColourSpaceInvariantError, UnsupportedColourSpaceError
from aco_draw.core.types import Colour, ColourSpaceId
from aco_draw.spaces import cmyk, grayscale, hsb, lab, rgb, wide_cmyk


def _words(a: int = 0, b: int = 0, c: int = 0, d: int = 0) -> bytes:
    return struct.pack('>4H', a, b, c, d)


def _close(colour: Colour, expected: tuple[int, int, int], tolerance: int = 1) -> bool:
    return all(abs(x - y) <= tolerance for x, y in zip(colour.rgb, expected))


class TestRegistry:
    def test_all_wire_ids_registered(self):
        assert set(registry.all_spaces()) == {0, 1, 2, 7, 8, 9}

    def test_ids_match_enum(self):
        for space_id, space in registry.all_spaces().items():
            assert ColourSpaceId(space_id) == space.id

    def test_unknown_id_raises(self):
        with pytest.raises(UnsupportedColourSpaceError) as exc:
            registry.get(3)
        assert exc.value.space_id == 3

    def test_by_name(self):
        assert registry.by_name('wide-cmyk').id == ColourSpaceId.WIDE_CMYK

    def test_by_name_unknown(self):
        with pytest.raises(KeyError):
            registry.by_name('pantone')


class TestRgb:
    def test_exact_channels(self):
        for r, g, b in [(0, 0, 0), (255, 255, 255), (37, 99, 235), (1, 128, 254)]:
            assert rgb.decode(_words(r * 257, g * 257, b * 257)) == Colour(r, g, b)

    def test_top_byte_kept(self):
        assert rgb.decode(_words(0xFF00, 0x00FF, 0x8080)) == Colour(255, 0, 128)

    def test_fourth_word_ignored(self):
        assert rgb.decode(_words(0, 0, 0, 0xFFFF)) == Colour(0, 0, 0)


class TestGrayscale:
    def test_zero_is_black(self):
        assert grayscale.decode(_words(0)) == Colour(0, 0, 0)

    def test_midpoint(self):
        assert grayscale.decode(_words(5000)) == Colour(128, 128, 128)

    def test_9999_truncates_to_255(self):
        assert grayscale.decode(_words(9999)) == Colour(255, 255, 255)

    def test_10000_clamped_to_255(self):
        # 10000 / 39.0625 == 256 exactly
        assert grayscale.decode(_words(10000)) == Colour(255, 255, 255)


class TestHsb:
    FULL = 65535

    def _hue(self, degrees: float) -> int:
        return round(degrees * hsb.HUE_DIVISOR)

    def test_six_sector_corners(self):
        corners = [
            (0, (255, 0, 0)),
            (60, (255, 255, 0)),
            (120, (0, 255, 0)),
            (180, (0, 255, 255)),
            (240, (0, 0, 255)),
            (300, (255, 0, 255)),
        ]
        for degrees, expected in corners:
            colour = hsb.decode(_words(self._hue(degrees), self.FULL, self.FULL))
            assert _close(colour, expected), f'{degrees}° gave {colour.rgb}, expected {expected}'

    def test_max_hue_wraps_to_red(self):
        assert _close(hsb.decode(_words(65535, self.FULL, self.FULL)), (255, 0, 0))

    def test_zero_brightness_is_black(self):
        assert hsb.decode(_words(self._hue(200), self.FULL, 0)) == Colour(0, 0, 0)

    def test_zero_saturation_is_gray(self):
        colour = hsb.decode(_words(self._hue(90), 0, 32768))
        assert colour.r == colour.g == colour.b
        assert _close(colour, (127, 127, 127))

    def test_sector_outside_range_is_invariant_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(hsb, 'math', types.SimpleNamespace(floor=lambda x: 6.5))
        with pytest.raises(ColourSpaceInvariantError):
            hsb.decode(_words(0, self.FULL, self.FULL))


class TestCmyk:
    def test_no_ink_is_white(self):
        assert cmyk.decode(_words(65535, 65535, 65535, 65535)) == Colour(255, 255, 255)

    def test_full_ink_is_black(self):
        assert cmyk.decode(_words(0, 0, 0, 0)) == Colour(0, 0, 0)

    def test_full_cyan(self):
        assert cmyk.decode(_words(0, 65535, 65535, 65535)) == Colour(0, 255, 255)

    def test_half_black_gives_mid_gray(self):
        # Scaled after the float result, so intermediate levels survive
        assert cmyk.decode(_words(65535, 65535, 65535, 32767)) == Colour(127, 127, 127)

    def test_shared_formula(self):
        assert cmyk.cmyk_to_colour(0.0, 1.0, 1.0, 0.0) == Colour(255, 0, 0)
        assert cmyk.cmyk_to_colour(0.0, 0.0, 0.0, 1.0) == Colour(0, 0, 0)


class TestWideCmyk:
    def test_no_ink_is_white(self):
        assert wide_cmyk.decode(_words(0, 0, 0, 0)) == Colour(255, 255, 255)

    def test_full_black(self):
        assert wide_cmyk.decode(_words(0, 0, 0, 10000)) == Colour(0, 0, 0)

    def test_full_cyan(self):
        assert wide_cmyk.decode(_words(10000, 0, 0, 0)) == Colour(0, 255, 255)

    def test_whole_percent_truncation(self):
        assert wide_cmyk.decode(_words(0, 0, 0, 5000)) == Colour(127, 127, 127)
        assert wide_cmyk.decode(_words(0, 0, 0, 5099)) == Colour(127, 127, 127)


class TestLab:
    def _lab(self, L: float, a: float, b: float) -> bytes:
        return struct.pack('>Hhh2x', round(L * 100), round(a * 100), round(b * 100))

    def test_black(self):
        assert lab.decode(self._lab(0, 0, 0)) == Colour(0, 0, 0)

    def test_d50_white(self):
        # No gamma curve: linear D65 RGB of the adapted white, red clamped
        assert _close(lab.decode(self._lab(100, 0, 0)), (255, 241, 231))

    def test_lab_to_xyz_white(self):
        xyz = lab.lab_to_xyz(100.0, 0.0, 0.0)
        assert xyz.tolist() == pytest.approx([0.9642, 1.0, 0.8249])

    def test_lab_to_xyz_linear_segment(self):
        # f_y = 16/116 < 6/29 takes the linear branch, giving zero
        assert lab.lab_to_xyz(0.0, 0.0, 0.0).tolist() == pytest.approx([0.0, 0.0, 0.0])

    def test_positive_a_is_red_and_clamped(self):
        colour = lab.decode(self._lab(50, 80, 0))
        assert colour.r == 255
        assert colour.g == 0
        assert colour.b < colour.r

    def test_negative_b_is_blue(self):
        colour = lab.decode(self._lab(50, 0, -80))
        assert colour.r == 0
        assert colour.b == 255
