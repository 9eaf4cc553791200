import numpy as np
import pytest

from colourcore.colours import Colour, PixelARGB
from ..samples import samples_rgb_hsb, samples_rgba


def test_default_is_transparent_black():
    colour = Colour()
    assert colour.value == (0, 0, 0, 0)
    assert colour.is_transparent
    assert not colour.is_opaque


def test_from_packed_argb():
    colour = Colour(0x80112233)
    assert colour.value == (0x11, 0x22, 0x33, 0x80)
    assert colour.argb == 0x80112233


def test_packed_argb_is_masked_to_32_bits():
    assert Colour(0x1FFFFFFFF) == Colour(0xFFFFFFFF)


def test_from_rgb_is_opaque():
    colour = Colour(1, 2, 3)
    assert colour.value == (1, 2, 3, 255)
    assert colour.is_opaque


def test_from_rgba_with_byte_alpha():
    assert Colour(1, 2, 3, 4).value == (1, 2, 3, 4)
    assert Colour(1, 2, 3, np.uint8(7)).alpha == 7


def test_from_rgba_with_float_alpha():
    assert Colour(1, 2, 3, 0.5).alpha == 128
    assert Colour(1, 2, 3, 1.0).alpha == 255
    assert Colour(1, 2, 3, 0.0).alpha == 0


def test_out_of_range_inputs_are_clamped():
    assert Colour(300, -5, 3, 1000).value == (255, 0, 3, 255)
    assert Colour(1, 2, 3, 1.5).alpha == 255
    assert Colour(1, 2, 3, -0.5).alpha == 0


def test_missing_channels_raise():
    with pytest.raises(TypeError):
        Colour(1, 2)


def test_from_hsb():
    assert Colour.from_hsb(0.0, 1.0, 1.0) == Colour(255, 0, 0, 255)
    assert Colour.from_hsb(0.0, 1.0, 1.0, 64).alpha == 64
    assert Colour.from_hsb(0.0, 1.0, 1.0, 0.5).alpha == 128
    assert Colour.from_hsb(2 / 3, 1.0, 1.0, 0.0) == Colour(0, 0, 255, 0)
    assert Colour.from_hsb(-1.0, 5.0, 5.0, 2.0) == Colour(255, 0, 0, 255)


def test_from_hsb_samples():
    for rgb, (h, s, v) in samples_rgb_hsb.items():
        assert Colour.from_hsb(h, s, v, 10).value == rgb + (10,)


def test_from_pixel():
    pixel = PixelARGB(10, 20, 30, 40)
    assert Colour.from_pixel(pixel).value == (10, 20, 30, 40)


def test_float_accessors():
    colour = Colour(255, 0, 51, 0)
    assert colour.float_red == 1.0
    assert colour.float_green == 0.0
    assert abs(colour.float_blue - 0.2) < 1e-12
    assert colour.float_alpha == 0.0


def test_pure_red_hsb():
    red = Colour(0xFFFF0000)
    assert abs(red.hue - 0.0) < 1e-9
    assert abs(red.saturation - 1.0) < 1e-9
    assert abs(red.brightness - 1.0) < 1e-9


def test_hsb_matches_individual_accessors():
    for rgb in samples_rgb_hsb:
        colour = Colour(*rgb)
        assert colour.hsb == (colour.hue, colour.saturation, colour.brightness)


def test_grey_level():
    assert Colour.grey_level(0.0) == Colour(0, 0, 0, 255)
    assert Colour.grey_level(1.0) == Colour(255, 255, 255, 255)
    assert Colour.grey_level(0.5).value == (128, 128, 128, 255)
    assert Colour.grey_level(7.0) == Colour(255, 255, 255)
    assert Colour.grey_level(-7.0) == Colour(0, 0, 0)


def test_pixel_argb_is_premultiplied():
    assert Colour(255, 128, 0, 128).pixel_argb == PixelARGB(128, 64, 0, 128)
    assert Colour(255, 128, 0).pixel_argb == PixelARGB(255, 128, 0, 255)


def test_equality_is_structural():
    assert Colour(255, 0, 0) == Colour(0xFFFF0000)
    assert Colour(255, 0, 0) != Colour(255, 0, 0, 254)
    assert Colour(255, 0, 0) != "ffff0000"
    assert hash(Colour(255, 0, 0)) == hash(Colour(0xFFFF0000))
    assert len({Colour(*rgba) for rgba in samples_rgba + samples_rgba}) == len(samples_rgba)


def test_colour_is_immutable():
    colour = Colour(1, 2, 3)
    with pytest.raises(AttributeError):
        colour.foo = 1
    with pytest.raises(AttributeError):
        colour._pixel = PixelARGB()
    assert colour.value == (1, 2, 3, 255)


def test_repr():
    assert repr(Colour(0xFFFF0000)) == "Colour(0xffff0000)"
    assert repr(Colour()) == "Colour(0x00000000)"
