from colourcore.colours import Colour
from ..samples import samples_rgba

RED = Colour(255, 0, 0)


def test_with_alpha():
    for rgba in samples_rgba:
        colour = Colour(*rgba)
        assert colour.with_alpha(colour.alpha) == colour

    assert RED.with_alpha(0.0).value == (255, 0, 0, 0)
    assert RED.with_alpha(0.5).alpha == 128
    assert RED.with_alpha(300).alpha == 255
    assert RED.alpha == 255  # receiver untouched


def test_with_multiplied_alpha():
    assert Colour(255, 0, 0, 255).with_multiplied_alpha(0.5).alpha == 128
    assert Colour(255, 0, 0, 100).with_multiplied_alpha(2.0).alpha == 200
    assert Colour(255, 0, 0, 200).with_multiplied_alpha(2.0).alpha == 255
    assert Colour(255, 0, 0, 200).with_multiplied_alpha(-1.0).alpha == 0
    assert Colour(255, 0, 0, 200).with_multiplied_alpha(0.5).value[:3] == (255, 0, 0)


def test_with_hue():
    assert RED.with_hue(1 / 3) == Colour(0, 255, 0)
    assert RED.with_hue(1.0) == RED
    assert RED.with_hue(-0.2) == RED
    assert Colour(255, 0, 0, 9).with_hue(2 / 3) == Colour(0, 0, 255, 9)


def test_with_hue_leaves_greys_alone():
    grey = Colour(128, 128, 128)
    assert grey.with_hue(0.3) == grey


def test_with_rotated_hue():
    assert RED.with_rotated_hue(0.5) == Colour(0, 255, 255)
    assert RED.with_rotated_hue(1.25) == RED.with_rotated_hue(0.25)
    assert RED.with_rotated_hue(-0.5) == RED.with_rotated_hue(0.5)
    assert RED.with_rotated_hue(1.0) == RED


def test_with_saturation():
    assert RED.with_saturation(0.0) == Colour(255, 255, 255)
    assert RED.with_saturation(0.5) == Colour(255, 128, 128)
    assert RED.with_saturation(3.0) == RED


def test_with_multiplied_saturation():
    assert RED.with_multiplied_saturation(0.5) == Colour(255, 128, 128)
    assert RED.with_multiplied_saturation(4.0) == RED


def test_with_brightness():
    assert Colour(10, 20, 30, 40).with_brightness(0.0) == Colour(0, 0, 0, 40)
    assert RED.with_brightness(100 / 255) == Colour(100, 0, 0)


def test_with_multiplied_brightness():
    assert Colour(100, 0, 0).with_multiplied_brightness(2.0) == Colour(200, 0, 0)
    assert Colour(100, 0, 0).with_multiplied_brightness(10.0) == RED
    assert Colour(100, 0, 0).with_multiplied_brightness(0.0) == Colour(0, 0, 0)


def test_brighter_and_darker_by_zero_are_identity():
    for rgba in samples_rgba:
        colour = Colour(*rgba)
        assert colour.brighter(0.0) == colour
        assert colour.darker(0.0) == colour


def test_brighter():
    assert Colour(100, 0, 0).brighter(0.2) == Colour(131, 0, 0)
    assert Colour(100, 0, 0).brighter(1.0) == RED
    assert Colour(0, 0, 0, 255).brighter() == Colour(102, 102, 102, 255)
    # already at full brightness
    assert RED.brighter() == RED


def test_darker():
    assert Colour(200, 100, 0, 77).darker(0.5) == Colour(100, 50, 0, 77)
    assert Colour(200, 100, 0, 77).darker(1.0) == Colour(0, 0, 0, 77)
    assert Colour(255, 255, 255).darker() == Colour(153, 153, 153)


def test_adjustments_keep_alpha():
    colour = Colour(17, 200, 93, 42)
    for derived in (
        colour.with_hue(0.1),
        colour.with_saturation(0.2),
        colour.with_brightness(0.3),
        colour.with_rotated_hue(0.4),
        colour.brighter(),
        colour.darker(),
        colour.contrasting(),
    ):
        assert derived.alpha == 42


def test_with_multiplied_alpha_non_finite_multipliers():
    colour = Colour(255, 0, 0, 200)
    assert colour.with_multiplied_alpha(float("inf")).alpha == 255
    assert colour.with_multiplied_alpha(float("-inf")).alpha == 0
    assert colour.with_multiplied_alpha(float("nan")).alpha == 0
    assert colour.with_multiplied_alpha(float("nan")).value[:3] == (255, 0, 0)
