from __future__ import annotations
from typing import Optional

import numpy as np
from boundednumbers.functions import clamp, cyclic_wrap_float

from .pixel import PixelARGB
from ..conversions import byte_rgb_to_hsb, hsb_to_byte_rgb, argb_to_string, string_to_argb
from ..types.colour_types import (
    CHANNEL_MAX,
    CONTRAST_THRESHOLD,
    DEFAULT_BRIGHTER_AMOUNT,
    DEFAULT_CONTRAST_AMOUNT,
    DEFAULT_DARKER_AMOUNT,
    GREY_LEVEL_STEPS,
    AlphaValue,
    ByteQuad,
    UnitTriple,
)
from ..utils.num_utils import alpha_to_byte, byte_to_unit, clamp01, clamp_byte, round_half_up, round_to_byte, unit_to_byte


class Colour:
    """
    An immutable colour with transparency, stored as four 8-bit channels.

    Construction mirrors the packed-pixel layout:

    >>> Colour()                      # transparent black
    >>> Colour(0xFFFF0000)            # packed ARGB, opaque red
    >>> Colour(255, 128, 0)           # 8-bit RGB, opaque
    >>> Colour(255, 128, 0, 64)       # 8-bit RGBA
    >>> Colour(255, 128, 0, 0.25)     # 8-bit RGB with unit alpha

    Integer channels are clamped to [0, 255], float alphas to [0, 1] before
    scaling. Every ``with_*`` method and every adjustment returns a new
    instance; the receiver is never modified.
    """
    __slots__ = ('_pixel', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        red_or_argb: int = 0,
        green: Optional[int] = None,
        blue: Optional[int] = None,
        alpha: Optional[AlphaValue] = None,
    ) -> None:
        if green is None and blue is None and alpha is None:
            pixel = PixelARGB.from_argb(red_or_argb)
        elif green is None or blue is None:
            raise TypeError(
                f"{self.__class__.__name__} expects a packed ARGB value or red, green and blue channels"
            )
        else:
            pixel = PixelARGB(
                red_or_argb,
                green,
                blue,
                CHANNEL_MAX if alpha is None else alpha_to_byte(alpha),
            )

        self._pixel = pixel
        super().__setattr__('_is_frozen', True)

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_hsb(
        cls,
        hue: float,
        saturation: float,
        brightness: float,
        alpha: AlphaValue = CHANNEL_MAX,
    ) -> Colour:
        """
        Create a colour from unit hue, saturation and brightness.

        Args:
            hue: 0.0 to 1.0, where 1.0 wraps round to 0.0
            saturation: 0.0 (grey) to 1.0 (fully saturated)
            brightness: 0.0 (black) to 1.0
            alpha: an 8-bit ``int`` or a unit ``float``. Defaults to opaque.

        Returns:
            New Colour. Out-of-range values are clamped, never rejected.
        """
        r, g, b = hsb_to_byte_rgb(hue, saturation, brightness)
        return cls(r, g, b, alpha)

    @classmethod
    def from_pixel(cls, pixel: PixelARGB) -> Colour:
        return cls(pixel.red, pixel.green, pixel.blue, pixel.alpha)

    @classmethod
    def grey_level(cls, brightness: float) -> Colour:
        """Return an opaque grey; 0.0 is black and 1.0 is white."""
        level = unit_to_byte(brightness)
        return cls(level, level, level)

    @classmethod
    def contrasting_pair(cls, colour1: Colour, colour2: Colour) -> Colour:
        """
        Return an opaque grey that stands out against both colours.

        Grey levels 0.0, 0.02, ... 1.0 are scored by their brightness
        distance to the nearer of the two inputs and the best one wins. On a
        tie the darker level is kept, so two colours of equal brightness get
        pure black or pure white, whichever is farther from them.
        """
        b1 = colour1.brightness
        b2 = colour2.brightness
        levels = np.linspace(0.0, 1.0, GREY_LEVEL_STEPS + 1)
        distance = np.minimum(np.abs(levels - b1), np.abs(levels - b2))
        return cls.grey_level(float(levels[int(np.argmax(distance))]))

    @classmethod
    def from_string(cls, text: str) -> Colour:
        """
        Parse a string created by ``to_string``.

        Raises:
            ColourParseError: if ``text`` is not exactly eight hex digits.
        """
        return cls(string_to_argb(text))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ByteQuad:
        """Channels as ``(red, green, blue, alpha)``."""
        return self._pixel.value

    @property
    def red(self) -> int:
        return self._pixel.red

    @property
    def green(self) -> int:
        return self._pixel.green

    @property
    def blue(self) -> int:
        return self._pixel.blue

    @property
    def alpha(self) -> int:
        return self._pixel.alpha

    @property
    def float_red(self) -> float:
        return byte_to_unit(self._pixel.red)

    @property
    def float_green(self) -> float:
        return byte_to_unit(self._pixel.green)

    @property
    def float_blue(self) -> float:
        return byte_to_unit(self._pixel.blue)

    @property
    def float_alpha(self) -> float:
        return byte_to_unit(self._pixel.alpha)

    @property
    def argb(self) -> int:
        """Packed 32-bit value: ``(alpha << 24) | (red << 16) | (green << 8) | blue``."""
        return self._pixel.argb

    @property
    def pixel_argb(self) -> PixelARGB:
        """Premultiplied pixel for handing to renderers."""
        return self._pixel.premultiplied()

    @property
    def is_opaque(self) -> bool:
        return self._pixel.alpha == CHANNEL_MAX

    @property
    def is_transparent(self) -> bool:
        return self._pixel.alpha == 0

    # Each of hue/saturation/brightness runs the full conversion;
    # use hsb when more than one component is needed.
    @property
    def hsb(self) -> UnitTriple:
        """Hue, saturation and brightness, each in [0, 1]."""
        return byte_rgb_to_hsb(self.red, self.green, self.blue)

    @property
    def hue(self) -> float:
        return self.hsb[0]

    @property
    def saturation(self) -> float:
        return self.hsb[1]

    @property
    def brightness(self) -> float:
        return self.hsb[2]

    # ------------------ DERIVED COLOURS ------------------
    def with_alpha(self, alpha: AlphaValue) -> Colour:
        """Same colour, new alpha: an 8-bit ``int`` or a unit ``float``."""
        return self.__class__(self.red, self.green, self.blue, alpha_to_byte(alpha))

    def with_multiplied_alpha(self, multiplier: float) -> Colour:
        return self.with_alpha(round_to_byte(self.alpha * multiplier))

    def _with_hsb(self, hue: float, saturation: float, brightness: float) -> Colour:
        return self.from_hsb(hue, saturation, brightness, self.alpha)

    def with_hue(self, hue: float) -> Colour:
        _, s, b = self.hsb
        return self._with_hsb(hue, s, b)

    def with_saturation(self, saturation: float) -> Colour:
        h, _, b = self.hsb
        return self._with_hsb(h, saturation, b)

    def with_brightness(self, brightness: float) -> Colour:
        h, s, _ = self.hsb
        return self._with_hsb(h, s, brightness)

    def with_rotated_hue(self, amount: float) -> Colour:
        """Rotate the hue by ``amount`` of a full turn, wrapping into [0, 1)."""
        h, s, b = self.hsb
        return self._with_hsb(float(cyclic_wrap_float(h + amount, 0.0, 1.0)), s, b)

    def with_multiplied_saturation(self, multiplier: float) -> Colour:
        h, s, b = self.hsb
        return self._with_hsb(h, clamp01(s * multiplier), b)

    def with_multiplied_brightness(self, multiplier: float) -> Colour:
        h, s, b = self.hsb
        return self._with_hsb(h, s, clamp01(b * multiplier))

    def brighter(self, amount: float = DEFAULT_BRIGHTER_AMOUNT) -> Colour:
        """
        Move the brightness toward 1.0 by ``amount`` of the remaining headroom.

        0.0 leaves the colour unchanged, 1.0 takes it to full brightness.
        Hue, saturation and alpha are kept.
        """
        amount = clamp01(amount)
        h, s, b = self.hsb
        return self._with_hsb(h, s, b + (1.0 - b) * amount)

    def darker(self, amount: float = DEFAULT_DARKER_AMOUNT) -> Colour:
        """Scale the brightness by ``1 - amount``; 0.0 leaves the colour unchanged."""
        amount = clamp01(amount)
        h, s, b = self.hsb
        return self._with_hsb(h, s, b * (1.0 - amount))

    def overlaid_with(self, foreground: Colour) -> Colour:
        """
        Alpha-composite ``foreground`` over this colour.

        An opaque foreground replaces this colour entirely; a fully
        transparent one leaves it unchanged.
        """
        fg_alpha = foreground.float_alpha
        if fg_alpha <= 0.0:
            return self

        bg_alpha = self.float_alpha * (1.0 - fg_alpha)
        result_alpha = fg_alpha + bg_alpha

        def blend(fg: int, bg: int) -> int:
            return clamp_byte(round_half_up((fg * fg_alpha + bg * bg_alpha) / result_alpha))

        return self.__class__(
            blend(foreground.red, self.red),
            blend(foreground.green, self.green),
            blend(foreground.blue, self.blue),
            float(clamp(result_alpha, 0.0, 1.0)),
        )

    def contrasting(self, amount: float = DEFAULT_CONTRAST_AMOUNT) -> Colour:
        """
        Return a colour that stands out against this one.

        The brightness moves toward its complement ``1 - brightness`` by
        ``amount``, keeping hue and saturation. When the complement is within
        the contrast threshold of the current brightness (mid brightness), it
        moves toward black or white instead and the saturation fades to 0
        by the same ``amount``, so ``amount=1.0`` gives a pure grey extreme.
        Alpha is always kept: opaque black at ``amount=1.0`` gives opaque
        white and vice versa.
        """
        amount = clamp01(amount)
        h, s, b = self.hsb
        target = 1.0 - b
        target_saturation = s
        if abs(target - b) < CONTRAST_THRESHOLD:
            target = 0.0 if b >= 0.5 else 1.0
            target_saturation = 0.0
        return self._with_hsb(
            h,
            s + (target_saturation - s) * amount,
            b + (target - b) * amount,
        )

    # ------------------ TEXT ------------------
    def to_string(self) -> str:
        """Eight lowercase hex digits of the packed ARGB value, e.g. ``"ffff0000"``."""
        return argb_to_string(self.argb)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(0x{self.argb:08x})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
