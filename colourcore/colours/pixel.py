from __future__ import annotations
from typing import ClassVar

from ..types.colour_types import ARGB_MASK, CHANNEL_MAX, ByteQuad
from ..utils.num_utils import clamp_byte, round_half_up


class PixelARGB:
    """
    Four 8-bit channels packed as ``(alpha << 24) | (red << 16) | (green << 8) | blue``.

    Instances are frozen after ``__init__``. Channels passed in are clamped to
    ``[0, 255]``.
    """
    __slots__ = ('_value', '_is_frozen')

    channel_max: ClassVar[int] = CHANNEL_MAX

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0, alpha: int = 0) -> None:
        self._value = (clamp_byte(red), clamp_byte(green), clamp_byte(blue), clamp_byte(alpha))
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_argb(cls, argb: int) -> PixelARGB:
        """Unpack a 32-bit ARGB integer. Bits above the low 32 are ignored."""
        argb = int(argb) & ARGB_MASK
        return cls((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ByteQuad:
        """Channels as ``(red, green, blue, alpha)``."""
        return self._value

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    @property
    def alpha(self) -> int:
        return self._value[3]

    @property
    def argb(self) -> int:
        r, g, b, a = self._value
        return (a << 24) | (r << 16) | (g << 8) | b

    def premultiplied(self) -> PixelARGB:
        """
        Return a copy whose colour channels are scaled by alpha.

        Each channel becomes ``round(c * alpha / 255)``; alpha is unchanged,
        so an opaque pixel is returned as an equal pixel.
        """
        r, g, b, a = self._value
        if a == self.channel_max:
            return self
        return PixelARGB(*(round_half_up(c * a / self.channel_max) for c in (r, g, b)), a)

    def unpremultiplied(self) -> PixelARGB:
        """Inverse of ``premultiplied``; a fully transparent pixel becomes transparent black."""
        r, g, b, a = self._value
        if a == self.channel_max:
            return self
        if a == 0:
            return PixelARGB(0, 0, 0, 0)
        return PixelARGB(*(round_half_up(c * self.channel_max / a) for c in (r, g, b)), a)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelARGB):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"{self.__class__.__name__}(red={r}, green={g}, blue={b}, alpha={a})"
