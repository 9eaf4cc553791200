"""Colourcore: an immutable ARGB colour value with HSB conversions."""

from .colours.colour import Colour
from .colours.pixel import PixelARGB
from .exceptions import ColourParseError
from .conversions import (
    unit_rgb_to_hsb,
    byte_rgb_to_hsb,
    np_unit_rgb_to_hsb,
    hsb_to_unit_rgb,
    hsb_to_byte_rgb,
    np_hsb_to_unit_rgb,
    argb_to_string,
    string_to_argb,
)

__version__ = "1.0.0"

__all__ = [
    # core colour types
    "Colour",
    "PixelARGB",
    # errors
    "ColourParseError",
    # conversions
    "unit_rgb_to_hsb",
    "byte_rgb_to_hsb",
    "np_unit_rgb_to_hsb",
    "hsb_to_unit_rgb",
    "hsb_to_byte_rgb",
    "np_hsb_to_unit_rgb",
    "argb_to_string",
    "string_to_argb",
    # version
    "__version__",
]
