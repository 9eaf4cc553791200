"""
Colourcore Colour Model Conversions
===================================

Conversions between 8-bit/unit RGB and hue-saturation-brightness, plus the
fixed-width text codec for packed ARGB values. Scalar functions serve the
``Colour`` value type; the numpy variants apply the same arithmetic to whole
arrays of colours.

Conversion Functions
-------------------

RGB → HSB:
    unit_rgb_to_hsb(r, g, b)
        Scalar unit RGB to HSB conversion
    byte_rgb_to_hsb(r, g, b)
        Scalar 8-bit RGB to HSB conversion
    np_unit_rgb_to_hsb(r, g, b)
        Vectorized RGB to HSB conversion

HSB → RGB:
    hsb_to_unit_rgb(h, s, b)
        Scalar HSB to unit RGB conversion
    hsb_to_byte_rgb(h, s, b)
        Scalar HSB to 8-bit RGB conversion, rounded half up
    np_hsb_to_unit_rgb(h, s, b)
        Vectorized HSB to RGB conversion

Text:
    argb_to_string(argb)
        Eight lowercase hex digits
    string_to_argb(text)
        Strict inverse, raises ColourParseError

All hue, saturation and brightness values are unit floats; hue lies in
[0, 1) rather than degrees.

Examples
--------
>>> from colourcore.conversions import byte_rgb_to_hsb, hsb_to_byte_rgb
>>> byte_rgb_to_hsb(255, 0, 0)
(0.0, 1.0, 1.0)
>>> hsb_to_byte_rgb(0.5, 1.0, 1.0)
(0, 255, 255)
"""

# RGB → HSB conversions
from .to_hsb import (
    unit_rgb_to_hsb,
    byte_rgb_to_hsb,
    np_unit_rgb_to_hsb,
)

# HSB → RGB conversions
from .to_rgb import (
    hsb_to_unit_rgb,
    hsb_to_byte_rgb,
    np_hsb_to_unit_rgb,
)

# Text codec
from .serialization import argb_to_string, string_to_argb

__all__ = [
    # RGB → HSB
    'unit_rgb_to_hsb',
    'byte_rgb_to_hsb',
    'np_unit_rgb_to_hsb',

    # HSB → RGB
    'hsb_to_unit_rgb',
    'hsb_to_byte_rgb',
    'np_hsb_to_unit_rgb',

    # Text
    'argb_to_string',
    'string_to_argb',
]
