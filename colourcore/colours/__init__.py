"""
Colourcore Colour Classes
=========================

Immutable colour values backed by a packed 4 x 8-bit pixel.

Features
--------
- Immutable instances (frozen after initialization)
- Construction from packed ARGB, 8-bit RGB/RGBA, float alpha or HSB
- Value clamping instead of rejection for every numeric input
- HSB adjustments, alpha compositing and contrast helpers
- Stable eight-digit hex text form

Usage
-----
>>> from colourcore.colours import Colour
>>>
>>> red = Colour(0xFFFF0000)
>>> print(red.value)  # (255, 0, 0, 255)
>>> print(red.hsb)  # (0.0, 1.0, 1.0)
>>>
>>> # Derived colours never modify the original
>>> faded = red.with_alpha(0.5)
>>> pastel = red.with_multiplied_saturation(0.5)
>>> shadow = red.darker()
>>>
>>> # Compositing and contrast
>>> mixed = Colour(255, 255, 255).overlaid_with(faded)
>>> label = mixed.contrasting()
>>>
>>> # Text round trip
>>> Colour.from_string(str(red)) == red  # True

Classes
-------
    - Colour: the colour value
    - PixelARGB: packed-pixel storage with premultiplied-alpha variants
"""

from .colour import Colour
from .pixel import PixelARGB


__all__ = ['Colour', 'PixelARGB']
