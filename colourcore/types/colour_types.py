from __future__ import annotations
from typing import Tuple, Union
import numpy as np

Scalar = int | float
ByteQuad = Tuple[int, int, int, int]
UnitTriple = Tuple[float, float, float]
# int -> 8-bit alpha (0-255), float -> unit alpha (0.0-1.0)
AlphaValue = Union[int, float, np.integer, np.floating]

CHANNEL_MAX = 255
ARGB_MASK = 0xFFFFFFFF

DEFAULT_BRIGHTER_AMOUNT = 0.4
DEFAULT_DARKER_AMOUNT = 0.4
DEFAULT_CONTRAST_AMOUNT = 1.0

# Below this brightness gap the complement is too close to be visible,
# so contrasting() pushes toward black or white instead.
CONTRAST_THRESHOLD = 0.25

# contrasting_pair() scans grey levels 0.0, 0.02, ... 1.0
GREY_LEVEL_STEPS = 50

# Width of the hex text encoding of a packed ARGB value
TEXT_WIDTH = 8


def is_byte_value(value: AlphaValue) -> bool:
    """Return True when ``value`` is an integer, i.e. an 8-bit channel."""
    return isinstance(value, (int, np.integer))
