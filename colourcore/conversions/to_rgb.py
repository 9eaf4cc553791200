import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..types.colour_types import UnitTriple
from ..utils.num_utils import clamp01, unit_to_byte


def hsb_to_unit_rgb(hue: float, saturation: float, brightness: float) -> UnitTriple:
    """
    Convert hue, saturation and brightness to unit RGB (0..1).

    All three inputs are clamped to [0, 1] first. A hue of 1.0 is the same
    angle as 0.0.
    """
    hue = clamp01(hue)
    saturation = clamp01(saturation)
    v = clamp01(brightness)

    if saturation == 0.0:
        return v, v, v

    h = (hue * 6.0) % 6.0
    sector = int(h)
    f = h - sector

    p = v * (1.0 - saturation)
    q = v * (1.0 - saturation * f)
    t = v * (1.0 - saturation * (1.0 - f))

    return (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[sector]


def hsb_to_byte_rgb(hue: float, saturation: float, brightness: float) -> Tuple[int, int, int]:
    """Convert HSB to 8-bit RGB channels, rounding each channel half up."""
    r, g, b = hsb_to_unit_rgb(hue, saturation, brightness)
    return unit_to_byte(r), unit_to_byte(g), unit_to_byte(b)


def np_hsb_to_unit_rgb(hue: NDArray, saturation: NDArray, brightness: NDArray) -> NDArray:
    """
    Vectorized: convert HSB back into unit RGB.

    Args:
        hue: array-like or scalar, [0,1]
        saturation: array-like or scalar, [0,1]
        brightness: array-like or scalar, [0,1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0,1]
    """
    h = np.clip(np.asarray(hue, dtype=float), 0.0, 1.0)
    s = np.clip(np.asarray(saturation, dtype=float), 0.0, 1.0)
    v = np.clip(np.asarray(brightness, dtype=float), 0.0, 1.0)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    h6 = (h * 6.0) % 6.0
    sector = np.floor(h6).astype(int)
    f = h6 - sector

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    conditions = [sector == i for i in range(6)]
    r = np.select(conditions, [v, q, p, p, t, v])
    g = np.select(conditions, [t, v, v, q, p, p])
    b = np.select(conditions, [p, p, t, v, v, q])

    grey = s == 0.0
    r = np.where(grey, v, r)
    g = np.where(grey, v, g)
    b = np.where(grey, v, b)

    return np.stack([r, g, b], axis=-1)
