import numpy as np
from numpy import ndarray as NDArray

from ..types.colour_types import CHANNEL_MAX, UnitTriple


def unit_rgb_to_hsb(r: float, g: float, b: float) -> UnitTriple:
    """
    Convert unit RGB (0..1) to hue, saturation and brightness.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 1)
        s ∈ [0, 1]   (0 for achromatic colours and for black)
        v ∈ [0, 1]   (the largest channel)
    """
    maximum = max(r, g, b)
    minimum = min(r, g, b)
    delta = maximum - minimum

    saturation = delta / maximum if maximum > 0 else 0.0

    if delta == 0:
        return 0.0, saturation, maximum

    if maximum == r:
        hue = (g - b) / delta
    elif maximum == g:
        hue = 2.0 + (b - r) / delta
    else:
        hue = 4.0 + (r - g) / delta

    hue /= 6.0
    if hue < 0.0:
        hue += 1.0

    return hue, saturation, maximum


def byte_rgb_to_hsb(r: int, g: int, b: int) -> UnitTriple:
    """Convert 8-bit RGB channels to unit hue, saturation and brightness."""
    return unit_rgb_to_hsb(r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)


def np_unit_rgb_to_hsb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: convert unit RGB to HSB.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsb: array of shape (..., 3): (hue [0,1), saturation [0,1], brightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    maximum = np.maximum(np.maximum(r, g), b)
    minimum = np.minimum(np.minimum(r, g), b)
    delta = maximum - minimum

    saturation = np.where(maximum > 0, delta / np.where(maximum > 0, maximum, 1.0), 0.0)

    safe_delta = np.where(delta == 0, 1.0, delta)
    hue = np.where(
        maximum == r,
        (g - b) / safe_delta,
        np.where(maximum == g, 2.0 + (b - r) / safe_delta, 4.0 + (r - g) / safe_delta),
    )
    hue = np.where(delta == 0, 0.0, hue / 6.0)
    hue = np.where(hue < 0.0, hue + 1.0, hue)

    return np.stack([hue, saturation, maximum], axis=-1)
