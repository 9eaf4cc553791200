from boundednumbers import clamp

from ..types.colour_types import CHANNEL_MAX, AlphaValue, Scalar, is_byte_value


def clamp01(value: Scalar) -> float:
    """Clamp a number to the inclusive range ``[0, 1]``. NaN maps to 0."""
    if value != value:
        return 0.0
    return float(clamp(float(value), 0.0, 1.0))


def clamp_byte(value: Scalar) -> int:
    """Clamp an integer channel to ``[0, 255]``."""
    return int(clamp(int(value), 0, CHANNEL_MAX))


def round_half_up(value: float) -> int:
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def unit_to_byte(value: Scalar) -> int:
    """Scale a unit float to an 8-bit channel, clamping first and rounding half up."""
    return round_half_up(clamp01(value) * CHANNEL_MAX)


def byte_to_unit(value: int) -> float:
    return value / CHANNEL_MAX


def alpha_to_byte(alpha: AlphaValue) -> int:
    """
    Convert an alpha given either as an 8-bit integer or as a unit float.

    Args:
        alpha: ``int`` values are taken as 0-255 and clamped,
               ``float`` values as 0.0-1.0, clamped then scaled.

    Returns:
        Alpha channel in ``[0, 255]``.
    """
    if is_byte_value(alpha):
        return clamp_byte(alpha)
    return unit_to_byte(alpha)


def round_to_byte(value: Scalar) -> int:
    """Round an 8-bit-scaled float half up into ``[0, 255]``. NaN maps to 0, infinities saturate."""
    if value != value:
        return 0
    return round_half_up(float(clamp(float(value), 0.0, float(CHANNEL_MAX))))
