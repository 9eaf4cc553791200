from .colour_types import (
    Scalar,
    ByteQuad,
    UnitTriple,
    AlphaValue,
    CHANNEL_MAX,
    ARGB_MASK,
    DEFAULT_BRIGHTER_AMOUNT,
    DEFAULT_DARKER_AMOUNT,
    DEFAULT_CONTRAST_AMOUNT,
    CONTRAST_THRESHOLD,
    GREY_LEVEL_STEPS,
    TEXT_WIDTH,
    is_byte_value,
)
