import logging
import re
from typing import Any

from ..exceptions import ColourParseError
from ..types.colour_types import ARGB_MASK, TEXT_WIDTH

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(rf"[0-9a-fA-F]{{{TEXT_WIDTH}}}")


def argb_to_string(argb: int) -> str:
    """Encode a packed ARGB value as eight lowercase hex digits, e.g. ``"ffff0000"``."""
    return f"{argb & ARGB_MASK:0{TEXT_WIDTH}x}"


def string_to_argb(text: Any) -> int:
    """
    Decode text produced by ``argb_to_string``.

    Exactly eight hex digits are accepted, in either case. Prefixes,
    whitespace, signs and any other length are rejected.

    Raises:
        ColourParseError: if ``text`` is not a valid encoding.
    """
    if not isinstance(text, str) or _HEX_PATTERN.fullmatch(text) is None:
        logger.debug("Rejecting colour string %r", text)
        raise ColourParseError(text)
    return int(text, 16)
