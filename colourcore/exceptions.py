from typing import Any

from .types.colour_types import TEXT_WIDTH


class ColourParseError(ValueError):
    """Raised when text is not a colour string produced by ``Colour.to_string``."""

    def __init__(self, text: Any):
        self.text = text
        super().__init__(
            f"Not a valid colour string: {text!r} (expected {TEXT_WIDTH} hexadecimal digits)"
        )
