"""playercolors - Generate distinguishable player colors from a single seed color"""

__version__ = "0.1.0"

from .color_utils import format_color_output, parse_color
from .colors import (
    MAX_COLOUR_COUNT,
    MIN_COLOUR_COUNT,
    generate,
    generate_colour_set,
    hsb_to_rgb,
    rgb_to_hsb,
)
from .exceptions import (
    CHANNEL_OUT_OF_RANGE_MESSAGE,
    GREYSCALE_REJECTED_MESSAGE,
    SIZE_TOO_LARGE_MESSAGE,
    SIZE_TOO_SMALL_MESSAGE,
    ChannelOutOfRangeError,
    ErrorKind,
    GreyscaleRejectedError,
    PlayerColorError,
    SizeTooLargeError,
    SizeTooSmallError,
)

__all__ = [
    "generate",
    "generate_colour_set",
    "rgb_to_hsb",
    "hsb_to_rgb",
    "MIN_COLOUR_COUNT",
    "MAX_COLOUR_COUNT",
    "ErrorKind",
    "PlayerColorError",
    "SizeTooSmallError",
    "SizeTooLargeError",
    "ChannelOutOfRangeError",
    "GreyscaleRejectedError",
    "SIZE_TOO_SMALL_MESSAGE",
    "SIZE_TOO_LARGE_MESSAGE",
    "CHANNEL_OUT_OF_RANGE_MESSAGE",
    "GREYSCALE_REJECTED_MESSAGE",
    "parse_color",
    "format_color_output",
]
