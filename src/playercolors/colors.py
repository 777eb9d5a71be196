"""Colour set generation module for playercolors.

This module turns a single seed colour into a set of mutually distinguishable
colours, e.g. to hand out player or team colours from one accent colour chosen
by the user.

Every produced colour has maximal saturation and brightness in HSB space, and
the hues of the set are spread evenly around the colour wheel, starting at the
hue of the seed colour.

Key Features:
    - Eager input validation with one error class per rejection reason
    - HSB conversions backed by colour-science on numpy arrays
    - Deterministic output: identical input always yields identical colours

Dependencies:
    - colour-science: RGB <-> HSV (HSB) conversions
    - numpy: Array handling and channel rounding

Example:
    >>> from playercolors.colors import generate_colour_set
    >>> generate_colour_set(255, 0, 0, 3)
    [(255, 0, 0), (0, 255, 0), (0, 0, 255)]
"""

import colour
import numpy as np

from .exceptions import (
    ChannelOutOfRangeError,
    GreyscaleRejectedError,
    SizeTooLargeError,
    SizeTooSmallError,
)

__all__ = [
    "MIN_COLOUR_COUNT",
    "MAX_COLOUR_COUNT",
    "generate_colour_set",
    "rgb_to_hsb",
    "hsb_to_rgb",
]

MIN_COLOUR_COUNT = 2
# Beyond ten evenly spaced hues, neighbours become hard to tell apart.
MAX_COLOUR_COUNT = 10

RGBColor = tuple[int, int, int]
HSBColor = tuple[float, float, float]


def rgb_to_hsb(red: int, green: int, blue: int) -> HSBColor:
    """Convert an 8-bit sRGB colour to HSB.

    Args:
        red: Red channel in [0, 255].
        green: Green channel in [0, 255].
        blue: Blue channel in [0, 255].

    Returns:
        tuple[float, float, float]: ``(hue, saturation, brightness)`` where hue
            is a fraction of a full rotation in [0, 1) and saturation and
            brightness lie in [0, 1]. Greys report a hue of 0.0.

    Examples:
        >>> rgb_to_hsb(255, 0, 0)
        (0.0, 1.0, 1.0)
        >>> rgb_to_hsb(128, 128, 128)
        (0.0, 0.0, 0.5019607843137255)
    """
    rgb = np.array([red, green, blue], dtype=float) / 255.0
    hue, saturation, brightness = colour.RGB_to_HSV(rgb)
    return (float(hue) % 1.0, float(saturation), float(brightness))


def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> RGBColor:
    """Convert an HSB colour to 8-bit sRGB.

    The hue wraps around, so ``1.25`` and ``0.25`` name the same colour.
    Channels are rounded half up (``floor(c * 255 + 0.5)``).

    Examples:
        >>> hsb_to_rgb(0.5, 1.0, 1.0)
        (0, 255, 255)
    """
    hsb = np.array([hue % 1.0, saturation, brightness], dtype=float)
    rgb = colour.HSV_to_RGB(hsb)
    channels = np.floor(np.clip(rgb, 0.0, 1.0) * 255 + 0.5).astype(int)
    return (int(channels[0]), int(channels[1]), int(channels[2]))


def _is_valid_channel(value: int) -> bool:
    return 0 <= value <= 255


def _verify_seed_color(red: int, green: int, blue: int) -> None:
    """Reject seeds with out-of-range channels or without a hue."""
    if not all(_is_valid_channel(c) for c in (red, green, blue)):
        raise ChannelOutOfRangeError()

    # A grey has zero saturation and therefore no hue to rotate from.
    if red == green == blue:
        raise GreyscaleRejectedError()


def _generate_max_distance_set(origin_hue: float, count: int) -> list[RGBColor]:
    step = 1.0 / count
    return [hsb_to_rgb((origin_hue + i * step) % 1.0, 1.0, 1.0) for i in range(count)]


def generate_colour_set(red: int, green: int, blue: int, count: int) -> list[RGBColor]:
    """Generate ``count`` distinguishable colours from a seed colour.

    The seed is converted to HSB and only its hue is kept. Output colour ``i``
    has hue ``(seed_hue + i / count) % 1.0`` with saturation and brightness
    both boosted to 1.0, so index 0 is the maximally vivid version of the
    seed. It equals the seed itself only when the seed was already fully
    saturated and bright.

    Args:
        red: Seed red channel in [0, 255].
        green: Seed green channel in [0, 255].
        blue: Seed blue channel in [0, 255].
        count: Number of colours to produce, in
            [MIN_COLOUR_COUNT, MAX_COLOUR_COUNT].

    Returns:
        list[tuple[int, int, int]]: ``count`` 8-bit RGB triplets in hue order.

    Raises:
        SizeTooSmallError: If ``count`` is below MIN_COLOUR_COUNT.
        SizeTooLargeError: If ``count`` is above MAX_COLOUR_COUNT.
        ChannelOutOfRangeError: If any seed channel is outside [0, 255].
        GreyscaleRejectedError: If the seed is a grey (R == G == B).

        Checks run in the order listed above and the first failure is raised.

    Examples:
        >>> generate_colour_set(255, 0, 0, 2)
        [(255, 0, 0), (0, 255, 255)]
        >>> generate_colour_set(42, 42, 42, 2)
        Traceback (most recent call last):
            ...
        playercolors.exceptions.GreyscaleRejectedError: Origin colour must have hue. (Greyscale not allowed)
    """
    if count < MIN_COLOUR_COUNT:
        raise SizeTooSmallError()
    if count > MAX_COLOUR_COUNT:
        raise SizeTooLargeError()

    _verify_seed_color(red, green, blue)

    origin_hue = rgb_to_hsb(red, green, blue)[0]
    return _generate_max_distance_set(origin_hue, count)


generate = generate_colour_set
