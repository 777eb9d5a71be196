"""Color parsing and formatting utilities for playercolors."""

import json
import re

from .colors import hsb_to_rgb

RGBColor = tuple[int, int, int]


def parse_hex_color(color_str: str) -> RGBColor | None:
    """Parse hexadecimal color format #RRGGBB or #RGB."""
    color_str = color_str.strip()
    if not color_str.startswith("#"):
        return None

    hex_str = color_str[1:]
    if not re.fullmatch(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}", hex_str):
        return None

    if len(hex_str) == 3:
        hex_str = "".join(c * 2 for c in hex_str)

    r = int(hex_str[0:2], 16)
    g = int(hex_str[2:4], 16)
    b = int(hex_str[4:6], 16)
    return (r, g, b)


def parse_rgb_color(color_str: str) -> RGBColor | None:
    """Parse RGB color format rgb(R, G, B).

    Channels outside [0, 255] are passed through; range checks belong to
    the generator.
    """
    pattern = r"rgb\s*\(\s*(-?\d+)\s*,\s*(-?\d+)\s*,\s*(-?\d+)\s*\)$"
    match = re.match(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    return (int(match.group(1)), int(match.group(2)), int(match.group(3)))


def parse_hsv_color(color_str: str) -> RGBColor | None:
    """Parse HSV color format hsv(H, S%, V%)."""
    pattern = (
        r"hsv\s*\(\s*(\d+(?:\.\d+)?)\s*,\s*"
        r"(\d+(?:\.\d+)?)\s*%\s*,\s*(\d+(?:\.\d+)?)\s*%\s*\)$"
    )
    match = re.match(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    h = float(match.group(1))
    s = float(match.group(2))
    v = float(match.group(3))

    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= v <= 100):
        return None

    return hsb_to_rgb(h / 360, s / 100, v / 100)


def parse_color(color_str: str) -> RGBColor:
    """Parse color string in various formats."""
    color_str = color_str.strip()

    parsers = [parse_hex_color, parse_rgb_color, parse_hsv_color]

    for parser in parsers:
        result = parser(color_str)
        if result is not None:
            return result

    raise ValueError(
        f"Invalid color format: '{color_str}'. "
        "Supported formats: #RRGGBB, #RGB, rgb(R,G,B), hsv(H,S%,V%)"
    )


def format_color_output(colors: list[RGBColor], format_type: str = "hex") -> list[str]:
    """Format colors for output."""
    formatted: list[str] = []

    for r, g, b in colors:
        if format_type == "hex":
            formatted.append(f"#{r:02X}{g:02X}{b:02X}")
        elif format_type == "rgb":
            formatted.append(f"rgb({r}, {g}, {b})")
        else:  # raw
            formatted.append(f"({r}, {g}, {b})")

    return formatted


def format_json_output(colors: list[RGBColor], format_type: str = "hex") -> str:
    """Render colors as a JSON array.

    ``raw`` keeps the channel triplets as nested arrays; the other formats
    emit strings.
    """
    if format_type == "raw":
        return json.dumps([list(rgb) for rgb in colors], indent=2)
    return json.dumps(format_color_output(colors, format_type), indent=2)
