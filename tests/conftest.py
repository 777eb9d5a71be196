"""Test configuration and fixtures for playercolors tests."""

import pytest

from playercolors.colors import rgb_to_hsb

RGBColor = tuple[int, int, int]


@pytest.fixture
def saturated_seeds() -> list[RGBColor]:
    """Provide fully saturated and bright seed colors."""
    return [
        (255, 0, 0),          # Red
        (0, 255, 0),          # Green
        (0, 0, 255),          # Blue
        (255, 255, 0),        # Yellow
        (255, 0, 255),        # Magenta
        (0, 255, 255),        # Cyan
    ]


@pytest.fixture
def muted_seeds() -> list[RGBColor]:
    """Provide seed colors that are neither fully saturated nor bright."""
    return [
        (128, 64, 64),        # Dull red
        (30, 144, 255),       # Dodger blue
        (10, 20, 15),         # Near black green
        (250, 240, 230),      # Linen
        (1, 0, 0),            # Darkest possible red
    ]


@pytest.fixture
def greyscale_seeds() -> list[RGBColor]:
    """Provide achromatic seed colors."""
    return [
        (0, 0, 0),            # Black
        (42, 42, 42),         # Dark grey
        (128, 128, 128),      # Mid grey
        (255, 255, 255),      # White
    ]


@pytest.fixture
def color_format_examples() -> list[tuple[str, RGBColor]]:
    """Provide examples of different color formats with expected RGB values."""
    return [
        ("#FF0000", (255, 0, 0)),         # Hex red
        ("#00ff00", (0, 255, 0)),         # Hex green
        ("#1E90FF", (30, 144, 255)),      # Hex dodger blue
        ("#f0f", (255, 0, 255)),          # Short hex magenta
        ("rgb(255, 0, 0)", (255, 0, 0)),          # RGB red
        ("RGB(0, 0, 255)", (0, 0, 255)),          # RGB blue
        ("rgb(1000, 0, 0)", (1000, 0, 0)),        # Out of range kept
        ("hsv(120, 100%, 100%)", (0, 255, 0)),    # HSV green
        ("hsv(0, 0%, 0%)", (0, 0, 0)),            # HSV black
    ]


@pytest.fixture
def invalid_color_formats() -> list[str]:
    """Provide examples of invalid color format strings."""
    return [
        "invalid",
        "#GG0000",             # Invalid hex characters
        "#FF00",               # Wrong hex length
        "#FF000000",           # Too long hex
        "FF0000",              # Missing # in hex
        "rgb(255, 0)",         # Missing RGB component
        "rgb(255, 0, 0",       # Unclosed parenthesis
        "hsv(361, 50%, 50%)",  # HSV hue out of range
        "hsv(180, 101%, 50%)", # HSV saturation out of range
        "hsl(180, 50%, 50%)",  # Unsupported model
        "",                    # Empty string
        "   ",                 # Whitespace only
    ]


class ColorTestHelpers:
    """Helper class with utility methods for color testing."""

    @staticmethod
    def hue_of(rgb: RGBColor) -> float:
        """Return the HSB hue of an 8-bit RGB color."""
        return rgb_to_hsb(*rgb)[0]

    @staticmethod
    def hue_distance(h1: float, h2: float) -> float:
        """Circular distance between two hues on a wheel of circumference 1."""
        d = abs(h1 - h2) % 1.0
        return min(d, 1.0 - d)

    @staticmethod
    def is_fully_saturated_and_bright(rgb: RGBColor) -> bool:
        """Full saturation pins one channel to 0, full brightness one to 255."""
        return min(rgb) == 0 and max(rgb) == 255

    @staticmethod
    def colors_approximately_equal(
        color1: RGBColor, color2: RGBColor, tolerance: int = 1
    ) -> bool:
        """Check if two colors are equal within a per-channel tolerance."""
        return all(abs(c1 - c2) <= tolerance for c1, c2 in zip(color1, color2))


@pytest.fixture
def color_helpers() -> ColorTestHelpers:
    """Provide helper methods for color testing."""
    return ColorTestHelpers()
