"""Error taxonomy for playercolors.

Every failure the generator can report is a caller-input problem, so all
errors derive from ``ValueError``. Each subclass carries a ``kind`` tag so
callers can branch on the failure without comparing message strings.
"""

from typing import Literal

__all__ = [
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
]

ErrorKind = Literal[
    "size-too-small",
    "size-too-large",
    "channel-out-of-range",
    "greyscale-rejected",
]

SIZE_TOO_SMALL_MESSAGE = "Target array size must be at least 2."
SIZE_TOO_LARGE_MESSAGE = (
    "Target colours are hard to distinguish for sizes > 10. "
    "Cowardly refusing to compute colours."
)
CHANNEL_OUT_OF_RANGE_MESSAGE = "Origin colour must use rgb channels in range [0-255]."
GREYSCALE_REJECTED_MESSAGE = "Origin colour must have hue. (Greyscale not allowed)"


class PlayerColorError(ValueError):
    """Base class for rejected colour set requests."""

    kind: ErrorKind
    default_message: str = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class SizeTooSmallError(PlayerColorError):
    """Requested fewer colours than the minimum set size."""

    kind: ErrorKind = "size-too-small"
    default_message = SIZE_TOO_SMALL_MESSAGE


class SizeTooLargeError(PlayerColorError):
    """Requested more colours than can be told apart."""

    kind: ErrorKind = "size-too-large"
    default_message = SIZE_TOO_LARGE_MESSAGE


class ChannelOutOfRangeError(PlayerColorError):
    """A seed channel lies outside [0, 255]."""

    kind: ErrorKind = "channel-out-of-range"
    default_message = CHANNEL_OUT_OF_RANGE_MESSAGE


class GreyscaleRejectedError(PlayerColorError):
    """The seed colour has no hue (R == G == B)."""

    kind: ErrorKind = "greyscale-rejected"
    default_message = GREYSCALE_REJECTED_MESSAGE
