"""Basic PNG enumerations, pixel layout helpers and parameter errors."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "ColorType",
    "BitDepth",
    "BytesPerPixel",
    "Unit",
    "PixelDimensions",
    "DisposeOp",
    "BlendOp",
    "Compression",
    "Transformations",
    "ParameterError",
    "ImageBufferSizeError",
    "PolledAfterEndOfImageError",
]


class BitDepth(enum.IntEnum):
    """Number of bits per sample."""

    ONE = 1
    TWO = 2
    FOUR = 4
    EIGHT = 8
    SIXTEEN = 16


class ColorType(enum.IntEnum):
    """How a pixel is encoded; values are the IHDR colour type codes."""

    GRAYSCALE = 0
    RGB = 2
    INDEXED = 3
    GRAYSCALE_ALPHA = 4
    RGBA = 6

    def samples(self) -> int:
        """Number of samples per pixel."""
        return _SAMPLES[self]

    def checked_raw_row_length(self, depth: BitDepth, width: int) -> Optional[int]:
        """Bytes in one filtered row (filter byte included), or None if unaddressable."""
        bits = width * self.samples() * BitDepth(depth)
        length = 1 + (bits + 7) // 8
        return length if length <= sys.maxsize else None

    def raw_row_length_from_width(self, depth: BitDepth, width: int) -> int:
        """Bytes in one filtered row of ``width`` pixels, filter byte included."""
        depth = BitDepth(depth)
        samples = width * self.samples()
        if depth is BitDepth.SIXTEEN:
            return 1 + samples * 2
        if depth is BitDepth.EIGHT:
            return 1 + samples
        samples_per_byte = 8 // depth
        whole, rest = divmod(samples, samples_per_byte)
        return 1 + whole + (1 if rest else 0)

    def is_combination_invalid(self, bit_depth: BitDepth) -> bool:
        """True if the PNG standard forbids this colour type with ``bit_depth``."""
        bit_depth = BitDepth(bit_depth)
        sub_byte = bit_depth in (BitDepth.ONE, BitDepth.TWO, BitDepth.FOUR)
        multi_sample = self in (
            ColorType.RGB,
            ColorType.GRAYSCALE_ALPHA,
            ColorType.RGBA,
        )
        return (sub_byte and multi_sample) or (
            bit_depth is BitDepth.SIXTEEN and self is ColorType.INDEXED
        )


_SAMPLES = {
    ColorType.GRAYSCALE: 1,
    ColorType.INDEXED: 1,
    ColorType.RGB: 3,
    ColorType.GRAYSCALE_ALPHA: 2,
    ColorType.RGBA: 4,
}


class BytesPerPixel(enum.IntEnum):
    """Whole bytes per pixel as used by the scanline filters."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    SIX = 6
    EIGHT = 8

    @classmethod
    def from_usize(cls, bpp: int) -> "BytesPerPixel":
        """Look up the member for ``bpp`` bytes; raise ValueError if none exists."""
        try:
            return cls(bpp)
        except ValueError:
            raise ValueError(
                f"not a possible byte rounded pixel width: {bpp}"
            ) from None


class Unit(enum.IntEnum):
    """Physical unit of the pixel dimensions."""

    UNSPECIFIED = 0
    METER = 1


@dataclass(frozen=True)
class PixelDimensions:
    """Pixels per unit along each axis."""

    xppu: int
    yppu: int
    unit: Unit


class _NamedOp(enum.IntEnum):
    def __str__(self) -> str:
        return f"{self._prefix()}{self.name}"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    @classmethod
    def _prefix(cls) -> str:
        raise NotImplementedError


class DisposeOp(_NamedOp):
    """How an animation frame's area is reset after it is shown."""

    NONE = 0
    BACKGROUND = 1
    PREVIOUS = 2

    @classmethod
    def _prefix(cls) -> str:
        return "DISPOSE_OP_"


class BlendOp(_NamedOp):
    """How an animation frame's pixels are written into the canvas."""

    SOURCE = 0
    OVER = 1

    @classmethod
    def _prefix(cls) -> str:
        return "BLEND_OP_"


class Compression(enum.Enum):
    """Type and strength of the deflate compression applied."""

    DEFAULT = "default"
    FAST = "fast"
    BEST = "best"
    HUFFMAN = "huffman"
    RLE = "rle"


class Transformations(enum.IntFlag):
    """Output transformations applied while decoding."""

    IDENTITY = 0x00000
    STRIP_16 = 0x00001
    EXPAND = 0x00010
    ALPHA = 0x10000

    @classmethod
    def normalize_to_color8(cls) -> "Transformations":
        """Expand and strip every input to 8-bit grayscale or colour."""
        return cls.EXPAND | cls.STRIP_16


class ParameterError(Exception):
    """A caller-supplied parameter does not fit the image."""


class ImageBufferSizeError(ParameterError):
    """The supplied buffer does not have the size the image needs."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"wrong data size, expected {expected} got {actual}")
        self.expected = expected
        self.actual = actual


class PolledAfterEndOfImageError(ParameterError):
    """A further frame was requested after the last one was read."""

    def __init__(self) -> None:
        super().__init__("End of image has been reached")