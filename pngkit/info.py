"""Image header information shared by the encoder and decoder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from pngkit.control import (
    AnimationControl,
    FrameControl,
    ScaledFloat,
    SourceChromaticities,
    SrgbRenderingIntent,
)
from pngkit.types import (
    BitDepth,
    BytesPerPixel,
    ColorType,
    Compression,
    PixelDimensions,
)

__all__ = ["Info", "create_info_from_plte_trns_bitdepth"]


@dataclass
class Info:
    """Header data of a PNG image and its ancillary chunks."""

    width: int = 0
    height: int = 0
    bit_depth: BitDepth = BitDepth.EIGHT
    color_type: ColorType = ColorType.GRAYSCALE
    interlaced: bool = False
    # Alpha of the palette entries, one byte each (tRNS).
    trns: Optional[bytes] = None
    pixel_dims: Optional[PixelDimensions] = None
    # RGB palette entries, three bytes each (PLTE).
    palette: Optional[bytes] = None
    gama_chunk: Optional[ScaledFloat] = None
    chrm_chunk: Optional[SourceChromaticities] = None
    frame_control: Optional[FrameControl] = None
    animation_control: Optional[AnimationControl] = None
    compression: Compression = Compression.FAST
    source_gamma: Optional[ScaledFloat] = None
    source_chromaticities: Optional[SourceChromaticities] = None
    srgb: Optional[SrgbRenderingIntent] = None
    icc_profile: Optional[bytes] = None
    uncompressed_latin1_text: List[Any] = field(default_factory=list)
    compressed_latin1_text: List[Any] = field(default_factory=list)
    utf8_text: List[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.bit_depth = BitDepth(self.bit_depth)
        self.color_type = ColorType(self.color_type)
        for name in ("trns", "palette", "icc_profile"):
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, bytes(value))

    @classmethod
    def with_size(cls, width: int, height: int) -> "Info":
        """Default info with the given dimensions."""
        return cls(width=width, height=height)

    def size(self) -> Tuple[int, int]:
        """Width and height of the image."""
        return self.width, self.height

    def is_animated(self) -> bool:
        """True if the image is an APNG image."""
        return self.frame_control is not None and self.animation_control is not None

    def bits_per_pixel(self) -> int:
        """Number of bits per pixel."""
        return self.color_type.samples() * int(self.bit_depth)

    def bytes_per_pixel(self) -> int:
        """Number of bytes per pixel, rounding sub-byte depths up to one byte."""
        return self.color_type.samples() * ((int(self.bit_depth) + 7) >> 3)

    def bpp_in_prediction(self) -> BytesPerPixel:
        """Bytes per pixel as used by the scanline filters."""
        return BytesPerPixel.from_usize(self.bytes_per_pixel())

    def raw_bytes(self) -> int:
        """Bytes needed for one deinterlaced image, filter bytes included."""
        return self.height * self.raw_row_length()

    def raw_row_length(self) -> int:
        """Bytes needed for one deinterlaced row, filter byte included."""
        return self.raw_row_length_from_width(self.width)

    def checked_raw_row_length(self) -> Optional[int]:
        """Row length as in raw_row_length, or None if it cannot be addressed."""
        return self.color_type.checked_raw_row_length(self.bit_depth, self.width)

    def raw_row_length_from_width(self, width: int) -> int:
        """Bytes needed for one deinterlaced row of ``width`` pixels."""
        return self.color_type.raw_row_length_from_width(self.bit_depth, width)


def create_info_from_plte_trns_bitdepth(
    plte: bytes, trns: Optional[bytes], bit_depth: int
) -> Info:
    """Info for an indexed image with the given palette, transparency and depth."""
    try:
        depth = BitDepth(bit_depth)
    except ValueError:
        raise ValueError(f"invalid bit depth: {bit_depth}") from None
    return Info(
        color_type=ColorType.INDEXED,
        bit_depth=depth,
        palette=bytes(plte),
        trns=None if trns is None else bytes(trns),
    )