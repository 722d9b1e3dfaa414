"""Animation control, gamma, chromaticity and sRGB chunk data."""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Tuple

from pngkit import chunk
from pngkit.types import BlendOp, DisposeOp

__all__ = [
    "FrameControl",
    "AnimationControl",
    "ScaledFloat",
    "SourceChromaticities",
    "SrgbRenderingIntent",
]

_U32_MAX = 0xFFFFFFFF


def _pack(fmt: str, *values: int) -> bytes:
    try:
        return struct.pack(fmt, *values)
    except struct.error as exc:
        raise ValueError(f"field out of range: {exc}") from None


@dataclass
class FrameControl:
    """Contents of an fcTL chunk."""

    sequence_number: int = 0
    width: int = 0
    height: int = 0
    x_offset: int = 0
    y_offset: int = 0
    delay_num: int = 1
    delay_den: int = 30
    dispose_op: DisposeOp = DisposeOp.NONE
    blend_op: BlendOp = BlendOp.SOURCE

    def set_seq_num(self, s: int) -> None:
        """Set the sequence number."""
        self.sequence_number = s

    def inc_seq_num(self, i: int) -> None:
        """Advance the sequence number by ``i``."""
        value = self.sequence_number + i
        if value > _U32_MAX:
            raise OverflowError("sequence number overflow")
        self.sequence_number = value

    def encode(self, w: BinaryIO) -> None:
        """Write this frame control as an fcTL chunk."""
        data = _pack(
            ">IIIIIHHBB",
            self.sequence_number,
            self.width,
            self.height,
            self.x_offset,
            self.y_offset,
            self.delay_num,
            self.delay_den,
            int(self.dispose_op),
            int(self.blend_op),
        )
        chunk.write_chunk(w, chunk.fcTL, data)


@dataclass
class AnimationControl:
    """Contents of an acTL chunk; ``num_plays`` 0 means loop forever."""

    num_frames: int
    num_plays: int

    def encode(self, w: BinaryIO) -> None:
        """Write this animation control as an acTL chunk."""
        chunk.write_chunk(w, chunk.acTL, _pack(">II", self.num_frames, self.num_plays))


_SCALING = 100_000.0
_U32_MAX_AS_F32 = 4294967296.0


def _f32(value: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack(">f", struct.pack(">f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class ScaledFloat:
    """A non-negative value stored as an integer in units of 1/100000."""

    scaled: int

    def __post_init__(self) -> None:
        if not 0 <= self.scaled <= _U32_MAX:
            raise ValueError(f"scaled value out of range: {self.scaled}")

    @staticmethod
    def _forward(value: float) -> int:
        value = _f32(value)
        if math.isnan(value):
            return 0
        product = _f32(max(value, 0.0) * _SCALING)
        if math.isinf(product):
            return _U32_MAX
        return min(math.floor(product), _U32_MAX)

    @staticmethod
    def _reverse(encoded: int) -> float:
        return _f32(_f32(float(encoded)) / _SCALING)

    @staticmethod
    def in_range(value: float) -> bool:
        """Whether ``value`` lies in the representable range."""
        value = _f32(value)
        if not value >= 0.0:
            return False
        product = _f32(value * _SCALING)
        if math.isinf(product):
            return False
        return math.floor(product) <= _U32_MAX_AS_F32

    @staticmethod
    def exact(value: float) -> bool:
        """Whether ``value`` survives conversion and back unchanged."""
        value = _f32(value)
        return value == ScaledFloat._reverse(ScaledFloat._forward(value))

    @classmethod
    def from_value(cls, value: float) -> "ScaledFloat":
        """Scale and quantise ``value``, clamping it into the valid range."""
        return cls(cls._forward(value))

    @classmethod
    def from_scaled(cls, val: int) -> "ScaledFloat":
        """Build from an already scaled integer."""
        return cls(val)

    def into_value(self) -> float:
        """The unscaled value."""
        return self._reverse(self.scaled)

    def encode_gama(self, w: BinaryIO) -> None:
        """Write this value as a gAMA chunk."""
        chunk.write_chunk(w, chunk.gAMA, _pack(">I", self.scaled))


_Pair = Tuple[ScaledFloat, ScaledFloat]


@dataclass(frozen=True)
class SourceChromaticities:
    """Chromaticities of the white point and the three primaries."""

    white: _Pair
    red: _Pair
    green: _Pair
    blue: _Pair = field()

    @classmethod
    def from_values(
        cls,
        white: Tuple[float, float],
        red: Tuple[float, float],
        green: Tuple[float, float],
        blue: Tuple[float, float],
    ) -> "SourceChromaticities":
        """Build from (x, y) float pairs."""

        def pair(xy: Tuple[float, float]) -> _Pair:
            x, y = xy
            return ScaledFloat.from_value(x), ScaledFloat.from_value(y)

        return cls(pair(white), pair(red), pair(green), pair(blue))

    def to_be_bytes(self) -> bytes:
        """The 32-byte cHRM payload: white, red, green, blue, x before y."""
        values = [
            component.scaled
            for point in (self.white, self.red, self.green, self.blue)
            for component in point
        ]
        return struct.pack(">8I", *values)

    def encode(self, w: BinaryIO) -> None:
        """Write these chromaticities as a cHRM chunk."""
        chunk.write_chunk(w, chunk.cHRM, self.to_be_bytes())


class SrgbRenderingIntent(enum.IntEnum):
    """Rendering intent of an sRGB image."""

    PERCEPTUAL = 0
    RELATIVE_COLORIMETRIC = 1
    SATURATION = 2
    ABSOLUTE_COLORIMETRIC = 3

    def encode(self, w: BinaryIO) -> None:
        """Write this intent as an sRGB chunk."""
        chunk.write_chunk(w, chunk.sRGB, bytes([int(self)]))