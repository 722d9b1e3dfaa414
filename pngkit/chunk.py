"""PNG chunk types and the chunk wire format."""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass
from typing import BinaryIO, Union

__all__ = [
    "ChunkType",
    "write_chunk",
    "IHDR",
    "PLTE",
    "IDAT",
    "IEND",
    "tRNS",
    "bKGD",
    "tIME",
    "pHYs",
    "cHRM",
    "gAMA",
    "sRGB",
    "iCCP",
    "tEXt",
    "zTXt",
    "iTXt",
    "acTL",
    "fcTL",
    "fdAT",
]

_PROPERTY_BIT = 32


@dataclass(frozen=True)
class ChunkType:
    """A four-byte PNG chunk type code."""

    raw: bytes

    def __post_init__(self) -> None:
        raw = self.raw
        if isinstance(raw, str):
            raw = raw.encode("latin-1")
        elif isinstance(raw, (bytearray, memoryview)):
            raw = bytes(raw)
        if not isinstance(raw, bytes):
            raise TypeError(f"chunk type must be bytes, not {type(raw).__name__}")
        if len(raw) != 4:
            raise ValueError(f"chunk type must be 4 bytes long, got {len(raw)}")
        object.__setattr__(self, "raw", raw)

    def is_critical(self) -> bool:
        """True if the chunk is critical (first letter upper case)."""
        return self.raw[0] & _PROPERTY_BIT == 0

    def is_private(self) -> bool:
        """True if the chunk is private (second letter lower case)."""
        return self.raw[1] & _PROPERTY_BIT != 0

    def reserved_set(self) -> bool:
        """True if the reserved bit is set, which makes the name invalid."""
        return self.raw[2] & _PROPERTY_BIT != 0

    def safe_to_copy(self) -> bool:
        """True if the chunk may be copied by editors that do not know it."""
        return self.raw[3] & _PROPERTY_BIT != 0

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.raw.decode("latin-1")

    def __repr__(self) -> str:
        name = self.raw.decode("latin-1").encode("unicode_escape").decode("ascii")
        return (
            f"ChunkType(type={name}, critical={self.is_critical()}, "
            f"private={self.is_private()}, reserved={self.reserved_set()}, "
            f"safecopy={self.safe_to_copy()})"
        )


# Critical chunks
IHDR = ChunkType(b"IHDR")
PLTE = ChunkType(b"PLTE")
IDAT = ChunkType(b"IDAT")
IEND = ChunkType(b"IEND")

# Ancillary chunks
tRNS = ChunkType(b"tRNS")
bKGD = ChunkType(b"bKGD")
tIME = ChunkType(b"tIME")
pHYs = ChunkType(b"pHYs")
cHRM = ChunkType(b"cHRM")
gAMA = ChunkType(b"gAMA")
sRGB = ChunkType(b"sRGB")
iCCP = ChunkType(b"iCCP")
tEXt = ChunkType(b"tEXt")
zTXt = ChunkType(b"zTXt")
iTXt = ChunkType(b"iTXt")

# Animation extension chunks
acTL = ChunkType(b"acTL")
fcTL = ChunkType(b"fcTL")
fdAT = ChunkType(b"fdAT")


def write_chunk(
    w: BinaryIO, chunk_type: Union[ChunkType, bytes, str], data: bytes
) -> None:
    """Write one chunk: big-endian length, type, data and CRC-32 of type and data."""
    if not isinstance(chunk_type, ChunkType):
        chunk_type = ChunkType(chunk_type)
    data = bytes(data)
    if len(data) > 0xFFFFFFFF:
        raise ValueError("chunk data is too long")
    crc = zlib.crc32(data, zlib.crc32(chunk_type.raw))
    w.write(struct.pack(">I", len(data)))
    w.write(chunk_type.raw)
    w.write(data)
    w.write(struct.pack(">I", crc & 0xFFFFFFFF))