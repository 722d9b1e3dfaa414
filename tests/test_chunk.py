import io
import struct
import zlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pngkit import chunk
from pngkit.chunk import ChunkType, write_chunk


def test_critical_chunks_are_critical_and_public():
    for ct in (chunk.IHDR, chunk.PLTE, chunk.IDAT, chunk.IEND):
        assert ct.is_critical()
        assert not ct.is_private()
        assert not ct.reserved_set()


def test_ancillary_chunks_are_not_critical():
    for ct in (chunk.tRNS, chunk.bKGD, chunk.tEXt, chunk.zTXt, chunk.iTXt, chunk.acTL):
        assert not ct.is_critical()


def test_safe_to_copy_follows_last_letter():
    assert chunk.tEXt.safe_to_copy()
    assert not chunk.IHDR.safe_to_copy()
    assert not chunk.gAMA.safe_to_copy()


def test_private_and_reserved_bits():
    ct = ChunkType(b"abcd")
    assert ct.is_private()
    assert ct.reserved_set()
    assert ct.safe_to_copy()
    assert not ct.is_critical()


def test_chunk_type_length_is_checked():
    with pytest.raises(ValueError):
        ChunkType(b"IHD")
    with pytest.raises(ValueError):
        ChunkType(b"IHDRX")


def test_chunk_type_accepts_str_and_compares_equal():
    assert ChunkType("IDAT") == chunk.IDAT
    assert bytes(chunk.IDAT) == b"IDAT"
    assert str(chunk.IDAT) == "IDAT"


def test_repr_mentions_properties():
    text = repr(ChunkType(b"IHDR"))
    assert "IHDR" in text
    assert "critical=True" in text


def test_iend_wire_bytes():
    buf = io.BytesIO()
    write_chunk(buf, chunk.IEND, b"")
    assert buf.getvalue() == b"\x00\x00\x00\x00IEND\xaeB`\x82"


def test_write_chunk_rejects_bad_type():
    with pytest.raises(ValueError):
        write_chunk(io.BytesIO(), b"ABC", b"")


@given(st.binary(max_size=200))
def test_write_chunk_layout(data):
    buf = io.BytesIO()
    write_chunk(buf, chunk.tEXt, data)
    out = buf.getvalue()
    assert len(out) == 12 + len(data)
    (length,) = struct.unpack(">I", out[:4])
    assert length == len(data)
    assert out[4:8] == b"tEXt"
    assert out[8:8 + length] == data
    (crc,) = struct.unpack(">I", out[8 + length:])
    assert crc == zlib.crc32(out[4:8 + length])