import io
import struct
import zlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pngkit.control import (
    AnimationControl,
    FrameControl,
    ScaledFloat,
    SourceChromaticities,
    SrgbRenderingIntent,
)
from pngkit.types import BlendOp, DisposeOp


def _read_chunk(raw):
    (length,) = struct.unpack(">I", raw[:4])
    chunk_type = raw[4:8]
    data = raw[8:8 + length]
    (crc,) = struct.unpack(">I", raw[8 + length:12 + length])
    assert len(raw) == 12 + length
    assert crc == zlib.crc32(chunk_type + data)
    return chunk_type, data


def _encode(obj, method="encode"):
    buf = io.BytesIO()
    getattr(obj, method)(buf)
    return _read_chunk(buf.getvalue())


def test_frame_control_defaults():
    fc = FrameControl()
    assert fc.delay_num == 1
    assert fc.delay_den == 30
    assert fc.dispose_op is DisposeOp.NONE
    assert fc.blend_op is BlendOp.SOURCE


def test_frame_control_sequence_numbers():
    fc = FrameControl()
    fc.set_seq_num(5)
    fc.inc_seq_num(3)
    assert fc.sequence_number == 5 + 3
    fc.set_seq_num(0xFFFFFFFF)
    with pytest.raises(OverflowError):
        fc.inc_seq_num(1)


def test_frame_control_encode():
    fc = FrameControl(
        sequence_number=7,
        width=20,
        height=10,
        x_offset=3,
        y_offset=4,
        delay_num=2,
        delay_den=100,
        dispose_op=DisposeOp.PREVIOUS,
        blend_op=BlendOp.OVER,
    )
    chunk_type, data = _encode(fc)
    assert chunk_type == b"fcTL"
    assert struct.unpack(">IIIIIHHBB", data) == (
        7, 20, 10, 3, 4, 2, 100, DisposeOp.PREVIOUS, BlendOp.OVER
    )


def test_frame_control_rejects_out_of_range():
    with pytest.raises(ValueError):
        FrameControl(delay_num=70000).encode(io.BytesIO())


def test_animation_control_encode():
    chunk_type, data = _encode(AnimationControl(num_frames=12, num_plays=0))
    assert chunk_type == b"acTL"
    assert struct.unpack(">II", data) == (12, 0)


def test_scaled_float_half():
    assert ScaledFloat.from_value(0.5).scaled == 50000


def test_scaled_float_clamps_negative():
    assert ScaledFloat.from_value(-1.0) == ScaledFloat.from_value(0.0)
    assert ScaledFloat.from_value(-1.0).into_value() == 0.0


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_scaled_roundtrip(val):
    assert ScaledFloat.from_scaled(val).scaled == val


@given(st.floats(min_value=0.0, max_value=1000.0))
def test_from_value_close(value):
    back = ScaledFloat.from_value(value).into_value()
    assert back <= value * (1 + 1e-6) + 1e-9
    assert value - back <= 1e-5 + value * 1e-6


def test_scaled_float_rejects_bad_scaled():
    with pytest.raises(ValueError):
        ScaledFloat.from_scaled(-1)
    with pytest.raises(ValueError):
        ScaledFloat.from_scaled(0x1_0000_0000)


def test_in_range():
    assert ScaledFloat.in_range(1.0)
    assert ScaledFloat.in_range(0.0)
    assert not ScaledFloat.in_range(-0.5)
    assert not ScaledFloat.in_range(1e10)
    assert not ScaledFloat.in_range(float("nan"))


def test_exact():
    assert ScaledFloat.exact(0.5)
    assert ScaledFloat.exact(0.1)
    assert not ScaledFloat.exact(0.123456)


def test_encode_gama():
    sf = ScaledFloat.from_scaled(45455)
    chunk_type, data = _encode(sf, "encode_gama")
    assert chunk_type == b"gAMA"
    assert struct.unpack(">I", data) == (45455,)


def test_chromaticities_bytes_and_chunk():
    chrm = SourceChromaticities.from_values(
        (0.3127, 0.329), (0.64, 0.33), (0.3, 0.6), (0.15, 0.06)
    )
    payload = chrm.to_be_bytes()
    expected = [
        c.scaled
        for point in (chrm.white, chrm.red, chrm.green, chrm.blue)
        for c in point
    ]
    assert list(struct.unpack(">8I", payload)) == expected
    assert chrm.red[0] == ScaledFloat.from_value(0.64)
    chunk_type, data = _encode(chrm)
    assert chunk_type == b"cHRM"
    assert data == payload


@pytest.mark.parametrize("intent", list(SrgbRenderingIntent))
def test_srgb_encode(intent):
    chunk_type, data = _encode(intent)
    assert chunk_type == b"sRGB"
    assert data == bytes([intent.value])
    assert SrgbRenderingIntent(data[0]) is intent