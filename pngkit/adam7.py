"""Adam7 interlacing: pass enumeration and expansion of pass scanlines."""

from __future__ import annotations

from typing import Iterator, Tuple

__all__ = [
    "adam7_passes",
    "subbyte_pixels",
    "expand_adam7_bits",
    "expand_pass",
]

# (column offset, column step, row offset, row step) for passes 1..7
_PASS_GEOMETRY = {
    1: (0, 8, 0, 8),
    2: (4, 8, 0, 8),
    3: (0, 4, 4, 8),
    4: (2, 4, 0, 4),
    5: (0, 2, 2, 4),
    6: (1, 2, 0, 2),
    7: (0, 1, 1, 2),
}


def _ceil_div_clamped(value: int, divisor: int) -> int:
    return max(0, -(-value // divisor))


def adam7_passes(width: int, height: int) -> Iterator[Tuple[int, int, int]]:
    """Yield (pass, line, line_width) for every non-empty line of every pass.

    The pattern over an 8x8 block is::

        16462646
        77777777
        56565656
        77777777
        36463646
        77777777
        56565656
        77777777
    """
    for pass_, (col_off, col_step, row_off, row_step) in _PASS_GEOMETRY.items():
        line_width = _ceil_div_clamped(width - col_off, col_step)
        lines = _ceil_div_clamped(height - row_off, row_step)
        if line_width == 0:
            continue
        for line in range(lines):
            yield pass_, line, line_width


def subbyte_pixels(scanline: bytes, bits_pp: int) -> Iterator[int]:
    """Yield the 1, 2 or 4 bit samples of a scanline, high-order bits first."""
    if bits_pp not in (1, 2, 4):
        raise ValueError(f"sub-byte pixel width must be 1, 2 or 4, got {bits_pp}")
    mask = (1 << bits_pp) - 1
    for bit_idx in range(0, len(scanline) * 8, bits_pp):
        shift = 8 - bit_idx % 8 - bits_pp
        yield (scanline[bit_idx // 8] >> shift) & mask


def expand_adam7_bits(pass_: int, width: int, line_no: int, bits_pp: int) -> range:
    """Bit positions in the full image of the pixels of one pass line."""
    try:
        samp_off, samp_mul, line_off, line_mul = _PASS_GEOMETRY[pass_]
    except KeyError:
        raise ValueError(f"Adam7 pass out of range: {pass_}") from None

    prog_line = line_mul * line_no + line_off
    # rows are padded to whole bytes
    line_width = (width * bits_pp + 7) & ~7
    line_start = prog_line * line_width
    start = line_start + samp_off * bits_pp
    stop = line_start + width * bits_pp
    return range(start, stop, bits_pp * samp_mul)


def expand_pass(
    img: bytearray,
    width: int,
    scanline: bytes,
    pass_: int,
    line_no: int,
    bits_pp: int,
) -> None:
    """Copy the pixels of one pass scanline into their places in ``img``.

    Passes outside 1..7 are ignored.
    """
    if pass_ not in _PASS_GEOMETRY:
        return

    bit_indices = expand_adam7_bits(pass_, width, line_no, bits_pp)

    if bits_pp < 8:
        for pos, px in zip(bit_indices, subbyte_pixels(scanline, bits_pp)):
            shift = 8 - pos % 8 - bits_pp
            img[pos // 8] |= px << shift
    else:
        bytes_pp = bits_pp // 8
        pixels = (
            scanline[offset:offset + bytes_pp]
            for offset in range(0, len(scanline), bytes_pp)
        )
        for bitpos, px in zip(bit_indices, pixels):
            start = bitpos // 8
            img[start:start + len(px)] = px