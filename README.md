# pngkit

Pure-Python building blocks for working with PNG and APNG images. The
package has no dependencies outside the standard library.

## Modules

- `pngkit.chunk`: `ChunkType` wraps a four-byte chunk code and reports
  whether the chunk is critical (`is_critical`), private (`is_private`),
  has the reserved bit set (`reserved_set`) or is safe to copy
  (`safe_to_copy`). Constants such as `IHDR`, `PLTE`, `IDAT`, `IEND`,
  `tRNS`, `gAMA`, `cHRM`, `sRGB`, `acTL`, `fcTL` and `fdAT` are provided.
  `write_chunk(w, chunk_type, data)` writes a complete chunk to a binary
  stream: the big-endian length, the type, the data and the CRC-32 of type
  and data. `chunk_type` may be a `ChunkType`, four bytes or a four-letter
  string.
- `pngkit.adam7`: `adam7_passes(width, height)` yields
  `(pass, line, line_width)` for every non-empty scanline of every
  interlacing pass. `expand_pass(img, width, scanline, pass_, line_no, bits_pp)`
  writes the pixels of one pass scanline into a `bytearray` holding the
  deinterlaced image. Sub-byte pixels are OR-ed into place, so the buffer
  should start out zeroed. `subbyte_pixels` and `expand_adam7_bits` are the
  helpers that `expand_pass` uses.
- `pngkit.types`: the enumerations `ColorType`, `BitDepth`,
  `BytesPerPixel`, `Unit`, `DisposeOp`, `BlendOp`, `Compression`, the
  flag set `Transformations` (`IDENTITY`, `STRIP_16`, `EXPAND`, `ALPHA`,
  plus `normalize_to_color8()`), the `PixelDimensions` dataclass, and the
  exceptions `ParameterError`, `ImageBufferSizeError` and
  `PolledAfterEndOfImageError`. `ColorType` can tell you its sample count,
  the length of a filtered row, and whether a given bit depth is a
  combination that the PNG standard forbids.
- `pngkit.control`: `FrameControl` (fcTL), `AnimationControl` (acTL),
  `ScaledFloat` (values in units of 1/100000, as gAMA and cHRM store
  them), `SourceChromaticities` (cHRM) and `SrgbRenderingIntent` (sRGB).
  Each one writes its own chunk through `encode(w)`, or `encode_gama(w)`
  in the case of `ScaledFloat`. A field that does not fit its chunk field
  raises `ValueError`.
- `pngkit.info`: `Info` is a dataclass holding the header fields of an
  image together with its ancillary data. It works out bits and bytes per
  pixel, row lengths and whole-image sizes. Every row length counts the
  filter byte. `create_info_from_plte_trns_bitdepth` builds an indexed
  `Info` from a palette, optional transparency and a bit depth.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Inspect a chunk type:

```python
from pngkit.chunk import ChunkType

ct = ChunkType(b"tEXt")
ct.is_critical()   # False
ct.safe_to_copy()  # True
```

Walk the Adam7 passes of a 4×4 image:

```python
from pngkit.adam7 import adam7_passes

list(adam7_passes(4, 4))
# [(1, 0, 1), (4, 0, 1), (5, 0, 2), (6, 0, 2), (6, 1, 2), (7, 0, 4), (7, 1, 4)]
```

Work out buffer sizes from header info:

```python
from pngkit.info import Info
from pngkit.types import ColorType

info = Info.with_size(10, 3)
info.color_type = ColorType.RGBA
info.raw_row_length()  # 41: one filter byte plus 40 bytes of pixels
info.raw_bytes()       # 123
```

Write an APNG frame control chunk:

```python
import io
from pngkit.control import FrameControl

buf = io.BytesIO()
FrameControl(width=2, height=1).encode(buf)
```

## What the package does not do

pngkit does not read or write whole PNG files. It has no decoder and no
encoder, and it does not compress or decompress image data. It also does
not apply or undo scanline filters, and it does not parse text chunks.
`Compression` and `Transformations` only name settings. Nothing in the
package acts on them. The text lists on `Info` are plain lists that the
package does not interpret. The package provides no command-line program.