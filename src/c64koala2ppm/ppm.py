"""Binary PPM (P6) writer."""

from __future__ import annotations

import io
from typing import BinaryIO

from PIL import Image

from .compositor import HEIGHT, WIDTH

MAXVAL = 255
PPM_HEADER = b"P6\n%d %d\n%d\n" % (WIDTH, HEIGHT, MAXVAL)
PPM_SIZE = len(PPM_HEADER) + WIDTH * HEIGHT * 3


def emit_ppm(raster: Image.Image, sink: BinaryIO) -> None:
    """Write ``raster`` to ``sink`` as a P6 pixmap.

    Pixels are written row by row as raw R, G, B bytes with no padding.
    Errors raised by ``sink`` are not caught.
    """

    if raster.mode != "RGB" or raster.size != (WIDTH, HEIGHT):
        raise ValueError(
            f"Expected a {WIDTH}x{HEIGHT} RGB raster, got {raster.size[0]}x{raster.size[1]} {raster.mode}"
        )
    sink.write(PPM_HEADER)
    sink.write(raster.tobytes())


def ppm_bytes(raster: Image.Image) -> bytes:
    buffer = io.BytesIO()
    emit_ppm(raster, buffer)
    return buffer.getvalue()
