"""End-to-end Koala to PPM conversion."""

from __future__ import annotations

import math
from pathlib import Path
from typing import BinaryIO

from PIL import Image

from .compositor import composite
from .decoder import KoalaImage, decode
from .palette import DEFAULT_SATURATION, build_palette
from .ppm import emit_ppm, ppm_bytes


class KoalaError(Exception):
    """Raised when a Koala file cannot be read or converted."""


def check_saturation(saturation: float) -> float:
    if not math.isfinite(saturation):
        raise KoalaError(f"saturation must be a finite number, got {saturation}")
    if saturation < 0:
        raise KoalaError("saturation must be >= 0")
    return saturation


def render_koala(image: KoalaImage, saturation: float = DEFAULT_SATURATION) -> Image.Image:
    palette = build_palette(check_saturation(saturation))
    return composite(image, palette)


def convert_koala(
    stream: BinaryIO, sink: BinaryIO, saturation: float = DEFAULT_SATURATION
) -> KoalaImage:
    """Decode a Koala file from ``stream`` and write it to ``sink`` as PPM.

    The saturation is checked before anything is read. Short input only
    produces a warning (see :func:`c64koala2ppm.decoder.decode`). Returns the
    decoded image so callers can inspect its header fields.
    """

    palette = build_palette(check_saturation(saturation))
    image = decode(stream)
    emit_ppm(composite(image, palette), sink)
    return image


def convert_koala_file(path: str | Path, saturation: float = DEFAULT_SATURATION) -> bytes:
    check_saturation(saturation)
    path = Path(path)
    try:
        with path.open("rb") as stream:
            image = decode(stream)
    except FileNotFoundError as exc:
        raise KoalaError(f"Input file not found: {path}") from exc
    except OSError as exc:
        raise KoalaError(f'could not open "{path}" for reading') from exc
    return ppm_bytes(render_koala(image, saturation))
