"""Commodore 64 KoalaPaint to PPM converter.

This package decodes KoalaPaint multicolor bitmaps and renders them as
160x200 binary PPM images. It can be invoked through the CLI (``python -m
c64koala2ppm``) or imported to convert a single file into bytes.
"""

from .compositor import HEIGHT, WIDTH, card_slots, composite, unpack_pixel_codes
from .converter import (
    KoalaError,
    check_saturation,
    convert_koala,
    convert_koala_file,
    render_koala,
)
from .decoder import (
    KOALA_FILE_SIZE,
    KoalaImage,
    TruncatedInputWarning,
    decode,
    decode_bytes,
)
from .palette import (
    DEFAULT_SATURATION,
    HARDWARE_COLORS,
    HardwareColor,
    YUVColor,
    build_palette,
    format_palette_text,
    hardware_to_rgb,
    hardware_to_yuv,
    yuv_to_rgb,
)
from .ppm import PPM_HEADER, PPM_SIZE, emit_ppm, ppm_bytes

__all__ = [
    "DEFAULT_SATURATION",
    "HARDWARE_COLORS",
    "HEIGHT",
    "KOALA_FILE_SIZE",
    "HardwareColor",
    "KoalaError",
    "KoalaImage",
    "PPM_HEADER",
    "PPM_SIZE",
    "TruncatedInputWarning",
    "WIDTH",
    "YUVColor",
    "build_palette",
    "card_slots",
    "check_saturation",
    "composite",
    "convert_koala",
    "convert_koala_file",
    "decode",
    "decode_bytes",
    "emit_ppm",
    "format_palette_text",
    "hardware_to_rgb",
    "hardware_to_yuv",
    "ppm_bytes",
    "render_koala",
    "unpack_pixel_codes",
    "yuv_to_rgb",
]
