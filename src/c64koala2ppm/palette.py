"""C64 hardware palette converted from polar YUV to RGB."""

# Reference: VIC-II colors (http://www.pepto.de/projects/colorvic/)
# Each color is defined by a chroma angle in sixteenths of a full turn
# (0-15), a luma level (0-32) and a saturation flag (0 = grey, 1 = colored).
# Pepto gives both chroma scales as 34.0081334493 / 255; the value below is
# slightly lower and the YUV->RGB matrix is the one from Wikipedia:
#   R = Y               + 1.13983 * V
#   G = Y - 0.39465 * U - 0.58060 * V
#   B = Y + 2.03211 * U

from __future__ import annotations

import math
from typing import List, NamedTuple, Sequence, Tuple

Color = Tuple[int, int, int]

USCALE = 0.1331
VSCALE = 0.1331
DEFAULT_SATURATION = 1.0


class HardwareColor(NamedTuple):
    angle: int
    luma: int
    saturation: int
    name: str = ""


class YUVColor(NamedTuple):
    """Luma (gamma-compressed, 0..1) and two color-difference components."""

    y: float
    u: float
    v: float


# Index = C64 color code.
HARDWARE_COLORS: Tuple[HardwareColor, ...] = (
    HardwareColor(0, 0, 0, "black"),
    HardwareColor(0, 32, 0, "white"),
    HardwareColor(5, 10, 1, "red"),
    HardwareColor(13, 20, 1, "cyan"),
    HardwareColor(2, 12, 1, "purple"),
    HardwareColor(10, 16, 1, "green"),
    HardwareColor(0, 8, 1, "blue"),
    HardwareColor(8, 24, 1, "yellow"),
    HardwareColor(6, 12, 1, "orange"),
    HardwareColor(7, 8, 1, "brown"),
    HardwareColor(5, 16, 1, "light red"),
    HardwareColor(0, 10, 0, "dark grey"),
    HardwareColor(0, 15, 0, "grey"),
    HardwareColor(10, 24, 1, "light green"),
    HardwareColor(0, 15, 1, "light blue"),
    HardwareColor(0, 20, 0, "light grey"),
)


def hardware_to_yuv(
    color: HardwareColor,
    saturation: float = DEFAULT_SATURATION,
    uscale: float = USCALE,
    vscale: float = VSCALE,
) -> YUVColor:
    angle = color.angle * math.pi / 8
    chroma = color.saturation * saturation
    return YUVColor(
        y=color.luma / 32.0,
        u=chroma * uscale * math.cos(angle),
        v=chroma * vscale * math.sin(angle),
    )


def _to_byte(value: float) -> int:
    value = max(0.0, min(1.0, value))
    return math.floor(255 * value + 0.5)


def yuv_to_rgb(yuv: YUVColor) -> Color:
    """Convert to 8-bit RGB, clamping each channel to the 0..1 range first."""

    y, u, v = yuv
    r = y + 1.13983 * v
    g = y - 0.39465 * u - 0.58060 * v
    b = y + 2.03211 * u
    return (_to_byte(r), _to_byte(g), _to_byte(b))


def hardware_to_rgb(color: HardwareColor, saturation: float = DEFAULT_SATURATION) -> Color:
    return yuv_to_rgb(hardware_to_yuv(color, saturation))


def build_palette(saturation: float = DEFAULT_SATURATION) -> List[Color]:
    """Return the 16 C64 colors as RGB triples.

    ``saturation`` scales the chroma of every colored entry; 0 gives pure
    greys and values above 1 exaggerate the colors. Negative values are not
    checked here (see :func:`c64koala2ppm.converter.check_saturation`).
    """

    return [hardware_to_rgb(color, saturation) for color in HARDWARE_COLORS]


def format_palette_text(palette: Sequence[Color]) -> str:
    entries = [
        f"{idx}: {HARDWARE_COLORS[idx].name} ({r},{g},{b})"
        for idx, (r, g, b) in enumerate(palette)
    ]
    return ", ".join(entries)
