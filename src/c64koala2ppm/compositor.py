"""Render decoded Koala planes into an RGB raster."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from PIL import Image

from .decoder import CARD_COLUMNS, CARD_HEIGHT, CARD_ROWS, KoalaImage
from .palette import Color

CARD_WIDTH = 4
WIDTH = CARD_COLUMNS * CARD_WIDTH
HEIGHT = CARD_ROWS * CARD_HEIGHT


def unpack_pixel_codes(value: int) -> Tuple[int, int, int, int]:
    """Split a bitmap byte into four 2-bit pixel codes, leftmost pixel first.

    The leftmost pixel lives in the two most significant bits:
    ``0b00_01_10_11`` unpacks to ``(0, 1, 2, 3)``.
    """

    return (
        (value >> 6) & 0b11,
        (value >> 4) & 0b11,
        (value >> 2) & 0b11,
        value & 0b11,
    )


def card_slots(
    image: KoalaImage, palette: Sequence[Color], row: int, col: int
) -> Tuple[Color, Color, Color, Color]:
    """Return the colors selected by pixel codes 00, 01, 10 and 11 in a card.

    00: global background color
    01: upper nibble of the video matrix byte
    10: lower nibble of the video matrix byte
    11: lower nibble of the color RAM byte
    """

    video = image.video_byte(row, col)
    return (
        palette[image.background & 0x0F],
        palette[(video >> 4) & 0x0F],
        palette[video & 0x0F],
        palette[image.color_byte(row, col) & 0x0F],
    )


def composite(image: KoalaImage, palette: Sequence[Color]) -> Image.Image:
    """Build the 160x200 RGB image for ``image`` using ``palette``."""

    if len(palette) != 16:
        raise ValueError(f"Palette must have 16 entries, got {len(palette)}")

    pixels: List[Color] = [palette[0]] * (WIDTH * HEIGHT)
    for card_row in range(CARD_ROWS):
        for card_col in range(CARD_COLUMNS):
            slots = card_slots(image, palette, card_row, card_col)
            for y, value in enumerate(image.card_bitmap(card_row, card_col)):
                base = (card_row * CARD_HEIGHT + y) * WIDTH + card_col * CARD_WIDTH
                for k, code in enumerate(unpack_pixel_codes(value)):
                    pixels[base + k] = slots[code]

    raster = Image.new("RGB", (WIDTH, HEIGHT))
    raster.putdata(pixels)
    return raster
