"""KoalaPaint file decoder."""

# Reference: KoalaPaint (C64) file layout
# Offset | Size | Contents
# -------|------|-----------------------------------------------------------
# 0      | 2    | Load address (little endian, ignored when rendering)
# 2      | 8000 | Bitmap, 1000 cards x 8 bytes, cards in row-major order
# 8002   | 1000 | Video matrix, 1 byte per card (two colors, one per nibble)
# 9002   | 1000 | Color RAM, 1 byte per card (one color, low nibble)
# 10002  | 1    | Background color (low nibble)
#
# A card is a 4x8 pixel block; the screen is 40 cards wide and 25 cards tall.
# Each bitmap byte holds one scanline of a card as four 2-bit pixel codes.

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import BinaryIO, Optional

CARD_COLUMNS = 40
CARD_ROWS = 25
CARD_COUNT = CARD_COLUMNS * CARD_ROWS
CARD_HEIGHT = 8

LOAD_ADDRESS_SIZE = 2
BITMAP_SIZE = CARD_COUNT * CARD_HEIGHT
VIDEO_SIZE = CARD_COUNT
COLOR_RAM_SIZE = CARD_COUNT
BACKGROUND_SIZE = 1

BITMAP_OFFSET = LOAD_ADDRESS_SIZE
VIDEO_OFFSET = BITMAP_OFFSET + BITMAP_SIZE
COLOR_RAM_OFFSET = VIDEO_OFFSET + VIDEO_SIZE
BACKGROUND_OFFSET = COLOR_RAM_OFFSET + COLOR_RAM_SIZE
KOALA_FILE_SIZE = BACKGROUND_OFFSET + BACKGROUND_SIZE

# Fill values for short files. They render as a black/red/green/blue stripe
# pattern so missing data is easy to spot.
BITMAP_FILL = 0x1B
VIDEO_FILL = 0x25
COLOR_RAM_FILL = 0x06
BACKGROUND_FILL = 0x00


class TruncatedInputWarning(RuntimeWarning):
    """Emitted when a Koala file ends before all planes are filled."""


@dataclass(frozen=True)
class KoalaImage:
    bitmap: bytes
    video: bytes
    color_ram: bytes
    background: int
    load_address: Optional[int] = None
    truncated: bool = False

    def __post_init__(self) -> None:
        if len(self.bitmap) != BITMAP_SIZE:
            raise ValueError(f"Bitmap must be {BITMAP_SIZE} bytes, got {len(self.bitmap)}")
        if len(self.video) != VIDEO_SIZE:
            raise ValueError(f"Video matrix must be {VIDEO_SIZE} bytes, got {len(self.video)}")
        if len(self.color_ram) != COLOR_RAM_SIZE:
            raise ValueError(f"Color RAM must be {COLOR_RAM_SIZE} bytes, got {len(self.color_ram)}")
        if not 0 <= self.background <= 0xFF:
            raise ValueError("Background color must be a byte value")

    @staticmethod
    def _card_index(row: int, col: int) -> int:
        if not (0 <= row < CARD_ROWS and 0 <= col < CARD_COLUMNS):
            raise IndexError(f"Card ({row}, {col}) is outside the {CARD_COLUMNS}x{CARD_ROWS} grid")
        return row * CARD_COLUMNS + col

    def card_bitmap(self, row: int, col: int) -> bytes:
        """Return the 8 scanline bytes of a card, top to bottom."""

        start = self._card_index(row, col) * CARD_HEIGHT
        return self.bitmap[start : start + CARD_HEIGHT]

    def video_byte(self, row: int, col: int) -> int:
        return self.video[self._card_index(row, col)]

    def color_byte(self, row: int, col: int) -> int:
        return self.color_ram[self._card_index(row, col)]


def _read_up_to(stream: BinaryIO, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = stream.read(size - len(chunks))
        if not chunk:
            break
        chunks.extend(chunk)
    return bytes(chunks)


def _plane(data: bytes, offset: int, size: int, fill: int) -> bytes:
    part = data[offset : offset + size]
    return part + bytes([fill]) * (size - len(part))


def decode_bytes(data: bytes) -> KoalaImage:
    """Decode an in-memory Koala file.

    Data beyond the background byte is ignored. If ``data`` is shorter than a
    full file, whatever was present is kept, the rest of each plane gets its
    fill value and a :class:`TruncatedInputWarning` is issued; the returned
    image is always complete.
    """

    data = bytes(data[:KOALA_FILE_SIZE])
    truncated = len(data) < KOALA_FILE_SIZE
    if truncated:
        warnings.warn(
            f"koala file is too short ({len(data)} of {KOALA_FILE_SIZE} bytes). "
            "Output may be corrupt.",
            TruncatedInputWarning,
            stacklevel=2,
        )

    load_address = None
    if len(data) >= LOAD_ADDRESS_SIZE:
        load_address = int.from_bytes(data[:LOAD_ADDRESS_SIZE], "little")

    if len(data) > BACKGROUND_OFFSET:
        background = data[BACKGROUND_OFFSET]
    else:
        background = BACKGROUND_FILL

    return KoalaImage(
        bitmap=_plane(data, BITMAP_OFFSET, BITMAP_SIZE, BITMAP_FILL),
        video=_plane(data, VIDEO_OFFSET, VIDEO_SIZE, VIDEO_FILL),
        color_ram=_plane(data, COLOR_RAM_OFFSET, COLOR_RAM_SIZE, COLOR_RAM_FILL),
        background=background,
        load_address=load_address,
        truncated=truncated,
    )


def decode(stream: BinaryIO) -> KoalaImage:
    """Read a whole Koala file from ``stream`` and decode it."""

    return decode_bytes(_read_up_to(stream, KOALA_FILE_SIZE))
