"""Command line interface for c64koala2ppm."""

from __future__ import annotations

import argparse
import sys
import warnings
from typing import List, Optional

from PIL import Image

from .compositor import composite
from .converter import KoalaError, check_saturation
from .decoder import KoalaImage, decode
from .palette import DEFAULT_SATURATION, build_palette, format_palette_text
from .ppm import emit_ppm

PROG = "c64koala2ppm"

LICENSE_TEXT = """\
c64koala2ppm, convert a Commodore 64 KoalaPaint image to Portable Pixmap
Copyright 2009 Christopher Williams

This program is free software; you can redistribute it and/or
modify it under the terms of the GNU General Public License
as published by the Free Software Foundation; either version 2
of the License, or (at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description=(
            "Convert a Commodore 64 KoalaPaint image to a 160x200 binary PPM (P6).\n"
            "The PPM is written to standard output unless --output is given."
        ),
        epilog=f"Palette at saturation {DEFAULT_SATURATION}: "
        + format_palette_text(build_palette()),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "koala_file",
        nargs="*",
        help="KoalaPaint file to read (standard input if omitted or '-')",
    )
    parser.add_argument(
        "-L",
        "--license",
        action="store_true",
        help="Show license information and exit",
    )
    parser.add_argument(
        "-s",
        "--saturation",
        type=float,
        default=DEFAULT_SATURATION,
        help="Set the output saturation. Value must be >= 0",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the PPM to this file instead of standard output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print the load address and background color to standard error",
    )
    return parser


def read_koala(name: Optional[str]) -> KoalaImage:
    if name is None or name == "-":
        return decode(sys.stdin.buffer)
    try:
        stream = open(name, "rb")
    except OSError as exc:
        raise KoalaError(f'could not open "{name}" for reading') from exc
    with stream:
        return decode(stream)


def write_ppm(raster: Image.Image, name: Optional[str]) -> None:
    if name is None or name == "-":
        emit_ppm(raster, sys.stdout.buffer)
        sys.stdout.buffer.flush()
        return
    try:
        sink = open(name, "wb")
    except OSError as exc:
        raise KoalaError(f'could not open "{name}" for writing') from exc
    with sink:
        emit_ppm(raster, sink)


def describe(image: KoalaImage) -> List[str]:
    if image.load_address is None:
        load_address = "none"
    else:
        load_address = f"0x{image.load_address:04x}"
    return [
        f"load address: {load_address}",
        f"background color: 0x{image.background:02x}",
    ]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.license:
        print(LICENSE_TEXT, file=sys.stderr)
        return 0

    if len(args.koala_file) > 1:
        print(f"{parser.prog}: too many filenames", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        palette = build_palette(check_saturation(args.saturation))
        name = args.koala_file[0] if args.koala_file else None

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            image = read_koala(name)
        for warning in caught:
            print(f"{parser.prog}: {warning.message}", file=sys.stderr)

        if args.verbose:
            for line in describe(image):
                print(line, file=sys.stderr)

        write_ppm(composite(image, palette), args.output)
        return 0
    except (KoalaError, OSError) as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
