import io
import math
import warnings

import pytest
from PIL import Image

from c64koala2ppm import (
    KoalaError,
    PPM_HEADER,
    PPM_SIZE,
    build_palette,
    check_saturation,
    composite,
    convert_koala,
    convert_koala_file,
    decode_bytes,
    emit_ppm,
    ppm_bytes,
)


class FailingSink:
    def write(self, data):
        raise OSError("disk full")


def _raster(data=b""):
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        return composite(decode_bytes(data), build_palette())


def test_header_and_size():
    assert PPM_HEADER == b"P6\n160 200\n255\n"
    assert PPM_SIZE == len(b"P6\n160 200\n255\n") + 160 * 200 * 3


def test_emit_writes_rows_of_rgb_triples():
    output = ppm_bytes(_raster())
    assert len(output) == PPM_SIZE
    assert output.startswith(PPM_HEADER)
    pixels = output[len(PPM_HEADER) :]
    # first card scanline: black, red, green, blue
    assert pixels[:12] == bytes([0, 0, 0, 115, 67, 53, 100, 151, 79, 64, 50, 133])
    # second row starts over at the left edge
    assert pixels[160 * 3 : 160 * 3 + 3] == bytes([0, 0, 0])


def test_emit_rejects_wrong_raster():
    with pytest.raises(ValueError):
        emit_ppm(Image.new("RGB", (320, 200)), io.BytesIO())
    with pytest.raises(ValueError):
        emit_ppm(Image.new("L", (160, 200)), io.BytesIO())


def test_sink_errors_propagate():
    with pytest.raises(OSError, match="disk full"):
        emit_ppm(_raster(), FailingSink())


def test_convert_koala_stream(make_koala):
    sink = io.BytesIO()
    image = convert_koala(io.BytesIO(make_koala(background=0x01)), sink)
    assert image.background == 0x01
    output = sink.getvalue()
    assert len(output) == PPM_SIZE
    assert output[len(PPM_HEADER) :] == b"\xff" * (160 * 200 * 3)


def test_convert_koala_short_input_warns():
    sink = io.BytesIO()
    with pytest.warns(RuntimeWarning, match="too short"):
        image = convert_koala(io.BytesIO(b"\x00\x60"), sink)
    assert image.truncated
    assert len(sink.getvalue()) == PPM_SIZE


def test_convert_koala_rejects_negative_saturation(make_koala):
    stream = io.BytesIO(make_koala())
    with pytest.raises(KoalaError, match="saturation"):
        convert_koala(stream, io.BytesIO(), saturation=-0.5)
    assert stream.tell() == 0


def test_convert_koala_file_is_deterministic(koala_file):
    first = convert_koala_file(koala_file, saturation=0.8)
    second = convert_koala_file(koala_file, saturation=0.8)
    assert first == second
    assert len(first) == PPM_SIZE


def test_convert_koala_file_saturation_zero_is_grey(koala_file):
    output = convert_koala_file(koala_file, saturation=0.0)
    pixels = output[len(PPM_HEADER) :]
    for i in range(0, 12, 3):
        assert pixels[i] == pixels[i + 1] == pixels[i + 2]


def test_convert_koala_file_missing(tmp_path):
    with pytest.raises(KoalaError, match="not found"):
        convert_koala_file(tmp_path / "missing.koa")


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_check_saturation_rejects_non_finite(value):
    with pytest.raises(KoalaError, match="finite"):
        check_saturation(value)
