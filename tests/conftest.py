import pytest

from koala_samples import build_koala


@pytest.fixture
def make_koala():
    return build_koala


@pytest.fixture
def koala_file(tmp_path):
    path = tmp_path / "picture.koa"
    path.write_bytes(build_koala(bitmap=0x1B, video=0x25, color_ram=0x06, background=0x00))
    return path
