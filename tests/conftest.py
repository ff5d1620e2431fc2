import io
import struct

import pytest
from PIL import Image

from pngme import Chunk, ChunkType, Png


@pytest.fixture
def image_bytes() -> bytes:
    # real 2x2 RGB image written by Pillow
    buf = io.BytesIO()
    Image.new("RGB", (2, 2), (255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def image_path(tmp_path, image_bytes):
    path = tmp_path / "image.png"
    path.write_bytes(image_bytes)
    return path


@pytest.fixture
def minimal_png() -> Png:
    # signature + a single IHDR chunk
    ihdr = struct.pack('>IIBBBBB', 1, 1, 8, 2, 0, 0, 0)
    return Png([Chunk(ChunkType.from_str("IHDR"), ihdr)])


@pytest.fixture
def minimal_png_path(tmp_path, minimal_png):
    path = tmp_path / "minimal.png"
    minimal_png.to_file(path)
    return path
