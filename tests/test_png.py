import logging

import pytest

from pngme import (
    Chunk,
    ChunkCrcMismatchError,
    ChunkLengthMismatchError,
    ChunkNotFoundError,
    ChunkTooShortError,
    ChunkType,
    Png,
    PngIOError,
    SignatureMismatchError,
)

from .helpers import raw_chunk


def chunk_from_strings(chunk_type, data):
    return Chunk(ChunkType.from_str(chunk_type), data.encode())


@pytest.fixture
def testing_png():
    return Png([
        chunk_from_strings("FrSt", "I am the first chunk"),
        chunk_from_strings("miDl", "I am another chunk"),
        chunk_from_strings("LASt", "I am the last chunk"),
    ])


def test_from_bytes_round_trip(image_bytes):
    png = Png.from_bytes(image_bytes)
    assert png.as_bytes() == image_bytes
    assert png.header == Png.STANDARD_HEADER
    assert [str(c.chunk_type) for c in png][0] == "IHDR"
    assert str(png.chunks[-1].chunk_type) == "IEND"


def test_from_chunks(testing_png):
    png = Png.from_bytes(testing_png.as_bytes())
    assert len(png) == 3
    assert png == testing_png


def test_empty_container():
    png = Png.from_bytes(Png.STANDARD_HEADER)
    assert len(png) == 0
    assert png.as_bytes() == Png.STANDARD_HEADER


@pytest.mark.parametrize("data", [b"", b"\x89PNG", b"not a png file at all", b"\x88PNG\r\n\x1a\n"])
def test_invalid_signature(data):
    with pytest.raises(SignatureMismatchError):
        Png.from_bytes(data)


def test_invalid_chunk_crc(testing_png):
    data = testing_png.as_bytes() + raw_chunk(b"ruSt", b"oops", crc=1)
    with pytest.raises(ChunkCrcMismatchError):
        Png.from_bytes(data)


def test_truncated_chunk(testing_png):
    data = testing_png.as_bytes()[:-2]
    with pytest.raises(ChunkLengthMismatchError):
        Png.from_bytes(data)


def test_trailing_garbage(testing_png):
    with pytest.raises(ChunkTooShortError):
        Png.from_bytes(testing_png.as_bytes() + b"\x00\x01")


def test_chunk_by_type(testing_png):
    chunk = testing_png.chunk_by_type("miDl")
    assert chunk.data_as_str() == "I am another chunk"
    assert testing_png.chunk_by_type(ChunkType.from_str("FrSt")).data_as_str() == "I am the first chunk"


def test_chunk_by_type_absent(testing_png):
    assert testing_png.chunk_by_type("ruSt") is None


def test_chunk_by_type_first_match(testing_png):
    testing_png.append_chunk(chunk_from_strings("miDl", "second"))
    assert testing_png.chunk_by_type("miDl").data_as_str() == "I am another chunk"


def test_append_chunk(testing_png):
    testing_png.append_chunk(chunk_from_strings("TeSt", "Message"))
    assert len(testing_png) == 4
    assert str(testing_png.chunks[-1].chunk_type) == "TeSt"
    assert testing_png.chunk_by_type("TeSt").data_as_str() == "Message"


def test_remove_chunk(testing_png):
    removed = testing_png.remove_chunk("miDl")
    assert removed.data_as_str() == "I am another chunk"
    assert [str(c.chunk_type) for c in testing_png] == ["FrSt", "LASt"]


def test_remove_missing_chunk(testing_png):
    with pytest.raises(ChunkNotFoundError) as exc:
        testing_png.remove_chunk("ruSt")
    assert exc.value.chunk_type == "ruSt"
    assert len(testing_png) == 3


def test_chunks_is_a_copy(testing_png):
    chunks = testing_png.chunks
    testing_png.append_chunk(chunk_from_strings("TeSt", "x"))
    assert len(chunks) == 3


def test_file_round_trip(tmp_path, image_path, image_bytes):
    png = Png.from_file(image_path)
    out = tmp_path / "copy.png"
    png.to_file(out)
    assert out.read_bytes() == image_bytes


def test_from_missing_file(tmp_path):
    with pytest.raises(PngIOError) as exc:
        Png.from_file(tmp_path / "missing.png")
    assert isinstance(exc.value.error, FileNotFoundError)


def test_to_file_in_missing_directory(tmp_path, testing_png):
    with pytest.raises(PngIOError):
        testing_png.to_file(tmp_path / "nope" / "out.png")


def test_display_lists_all_chunks(testing_png):
    text = str(testing_png)
    assert text.index("FrSt") < text.index("miDl") < text.index("LASt")
    assert "I am another chunk" in text


def test_remove_chunk_first_match(testing_png):
    testing_png.append_chunk(chunk_from_strings("ruSt", "a"))
    testing_png.append_chunk(chunk_from_strings("ruSt", "b"))
    removed = testing_png.remove_chunk("ruSt")
    assert removed.data == b"a"
    assert testing_png.chunk_by_type("ruSt").data == b"b"
    assert [str(c.chunk_type) for c in testing_png] == ["FrSt", "miDl", "LASt", "ruSt"]


def test_remove_missing_non_utf8_type(testing_png):
    with pytest.raises(ChunkNotFoundError) as exc:
        testing_png.remove_chunk(ChunkType.from_bytes(b"\xff\xfe\xfd\xfc"))
    assert exc.value.chunk_type == "\xff\xfe\xfd\xfc"


def test_remove_non_utf8_type_is_logged(testing_png, caplog):
    odd_type = ChunkType.from_bytes(b"\xff\xfe\xfd\xfc")
    testing_png.append_chunk(Chunk(odd_type, b"x"))
    caplog.set_level(logging.INFO, logger="pngme.png")
    assert testing_png.remove_chunk(odd_type).data == b"x"
    assert "Removed \xff\xfe\xfd\xfc chunk at position 3" in caplog.text
