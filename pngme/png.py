import logging
import struct
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .chunk import CHUNK_OVERHEAD, Chunk
from .chunk_type import ChunkType
from .errors import (
    ChunkNotFoundError,
    ChunkTooShortError,
    PngIOError,
    SignatureMismatchError,
)
from .print_chunks import describe_chunks

_l = logging.getLogger(__name__)

TypeLike = Union[str, ChunkType]


def _type_bytes(chunk_type: TypeLike) -> bytes:
    if isinstance(chunk_type, ChunkType):
        return chunk_type.bytes
    return chunk_type.encode("utf-8")


def _type_label(chunk_type: TypeLike) -> str:
    # latin-1 renders any 4 type bytes
    if isinstance(chunk_type, ChunkType):
        return chunk_type.bytes.decode("latin-1")
    return chunk_type


class Png:
    """A PNG file seen as its signature followed by an ordered list of chunks.

    Chunk order is kept exactly, so an untouched ``Png`` serializes back to
    the bytes it was parsed from. Nothing here enforces PNG ordering rules
    (IHDR first, IEND last); payloads are opaque.
    """

    STANDARD_HEADER = b'\x89PNG\r\n\x1a\n'

    def __init__(self, chunks: Iterable[Chunk] = ()):
        self._chunks: List[Chunk] = list(chunks)

    @classmethod
    def from_chunks(cls, chunks: Iterable[Chunk]) -> "Png":
        return cls(chunks)

    @classmethod
    def from_bytes(cls, data) -> "Png":
        data = bytes(data)
        #1 signature check happens before any chunk is touched
        signature = data[:len(cls.STANDARD_HEADER)]
        if signature != cls.STANDARD_HEADER:
            raise SignatureMismatchError(signature)

        #2 walk the chunks until the input is exhausted
        chunks = []
        offset = len(cls.STANDARD_HEADER)
        while offset < len(data):
            remaining = len(data) - offset
            if remaining < CHUNK_OVERHEAD:
                raise ChunkTooShortError(remaining)
            length, = struct.unpack_from('>I', data, offset)
            end = offset + CHUNK_OVERHEAD + length
            chunks.append(Chunk.from_bytes(data[offset:end]))
            offset = end

        _l.debug("Parsed %d chunks from %d bytes", len(chunks), len(data))
        return cls(chunks)

    @classmethod
    def from_file(cls, path) -> "Png":
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise PngIOError(path, e) from e
        _l.debug("Read %d bytes from %s", len(data), path)
        return cls.from_bytes(data)

    def to_file(self, path) -> None:
        data = self.as_bytes()
        try:
            Path(path).write_bytes(data)
        except OSError as e:
            raise PngIOError(path, e) from e
        _l.info("Wrote %d chunks (%d bytes) to %s", len(self._chunks), len(data), path)

    @property
    def header(self) -> bytes:
        return self.STANDARD_HEADER

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)

    def _index_of(self, chunk_type: TypeLike) -> Optional[int]:
        wanted = _type_bytes(chunk_type)
        for i, chunk in enumerate(self._chunks):
            if chunk.chunk_type.bytes == wanted:
                return i
        return None

    def chunk_by_type(self, chunk_type: TypeLike) -> Optional[Chunk]:
        """First chunk of ``chunk_type`` or None."""
        i = self._index_of(chunk_type)
        if i is None:
            _l.debug("No chunk of type %s", _type_label(chunk_type))
            return None
        return self._chunks[i]

    def remove_chunk(self, chunk_type: TypeLike) -> Chunk:
        """Remove and return the first chunk of ``chunk_type``.

        Raises ChunkNotFoundError when there is none.
        """
        i = self._index_of(chunk_type)
        if i is None:
            raise ChunkNotFoundError(_type_label(chunk_type))
        removed = self._chunks.pop(i)
        _l.info("Removed %s chunk at position %d", _type_label(chunk_type), i)
        return removed

    def as_bytes(self) -> bytes:
        return self.STANDARD_HEADER + b''.join(c.as_bytes() for c in self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks)

    def __eq__(self, other):
        if not isinstance(other, Png):
            return NotImplemented
        return self._chunks == other._chunks

    def __repr__(self):
        return f"Png(chunks={len(self._chunks)})"

    def __str__(self):
        return describe_chunks(self._chunks, len(self.STANDARD_HEADER))
