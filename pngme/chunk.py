import struct
import zlib
from dataclasses import dataclass, field

from .chunk_type import ChunkType
from .errors import (
    ChunkCrcMismatchError,
    ChunkLengthMismatchError,
    ChunkTooShortError,
    TextEncodingError,
)

# chunk = [4B length][4B type][payload][4B CRC], length counts the payload only
CHUNK_OVERHEAD = 12


def compute_crc(chunk_type: ChunkType, data: bytes) -> int:
    # CRC covers type + data, never the length field
    return zlib.crc32(data, zlib.crc32(chunk_type.bytes))


@dataclass(frozen=True)
class Chunk:
    chunk_type: ChunkType
    data: bytes
    crc: int = field(init=False)

    def __post_init__(self):
        if isinstance(self.chunk_type, str):
            object.__setattr__(self, "chunk_type", ChunkType.from_str(self.chunk_type))
        elif not isinstance(self.chunk_type, ChunkType):
            raise TypeError(f"chunk_type must be a ChunkType or str, got {type(self.chunk_type).__name__}")
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "crc", compute_crc(self.chunk_type, self.data))

    @classmethod
    def from_bytes(cls, raw) -> "Chunk":
        """Parse exactly one serialized chunk.

        ``raw`` must hold the whole record and nothing else: the declared
        length has to match the bytes between the type and the CRC, and
        the stored CRC has to match the one computed over type + data.
        """
        raw = bytes(raw)
        if len(raw) < CHUNK_OVERHEAD:
            raise ChunkTooShortError(len(raw))

        declared, = struct.unpack_from('>I', raw, 0)
        actual = len(raw) - CHUNK_OVERHEAD
        if declared != actual:
            raise ChunkLengthMismatchError(declared, actual)

        chunk_type = ChunkType.from_bytes(raw[4:8])
        data = raw[8:-4]
        stored_crc, = struct.unpack_from('>I', raw, len(raw) - 4)
        calc_crc = compute_crc(chunk_type, data)
        if stored_crc != calc_crc:
            raise ChunkCrcMismatchError(stored_crc, calc_crc)

        return cls(chunk_type, data)

    @property
    def length(self) -> int:
        return len(self.data)

    def data_as_str(self) -> str:
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TextEncodingError(self.data, e) from e

    def as_bytes(self) -> bytes:
        return (struct.pack('>I', self.length)
                + self.chunk_type.bytes
                + self.data
                + struct.pack('>I', self.crc))

    def __str__(self):
        return self.data_as_str()
