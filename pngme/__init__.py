"""Read, edit and write PNG files as sequences of checksummed chunks."""

__version__ = "1.0.0"

from .chunk import Chunk
from .chunk_type import ChunkType
from .errors import (
    ByteLengthError,
    ChunkCrcMismatchError,
    ChunkError,
    ChunkLengthMismatchError,
    ChunkNotFoundError,
    ChunkTooShortError,
    ChunkTypeError,
    InvalidCharactersError,
    PngError,
    PngIOError,
    PngmeError,
    SignatureMismatchError,
    TextEncodingError,
)
from .png import Png

__all__ = [
    "ByteLengthError",
    "Chunk",
    "ChunkCrcMismatchError",
    "ChunkError",
    "ChunkLengthMismatchError",
    "ChunkNotFoundError",
    "ChunkTooShortError",
    "ChunkType",
    "ChunkTypeError",
    "InvalidCharactersError",
    "Png",
    "PngError",
    "PngIOError",
    "PngmeError",
    "SignatureMismatchError",
    "TextEncodingError",
]
