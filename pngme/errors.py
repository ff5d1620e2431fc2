# every failure raised by pngme derives from PngmeError, grouped per layer:
#   ChunkTypeError - bad 4 byte type tag
#   ChunkError     - bad length/type/data/crc record
#   PngError       - bad signature or missing chunk
#   PngIOError     - file could not be read or written


class PngmeError(Exception):
    """Base class for all pngme errors."""


class ChunkTypeError(PngmeError, ValueError):
    pass


class ByteLengthError(ChunkTypeError):
    def __init__(self, length: int):
        super().__init__(f"Expected chunk type of 4 bytes, got {length}")
        self.length = length


class InvalidCharactersError(ChunkTypeError):
    def __init__(self, value):
        super().__init__(f"Chunk type {value!r} contains bytes outside A-Z and a-z")
        self.value = value


class ChunkError(PngmeError, ValueError):
    pass


class ChunkTooShortError(ChunkError):
    def __init__(self, length: int):
        super().__init__(f"Chunk must be at least 12 bytes long, got {length}")
        self.length = length


class ChunkLengthMismatchError(ChunkError):
    def __init__(self, declared: int, actual: int):
        super().__init__(f"Length in chunk ({declared}) does not match actual length ({actual})")
        self.declared = declared
        self.actual = actual


class ChunkCrcMismatchError(ChunkError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"CRC in chunk ({expected:#010x}) does not match actual CRC ({actual:#010x})")
        self.expected = expected
        self.actual = actual


class PngError(PngmeError, ValueError):
    pass


class SignatureMismatchError(PngError):
    def __init__(self, found: bytes):
        super().__init__(f"Invalid PNG signature {found!r}")
        self.found = found


class ChunkNotFoundError(PngError):
    def __init__(self, chunk_type: str):
        super().__init__(f"No chunk of type {chunk_type} found")
        self.chunk_type = chunk_type


class PngIOError(PngmeError):
    def __init__(self, path, error: OSError):
        super().__init__(f"Cannot access {path}: {error.strerror or error}")
        self.path = path
        self.error = error


class TextEncodingError(PngmeError, ValueError):
    def __init__(self, raw: bytes, error: UnicodeDecodeError):
        super().__init__(f"Bytes are not valid UTF-8 text: {error.reason} at position {error.start}")
        self.raw = raw
        self.error = error
