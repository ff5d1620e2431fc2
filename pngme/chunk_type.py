from dataclasses import dataclass

from .errors import ByteLengthError, InvalidCharactersError, TextEncodingError

# bit 5 (0x20) of every type byte is the "case bit" carrying one property flag
PROPERTY_BIT = 0x20


def _is_letter(b: int) -> bool:
    return 0x41 <= b <= 0x5A or 0x61 <= b <= 0x7A


@dataclass(frozen=True)
class ChunkType:
    """4 byte chunk type code, e.g. ``IHDR`` or ``ruSt``.

    Any 4 bytes are accepted, so a type read from a damaged file is kept
    as-is; ``is_valid()`` tells whether the code follows the PNG rules.
    """

    bytes: bytes

    def __post_init__(self):
        raw = bytes(self.bytes)
        if len(raw) != 4:
            raise ByteLengthError(len(raw))
        object.__setattr__(self, "bytes", raw)

    @classmethod
    def from_bytes(cls, raw) -> "ChunkType":
        return cls(raw)

    @classmethod
    def from_str(cls, s: str) -> "ChunkType":
        """Build a type from user text: exactly 4 ASCII letters."""
        raw = s.encode("utf-8")
        if len(raw) != 4:
            raise ByteLengthError(len(raw))
        if not all(_is_letter(b) for b in raw):
            raise InvalidCharactersError(s)
        return cls(raw)

    def is_critical(self) -> bool:
        return not self.bytes[0] & PROPERTY_BIT

    def is_public(self) -> bool:
        return not self.bytes[1] & PROPERTY_BIT

    def is_reserved_bit_valid(self) -> bool:
        return not self.bytes[2] & PROPERTY_BIT

    def is_safe_to_copy(self) -> bool:
        return bool(self.bytes[3] & PROPERTY_BIT)

    def is_valid(self) -> bool:
        return self.is_reserved_bit_valid() and all(_is_letter(b) for b in self.bytes)

    def to_str(self) -> str:
        try:
            return self.bytes.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TextEncodingError(self.bytes, e) from e

    def __str__(self):
        return self.to_str()
