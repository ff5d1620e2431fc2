import struct

from .chunk import CHUNK_OVERHEAD
from .errors import TextEncodingError

# human readable listing of chunks, one header line per chunk plus decoded
# fields for the well known types (payloads are never decompressed)


def _ihdr(d):
    w, h, bitd, colort, compm, filterm, interlacem = struct.unpack('>IIBBBBB', d)
    return [f"width={w}, height={h}, bit_depth={bitd}, color_type={colort}, "
            f"compression={compm}, filter={filterm}, interlace={interlacem}"]


def _plte(d):
    # palette is a list of 3 byte RGB entries
    return [f"palette entries={len(d) // 3}"]


def _gama(d):
    gamma, = struct.unpack('>I', d)
    return [f"gamma={gamma / 100000.0}"]


def _sbit(d):
    return [f"significant bits per channel={list(d)}"]


def _time(d):
    y, mo, day, h, mi, s = struct.unpack('>HBBBBB', d)
    return [f"{y:04}-{mo:02}-{day:02} {h:02}:{mi:02}:{s:02}"]


def _phys(d):
    x_ppu, y_ppu, unit = struct.unpack('>IIB', d)
    unit_descr = 'meter' if unit == 1 else 'unknown'
    return [f"x_ppu={x_ppu}, y_ppu={y_ppu}, unit={unit} ({unit_descr})"]


def _text(d):
    # tEXt is latin-1 keyword\0text
    key, val = d.split(b'\x00', 1)
    return [f"key='{key.decode('latin-1')}', text='{val.decode('latin-1')}'"]


_DECODERS = {
    b'IHDR': _ihdr,
    b'PLTE': _plte,
    b'gAMA': _gama,
    b'sBIT': _sbit,
    b'tIME': _time,
    b'pHYs': _phys,
    b'tEXt': _text,
}


def _flags(chunk_type):
    return ", ".join([
        "critical" if chunk_type.is_critical() else "ancillary",
        "public" if chunk_type.is_public() else "private",
        "safe to copy" if chunk_type.is_safe_to_copy() else "unsafe to copy",
    ])


def describe_chunk(chunk, offset=None):
    """Return the listing lines for a single chunk."""
    typ = chunk.chunk_type.bytes.decode('latin-1')
    head = f"{typ} length: {chunk.length}"
    if offset is not None:
        head += f", offset: {offset}"
    lines = [head]

    decoder = _DECODERS.get(chunk.chunk_type.bytes)
    if decoder is not None:
        try:
            details = decoder(chunk.data)
        except (struct.error, ValueError):
            details = [f"malformed {typ} data (length={chunk.length})"]
    elif chunk.chunk_type.bytes in (b'IDAT', b'IEND'):
        details = []
    else:
        try:
            details = [f"text={chunk.data_as_str()!r}"]
        except TextEncodingError:
            details = [_flags(chunk.chunk_type)]

    lines.extend("  " + line for line in details)
    return lines


def describe_chunks(chunks, start=8):
    """Listing of all ``chunks`` in order; ``start`` is the offset of the first one."""
    lines = []
    offset = start
    for chunk in chunks:
        lines.extend(describe_chunk(chunk, offset))
        offset += CHUNK_OVERHEAD + chunk.length
    return "\n".join(lines)
