import struct
import zlib

MESSAGE = "This is where your secret message will be!"
MESSAGE_CRC = 2882656334


def raw_chunk(chunk_type: bytes, data: bytes, length=None, crc=None) -> bytes:
    if length is None:
        length = len(data)
    if crc is None:
        crc = zlib.crc32(data, zlib.crc32(chunk_type))
    return struct.pack('>I', length) + chunk_type + data + struct.pack('>I', crc)
