import logging

from .args import CommandArgs, DecodeArgs, EncodeArgs, PrintArgs, RemoveArgs
from .chunk import Chunk
from .errors import ChunkNotFoundError, TextEncodingError
from .png import Png

_l = logging.getLogger(__name__)


def encode(args: EncodeArgs) -> str:
    png = Png.from_file(args.file_path)
    png.append_chunk(Chunk(args.chunk_type, args.message.encode("utf-8")))
    png.to_file(args.output_path)
    return f"Encoded {args.chunk_type} chunk into {args.output_path}"


def decode(args: DecodeArgs) -> str:
    png = Png.from_file(args.file_path)
    chunk = png.chunk_by_type(args.chunk_type)
    if chunk is None:
        raise ChunkNotFoundError(str(args.chunk_type))
    return chunk.data_as_str()


def remove(args: RemoveArgs) -> str:
    # read-modify-write on the same file, no backup is kept
    png = Png.from_file(args.file_path)
    removed = png.remove_chunk(args.chunk_type)
    png.to_file(args.file_path)
    try:
        payload = removed.data_as_str()
    except TextEncodingError:
        payload = f"<{removed.length} bytes>"
    return f"Removed chunk: {removed.chunk_type} ({payload}) from file {args.file_path}"


def print_png(args: PrintArgs) -> str:
    return str(Png.from_file(args.file_path))


_COMMANDS = {
    EncodeArgs: encode,
    DecodeArgs: decode,
    RemoveArgs: remove,
    PrintArgs: print_png,
}


def run(args: CommandArgs) -> str:
    """Run one command, print what it reports and return it."""
    command = _COMMANDS[type(args)]
    _l.debug("Running %s on %s", command.__name__, args.file_path)
    output = command(args)
    print(output)
    return output
