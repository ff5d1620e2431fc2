import argparse
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from . import __version__
from .chunk_type import ChunkType
from .errors import ChunkTypeError

LOG_LEVEL_ENV = "PNGME_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class EncodeArgs:
    file_path: Path
    chunk_type: ChunkType
    message: str
    output_path: Path


@dataclass(frozen=True)
class DecodeArgs:
    file_path: Path
    chunk_type: ChunkType


@dataclass(frozen=True)
class RemoveArgs:
    file_path: Path
    chunk_type: ChunkType


@dataclass(frozen=True)
class PrintArgs:
    file_path: Path


CommandArgs = Union[EncodeArgs, DecodeArgs, RemoveArgs, PrintArgs]


def chunk_type_arg(value: str) -> ChunkType:
    try:
        return ChunkType.from_str(value)
    except ChunkTypeError as e:
        raise argparse.ArgumentTypeError(
            f"{e}. All 4 bytes must be ASCII letters.") from e


def _log_level_arg(value: str) -> int:
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"unknown log level {value!r}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pngme",
        description="Hide messages in PNG files as private chunks",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=_log_level_arg,
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    encode = sub.add_parser("encode", help="Encode a message into a .png file")
    encode.add_argument("file_path", type=Path, help="Path of .png file")
    encode.add_argument("chunk_type", type=chunk_type_arg, help="Chunk type")
    encode.add_argument("message", help="Message to encode")
    encode.add_argument("output_path", type=Path, help="Output path for png")

    decode = sub.add_parser("decode", help="Decode a message from a .png file")
    decode.add_argument("file_path", type=Path, help="Path of .png file")
    decode.add_argument("chunk_type", type=chunk_type_arg, help="Chunk type")

    remove = sub.add_parser("remove", help="Remove a chunk from a .png file")
    remove.add_argument("file_path", type=Path, help="Path of .png file")
    remove.add_argument("chunk_type", type=chunk_type_arg, help="Chunk type")

    show = sub.add_parser("print", help="Print the chunks of a .png file")
    show.add_argument("file_path", type=Path, help="Path of .png file")

    return parser


def to_command_args(ns: argparse.Namespace) -> CommandArgs:
    if ns.command == "encode":
        return EncodeArgs(ns.file_path, ns.chunk_type, ns.message, ns.output_path)
    if ns.command == "decode":
        return DecodeArgs(ns.file_path, ns.chunk_type)
    if ns.command == "remove":
        return RemoveArgs(ns.file_path, ns.chunk_type)
    if ns.command == "print":
        return PrintArgs(ns.file_path)
    raise ValueError(f"Unknown command {ns.command!r}")


def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[CommandArgs, int]:
    """Parse the command line into command arguments and a log level.

    Invalid input makes argparse print usage and exit with status 2.
    """
    ns = build_parser().parse_args(argv)
    return to_command_args(ns), ns.log_level
