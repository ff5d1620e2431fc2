import logging
import sys
from typing import Optional, Sequence

from .args import parse_args
from .commands import run
from .errors import PngmeError

_l = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args, log_level = parse_args(argv)
    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        run(args)
    except PngmeError as e:
        _l.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
