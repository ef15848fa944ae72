"""Interactive command loop.

Reads one command per line, runs it against a DictCollection and prints
the result. Unknown keywords print <INVALID COMMAND>; command failures
print <ERROR: message>. Either way the rest of the line is discarded and
the loop moves on.
"""

from typing import Iterable, Optional, TextIO
import logging
import sys

from .commands import CommandResult, TokenStream, get_command
from .schema import DictCollection

logger = logging.getLogger(__name__)

INVALID_COMMAND = "<INVALID COMMAND>"


class Shell:
    """Runs command lines against one collection."""

    def __init__(self, dicts: Optional[DictCollection] = None, out: Optional[TextIO] = None):
        """Initialize shell.

        Args:
            dicts: Collection to operate on (default: a new empty one).
            out: Output stream (default: sys.stdout at call time).
        """
        self.dicts = dicts if dicts is not None else DictCollection()
        self.out = out

    def execute(self, line: str) -> Optional[CommandResult]:
        """Run one input line.

        Returns:
            The command result, or None for a blank line or unknown command.
        """
        tokens = TokenStream.from_line(line)
        keyword = tokens.next()
        if keyword is None:
            return None

        command = get_command(keyword)
        if command is None:
            logger.debug("Unknown command: %s", keyword)
            self._write([INVALID_COMMAND])
            return None

        result = command.run(tokens, self.dicts)
        self._write(result.render())
        return result

    def run(self, lines: Iterable[str]) -> int:
        """Run every line until input ends. Returns the exit status."""
        for line in lines:
            self.execute(line)
        return 0

    def _write(self, lines: list[str]) -> None:
        out = self.out if self.out is not None else sys.stdout
        for line in lines:
            print(line, file=out)
