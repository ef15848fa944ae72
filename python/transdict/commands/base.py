"""Base command interface.

All commands inherit from Command and implement the execute() method.
This gives every command the same argument and error contract:

    - Missing tokens -> "invalid arguments for <name>"
    - Extra tokens at the end of the line are ignored
    - Failures raise CommandError; run() turns them into a CommandResult
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Sequence
import logging
import re

from ..schema import DictCollection

logger = logging.getLogger(__name__)

EMPTY = "<EMPTY>"
INTEGER = re.compile(r"-?[0-9]+")


class CommandError(Exception):
    """A command failed; the message is shown to the user."""


class TokenStream:
    """Whitespace-separated arguments of one input line."""

    def __init__(self, tokens: Sequence[str]):
        self._tokens = list(tokens)
        self._pos = 0

    @classmethod
    def from_line(cls, line: str) -> "TokenStream":
        return cls(line.split())

    def next(self) -> Optional[str]:
        """Consume one token, or return None at end of line."""
        if self._pos >= len(self._tokens):
            return None
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def next_int(self) -> Optional[int]:
        """Consume one integer token. None if absent or not an integer."""
        token = self.next()
        if token is None:
            return None
        if not INTEGER.fullmatch(token):
            return None
        return int(token)

    def take(self, count: int) -> Optional[list[str]]:
        """Consume exactly `count` tokens, or None if fewer remain."""
        if count > self.remaining():
            self._pos = len(self._tokens)
            return None
        taken = self._tokens[self._pos:self._pos + count]
        self._pos += count
        return taken

    def rest(self) -> list[str]:
        """Consume every remaining token."""
        taken = self._tokens[self._pos:]
        self._pos = len(self._tokens)
        return taken

    def remaining(self) -> int:
        return len(self._tokens) - self._pos


@dataclass
class CommandResult:
    """Outcome of a command: output lines or an error message."""

    lines: list[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> list[str]:
        """Lines to print for this result."""
        if self.error is not None:
            return [f"<ERROR: {self.error}>"]
        return list(self.lines)


class Command(ABC):
    """Base class for commands.

    Subclasses must set:
        - name: keyword typed by the user
        - usage: argument synopsis for the help text
        - description: one-line summary for the help text

    and implement execute(tokens, dicts) -> output lines.
    """

    name: str = ""
    usage: str = ""
    description: str = ""

    @abstractmethod
    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        """Run the command.

        Args:
            tokens: Remaining tokens of the input line.
            dicts: Collection to read or modify.

        Returns:
            Output lines (possibly empty).

        Raises:
            CommandError: On any user-facing failure. Nothing is modified
                before the error is raised.
        """
        pass

    def run(self, tokens: TokenStream, dicts: DictCollection) -> CommandResult:
        """Execute and capture any failure as a failed result."""
        try:
            lines = self.execute(tokens, dicts)
        except CommandError as e:
            logger.debug("%s failed: %s", self.name, e)
            return CommandResult(error=str(e))
        except Exception as e:
            logger.exception("%s raised an unexpected error", self.name)
            return CommandResult(error=str(e) or type(e).__name__)
        return CommandResult(lines=lines)

    def invalid_arguments(self) -> CommandError:
        return CommandError(f"invalid arguments for {self.name}")

    def arguments(self, tokens: TokenStream, count: int) -> list[str]:
        """Consume `count` required tokens or fail with invalid arguments."""
        values = tokens.take(count)
        if values is None:
            raise self.invalid_arguments()
        return values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
