"""Command registry.

Maps each command keyword to a Command instance:
- createdict, deletedict, listdicts
- addword, addtranslation, removetranslation, deleteword
- findtranslations, listwords, stat
- merge, subtract, symdiff, findcommon
- save, load

Usage:
    from transdict.commands import get_command, TokenStream

    command = get_command("createdict")
    result = command.run(TokenStream(["en"]), dicts)
"""

from typing import Optional

from .. import config as cfg
from .base import Command, CommandError, CommandResult, TokenStream, EMPTY
from .crud import (
    CreateDict,
    DeleteDict,
    ListDicts,
    AddWord,
    AddTranslation,
    RemoveTranslation,
    DeleteWord,
    FindTranslations,
    ListWords,
    Stat,
)
from .multi import Merge, Subtract, SymDiff, FindCommon
from .persistence import Save, Load, load_file

# Register available commands, in help-text order
COMMANDS: dict[str, Command] = {
    command.name: command
    for command in (
        CreateDict(),
        DeleteDict(),
        ListDicts(),
        AddWord(),
        AddTranslation(),
        RemoveTranslation(),
        DeleteWord(),
        FindTranslations(),
        ListWords(),
        Merge(),
        FindCommon(),
        Save(),
        Load(),
        Stat(),
        Subtract(),
        SymDiff(),
    )
}


def get_command(name: str) -> Optional[Command]:
    """Get command by keyword, or None if unknown."""
    return COMMANDS.get(name)


def register_command(command: Command) -> None:
    """Register a custom command."""
    COMMANDS[command.name] = command


def list_commands() -> list[str]:
    """Command keywords in registration order."""
    return list(COMMANDS)


def format_help(width: Optional[int] = None) -> str:
    """Render the numbered command reference."""
    width = width or cfg.default_help_width()
    lines = ["Available commands:", ""]
    for number, command in enumerate(COMMANDS.values(), start=1):
        lines.append(f"{str(number) + '.':<4}{command.usage:<{width}}{command.description}")
    return "\n".join(lines) + "\n"


__all__ = [
    "Command",
    "CommandError",
    "CommandResult",
    "TokenStream",
    "EMPTY",
    "COMMANDS",
    "get_command",
    "register_command",
    "list_commands",
    "format_help",
    "load_file",
]
