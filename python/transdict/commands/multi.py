"""Multi-dictionary commands built on set algebra.

Argument shape for merge, subtract and symdiff:

    <command> <new> <count> <dict1> ... <dictN>

Every source must exist and <new> must be unused before anything is
created. findcommon takes a dictionary and <count> words instead.
"""

from typing import Callable, Sequence
import logging

from .. import setops
from ..schema import DictCollection, Dictionary
from .base import Command, CommandError, TokenStream, EMPTY

logger = logging.getLogger(__name__)

INVALID_COUNT = "invalid count"


class SetOperationCommand(Command):
    """Combines `count` named dictionaries into a new one."""

    min_count = 2
    operation: Callable[[Sequence[Dictionary]], Dictionary]

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        new_name = tokens.next()
        count = tokens.next_int()
        if new_name is None or count is None:
            raise self.invalid_arguments()
        if count < self.min_count:
            raise CommandError(INVALID_COUNT)

        source_names = tokens.take(count)
        if source_names is None:
            raise CommandError(INVALID_COUNT)
        if dicts.missing(source_names):
            raise CommandError("dictionary not found")
        if new_name in dicts:
            raise CommandError("dictionary already exists")

        sources = [dicts.get(name) for name in source_names]
        result = self.operation(sources)
        dicts.add(new_name, result)
        logger.debug(
            "%s %s -> %s (%d words)",
            self.name, ", ".join(source_names), new_name, result.count(),
        )
        return []


class Merge(SetOperationCommand):
    name = "merge"
    usage = "merge <new> <count> <dicts...>"
    description = "merge dictionaries"
    operation = staticmethod(setops.merge)


class Subtract(SetOperationCommand):
    name = "subtract"
    usage = "subtract <new> <count> <dicts...>"
    description = "dictionary subtraction"
    operation = staticmethod(setops.subtract)


class SymDiff(SetOperationCommand):
    name = "symdiff"
    usage = "symdiff <new> <count> <dicts...>"
    description = "symmetric difference"
    operation = staticmethod(setops.symdiff)


class FindCommon(Command):
    name = "findcommon"
    usage = "findcommon <dict> <count> <words...>"
    description = "find common translations"

    not_found = "dictionary or word(s) not found"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        dict_name = tokens.next()
        count = tokens.next_int()
        if dict_name is None or count is None:
            raise self.invalid_arguments()
        if count < 1:
            raise CommandError(INVALID_COUNT)

        dictionary = dicts.get(dict_name)
        if dictionary is None:
            raise CommandError(self.not_found)

        words = tokens.take(count)
        if words is None:
            raise CommandError(INVALID_COUNT)

        common = setops.common_translations(dictionary, words)
        if common is None:
            raise CommandError(self.not_found)
        if not common:
            return [EMPTY]
        return [" ".join(sorted(common))]
