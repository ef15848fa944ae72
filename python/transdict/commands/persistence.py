"""Save and load dictionaries as plain text files.

File handles live inside codec.read_file / codec.write_file and are closed
before a command returns, on success or failure.
"""

from pathlib import Path
import logging

from .. import codec
from .. import config as cfg
from ..codec import DictionaryFileError
from ..schema import DictCollection
from .base import Command, CommandError, TokenStream

logger = logging.getLogger(__name__)

SAVE_FAILED = "dictionary not found or file error"
LOAD_FAILED = "file not found or invalid format"


class Save(Command):
    name = "save"
    usage = "save <dict> <file>"
    description = "save dictionary to file"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        dict_name, filename = self.arguments(tokens, 2)
        dictionary = dicts.get(dict_name)
        if dictionary is None:
            raise CommandError(SAVE_FAILED)

        try:
            codec.write_file(dictionary, filename, encoding=cfg.default_encoding())
        except (OSError, ValueError, LookupError) as e:
            logger.debug("Cannot write %s: %s", filename, e)
            raise CommandError(SAVE_FAILED) from e

        logger.debug("Saved %s to %s (%d words)", dict_name, filename, dictionary.count())
        return []


class Load(Command):
    name = "load"
    usage = "load <dict> <file>"
    description = "load dictionary from file"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        dict_name, filename = self.arguments(tokens, 2)
        if dict_name in dicts:
            raise CommandError("dictionary already exists")

        try:
            dictionary = codec.read_file(filename, encoding=cfg.default_encoding())
        except (OSError, ValueError, LookupError) as e:
            logger.debug("Cannot read %s: %s", filename, e)
            raise CommandError(LOAD_FAILED) from e

        if not dictionary.count():
            raise CommandError(LOAD_FAILED)

        dicts.add(dict_name, dictionary)
        logger.debug("Loaded %s from %s (%d words)", dict_name, filename, dictionary.count())
        return []


def load_file(filepath: Path | str, dicts: DictCollection, name: str | None = None) -> bool:
    """Load a startup dictionary file into the collection.

    Args:
        filepath: Dictionary file given on the command line.
        dicts: Collection to populate.
        name: Dictionary name (default: the configured bootstrap name).

    Returns:
        True if a dictionary was added, False if the file held no entries.

    Raises:
        DictionaryFileError: If the file cannot be opened or decoded.
    """
    name = name or cfg.default_bootstrap_dict()
    try:
        dictionary = codec.read_file(filepath, encoding=cfg.default_encoding())
    except (OSError, ValueError, LookupError) as e:
        raise DictionaryFileError(LOAD_FAILED) from e

    if not dictionary.count():
        logger.debug("Startup file %s has no entries", filepath)
        return False

    dicts.add(name, dictionary)
    logger.debug("Loaded %s from %s (%d words)", name, filepath, dictionary.count())
    return True
