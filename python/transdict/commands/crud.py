"""Single-dictionary commands: create, delete, edit, query and statistics."""

import logging

from ..schema import DictCollection, Dictionary
from .base import Command, CommandError, TokenStream, EMPTY

logger = logging.getLogger(__name__)

DICT_NOT_FOUND = "dictionary not found"
DICT_OR_WORD_NOT_FOUND = "dictionary or word not found"


def _require_dict(dicts: DictCollection, name: str, message: str = DICT_NOT_FOUND) -> Dictionary:
    dictionary = dicts.get(name)
    if dictionary is None:
        raise CommandError(message)
    return dictionary


class CreateDict(Command):
    name = "createdict"
    usage = "createdict <name>"
    description = "create a new dictionary"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        (dict_name,) = self.arguments(tokens, 1)
        if dict_name in dicts:
            raise CommandError("dictionary already exists")

        dicts.add(dict_name)
        logger.debug("Created dictionary %s", dict_name)
        return []


class DeleteDict(Command):
    name = "deletedict"
    usage = "deletedict <name>"
    description = "delete a dictionary"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        (dict_name,) = self.arguments(tokens, 1)
        if not dicts.delete(dict_name):
            raise CommandError(DICT_NOT_FOUND)

        logger.debug("Deleted dictionary %s", dict_name)
        return []


class ListDicts(Command):
    name = "listdicts"
    usage = "listdicts"
    description = "list all dictionaries"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        return dicts.names() or [EMPTY]


class AddWord(Command):
    name = "addword"
    usage = "addword <dict> <word> <trans...>"
    description = "add word with translations"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        dict_name, word = self.arguments(tokens, 2)
        dictionary = _require_dict(dicts, dict_name)
        if word in dictionary:
            raise CommandError("word already exists")

        translations = tokens.rest()
        if not translations:
            raise CommandError("no translations provided")

        dictionary.add_word(word, translations)
        return []


class AddTranslation(Command):
    name = "addtranslation"
    usage = "addtranslation <dict> <word> <trans>"
    description = "add translation to word"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        dict_name, word, translation = self.arguments(tokens, 3)
        dictionary = _require_dict(dicts, dict_name, DICT_OR_WORD_NOT_FOUND)
        if word not in dictionary:
            raise CommandError(DICT_OR_WORD_NOT_FOUND)

        dictionary.add_translation(word, translation)
        return []


class RemoveTranslation(Command):
    name = "removetranslation"
    usage = "removetranslation <dict> <word> <trans>"
    description = "remove translation"

    not_found = "dictionary, word or translation not found"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        dict_name, word, translation = self.arguments(tokens, 3)
        dictionary = _require_dict(dicts, dict_name, self.not_found)
        if not dictionary.remove_translation(word, translation):
            raise CommandError(self.not_found)
        return []


class DeleteWord(Command):
    name = "deleteword"
    usage = "deleteword <dict> <word>"
    description = "delete word"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        dict_name, word = self.arguments(tokens, 2)
        dictionary = _require_dict(dicts, dict_name, DICT_OR_WORD_NOT_FOUND)
        if not dictionary.delete_word(word):
            raise CommandError(DICT_OR_WORD_NOT_FOUND)
        return []


class FindTranslations(Command):
    name = "findtranslations"
    usage = "findtranslations <dict> <word>"
    description = "find word translations"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        dict_name, word = self.arguments(tokens, 2)
        dictionary = _require_dict(dicts, dict_name, DICT_OR_WORD_NOT_FOUND)
        translations = dictionary.translations(word)
        if translations is None:
            raise CommandError(DICT_OR_WORD_NOT_FOUND)
        return [" ".join(sorted(translations))]


class ListWords(Command):
    name = "listwords"
    usage = "listwords <dict>"
    description = "list all words in dictionary"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        (dict_name,) = self.arguments(tokens, 1)
        dictionary = _require_dict(dicts, dict_name)
        if not dictionary.count():
            return [EMPTY]
        return [" ".join([word, *translations]) for word, translations in dictionary.items()]


class Stat(Command):
    name = "stat"
    usage = "stat <dict>"
    description = "show dictionary statistics"

    def execute(self, tokens: TokenStream, dicts: DictCollection) -> list[str]:
        (dict_name,) = self.arguments(tokens, 1)
        dictionary = _require_dict(dicts, dict_name)
        return [
            f"Words: {dictionary.count()}",
            f"Translations: {dictionary.translation_count()}",
            f"Average translations per word: {round(dictionary.average_translations(), 2)}",
        ]
