"""Dictionary schema and data structures for transdict.

Core concept:
    - A Dictionary maps a word to a set of translations
    - A word never maps to an empty set; dropping the last translation
      drops the word
    - A DictCollection owns every dictionary under a unique name

Example:
    "cat" -> {"кот", "кошка"}
    Stored in the collection as "en"
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass
class Dictionary:
    """A word -> translations mapping."""

    entries: dict[str, set[str]] = field(default_factory=dict)

    def __contains__(self, word: str) -> bool:
        return word in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def translations(self, word: str) -> Optional[set[str]]:
        """Get the translation set for a word, or None if absent."""
        return self.entries.get(word)

    def add_word(self, word: str, translations: Iterable[str]) -> None:
        """Insert a word, replacing any existing entry."""
        values = set(translations)
        if not values:
            raise ValueError(f"No translations for word: {word}")
        self.entries[word] = values

    def add_translation(self, word: str, translation: str) -> None:
        """Add a translation to an existing word."""
        self.entries[word].add(translation)

    def merge_translations(self, word: str, translations: Iterable[str]) -> None:
        """Union translations into a word, creating it if needed."""
        self.entries.setdefault(word, set()).update(translations)

    def remove_translation(self, word: str, translation: str) -> bool:
        """Remove a translation; drops the word when its set empties.

        Returns:
            False if the word or translation was not present.
        """
        values = self.entries.get(word)
        if values is None or translation not in values:
            return False

        values.discard(translation)
        if not values:
            del self.entries[word]
        return True

    def delete_word(self, word: str) -> bool:
        """Remove a word entry. Returns False if absent."""
        return self.entries.pop(word, None) is not None

    def words(self) -> list[str]:
        """Get sorted list of words."""
        return sorted(self.entries)

    def items(self) -> Iterator[tuple[str, list[str]]]:
        """Yield (word, sorted translations) in word order."""
        for word in self.words():
            yield word, sorted(self.entries[word])

    def count(self) -> int:
        """Get word count."""
        return len(self.entries)

    def translation_count(self) -> int:
        """Get total number of translations across all words."""
        return sum(len(values) for values in self.entries.values())

    def average_translations(self) -> float:
        """Average translations per word (0.0 for an empty dictionary)."""
        if not self.entries:
            return 0.0
        return self.translation_count() / len(self.entries)


@dataclass
class DictCollection:
    """Named dictionaries. Names are unique and never overwritten."""

    dicts: dict[str, Dictionary] = field(default_factory=dict)

    def __contains__(self, name: str) -> bool:
        return name in self.dicts

    def __len__(self) -> int:
        return len(self.dicts)

    def get(self, name: str) -> Optional[Dictionary]:
        """Look up a dictionary by name, or None if absent."""
        return self.dicts.get(name)

    def add(self, name: str, dictionary: Optional[Dictionary] = None) -> Dictionary:
        """Store a dictionary under a new name.

        Raises:
            ValueError: If the name is already taken.
        """
        if name in self.dicts:
            raise ValueError(f"Dictionary already exists: {name}")
        if dictionary is None:
            dictionary = Dictionary()
        self.dicts[name] = dictionary
        return dictionary

    def delete(self, name: str) -> bool:
        """Remove a dictionary. Returns False if absent."""
        return self.dicts.pop(name, None) is not None

    def names(self) -> list[str]:
        """Get sorted list of dictionary names."""
        return sorted(self.dicts)

    def missing(self, names: Iterable[str]) -> list[str]:
        """Return the given names that are not in the collection."""
        return [name for name in names if name not in self.dicts]
