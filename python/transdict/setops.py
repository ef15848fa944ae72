"""Set algebra over dictionaries.

All functions are pure: sources are never modified and results never share
translation sets with them.

Operations:
- merge: union of words, translations unioned per word
- subtract: words of the first source absent from every other source
- symdiff: words present in exactly one source
- common_translations: intersection of several words' translations
"""

from collections import Counter
from typing import Optional, Sequence

from .schema import Dictionary


def merge(sources: Sequence[Dictionary]) -> Dictionary:
    """Union all sources.

    Args:
        sources: Dictionaries to merge.

    Returns:
        New Dictionary where each word's translations are the union over
        every source containing it.
    """
    result = Dictionary()
    for source in sources:
        for word, values in source.entries.items():
            result.merge_translations(word, values)
    return result


def subtract(sources: Sequence[Dictionary]) -> Dictionary:
    """Remove from the first source every word found in any other source.

    Translations of surviving words are copied from the first source.
    """
    if not sources:
        return Dictionary()

    first, others = sources[0], sources[1:]
    result = Dictionary()
    for word, values in first.entries.items():
        if any(word in other for other in others):
            continue
        result.add_word(word, values)
    return result


def symdiff(sources: Sequence[Dictionary]) -> Dictionary:
    """Keep words that appear in exactly one source, with that source's set."""
    occurrences: Counter[str] = Counter()
    for source in sources:
        occurrences.update(source.entries.keys())

    result = Dictionary()
    for source in sources:
        for word, values in source.entries.items():
            if occurrences[word] == 1:
                result.add_word(word, values)
    return result


def common_translations(dictionary: Dictionary, words: Sequence[str]) -> Optional[set[str]]:
    """Intersect translation sets left to right, starting from the first word.

    Returns:
        The intersection, or None if any word is missing from the dictionary.
    """
    common: Optional[set[str]] = None
    for word in words:
        values = dictionary.translations(word)
        if values is None:
            return None
        common = set(values) if common is None else common & values
    return common if common is not None else set()
