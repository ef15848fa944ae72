"""Plain text dictionary codec.

Format: one word per line, followed by its translations.

    cat кот кошка
    dog пёс

Fields are separated by one or more whitespace characters. There is no
quoting or escaping, so words and translations never contain whitespace.
Lines without at least one translation are skipped.
"""

import io
from pathlib import Path
from typing import Iterator, TextIO

from .schema import Dictionary


class DictionaryFileError(Exception):
    """A dictionary file could not be opened or decoded."""


def parse(stream: TextIO) -> Iterator[tuple[str, list[str], int]]:
    """Parse a text stream.

    Args:
        stream: Open text stream.

    Yields:
        Tuples of (word, translations, line_number).
    """
    for line_num, line in enumerate(stream, start=1):
        fields = line.split()
        if len(fields) < 2:
            continue
        yield fields[0], fields[1:], line_num


def decode(stream: TextIO) -> Dictionary:
    """Read a Dictionary from a text stream.

    An empty result means the input held no usable entries; callers treat
    that as an invalid file.
    """
    dictionary = Dictionary()
    for word, translations, _ in parse(stream):
        dictionary.add_word(word, translations)
    return dictionary


def encode(dictionary: Dictionary, stream: TextIO) -> None:
    """Write a Dictionary to a text stream, sorted by word."""
    for word, translations in dictionary.items():
        stream.write(" ".join([word, *translations]) + "\n")


def read_file(filepath: Path | str, encoding: str = "utf-8") -> Dictionary:
    """Decode a dictionary file.

    Raises:
        OSError: If the file cannot be opened.
        ValueError: If the path is invalid or the file is not valid text
            in `encoding` (UnicodeDecodeError).
    """
    with open(filepath, "r", encoding=encoding) as f:
        return decode(f)


def write_file(dictionary: Dictionary, filepath: Path | str, encoding: str = "utf-8") -> None:
    """Encode a dictionary to a file, truncating it.

    The text is encoded before the file is opened, so an unencodable
    token leaves an existing file untouched.

    Raises:
        UnicodeEncodeError: If a token cannot be represented in `encoding`.
        OSError: If the file cannot be opened for writing.
    """
    buffer = io.StringIO()
    encode(dictionary, buffer)
    data = buffer.getvalue().encode(encoding)
    with open(filepath, "wb") as f:
        f.write(data)
