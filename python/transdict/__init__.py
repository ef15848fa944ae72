"""transdict - named translation dictionaries.

An interactive line-command processor over a collection of dictionaries,
each mapping a word to a set of translations.

Core concepts:
    - A Dictionary maps word -> set of translations
    - A DictCollection holds dictionaries under unique names
    - Commands edit, query and combine dictionaries (union, difference,
      symmetric difference, common translations)

Example:
    createdict en
    addword en cat кот кошка
    addword en dog пёс
    stat en
    -> Words: 2 / Translations: 3 / Average translations per word: 1.5

Usage:
    from transdict.schema import DictCollection
    from transdict.shell import Shell

    shell = Shell(DictCollection())
    shell.run(["createdict en", "addword en cat кот", "listwords en"])
"""

__version__ = "0.1.0"
