"""transdict CLI - interactive translation dictionary shell.

Usage:
    python -m transdict.main
    python -m transdict.main words.txt < commands.txt
    python -m transdict.main --help
"""

import argparse
import logging
import sys
from pathlib import Path

from . import config as cfg
from .codec import DictionaryFileError
from .commands import format_help, load_file
from .schema import DictCollection
from .shell import Shell


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="transdict",
        description="transdict - named translation dictionaries",
        epilog=format_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Dictionary file loaded at startup",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.json (default: searched from project root)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging on stderr",
    )

    args = parser.parse_args(argv)

    if args.config:
        cfg.reset()
        cfg.load(args.config)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or cfg.default_verbose() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    dicts = DictCollection()
    if args.file:
        try:
            load_file(args.file, dicts)
        except DictionaryFileError as e:
            print(e, file=sys.stderr)
            return 1

    return Shell(dicts).run(sys.stdin)


if __name__ == "__main__":
    sys.exit(main())
