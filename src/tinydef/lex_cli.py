"""Simple CLI to lex a tinydef source file and print tokens."""

import argparse
from pathlib import Path

from .lexer import Lexer, LexError


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Lex a tinydef source file")
    parser.add_argument("path", type=Path, help="Path to tinydef source")
    parser.add_argument(
        "--strict-identifiers",
        action="store_true",
        help="Only accept single-letter identifiers",
    )
    args = parser.parse_args(argv)

    try:
        text = args.path.read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"error: file not found: {args.path}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.path}: {e}")
        return 1

    try:
        tokens = Lexer(text, single_char_identifiers=args.strict_identifiers).scan()
    except LexError as e:
        print(f"lexer error: {e}")
        return 1

    for t in tokens:
        print(f"{t.kind.value}\t{t.text!r}\t(line {t.line})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
