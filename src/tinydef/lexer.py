"""
Lexer for tinydef source.

Scans a single function definition into tokens by trying an ordered list of
anchored patterns at the cursor. Keywords come before identifiers so that
``def``/``end`` never lex as names.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Pattern, Tuple


class TokenKind(Enum):
    DEF = "def"
    END = "end"
    IDENT = "identifier"
    INTEGER = "integer"
    LPAREN = "oparen"
    RPAREN = "cparen"
    COMMA = "comma"


IDENT_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9_]*")
SINGLE_CHAR_IDENT_PATTERN = re.compile(r"[a-zA-Z]\b")

# Priority order matters: first match wins.
TOKEN_PATTERNS: List[Tuple[TokenKind, Pattern[str]]] = [
    (TokenKind.DEF, re.compile(r"def\b")),
    (TokenKind.END, re.compile(r"end\b")),
    (TokenKind.IDENT, IDENT_PATTERN),
    (TokenKind.INTEGER, re.compile(r"[0-9]+\b")),
    (TokenKind.LPAREN, re.compile(r"\(")),
    (TokenKind.RPAREN, re.compile(r"\)")),
    (TokenKind.COMMA, re.compile(r",")),
]


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    line: int = field(default=1, compare=False)
    col: int = field(default=1, compare=False)


class TinyDefError(Exception):
    """Base class for every compilation failure."""


class LexError(TinyDefError):
    def __init__(self, remaining: str, line: int = 1, col: int = 1):
        self.remaining = remaining
        self.line = line
        self.col = col
        super().__init__(f"Couldn't match token on {remaining!r} at {line}:{col}")


class Lexer:
    def __init__(self, source: str, *, single_char_identifiers: bool = False):
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.line = 1
        self.col = 1
        self.tokens: List[Token] = []
        self.patterns = list(TOKEN_PATTERNS)
        if single_char_identifiers:
            self.patterns = [
                (kind, SINGLE_CHAR_IDENT_PATTERN if kind is TokenKind.IDENT else pat)
                for kind, pat in self.patterns
            ]

    def scan(self) -> List[Token]:
        while True:
            self._skip_whitespace()
            if self._is_at_end():
                break
            self.tokens.append(self._scan_one())
        return self.tokens

    def _scan_one(self) -> Token:
        for kind, pattern in self.patterns:
            m = pattern.match(self.source, self.pos)
            if m:
                tok = Token(kind, m.group(0), self.line, self.col)
                self._advance(len(m.group(0)))
                return tok
        raise LexError(self.source[self.pos :], self.line, self.col)

    def _skip_whitespace(self) -> None:
        while not self._is_at_end() and self.source[self.pos].isspace():
            self._advance(1)

    def _advance(self, count: int) -> None:
        for ch in self.source[self.pos : self.pos + count]:
            if ch == "\n":
                self.line += 1
                self.col = 1
            else:
                self.col += 1
        self.pos += count

    def _is_at_end(self) -> bool:
        return self.pos >= self.length


def tokenize(source: str, *, single_char_identifiers: bool = False) -> List[Token]:
    return Lexer(source, single_char_identifiers=single_char_identifiers).scan()


__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "LexError",
    "TinyDefError",
    "TOKEN_PATTERNS",
    "tokenize",
]
