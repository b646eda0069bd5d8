from .lexer import Lexer, Token, TokenKind, LexError, TinyDefError, tokenize
from .parser import Parser, ParseError, parse
from .codegen import Codegen, CodegenError, generate
from .defc import transpile, assemble

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "LexError",
    "TinyDefError",
    "tokenize",
    "Parser",
    "ParseError",
    "parse",
    "Codegen",
    "CodegenError",
    "generate",
    "transpile",
    "assemble",
]
