"""Recursive-descent parser for tinydef.

Grammar::

    def    := "def" IDENT "(" params ")" expr "end"
    params := [ IDENT { "," IDENT } ]
    expr   := INTEGER | IDENT "(" args ")" | IDENT
    args   := [ expr { "," expr } ]
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from . import lexer
from .ast import Call, Expr, FunctionDef, IntLiteral, VarRef


class ParseError(lexer.TinyDefError):
    def __init__(
        self,
        expected: Optional[lexer.TokenKind],
        actual: Optional[lexer.TokenKind],
        token: Optional[lexer.Token] = None,
        reason: Optional[str] = None,
    ):
        self.expected = expected
        self.actual = actual
        self.token = token
        self.reason = reason
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.reason is not None:
            where = f" at {self.token.line}:{self.token.col}" if self.token else ""
            return f"{self.reason}{where}"
        if self.actual is None:
            return (
                f"Expected token type {self.expected.value!r} "
                "but reached end of input"
            )
        where = f" at {self.token.line}:{self.token.col}" if self.token else ""
        if self.expected is None:
            return f"Unexpected trailing token {self.actual.value!r}{where}"
        return (
            f"Expected token type {self.expected.value!r} "
            f"but got {self.actual.value!r}{where}"
        )


class Parser:
    def __init__(self, tokens: Sequence[lexer.Token]):
        # Private copy: the caller's sequence stays untouched.
        self.tokens: List[lexer.Token] = list(tokens)
        self.current = 0

    def parse(self) -> FunctionDef:
        fn = self._function_def()
        if not self._is_at_end():
            tok = self._peek()
            raise ParseError(None, tok.kind, tok)
        return fn

    def _function_def(self) -> FunctionDef:
        start = self._consume(lexer.TokenKind.DEF)
        name = self._consume(lexer.TokenKind.IDENT).text
        params = self._param_names()
        body = self._expression()
        self._consume(lexer.TokenKind.END)
        return FunctionDef(
            name=name, params=params, body=body, line=start.line, col=start.col
        )

    def _param_names(self) -> tuple:
        names: List[str] = []
        self._consume(lexer.TokenKind.LPAREN)
        if not self._check_kind(lexer.TokenKind.RPAREN):
            names.append(self._consume(lexer.TokenKind.IDENT).text)
            while self._match_kind(lexer.TokenKind.COMMA):
                names.append(self._consume(lexer.TokenKind.IDENT).text)
        self._consume(lexer.TokenKind.RPAREN)
        return tuple(names)

    # --- expressions ---
    def _expression(self) -> Expr:
        if self._check_kind(lexer.TokenKind.INTEGER):
            return self._integer()
        if self._check_kind(lexer.TokenKind.IDENT) and self._peek_next_is(
            lexer.TokenKind.LPAREN
        ):
            return self._call()
        return self._var_ref()

    def _integer(self) -> IntLiteral:
        tok = self._consume(lexer.TokenKind.INTEGER)
        try:
            value = int(tok.text)
        except ValueError:
            # Beyond the interpreter's int/str conversion digit limit.
            raise ParseError(
                lexer.TokenKind.INTEGER,
                tok.kind,
                tok,
                reason=f"Integer literal of {len(tok.text)} digits is too long",
            ) from None
        return IntLiteral(value=value, line=tok.line, col=tok.col)

    def _call(self) -> Call:
        tok = self._consume(lexer.TokenKind.IDENT)
        args = self._arg_exprs()
        return Call(callee=tok.text, args=args, line=tok.line, col=tok.col)

    def _arg_exprs(self) -> tuple:
        args: List[Expr] = []
        self._consume(lexer.TokenKind.LPAREN)
        if not self._check_kind(lexer.TokenKind.RPAREN):
            args.append(self._expression())
            while self._match_kind(lexer.TokenKind.COMMA):
                args.append(self._expression())
        self._consume(lexer.TokenKind.RPAREN)
        return tuple(args)

    def _var_ref(self) -> VarRef:
        tok = self._consume(lexer.TokenKind.IDENT)
        return VarRef(name=tok.text, line=tok.line, col=tok.col)

    # --- helpers ---
    def _consume(self, kind: lexer.TokenKind) -> lexer.Token:
        if self._is_at_end():
            raise ParseError(kind, None)
        tok = self._peek()
        if tok.kind != kind:
            raise ParseError(kind, tok.kind, tok)
        return self._advance()

    def _match_kind(self, kind: lexer.TokenKind) -> bool:
        if self._check_kind(kind):
            self._advance()
            return True
        return False

    def _check_kind(self, kind: lexer.TokenKind) -> bool:
        if self._is_at_end():
            return False
        return self._peek().kind == kind

    def _peek_next_is(self, kind: lexer.TokenKind) -> bool:
        if self.current + 1 >= len(self.tokens):
            return False
        return self.tokens[self.current + 1].kind == kind

    def _advance(self) -> lexer.Token:
        self.current += 1
        return self.tokens[self.current - 1]

    def _peek(self) -> lexer.Token:
        return self.tokens[self.current]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.tokens)


def parse(tokens: Sequence[lexer.Token]) -> FunctionDef:
    return Parser(tokens).parse()


__all__ = ["Parser", "ParseError", "parse"]
