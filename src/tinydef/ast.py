"""AST node definitions for tinydef."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


# Base node for location info; positions never take part in equality
@dataclass(frozen=True, kw_only=True)
class Node:
    line: Optional[int] = field(default=None, compare=False)
    col: Optional[int] = field(default=None, compare=False)


# Expressions
@dataclass(frozen=True)
class Expr(Node):
    pass


@dataclass(frozen=True)
class IntLiteral(Expr):
    value: int


@dataclass(frozen=True)
class VarRef(Expr):
    name: str


@dataclass(frozen=True)
class Call(Expr):
    callee: str
    args: Tuple[Expr, ...] = ()


# Definitions
@dataclass(frozen=True)
class FunctionDef(Node):
    name: str
    params: Tuple[str, ...]
    body: Expr


__all__ = [
    "Node",
    "Expr",
    "IntLiteral",
    "VarRef",
    "Call",
    "FunctionDef",
]
