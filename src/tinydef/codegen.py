"""tinydef-to-JavaScript code generation.

One rule per node type; output is a single line such as
``function f(x,y) { return add(x,y) };``.
"""

from __future__ import annotations

from . import ast
from .lexer import TinyDefError


class CodegenError(TinyDefError):
    def __init__(self, node: object):
        self.node = node
        super().__init__(f"Unexpected node type: {type(node).__name__}")


class Codegen:
    def generate(self, node: ast.Node) -> str:
        if isinstance(node, ast.FunctionDef):
            return "function %s(%s) { return %s };" % (
                node.name,
                ",".join(node.params),
                self.generate(node.body),
            )
        if isinstance(node, ast.Call):
            return "%s(%s)" % (
                node.callee,
                ",".join(self.generate(arg) for arg in node.args),
            )
        if isinstance(node, ast.VarRef):
            return node.name
        if isinstance(node, ast.IntLiteral):
            return str(node.value)
        raise CodegenError(node)


def generate(node: ast.Node) -> str:
    return Codegen().generate(node)


__all__ = ["Codegen", "CodegenError", "generate"]
