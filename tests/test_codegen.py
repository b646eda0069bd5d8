import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from tinydef import ast  # noqa: E402
from tinydef.codegen import Codegen, CodegenError, generate  # noqa: E402
from tinydef.defc import transpile  # noqa: E402
from tinydef.lexer import Lexer  # noqa: E402
from tinydef.parser import Parser  # noqa: E402


def test_call_body_codegen():
    assert (
        transpile("def f(x,y)\n  add(x, y)\nend")
        == "function f(x,y) { return add(x,y) };"
    )


def test_zero_params_integer_codegen():
    assert transpile("def k() 7 end") == "function k() { return 7 };"


def test_var_ref_codegen():
    assert transpile("def id(a) a end") == "function id(a) { return a };"


def test_nested_call_codegen():
    assert (
        transpile("def f(a, b) g(h(a), 10, i()) end")
        == "function f(a,b) { return g(h(a),10,i()) };"
    )


def test_leading_zeros_render_as_decimal():
    assert transpile("def k() 007 end") == "function k() { return 7 };"


def test_generate_individual_nodes():
    assert generate(ast.IntLiteral(12)) == "12"
    assert generate(ast.VarRef("q")) == "q"
    assert generate(ast.Call("p", (ast.IntLiteral(1), ast.VarRef("z")))) == "p(1,z)"


@pytest.mark.parametrize("node", [None, "x", 3, ast.Expr()])
def test_unknown_nodes_raise(node):
    with pytest.raises(CodegenError) as info:
        Codegen().generate(node)
    assert info.value.node is node
    assert "Unexpected node type" in str(info.value)


def test_unknown_nested_node_raises():
    tree = ast.FunctionDef("f", (), ast.Call("g", (object(),)))
    with pytest.raises(CodegenError) as info:
        generate(tree)
    assert "object" in str(info.value)


@pytest.mark.parametrize(
    "source",
    ["def f(x,y) add(x, y) end", "def k() 7 end", "def abc(p, q, r) q end"],
)
def test_generated_signature_matches_definition(source: str):
    tree = Parser(Lexer(source).scan()).parse()
    out = generate(tree)
    header = out[len("function ") : out.index(")")]
    name, params = header.split("(")
    assert name == tree.name
    assert tuple(p for p in params.split(",") if p) == tree.params
