"""defc: transpile tinydef source to JavaScript and optionally run it."""

from __future__ import annotations

import argparse
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from .codegen import Codegen, CodegenError
from .lexer import Lexer, LexError
from .parser import Parser, ParseError

DEFAULT_RUNTIME = "function g(x, y) { return x + y };"

def transpile(source: str, *, single_char_identifiers: bool = False) -> str:
    tokens = Lexer(source, single_char_identifiers=single_char_identifiers).scan()
    tree = Parser(tokens).parse()
    return Codegen().generate(tree)


def assemble(
    generated: str, *, runtime: Optional[str] = DEFAULT_RUNTIME, call: Optional[str] = None
) -> str:
    """Wrap generated code with the runtime preamble and an optional
    ``console.log(<call>);`` trailer, one part per line."""
    parts = [runtime, generated, f"console.log({call});" if call else None]
    return "\n".join(p.strip() for p in parts if p and p.strip())


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Transpile tinydef source to JavaScript")
    ap.add_argument("input", help="Input source file, or '-' to read stdin")
    ap.add_argument(
        "--out", type=Path, default=None, help="Output .js file (default: stdout)"
    )
    ap.add_argument(
        "--runtime",
        type=Path,
        default=None,
        help="File whose contents replace the built-in runtime preamble",
    )
    ap.add_argument(
        "--no-runtime", action="store_true", help="Emit no runtime preamble"
    )
    ap.add_argument(
        "--call",
        default=None,
        help="Expression to print after the definition, e.g. 'f(1,2)'",
    )
    ap.add_argument(
        "--strict-identifiers",
        action="store_true",
        help="Only accept single-letter identifiers",
    )
    ap.add_argument(
        "--run", action="store_true", help="Run the generated script with Node.js"
    )
    ap.add_argument(
        "--node",
        default=None,
        help="Node.js executable to use (default: auto-detect node then nodejs)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log pipeline steps")
    args = ap.parse_args(argv)

    try:
        src = _read_source(args.input)
        runtime = DEFAULT_RUNTIME
        if args.no_runtime:
            runtime = None
        elif args.runtime is not None:
            runtime = args.runtime.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        log_error(f"file not found: {e.filename}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        log_error(f"cannot read input: {e}")
        return 1

    try:
        log_step("lexing", args.verbose)
        tokens = Lexer(src, single_char_identifiers=args.strict_identifiers).scan()
        log_step("parsing", args.verbose)
        tree = Parser(tokens).parse()
        log_step("codegen", args.verbose)
        generated = Codegen().generate(tree)
    except (LexError, ParseError, CodegenError) as e:
        log_error(str(e))
        return 1

    script = assemble(generated, runtime=runtime, call=args.call)

    if args.out is not None:
        args.out.write_text(script + "\n", encoding="utf-8")
        log_step(f"wrote {args.out}", args.verbose)
    elif not args.run:
        print(script)

    if args.run:
        node = _choose_node(args.node)
        if node is None:
            log_error("no Node.js executable found; install node or pass --node <path>")
            return 1
        log_step(f"running with {node}", args.verbose)
        return _run_script(node, script, args.out)
    return 0


def _read_source(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def _choose_node(preferred: Optional[str]) -> Optional[str]:
    candidates = []
    if preferred:
        candidates.append(preferred)
    candidates.extend(["node", "nodejs"])
    for exe in candidates:
        if shutil.which(exe):
            return exe
    return None


def _run_script(node: str, script: str, path: Optional[Path]) -> int:
    if path is not None:
        result = subprocess.run([node, str(path)], capture_output=True, text=True)
    else:
        with tempfile.TemporaryDirectory() as tmpdir:
            js_path = Path(tmpdir) / "out.js"
            js_path.write_text(script + "\n", encoding="utf-8")
            result = subprocess.run([node, str(js_path)], capture_output=True, text=True)
    _print_stream("stdout", result.stdout)
    _print_stream("stderr", result.stderr)
    return result.returncode


def log_step(msg: str, verbose: bool = True) -> None:
    if verbose:
        print(f"[defc] {msg}...", file=sys.stderr)


def log_error(msg: str) -> None:
    print(f"[defc:error] {msg}", file=sys.stderr)


def _print_stream(label: str, data: str) -> None:
    if data:
        print(f"[{label}]", end=" ")
        print(data, end="")


if __name__ == "__main__":
    raise SystemExit(main())
