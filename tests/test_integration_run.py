import shutil
import subprocess
import sys
import tempfile
from pathlib import Path

import pytest


PROGRAM = """def f(x,y)
  g(x, y)
end
"""


def test_run_end_to_end_with_node():
    # Skip if no JavaScript runtime available.
    node = shutil.which("node") or shutil.which("nodejs")
    if node is None:
        pytest.skip("node not available for integration run")

    project_root = Path(__file__).resolve().parents[1]
    defc = [sys.executable, "-m", "tinydef.defc"]

    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir = Path(tmpdir)
        src_path = tmpdir / "test.src"
        js_path = tmpdir / "test.js"
        src_path.write_text(PROGRAM, encoding="utf-8")

        result = subprocess.run(
            defc
            + [
                str(src_path),
                "--out",
                str(js_path),
                "--call",
                "f(1,2)",
                "--run",
                "--node",
                node,
            ],
            cwd=project_root,
            env={"PYTHONPATH": str(project_root / "src")},
            capture_output=True,
            text=True,
            timeout=30,
        )
        assert result.returncode == 0, result.stderr
        assert js_path.exists()
        assert "[stdout] 3" in result.stdout
