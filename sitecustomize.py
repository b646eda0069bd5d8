"""Put the local 'src' directory on sys.path so `python -m tinydef.defc` works from the project root."""

import sys
from pathlib import Path

root = Path(__file__).resolve().parent
src = root / "src"
if src.exists():
    sys.path.insert(0, str(src))
