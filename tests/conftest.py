# Make the src/ modules importable from a fresh clone without installing.
import os
import sys
from pathlib import Path

# pygame prints a banner on import unless told not to
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


def _ensure_src_path():
    src_dir = Path(__file__).resolve().parents[1] / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


_ensure_src_path()
