from __future__ import annotations

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")


def _ensure_local_package_first() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    if (repo_root / "knotfit").is_dir():
        s = str(repo_root)
        if s not in sys.path:
            sys.path.insert(0, s)


_ensure_local_package_first()
