from __future__ import annotations

import os
from pathlib import Path


def normalize_path(raw: str | Path) -> Path:
    return Path(os.path.expanduser(str(raw).strip())).resolve()


def human_kb(n: int) -> str:
    """Format a byte count as kilobytes with two decimals, e.g. ``'12.34 KB'``."""
    return f"{n / 1024:.2f} KB"
