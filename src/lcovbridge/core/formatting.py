"""Formatting helpers for terminal output.

- Paths compressed for deep nesting
- Hit/found ratios rendered the same way everywhere
"""

from __future__ import annotations

import os
from pathlib import Path


def prettify_path(path: str, base: Path | None = None) -> str:
    """Show path relative to base (default: cwd) when it lives below it.

    Examples:
        /work/repo/src/foo.c (cwd=/work/repo) -> src/foo.c
        src/main/java/com/Foo.java -> src/main/java/com/Foo.java (unchanged)
    """
    if not os.path.isabs(path):
        return path
    base = base or Path.cwd()
    try:
        return str(Path(path).relative_to(base))
    except ValueError:
        return path


def compress_path(path: str, max_len: int = 60) -> str:
    """Compress path to fit within max_len.

    Examples:
        src/main/java/com/example/deep/Foo.java -> src/.../Foo.java
        short/path.c -> short/path.c (unchanged)
    """
    if len(path) <= max_len:
        return path

    parts = path.split("/")
    if len(parts) <= 2:
        return path  # Can't compress further

    compressed = f"{parts[0]}/.../{parts[-1]}"
    if len(compressed) <= max_len:
        return compressed

    return parts[-1]


def percent(hit: int, found: int) -> float:
    """Coverage percentage; nothing to cover counts as fully covered."""
    if found == 0:
        return 100.0
    return hit * 100.0 / found


def format_ratio(hit: int, found: int, *, with_percent: bool = True) -> str:
    """Format a hit/found cell.

    Examples:
        (3, 4) -> "3 / 4  (75.0%)"
        (0, 0) -> "0 / 0 (100.0%)"
        (3, 4, with_percent=False) -> "3 / 4"
    """
    ratio = f"{hit} / {found}"
    if not with_percent:
        return ratio
    return f"{ratio} {f'({percent(hit, found):.1f}%)':>8}"
