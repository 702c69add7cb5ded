"""Small utility helpers used across the mcorr_vcf package.

Timestamped log helpers and the subpopulation list reader. Pure Python,
no heavy dependencies.
"""
import sys
from datetime import datetime
from typing import FrozenSet, List


def log_info(msg: str):
    """Print info log message."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [INFO] {msg}")


def log_warn(msg: str):
    """Print warning log message."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [WARN] {msg}")


def log_error(msg: str):
    """Print error log message and exit."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [ERROR] {msg}", file=sys.stderr)
    sys.exit(1)


def progress_interval(count: int) -> int:
    """Adaptive progress interval: report often early on, rarely later."""
    if count <= 100000:
        return 10000
    if count <= 1000000:
        return 100000
    return 1000000


def read_trim_lines(path: str) -> List[str]:
    """Return every line of ``path`` with surrounding whitespace removed."""
    with open(path, "rt") as fh:
        return [line.strip() for line in fh]


def load_sample_mask(path: str) -> FrozenSet[int]:
    """Read a subpopulation file: one 0-based sample index per line.

    Blank lines are ignored. A line that is not an integer raises ValueError.
    """
    indices = set()
    for lineno, line in enumerate(read_trim_lines(path), start=1):
        if not line:
            continue
        try:
            idx = int(line)
        except ValueError:
            raise ValueError(f"{path}:{lineno}: sample index is not an integer: {line!r}") from None
        if idx < 0:
            raise ValueError(f"{path}:{lineno}: sample index must be non-negative: {idx}")
        indices.add(idx)
    return frozenset(indices)


__all__ = [
    "log_info",
    "log_warn",
    "log_error",
    "progress_interval",
    "read_trim_lines",
    "load_sample_mask",
]
