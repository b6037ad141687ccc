"""Reading and decoding markup input for the CLI."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

# Tried in order before falling back to lossy UTF-8.
ENCODINGS = ("utf-8", "utf-16", "ascii")


def decode_bytes(data: bytes) -> str:
    """Decode *data* with the first encoding that fits.

    Falls back to UTF-8 with replacement characters when none do.
    """
    for encoding in ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("utf-8", errors="replace")


def read_input(path: Optional[Path] = None) -> str:
    """Read markup from *path*, or from standard input when it is None."""
    if path is not None:
        data = path.read_bytes()
    else:
        data = sys.stdin.buffer.read()
    return decode_bytes(data)
