"""Reading and writing the backing file.

Bytes map one-to-one onto characters (latin-1) so any file content survives
a load/save cycle unchanged.
"""

from __future__ import annotations

import os
from typing import List

FILE_ENCODING = "latin-1"
FILE_MODE = 0o644


def read_lines(path: str) -> List[str]:
    """Return every physical line with trailing ``\\n``/``\\r`` removed."""

    with open(path, "rb") as handle:
        raw = handle.read()
    if not raw:
        return []
    text = raw.decode(FILE_ENCODING)
    chunks = text.split("\n")
    if text.endswith("\n"):
        chunks.pop()
    return [chunk.rstrip("\r\n") for chunk in chunks]


def write_file(path: str, content: str) -> int:
    """Create or truncate ``path`` and write ``content``; return bytes written.

    Raises ``OSError`` on any failure, including a short write.
    """

    data = content.encode(FILE_ENCODING)
    fd = os.open(path, os.O_RDWR | os.O_CREAT, FILE_MODE)
    try:
        os.ftruncate(fd, len(data))
        written = os.write(fd, data)
    finally:
        os.close(fd)
    if written != len(data):
        raise OSError(0, f"short write ({written} of {len(data)} bytes)")
    return written


__all__ = ["FILE_ENCODING", "read_lines", "write_file"]
