"""Low-level helpers shared by the TZX/CDT tape writers."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

TZX_SIGNATURE = b"ZXTape!\x1a\x01\x00"


class TapeError(Exception):
    """Raised when a tape or its source file cannot be read or written."""


def u16le(value: int) -> bytes:
    """Return the low 16 bits of ``value`` as two little-endian bytes."""
    return (value & 0xFFFF).to_bytes(2, "little")


def u24le(value: int) -> bytes:
    """Return the low 24 bits of ``value`` as three little-endian bytes."""
    return (value & 0xFFFFFF).to_bytes(3, "little")


def open_tape(path: str | Path, signature: bytes) -> BinaryIO:
    """Open a tape file for writing blocks.

    An existing file is opened for appending. A new file is created and
    ``signature`` is written at its start.
    """
    path = Path(path)
    try:
        if path.exists():
            return path.open("ab")
        handle = path.open("wb")
    except OSError as exc:
        raise TapeError(f"cannot open target file '{path}'") from exc
    handle.write(signature)
    return handle