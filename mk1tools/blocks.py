"""Builders for the standard (0x10) and turbo (0x11) TZX/CDT data blocks."""

from __future__ import annotations

from functools import reduce
from operator import xor

from .tzx import u16le, u24le

STANDARD_BLOCK_ID = 0x10
TURBO_BLOCK_ID = 0x11
CHUNK_SIZE = 256
CRC_POLY = 0x1021
USED_BITS = 8


def amstrad_crc16(chunk: bytes) -> int:
    """Return the CRC-16 that the CPC firmware appends to each 256-byte chunk.

    Chunks shorter than 256 bytes are padded with zeros, as on tape.
    """
    if len(chunk) > CHUNK_SIZE:
        raise ValueError(f"chunk longer than {CHUNK_SIZE} bytes: {len(chunk)}")
    crc = 0xFFFF
    for byte in bytes(chunk).ljust(CHUNK_SIZE, b"\0"):
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ CRC_POLY) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc ^ 0xFFFF


def standard_block(data: bytes, flag: int, pause: int) -> bytes:
    """Return a standard speed data block led by ``flag`` and closed by an XOR checksum."""
    flag &= 0xFF
    checksum = reduce(xor, data, flag)
    return (
        bytes([STANDARD_BLOCK_ID])
        + u16le(pause)
        + u16le(len(data) + 2)
        + bytes([flag])
        + bytes(data)
        + bytes([checksum & 0xFF])
    )


def turbo_block(
    data: bytes,
    flag: int,
    pause: int,
    baud_pulse: int,
    pilot_pulses: int = 4096,
    trailer: int = 4,
) -> bytes:
    """Return a turbo speed block in CPC firmware format.

    The data is split in 256-byte chunks, each followed by its CRC (high byte
    first), and the block ends with ``trailer`` bytes of 0xFF.
    """
    chunks = [bytes(data[start:start + CHUNK_SIZE]) for start in range(0, len(data), CHUNK_SIZE)]
    long_pulse = baud_pulse * 2
    out = bytearray([TURBO_BLOCK_ID])
    out += u16le(long_pulse)
    out += u16le(baud_pulse) * 3
    out += u16le(long_pulse)
    out += u16le(pilot_pulses)
    out.append(USED_BITS)
    out += u16le(pause)
    out += u24le(1 + len(chunks) * (CHUNK_SIZE + 2) + trailer)
    out.append(flag & 0xFF)
    for chunk in chunks:
        padded = chunk.ljust(CHUNK_SIZE, b"\0")
        out += padded
        out += amstrad_crc16(padded).to_bytes(2, "big")
    out += b"\xff" * trailer
    return bytes(out)