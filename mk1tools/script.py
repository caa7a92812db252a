"""Interpreter for compiled game scripts."""

from __future__ import annotations

from collections.abc import MutableSequence

MAX_FLAGS = 5
END = 0xFF
FLAG_REFERENCE = 0x80


class ScriptRunner:
    """Runs the compiled script section stored in ``data``.

    ``offset`` is where the current level's script table starts; the table
    holds one little-endian pointer, relative to ``offset``, per script.
    """

    def __init__(
        self,
        data: bytes,
        flags: MutableSequence[int] | None = None,
        offset: int = 0,
    ) -> None:
        self.data = bytes(data)
        self.flags = flags if flags is not None else [0] * MAX_FLAGS
        self.offset = offset
        self.position = offset

    def read_byte(self) -> int:
        """Read the next byte of script."""
        if not 0 <= self.position < len(self.data):
            raise IndexError(f"script read past end of data at {self.position}")
        value = self.data[self.position]
        self.position += 1
        return value

    def _resolve(self, value: int) -> int:
        if value & FLAG_REFERENCE:
            return self.flags[value & 0x7F]
        return value

    def read_vbyte(self) -> int:
        """Read a byte that may refer to a flag (bit 7 set)."""
        return self._resolve(self.read_byte())

    def read_xy(self) -> tuple[int, int]:
        """Read a pair of coordinates, each possibly a flag reference."""
        x = self.read_vbyte()
        y = self.read_vbyte()
        return x, y

    def read_flag_pair(self) -> tuple[int, int]:
        """Read a flag number and a value, each possibly a flag reference."""
        flag = self.read_vbyte()
        value = self.read_vbyte()
        return flag, value

    def _read_until_end(self) -> None:
        while self.read_byte() != END:
            pass

    def run_script(self, which: int) -> int:
        """Run script number ``which``; return how many clauses had their actions run."""
        entry = self.offset + 2 * which
        if entry + 1 >= len(self.data) or entry < 0:
            raise IndexError(f"no script table entry for script {which}")
        pointer = self.data[entry] | (self.data[entry + 1] << 8)
        if pointer == 0:
            return 0
        self.position = self.offset + pointer
        executed = 0
        while (length := self.read_byte()) != END:
            next_clause = self.position + length
            # Conditions: the only one known is THEN, which ends the list.
            self._read_until_end()
            executed += 1
            self._read_until_end()
            self.position = next_clause
        return executed