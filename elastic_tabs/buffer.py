"""
Cell and line buffering for one alignment round.

All bytes of a round live in a single append-only ``bytearray``. Cells refer
into it by offset and size, so terminating a cell never copies its contents.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from .width import display_columns


TAB = 0x09
NEWLINE = 0x0A

_DELIMITER_RE = re.compile(rb"[\t\n]")


@dataclass
class Cell:
    """
    One tab- or newline-delimited field.

    Attributes:
        start: Offset of the cell's first byte in the round buffer
        size: Length of the cell's contents in bytes
        width: Display columns; 0 until the cell is terminated
    """
    start: int
    size: int = 0
    width: int = 0

    @property
    def end(self) -> int:
        return self.start + self.size

    def update_width(self, buf: bytearray) -> None:
        self.width = display_columns(memoryview(buf)[self.start:self.end])


class LineBuffer:
    """
    Buffered cells and lines since the last reset.

    ``lines`` always holds at least one entry; the last one is the line
    currently being filled. ``curcell`` is the cell under construction and
    is not part of any line until it is terminated.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Discard all buffered bytes, lines and the in-progress cell."""
        self.buf = bytearray()
        self.lines: list[list[Cell]] = [[]]
        self.curcell = Cell(0)

    @property
    def current_line(self) -> list[Cell]:
        return self.lines[-1]

    @property
    def is_empty(self) -> bool:
        return not self.buf and not any(self.lines)

    def add_bytes(self, data: bytes) -> None:
        """Append bytes to the in-progress cell."""
        self.curcell.size += len(data)
        self.buf += data

    def terminate_current_cell(self) -> Cell:
        """
        Close the in-progress cell and start a fresh one after it.

        The closed cell gets its width computed and is appended to the
        current line.
        """
        cell, self.curcell = self.curcell, Cell(len(self.buf))
        cell.update_width(self.buf)
        self.current_line.append(cell)
        return cell

    def finish(self) -> None:
        """Terminate the in-progress cell if it holds any bytes."""
        if self.curcell.size > 0:
            self.terminate_current_cell()

    def cell_bytes(self, cell: Cell) -> bytes:
        return bytes(self.buf[cell.start:cell.end])

    def consume(self, data: bytes, on_break: Callable[[], None]) -> None:
        """
        Split ``data`` into cells and lines.

        ``on_break`` is called as soon as a newline completes a line that
        holds a single cell: no column block can continue across such a
        line, so everything buffered so far is ready to be aligned. The
        callback is expected to emit and reset this buffer; consumption
        then continues into the emptied buffer.

        Args:
            data: Raw bytes; multi-byte sequences may be split across calls
            on_break: Round-boundary callback
        """
        last = 0
        for match in _DELIMITER_RE.finditer(data):
            i = match.start()
            self.add_bytes(data[last:i])
            self.terminate_current_cell()
            last = i + 1
            if data[i] == NEWLINE:
                ncells = len(self.current_line)
                self.lines.append([])
                if ncells == 1:
                    on_break()
        self.add_bytes(data[last:])
