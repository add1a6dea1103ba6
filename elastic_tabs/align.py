"""
Column width computation and padded emission.

Elastic tabstops align *column blocks*: maximal runs of consecutive lines
that all have a cell at index ``col`` that is not their last cell. All cells
of a block share one width. The last cell of a line is never padded.
"""

from __future__ import annotations

from typing import BinaryIO, Callable, Optional, Sequence

from .buffer import Cell


def cell_widths(
    lines: Sequence[Sequence[Cell]],
    minwidth: int,
    on_visit: Optional[Callable[[int, int], None]] = None,
) -> list[list[int]]:
    """
    Compute the padded width of every non-trailing cell.

    Naively this looks like O(n^2 m) for n lines and m columns. It is O(nm):
    a block found while scanning line i assigns its width to every line it
    covers, and those lines start their own scans after the columns already
    assigned to them, so each width is computed exactly once.

    Args:
        lines: Terminated cells grouped by line
        minwidth: Floor for every column width
        on_visit: Called with (line index, column) for every cell read

    Returns:
        One list per line holding a width for each cell but the last
    """
    widths: list[list[int]] = [[] for _ in lines]
    for i, iline in enumerate(lines):
        if not iline:
            continue
        for col in range(len(widths[i]), len(iline) - 1):
            width = minwidth
            contig = 0
            for j in range(i, len(lines)):
                line = lines[j]
                if col + 1 >= len(line):  # col is trailing (or absent) here
                    break
                if on_visit is not None:
                    on_visit(j, col)
                width = max(width, line[col].width)
                contig += 1
            for j in range(i, i + contig):
                widths[j].append(width)
    return widths


def emit(
    sink: BinaryIO,
    buf: bytes,
    lines: Sequence[Sequence[Cell]],
    widths: Sequence[Sequence[int]],
    padding: int,
) -> int:
    """
    Write every buffered line to ``sink`` with computed padding.

    Lines are separated by a single newline; nothing is appended after the
    last line. Each non-trailing cell is followed by
    ``padding + (width - cell.width)`` spaces. Short writes are retried until
    each line is fully written. Exceptions raised by the sink propagate
    unchanged and whatever was already written stays written.

    Returns:
        Number of bytes handed to the sink
    """
    written = 0
    for n, (line, line_widths) in enumerate(zip(lines, widths)):
        parts = [b"\n"] if n else []
        for k, cell in enumerate(line):
            parts.append(buf[cell.start:cell.end])
            if k < len(line_widths):
                assert line_widths[k] >= cell.width
                parts.append(b" " * (padding + line_widths[k] - cell.width))
        chunk = b"".join(parts)
        if chunk:
            _write_all(sink, chunk)
            written += len(chunk)
    return written


def _write_all(sink: BinaryIO, chunk: bytes) -> None:
    """
    Hand all of ``chunk`` to the sink, retrying after short writes.

    A sink whose ``write`` returns None is taken to have accepted everything,
    as buffered files and most writer objects do.
    """
    while chunk:
        n = sink.write(chunk)
        if n is None or n >= len(chunk):
            return
        if n == 0:
            raise OSError("sink accepted no bytes")
        chunk = chunk[n:]
