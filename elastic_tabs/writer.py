"""
TabWriter: elastic tabstops over a binary sink.

Contiguous column blocks indicated by tabs are aligned. When a line without
any tab arrives it breaks every block, and all buffered output is written to
the sink immediately. Otherwise output stays buffered until ``finalize`` (or
``flush``) is called; all text considered in one alignment must fit in
memory.

Example::

    tw = TabWriter(io.BytesIO())
    tw.write(b"Bruce Springsteen\\tBorn to Run\\nBob Seger\\tNight Moves\\n")
    tw.finalize()

A sink error leaves the round buffered. Calling ``finalize`` again re-emits
the whole round from its first line, so bytes written before the failure
are written a second time.
"""

from __future__ import annotations

from typing import BinaryIO, Optional

from .align import cell_widths, emit
from .buffer import LineBuffer
from .config import TabWriterConfig
from .logging_config import get_logger


logger = get_logger(__name__)


class TabWriter:
    """
    Wraps a binary sink and aligns tab-delimited output written through it.

    The sink needs only a ``write(bytes)`` method. It is referenced, never
    closed. Instances are not thread-safe.
    """

    def __init__(
        self,
        sink: BinaryIO,
        minwidth: Optional[int] = None,
        padding: Optional[int] = None,
        *,
        config: Optional[TabWriterConfig] = None,
    ):
        config = config or TabWriterConfig()
        self._config = TabWriterConfig(
            minwidth=config.minwidth if minwidth is None else minwidth,
            padding=config.padding if padding is None else padding,
        )
        self._sink = sink
        self._buffer = LineBuffer()
        self.rounds = 0

    @classmethod
    def from_config(cls, sink: BinaryIO, config: TabWriterConfig) -> TabWriter:
        return cls(sink, config=config)

    @property
    def minwidth(self) -> int:
        return self._config.minwidth

    @property
    def padding(self) -> int:
        return self._config.padding

    @property
    def config(self) -> TabWriterConfig:
        return self._config

    @property
    def sink(self) -> BinaryIO:
        return self._sink

    def with_minwidth(self, minwidth: int) -> TabWriter:
        """Set the minimum width of every column. Default 2."""
        self._config = TabWriterConfig(minwidth=minwidth, padding=self.padding)
        return self

    def with_padding(self, padding: int) -> TabWriter:
        """
        Set the minimum gap between columns. Default 2.

        With a padding of zero, a column's widest cell runs straight into
        the next column.
        """
        self._config = TabWriterConfig(minwidth=self.minwidth, padding=padding)
        return self

    def write(self, data: bytes) -> int:
        """
        Buffer ``data``, aligning and emitting early when a line without
        tabs completes a round.

        Returns:
            len(data); all bytes are always accepted

        Raises:
            Whatever the sink raises during an early flush
        """
        data = bytes(data)
        self._buffer.consume(data, self._on_break)
        return len(data)

    def write_str(self, text: str, encoding: str = "utf-8") -> int:
        return self.write(text.encode(encoding))

    def _on_break(self) -> None:
        logger.debug("line without tabs closes round %d", self.rounds + 1)
        self._align_and_emit()

    def finalize(self) -> None:
        """
        Align and emit everything buffered so far.

        Must be called at end of input or trailing data never reaches the
        sink. On success the buffer is reset and the sink flushed if it
        supports flushing. On failure the buffer is left as it was.
        """
        self._buffer.finish()
        self._align_and_emit()
        flush = getattr(self._sink, "flush", None)
        if callable(flush):
            flush()

    def flush(self) -> None:
        """Same as finalize, for callers expecting a file-like object."""
        self.finalize()

    def _align_and_emit(self) -> None:
        buffer = self._buffer
        if buffer.is_empty:
            return
        widths = cell_widths(buffer.lines, self.minwidth)
        try:
            written = emit(self._sink, buffer.buf, buffer.lines, widths, self.padding)
        except Exception as e:
            logger.warning("sink write failed, round %d left buffered: %s", self.rounds + 1, e)
            raise
        self.rounds += 1
        logger.debug(
            "round %d: aligned %d lines, wrote %d bytes",
            self.rounds, len(buffer.lines), written,
        )
        buffer.reset()

    def into_sink(self) -> BinaryIO:
        """
        Return the underlying sink.

        Call ``finalize`` first or buffered data is lost.
        """
        return self._sink

    def __enter__(self) -> TabWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.finalize()
