# src/byuuml/parsing/scanner.py

"""Logical line scanner.

Reassembles lines from a byte source that may split them at any point.
``\\n`` and ``\\r`` are interchangeable terminators and any run of them is a
single boundary, so empty lines never reach the caller. Lines starting with
``//`` are comments and are dropped here.
"""

import logging
import re
from collections.abc import Iterator

from byuuml.readers.base import Reader

logger = logging.getLogger(__name__)

_TERMINATOR_RUN = re.compile(rb"[\r\n]*")
_TERMINATOR = re.compile(rb"[\r\n]")

COMMENT_MARKER = b"//"


class LineScanner:
    def __init__(self, reader: Reader) -> None:
        self._reader = reader
        # Either the latest chunk as handed back by the reader, or a scratch
        # bytearray holding a line stitched together from several chunks.
        self._buf: bytes | bytearray = b""
        self._pos = 0
        self.chunks_read = 0
        self.bytes_read = 0
        self.lines_read = 0

    def next_line(self) -> bytes | None:
        """Return the next non-comment logical line, or None at end of input."""
        while True:
            line = self._read_line()
            if line is None:
                return None
            if line.startswith(COMMENT_MARKER):
                logger.debug("Skipping comment line: %r", line)
                continue
            self.lines_read += 1
            return line

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line

    def _read_more(self) -> bytes:
        chunk = self._reader.read_more()
        if chunk:
            self.chunks_read += 1
            self.bytes_read += len(chunk)
            logger.debug("Read chunk of %d bytes", len(chunk))
        return chunk

    def _read_line(self) -> bytes | None:
        # Bytes of a stitched line already known to hold no terminator.
        scanned = 0
        while True:
            buf = self._buf
            start = _TERMINATOR_RUN.match(buf, self._pos).end()
            if start == len(buf):
                # Nothing but terminators left; drop them and refill.
                chunk = self._read_more()
                if not chunk:
                    self._buf, self._pos = b"", 0
                    return None
                self._buf, self._pos = chunk, 0
                scanned = 0
                continue

            found = _TERMINATOR.search(buf, max(start, scanned))
            if found is not None:
                self._pos = found.start()
                return bytes(buf[start : found.start()])

            # The line runs to the end of what we hold; its end is unknown.
            chunk = self._read_more()
            if not chunk:
                self._buf, self._pos = b"", 0
                return bytes(buf[start:])
            if start == 0 and isinstance(buf, bytearray):
                stitched = buf
            else:
                stitched = bytearray(buf[start:])
            scanned = len(stitched)
            stitched += chunk
            self._buf, self._pos = stitched, 0
