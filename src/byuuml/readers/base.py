from typing import Protocol


class Reader(Protocol):
    """Byte source consumed by the line scanner.

    Design principles:
    - Pull only: the scanner asks for more bytes when it needs them
    - No alignment: chunks may split lines (or terminators) anywhere
    - Sticky end: once ``b""`` is returned the source is exhausted
    """

    def read_more(self) -> bytes:
        """Return newly available bytes, or ``b""`` at end-of-stream."""
        ...
