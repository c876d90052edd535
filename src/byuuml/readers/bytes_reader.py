from collections.abc import Iterable

from .base import Reader


class BytesReader(Reader):
    """Serves an in-memory buffer in fixed-size slices."""

    def __init__(self, data: bytes, chunk_size: int = 4096) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        self._data = memoryview(bytes(data))
        self._chunk_size = chunk_size
        self._offset = 0

    def read_more(self) -> bytes:
        start = self._offset
        end = min(start + self._chunk_size, len(self._data))
        self._offset = end
        return self._data[start:end].tobytes()


class ChunkedReader(Reader):
    """Serves caller-supplied chunks verbatim.

    Useful for feeding the parser from generators and for exercising
    arbitrary read boundaries. Empty chunks are skipped, since returning one
    would end the stream early.
    """

    def __init__(self, chunks: Iterable[bytes]) -> None:
        self._chunks = iter(chunks)

    def read_more(self) -> bytes:
        for chunk in self._chunks:
            if chunk:
                return bytes(chunk)
        return b""
