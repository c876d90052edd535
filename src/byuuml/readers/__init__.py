from .base import Reader
from .bytes_reader import BytesReader, ChunkedReader
from .stream_reader import StreamReader

__all__ = [
    "BytesReader",
    "ChunkedReader",
    "Reader",
    "StreamReader",
]
