import logging
from typing import BinaryIO

from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .base import Reader

logger = logging.getLogger(__name__)

# Errors worth another read attempt. Anything else is a real I/O failure.
TRANSIENT_ERRORS = (TimeoutError, BlockingIOError)


class StreamReader(Reader):
    """Reads a binary stream (file, socket file, pipe) in chunks.

    Retries only on transient transport errors, with exponential backoff.
    Never retries on end-of-stream or on hard I/O errors.
    """

    def __init__(
        self,
        stream: BinaryIO,
        chunk_size: int = 4096,
        max_retries: int = 3,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._stream = stream
        self._chunk_size = chunk_size
        self._max_retries = max_retries

    def read_more(self) -> bytes:
        for attempt in Retrying(
            stop=stop_after_attempt(self._max_retries + 1),
            wait=wait_exponential(multiplier=0.05, min=0.05, max=1),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                chunk = self._stream.read(self._chunk_size)
                if chunk is None:
                    # Non-blocking stream with nothing buffered yet.
                    raise BlockingIOError("No bytes available from stream")
                return bytes(chunk)
