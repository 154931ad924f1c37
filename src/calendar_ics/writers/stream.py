"""Buffered sink over a file-like destination."""

import io
import logging
from typing import IO, Any

from ..utils.exceptions import CalendarWriteError
from .base import Sink

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 4096


class StreamSink(Sink):
    """
    Buffer encoder output and drain it into a file object.

    Text destinations (``io.TextIOBase``) receive ``str``; anything else
    receives bytes in ``encoding``. Text files must be opened with
    ``newline=""`` so CRLF terminators are not translated; prefer binary
    destinations. The buffer is drained when it reaches ``buffer_size``
    characters and on ``flush()``.
    """

    def __init__(
        self,
        destination: IO[Any],
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
    ):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.destination = destination
        self.buffer_size = buffer_size
        self.encoding = encoding
        self.bytes_written = 0
        self._text_mode = isinstance(destination, io.TextIOBase)
        self._buffer: list[str] = []
        self._buffered = 0

    def write(self, data: str) -> None:
        self._buffer.append(data)
        self._buffered += len(data)
        if self._buffered >= self.buffer_size:
            self._drain()

    def flush(self) -> None:
        self._drain()
        flush = getattr(self.destination, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except (OSError, ValueError) as e:
            raise CalendarWriteError(f"Failed to flush calendar output: {e}") from e

    def _drain(self) -> None:
        if not self._buffer:
            return
        text = "".join(self._buffer)
        self._buffer.clear()
        self._buffered = 0

        payload = text if self._text_mode else text.encode(self.encoding)
        try:
            self.destination.write(payload)
        except (OSError, ValueError) as e:
            raise CalendarWriteError(f"Failed to write calendar output: {e}") from e

        self.bytes_written += len(text.encode(self.encoding)) if self._text_mode else len(payload)
        logger.debug(f"Drained {len(text)} characters to destination")
