from io import StringIO
import logging
import typing as t
import attr
from capsink.errors import SinkError, SinkClosedError


log = logging.getLogger(__name__)


@attr.s
class CapturingSink:
    """In-memory sink which records written text for later inspection.

    Meant for tests: hand it to code writing through an `ISink` and assert on
    `get_content()` afterwards. Only `write` records anything. `write_chars`,
    `newline`, `flush` and `close` leave the captured text untouched, and the
    sink remains usable after `close`."""
    _buffer = attr.ib(init=False, repr=False, factory=StringIO)

    def write(self, s: t.Optional[str]) -> None:
        if s is None:
            return
        self._buffer.write(s)

    def write_chars(self, chars: t.Sequence[str], offset: int, length: int) -> None:
        # Captures nothing, only `write` is recorded
        pass

    def get_content(self) -> str:
        return self._buffer.getvalue()

    # Lets the sink stand in where a StringIO is expected
    getvalue = get_content

    def newline(self) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


@attr.s
class StreamSink:
    """Sink writing through to a text stream.

    Errors raised by the stream surface as `SinkError`. Once closed, any
    further use raises `SinkClosedError`. The stream itself is only closed
    if the sink owns it (see `StreamSink.open`)."""
    _stream = attr.ib(type=t.TextIO)
    _newline = attr.ib(default='\n', type=str)
    _owned = attr.ib(default=False, type=bool)
    _closed = attr.ib(init=False, default=False, type=bool)

    @classmethod
    def open(cls, path, newline: str = '\n', encoding: str = 'utf-8') -> "StreamSink":
        try:
            stream = open(str(path), 'w', encoding=encoding, newline='')
        except OSError as e:
            raise SinkError(f"cannot open '{path}' for writing") from e
        log.debug(f"opened sink to '{path}'")
        return cls(stream, newline=newline, owned=True)

    @property
    def closed(self) -> bool:
        return self._closed

    def __ensure_open(self):
        if self._closed:
            raise SinkClosedError(self)

    def __write(self, s: str):
        try:
            self._stream.write(s)
        except OSError as e:
            raise SinkError("failed to write to stream") from e

    def write(self, s: str) -> None:
        self.__ensure_open()
        self.__write(s)

    def write_chars(self, chars: t.Sequence[str], offset: int, length: int) -> None:
        self.__ensure_open()
        if offset < 0 or length < 0 or offset + length > len(chars):
            raise ValueError(
                f"range [{offset}, {offset + length}) out of bounds for {len(chars)} chars")
        self.__write(''.join(chars[offset:offset + length]))

    def newline(self) -> None:
        self.__ensure_open()
        self.__write(self._newline)

    def flush(self) -> None:
        self.__ensure_open()
        try:
            self._stream.flush()
        except OSError as e:
            raise SinkError("failed to flush stream") from e

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            try:
                self._stream.flush()
            finally:
                if self._owned:
                    self._stream.close()
        except OSError as e:
            raise SinkError("failed to close stream") from e
        log.debug("sink closed")

    def __enter__(self) -> "StreamSink":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
