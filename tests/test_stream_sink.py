from io import StringIO
import pytest
from capsink.sink import StreamSink
from capsink.errors import SinkError, SinkClosedError


class FailingStream(StringIO):
    def write(self, s):
        raise OSError("disk full")

    def flush(self):
        raise OSError("disk full")


def test_write_passes_through():
    buf = StringIO()
    sink = StreamSink(buf)
    sink.write("hello, ")
    sink.write("world")
    assert buf.getvalue() == "hello, world"


def test_newline_uses_separator():
    buf = StringIO()
    sink = StreamSink(buf, newline='\r\n')
    sink.write("a")
    sink.newline()
    sink.write("b")
    assert buf.getvalue() == "a\r\nb"


def test_write_chars_honours_range():
    buf = StringIO()
    sink = StreamSink(buf)
    sink.write_chars(list("abcdef"), 1, 3)
    assert buf.getvalue() == "bcd"


@pytest.mark.parametrize("offset, length", [(-1, 1), (0, -1), (2, 5)])
def test_write_chars_rejects_bad_range(offset, length):
    sink = StreamSink(StringIO())
    with pytest.raises(ValueError):
        sink.write_chars(list("abc"), offset, length)


def test_use_after_close_raises():
    buf = StringIO()
    sink = StreamSink(buf)
    sink.close()
    assert sink.closed
    with pytest.raises(SinkClosedError):
        sink.write("x")
    with pytest.raises(SinkClosedError):
        sink.newline()
    # closing twice is fine
    sink.close()


def test_borrowed_stream_stays_open():
    buf = StringIO()
    with StreamSink(buf) as sink:
        sink.write("x")
    assert not buf.closed
    assert buf.getvalue() == "x"


def test_os_errors_become_sink_errors():
    sink = StreamSink(FailingStream())
    with pytest.raises(SinkError) as exc_info:
        sink.write("x")
    assert isinstance(exc_info.value.__cause__, OSError)
    with pytest.raises(SinkError):
        sink.flush()


def test_open_owns_file(tmp_path):
    path = tmp_path.joinpath("out.txt")
    sink = StreamSink.open(path, newline='\n')
    sink.write("a")
    sink.newline()
    sink.write_chars("bc", 0, 2)
    sink.close()
    assert path.read_text() == "a\nbc"


def test_open_missing_dir_raises(tmp_path):
    with pytest.raises(SinkError):
        StreamSink.open(tmp_path.joinpath("nope", "out.txt"))


class FlushFailingStream:
    def __init__(self):
        self.closed = False

    def write(self, s):
        pass

    def flush(self):
        raise OSError("disk full")

    def close(self):
        self.closed = True


def test_owned_stream_closed_when_flush_fails():
    stream = FlushFailingStream()
    sink = StreamSink(stream, owned=True)
    with pytest.raises(SinkError):
        sink.close()
    assert stream.closed, "owned stream must be closed even if flushing fails"
    assert sink.closed
