from capsink.protocols import ISink
from capsink.sink import CapturingSink, StreamSink
from capsink.errors import CapsinkError, SinkError, SinkClosedError

__all__ = [
    'ISink',
    'CapturingSink',
    'StreamSink',
    'CapsinkError',
    'SinkError',
    'SinkClosedError',
]
