class CapsinkError(Exception):
    pass


class SinkError(CapsinkError):
    """Writing to, flushing or closing a sink failed."""
    pass


class SinkClosedError(SinkError):
    def __init__(self, sink):
        self.sink = sink
        super().__init__(f"cannot use closed sink {sink!r}")
