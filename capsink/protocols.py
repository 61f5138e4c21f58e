import typing as t
from typing_extensions import Protocol


class ISink(Protocol):
    """Destination for text output.

    Implementations may raise `capsink.errors.SinkError` from any of these
    operations when the underlying medium fails."""
    def write(self, s: str) -> None:
        ...

    def write_chars(self, chars: t.Sequence[str], offset: int, length: int) -> None:
        ...

    def newline(self) -> None:
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        ...
