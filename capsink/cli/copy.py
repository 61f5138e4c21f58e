import logging
import typing as t
from pathlib import Path
from capsink.protocols import ISink


log = logging.getLogger(__name__)


def copy_files(sink: ISink, paths: t.Iterable[Path], encoding: str = 'utf-8') -> int:
    """Copy the lines of each file in `paths` through `sink`.

    Line separators are not copied, instead `sink.newline()` is called
    between lines so the sink decides how lines are terminated.

    Returns
    -------
        The number of lines written.
    """
    lines = 0
    for path in paths:
        log.info(f"copying '{path}'")
        with open(str(path), 'r', encoding=encoding) as f:
            for line in f:
                if lines:
                    sink.newline()
                sink.write(line.rstrip('\r\n'))
                lines += 1
    sink.flush()
    log.debug(f"copied {lines} line(s)")
    return lines
