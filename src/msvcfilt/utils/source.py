"""
Input sources for the filter.
A run reads either from strings given on the command line or from a text
stream (normally stdin). The choice is made once, by open_source().
"""
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, Iterator, Optional, TextIO


class InputSource(ABC):
    @abstractmethod
    def next_line(self) -> Optional[str]:
        """Return the next line without its terminator, or None when exhausted."""

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


class QueueSource(InputSource):
    """Hands out a fixed list of strings front to back, one per line."""
    def __init__(self, strings: Iterable[str]):
        self.queue = deque(strings)

    def next_line(self) -> Optional[str]:
        if not self.queue:
            return None
        return self.queue.popleft()


class StreamSource(InputSource):
    """Reads one line per call from a text stream until EOF or a read failure."""
    def __init__(self, stream: TextIO):
        self.stream = stream
        self.exhausted = False

    def next_line(self) -> Optional[str]:
        if self.exhausted:
            return None
        try:
            line = self.stream.readline()
        except UnicodeDecodeError:
            raise
        except (OSError, ValueError):
            # ValueError: I/O operation on closed file
            self.exhausted = True
            return None

        if not line:
            self.exhausted = True
            return None

        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line


def use_surrogateescape(stream: Optional[TextIO]):
    """
    Let undecodable bytes round-trip through a text stream unchanged.
    Streams that cannot be reconfigured (StringIO, None) are left alone.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def open_source(strings: Optional[Iterable[str]], stream: Optional[TextIO]) -> InputSource:
    """
    Pick the input mode for a run.
    Any literal strings win and the stream is never touched; otherwise lines
    come from the stream.
    """
    strings = list(strings or [])
    if strings:
        return QueueSource(strings)
    if stream is None:
        raise ValueError("No input strings and no stream to read from")
    return StreamSource(stream)
