import re
from typing import Iterator, NamedTuple, Optional

# A '?' followed by identifier-ish characters. Only a guess at what an MSVC
# decorated name looks like; the resolver has the final word.
RE_DECORATED_SYMBOL = re.compile(r"\?[a-zA-Z0-9_@?$]+")


class Candidate(NamedTuple):
    prefix: str  # literal text between the previous match (or line start) and this one
    start: int
    end: int
    text: str


def scan_line(line: str) -> Iterator[Candidate]:
    """
    Yields every decorated-name candidate in the line, left to right,
    non-overlapping. Nothing is carried over between calls.
    """
    prev_end = 0
    for match in RE_DECORATED_SYMBOL.finditer(line):
        yield Candidate(
            prefix=line[prev_end:match.start()],
            start=match.start(),
            end=match.end(),
            text=match.group(0),
        )
        prev_end = match.end()


def trailing_text(line: str, last: Optional[Candidate]) -> str:
    """Text after the last candidate, or the whole line when there was none."""
    if last is None:
        return line
    return line[last.end:]
