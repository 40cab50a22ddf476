import logging
from typing import Iterable, Optional, Protocol, TextIO

from .scanner import Candidate, scan_line, trailing_text

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    def resolve(self, candidate: str) -> Optional[str]:
        ...


class LineRewriter:
    """
    Replaces (or annotates) decorated names in each line with what the
    resolver returns. Candidates the resolver rejects are copied through
    untouched, as is all text between candidates.
    """
    def __init__(self, resolver: Resolver, keep_original: bool = False):
        self.resolver = resolver
        self.keep_original = keep_original

    def substitute(self, candidate: Candidate) -> str:
        resolved = self.resolver.resolve(candidate.text)
        if resolved is None:
            logger.debug("Unresolved candidate %r", candidate.text)
            return candidate.text
        if self.keep_original:
            return f'{candidate.text} "{resolved}"'
        return resolved

    def rewrite_line(self, line: str) -> str:
        parts = []
        last = None
        for candidate in scan_line(line):
            parts.append(candidate.prefix)
            parts.append(self.substitute(candidate))
            last = candidate
        parts.append(trailing_text(line, last))
        return "".join(parts)

    def run(self, lines: Iterable[str], out: TextIO) -> int:
        """Rewrite every line into `out`, one terminator per line. Returns the line count."""
        count = 0
        for line in lines:
            out.write(self.rewrite_line(line))
            out.write("\n")
            out.flush()
            count += 1
        return count
