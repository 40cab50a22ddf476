from .scanner import RE_DECORATED_SYMBOL, Candidate, scan_line, trailing_text
from .rewriter import LineRewriter, Resolver

__all__ = [
    "RE_DECORATED_SYMBOL",
    "Candidate",
    "scan_line",
    "trailing_text",
    "LineRewriter",
    "Resolver",
]
