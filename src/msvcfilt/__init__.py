from .parsing import LineRewriter, Resolver

__version__ = "1.0.0"


def undecorate_text(text: str, resolver: Resolver, keep_original: bool = False) -> str:
    """
    Pipeline: Decorated Text -> Candidates -> Resolved -> Human Readable
    """
    rewriter = LineRewriter(resolver, keep_original=keep_original)
    return "\n".join(rewriter.rewrite_line(line) for line in text.splitlines())
