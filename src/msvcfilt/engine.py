import logging
import sys
from typing import List, Optional, TextIO

from .errors import ConfigError
from .parsing import LineRewriter
from .resolver import SymbolHandler, create_backend
from .utils.config import ConfigManager
from .utils.source import open_source

logger = logging.getLogger(__name__)


def undname_timeout(config: ConfigManager) -> float:
    value = config.get("undname_timeout", 5.0)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"undname_timeout must be a positive number of seconds, got {value!r}")
    return float(value)


class FilterEngine:
    """
    Wires one run together: input source, symbol handler and rewriter.
    The engine owns the handler; it is closed when run() finishes.
    """
    def __init__(
        self,
        config: ConfigManager,
        inputs: Optional[List[str]] = None,
        keep_original: Optional[bool] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        handler: Optional[SymbolHandler] = None,
    ):
        self.config = config
        if keep_original is None:
            keep_original = bool(config.get("keep_original", False))
        self.keep_original = keep_original

        self.source = open_source(inputs, stdin if stdin is not None else sys.stdin)
        self.out = stdout if stdout is not None else sys.stdout

        if handler is None:
            backend = create_backend(
                config.get("resolver", "auto"),
                tool=config.get("undname_tool", "llvm-undname"),
                timeout=undname_timeout(config),
            )
            handler = SymbolHandler(backend)
        self.handler = handler
        self.rewriter = LineRewriter(self.handler, keep_original=self.keep_original)

    def run(self) -> int:
        logger.debug(
            "Filtering %s with resolver '%s' (keep_original=%s)",
            type(self.source).__name__, self.handler.backend.name, self.keep_original,
        )
        with self.handler:
            count = self.rewriter.run(self.source, self.out)
        logger.debug("Wrote %d line(s)", count)
        return count
