import sys

from ..errors import ConfigError
from .backend import MAX_SYMBOL_NAME_LEN, ResolverBackend
from .dbghelp import DbgHelpBackend
from .handler import HandlerState, SymbolHandler
from .undname import UndnameToolBackend, parse_undname_output

RESOLVER_CHOICES = ("auto", "dbghelp", "undname")


def create_backend(name: str = "auto", tool: str = "llvm-undname", timeout: float = 5.0) -> ResolverBackend:
    """Pick a backend by name. 'auto' means DbgHelp on Windows, the external tool elsewhere."""
    if name == "auto":
        name = "dbghelp" if sys.platform == "win32" else "undname"
    if name == "dbghelp":
        return DbgHelpBackend()
    if name == "undname":
        return UndnameToolBackend(tool=tool, timeout=timeout)
    raise ConfigError(f"Unknown resolver '{name}', expected one of: {', '.join(RESOLVER_CHOICES)}")


__all__ = [
    "MAX_SYMBOL_NAME_LEN",
    "RESOLVER_CHOICES",
    "ResolverBackend",
    "DbgHelpBackend",
    "UndnameToolBackend",
    "HandlerState",
    "SymbolHandler",
    "create_backend",
    "parse_undname_output",
]
