"""
DbgHelp-based undecoration (Windows only).
Calls UnDecorateSymbolName from DbgHelp.dll through ctypes, after
SymInitialize has been run for the current process.
"""
import ctypes
import logging
import sys
from typing import Optional

from ..errors import ResolverInitError
from .backend import MAX_SYMBOL_NAME_LEN, ResolverBackend

logger = logging.getLogger(__name__)

UNDNAME_COMPLETE = 0x0000


class DbgHelpBackend(ResolverBackend):
    name = "dbghelp"

    def __init__(self, flags: int = UNDNAME_COMPLETE):
        self.flags = flags
        self._process = None
        self._undecorate_fn = None
        self._cleanup_fn = None
        self._buffer = None

    def initialize(self):
        if sys.platform != "win32":
            raise ResolverInitError("DbgHelp is only available on Windows")

        from ctypes import wintypes

        try:
            dbghelp = ctypes.WinDLL("dbghelp", use_last_error=True)
            kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        except OSError as e:
            raise ResolverInitError(f"Cannot load DbgHelp.dll: {e}") from e

        kernel32.GetCurrentProcess.argtypes = []
        kernel32.GetCurrentProcess.restype = wintypes.HANDLE

        dbghelp.SymInitialize.argtypes = [wintypes.HANDLE, wintypes.LPCSTR, wintypes.BOOL]
        dbghelp.SymInitialize.restype = wintypes.BOOL
        dbghelp.SymCleanup.argtypes = [wintypes.HANDLE]
        dbghelp.SymCleanup.restype = wintypes.BOOL

        # DWORD UnDecorateSymbolName(PCSTR name, PSTR outputString, DWORD maxStringLength, DWORD flags)
        dbghelp.UnDecorateSymbolName.argtypes = [wintypes.LPCSTR, ctypes.c_char_p, wintypes.DWORD, wintypes.DWORD]
        dbghelp.UnDecorateSymbolName.restype = wintypes.DWORD

        process = kernel32.GetCurrentProcess()
        if not dbghelp.SymInitialize(process, None, False):
            raise ResolverInitError(f"SymInitialize failed (error {ctypes.get_last_error()})")

        self._process = process
        self._undecorate_fn = dbghelp.UnDecorateSymbolName
        self._cleanup_fn = dbghelp.SymCleanup
        self._buffer = ctypes.create_string_buffer(MAX_SYMBOL_NAME_LEN + 1)
        logger.debug("DbgHelp symbol handler initialized")

    def undecorate(self, symbol: str) -> Optional[str]:
        if self._undecorate_fn is None:
            return None
        written = self._undecorate_fn(symbol.encode("utf-8"), self._buffer, MAX_SYMBOL_NAME_LEN, self.flags)
        if not written:
            return None
        name = self._buffer.value.decode("utf-8", errors="replace")
        # Names DbgHelp cannot parse may come back verbatim
        return name if name != symbol else None

    def cleanup(self):
        if self._cleanup_fn is not None and self._process is not None:
            self._cleanup_fn(self._process)
            logger.debug("DbgHelp symbol handler cleaned up")
        self._process = None
        self._undecorate_fn = None
        self._cleanup_fn = None
