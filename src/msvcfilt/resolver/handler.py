import logging
import threading
from enum import Enum
from typing import Optional

from ..errors import ResolverInitError
from .backend import MAX_SYMBOL_NAME_LEN, ResolverBackend

logger = logging.getLogger(__name__)


class HandlerState(str, Enum):
    NEW = "new"
    READY = "ready"
    FAILED = "failed"
    CLOSED = "closed"


class SymbolHandler:
    """
    The process's one handle on the name-resolution backend.

    The backend is initialized on the first resolve() call and never again:
    if that fails, every later call reports "unresolved" without retrying.
    close() tears the backend down once, and only if it came up.
    """
    def __init__(self, backend: ResolverBackend):
        self.backend = backend
        self.state = HandlerState.NEW
        self._lock = threading.Lock()

    def _ensure_initialized(self) -> bool:
        if self.state is HandlerState.NEW:
            try:
                self.backend.initialize()
            except ResolverInitError as e:
                logger.warning("Symbol resolver '%s' unavailable, names will pass through: %s", self.backend.name, e)
                self.state = HandlerState.FAILED
            else:
                self.state = HandlerState.READY
        return self.state is HandlerState.READY

    def resolve(self, candidate: str) -> Optional[str]:
        with self._lock:
            if not self._ensure_initialized():
                return None
            if len(candidate) > MAX_SYMBOL_NAME_LEN:
                return None
            return self.backend.undecorate(candidate)

    def close(self):
        with self._lock:
            if self.state is HandlerState.READY:
                self.backend.cleanup()
            self.state = HandlerState.CLOSED

    def __enter__(self) -> "SymbolHandler":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
