from abc import ABC, abstractmethod
from typing import Optional

# DbgHelp's MAX_SYM_NAME; the longest decorated name any backend is handed
MAX_SYMBOL_NAME_LEN = 2000


class ResolverBackend(ABC):
    """
    A platform service that turns a decorated name into its undecorated form.
    initialize() raises ResolverInitError when the service is unavailable.
    """
    name = "backend"

    @abstractmethod
    def initialize(self):
        ...

    @abstractmethod
    def undecorate(self, symbol: str) -> Optional[str]:
        """Return the undecorated name, or None if the service rejects the symbol."""

    def cleanup(self):
        pass
