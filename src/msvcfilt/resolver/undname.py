"""
Undecoration through an external tool: llvm-undname by default, or
Microsoft's undname.exe. This is the counterpart of DbgHelp for hosts
where DbgHelp.dll is not available.
"""
import logging
import re
import shutil
import subprocess
from typing import Optional

from ..errors import ResolverInitError
from .backend import ResolverBackend

logger = logging.getLogger(__name__)

# undname.exe prints:  is :- "void __cdecl foo(void)"
RE_UNDNAME_RESULT = re.compile(r'^is :- "(.*)"$')


def parse_undname_output(stdout: str, symbol: str) -> Optional[str]:
    """
    Pull the undecorated name out of llvm-undname or undname.exe output.
    llvm-undname echoes the input line before the result; undname.exe echoes
    the input back unchanged when it cannot undecorate it.
    """
    lines = [line.strip() for line in stdout.splitlines() if line.strip()]

    for line in lines:
        match = RE_UNDNAME_RESULT.match(line)
        if match:
            name = match.group(1)
            return name if name and name != symbol else None

    for line in lines:
        if line == symbol:
            continue
        if line.startswith("error:"):
            return None
        return line
    return None


class UndnameToolBackend(ResolverBackend):
    name = "undname"

    def __init__(self, tool: str = "llvm-undname", timeout: float = 5.0):
        self.tool = tool
        self.timeout = timeout
        self.tool_path: Optional[str] = None

    def initialize(self):
        path = shutil.which(self.tool)
        if not path:
            raise ResolverInitError(f"{self.tool} not found on PATH")
        self.tool_path = path
        logger.debug("Using %s for undecoration", path)

    def undecorate(self, symbol: str) -> Optional[str]:
        if not self.tool_path:
            return None
        try:
            result = subprocess.run(
                [self.tool_path, symbol],
                capture_output=True,
                text=True,
                check=False,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("%s failed on %r: %s", self.tool, symbol, e)
            return None

        if result.returncode != 0:
            return None
        return parse_undname_output(result.stdout, symbol)
