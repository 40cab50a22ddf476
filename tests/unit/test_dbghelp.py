"""
Unit tests for the DbgHelp backend. The ctypes functions are replaced with
fakes, so these run on any platform; the last class needs real Windows.
"""
import ctypes
import sys
import pytest
from unittest.mock import patch, MagicMock
from msvcfilt.errors import ResolverInitError
from msvcfilt.resolver import MAX_SYMBOL_NAME_LEN, DbgHelpBackend


def _wired_backend(result=b"void __cdecl foo(void)"):
    """A backend with fake DbgHelp entry points, as if initialize() had run."""
    backend = DbgHelpBackend()

    def fake_undecorate(name, buf, size, flags):
        fake_undecorate.calls.append((name, size, flags))
        if result is None:
            return 0
        buf.value = result
        return len(result)

    fake_undecorate.calls = []
    backend._process = 42
    backend._buffer = ctypes.create_string_buffer(MAX_SYMBOL_NAME_LEN + 1)
    backend._undecorate_fn = fake_undecorate
    backend._cleanup_fn = MagicMock(return_value=1)
    return backend, fake_undecorate


class TestInitialize:

    def test_not_windows(self):
        with patch("sys.platform", "linux"):
            with pytest.raises(ResolverInitError):
                DbgHelpBackend().initialize()


class TestUndecorate:

    def test_success(self):
        backend, fake = _wired_backend()
        assert backend.undecorate("?foo@@YAXXZ") == "void __cdecl foo(void)"
        assert fake.calls == [(b"?foo@@YAXXZ", MAX_SYMBOL_NAME_LEN, 0)]

    def test_failure(self):
        backend, _ = _wired_backend(result=None)
        assert backend.undecorate("?bad@") is None

    def test_echoed_input_is_unresolved(self):
        backend, _ = _wired_backend(result=b"?bad@")
        assert backend.undecorate("?bad@") is None

    def test_not_initialized(self):
        assert DbgHelpBackend().undecorate("?foo@@YAXXZ") is None


class TestCleanup:

    def test_calls_symcleanup_with_process(self):
        backend, _ = _wired_backend()
        cleanup = backend._cleanup_fn
        backend.cleanup()
        cleanup.assert_called_once_with(42)
        assert backend.undecorate("?foo@@YAXXZ") is None

    def test_cleanup_without_init(self):
        DbgHelpBackend().cleanup()


@pytest.mark.skipif(sys.platform != "win32", reason="DbgHelp.dll is Windows-only")
class TestRealDbgHelp:

    def test_round_trip(self):
        backend = DbgHelpBackend()
        backend.initialize()
        try:
            assert backend.undecorate("?foo@@YAXXZ") == "void __cdecl foo(void)"
        finally:
            backend.cleanup()
