"""
Exception hierarchy for msvcfilt.
Only configuration and resolver start-up problems are errors; a candidate
that cannot be undecorated is a normal outcome and never raises.
"""


class MsvcFiltError(Exception):
    """Base class for every error raised by msvcfilt."""


class ResolverInitError(MsvcFiltError):
    """The name-resolution backend could not be brought up."""


class ConfigError(MsvcFiltError):
    """A configuration value is missing or has an unusable value."""
