"""Exception hierarchy for finderveil.

Core modules raise these; the CLI layer turns them into an error message
and a non-zero exit code.
"""


class FinderveilError(Exception):
    """Base exception for all finderveil errors."""


class ConfigError(FinderveilError):
    """Raised when the configuration cannot be read or is invalid."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""


class TargetResolutionError(FinderveilError):
    """Raised when the applications directory cannot be listed."""


class ReportError(FinderveilError):
    """Raised when the report artifact cannot be created or finalized."""
