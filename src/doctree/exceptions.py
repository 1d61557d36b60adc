"""
doctree exceptions module.

Contains exception classes used across multiple modules to avoid circular dependencies.
"""


class DoctreeError(Exception):
    """Base class for errors surfaced to the user."""

    pass


class PathResolutionError(DoctreeError):
    """Exception raised when a project path cannot be made absolute."""

    pass


class CatalogReadError(DoctreeError):
    """Exception raised when the autoindex catalog cannot be read."""

    pass


class CatalogParseError(DoctreeError):
    """Exception raised when the autoindex catalog contains malformed data."""

    pass


class CatalogWriteError(DoctreeError):
    """Exception raised when the autoindex catalog cannot be written."""

    pass


class FingerprintError(DoctreeError):
    """Exception raised when a directory fingerprint cannot be computed.

    Never escapes compute_fingerprint(); it is converted to the sentinel value.
    """

    pass


class ConfigurationError(DoctreeError, ValueError):
    """Exception raised when a setting read from the environment is invalid."""

    pass
