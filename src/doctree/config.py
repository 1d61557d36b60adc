"""Configuration and environment handling for doctree."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from doctree.exceptions import ConfigurationError

__all__ = [
    "AUTOINDEX_FILENAME",
    "FingerprintSettings",
    "default_project_name",
    "get_autoindex_path",
    "get_data_dir",
    "get_fingerprint_settings",
]

# Name of the catalog file inside the data directory
AUTOINDEX_FILENAME = "autoindex"


# Environment variable backing each FingerprintSettings field
_SETTINGS_ENV_VARS = {
    "method": "DOCTREE_FINGERPRINT_METHOD",
    "timeout": "DOCTREE_FINGERPRINT_TIMEOUT",
}


class FingerprintSettings(BaseModel):
    """Directory fingerprint configuration.

    The ``walk`` method hashes the tree in-process and ignores modification
    times. The ``tar`` method pipes ``tar`` output into a hash, so touching a
    file changes the digest even when its content does not.

    All settings can be customized via environment variables.
    """

    method: Literal["walk", "tar"] = Field(
        default="walk",
        description="Fingerprint method: in-process walk or external tar archive",
    )

    timeout: float = Field(
        default=60.0,
        gt=0,
        description="Seconds before fingerprinting is abandoned",
    )

    @classmethod
    def from_env(cls) -> "FingerprintSettings":
        """Create FingerprintSettings from environment variables.

        Environment variables:
        - DOCTREE_FINGERPRINT_METHOD: "walk" or "tar" (default: walk)
        - DOCTREE_FINGERPRINT_TIMEOUT: Timeout in seconds (default: 60)

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        raw = {
            field: value for field, env_var in _SETTINGS_ENV_VARS.items() if (value := os.environ.get(env_var))
        }
        try:
            return cls(**raw)
        except ValidationError as e:
            error = e.errors()[0]
            field = error["loc"][0]
            raise ConfigurationError(f"Invalid {_SETTINGS_ENV_VARS[field]} {raw[field]!r}: {error['msg']}") from e


# Global fingerprint settings instance
_fingerprint_settings: FingerprintSettings | None = None


def get_fingerprint_settings() -> FingerprintSettings:
    """Get fingerprint settings.

    Returns cached instance if already initialized.
    """
    global _fingerprint_settings
    if _fingerprint_settings is None:
        _fingerprint_settings = FingerprintSettings.from_env()
    return _fingerprint_settings


# Forbidden system directories that cannot be used as data directories
_FORBIDDEN_PATHS = frozenset(["/", "/etc", "/sys", "/dev", "/bin", "/sbin", "/usr", "/var", "/boot", "/proc"])


def _validate_data_dir(data_path: Path) -> None:
    """Validate that data directory is not a dangerous system path.

    Args:
        data_path: Path to validate

    Raises:
        ValueError: If path is a forbidden system directory
    """
    resolved_str = str(data_path.resolve())

    for forbidden in _FORBIDDEN_PATHS:
        if resolved_str == forbidden or resolved_str.rstrip("/") == forbidden:
            raise ValueError(f"DOCTREE_DATA_DIR cannot be set to system directory: {forbidden}")


def get_data_dir() -> Path:
    """Get the default data directory for doctree.

    Resolution priority:
    1. DOCTREE_DATA_DIR environment variable (if set)
    2. XDG_DATA_HOME/doctree (if XDG_DATA_HOME is set)
    3. ~/.local/share/doctree (fallback)

    Returns:
        Path object pointing to the data directory.

    Raises:
        ValueError: If DOCTREE_DATA_DIR points to a system directory
    """
    doctree_data_dir = os.environ.get("DOCTREE_DATA_DIR")
    if doctree_data_dir:
        data_path = Path(doctree_data_dir).expanduser().resolve()
        _validate_data_dir(data_path)
        return data_path

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home).expanduser() / "doctree"

    return Path.home() / ".local" / "share" / "doctree"


def get_autoindex_path(data_dir: str | Path | None = None) -> Path:
    """Get the path of the autoindex catalog file.

    Args:
        data_dir: Data directory override. Defaults to get_data_dir().
    """
    if data_dir is None:
        data_dir = get_data_dir()
    return Path(data_dir) / AUTOINDEX_FILENAME


def default_project_name() -> str:
    """Name of the current working directory, used when no project name is given."""
    return Path.cwd().name
