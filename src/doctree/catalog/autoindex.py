"""
Autoindex catalog - the list of projects registered for automatic indexing.

The catalog is a single JSON file holding an array of
``{"name", "path", "hash"}`` objects in registration order. Each write
replaces the whole file atomically.
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from doctree.exceptions import CatalogParseError, CatalogReadError, CatalogWriteError
from doctree.models import AutoIndexedProject
from doctree.utils import atomic_write_json

logger = logging.getLogger(__name__)

__all__ = ["AutoIndexCatalog", "read_autoindex", "write_autoindex"]

_projects_adapter = TypeAdapter(list[AutoIndexedProject])


def read_autoindex(path: str | Path) -> list[AutoIndexedProject]:
    """Read the autoindex catalog.

    A missing file is an empty catalog. A ``null`` document is also read as
    empty.

    Args:
        path: Path to the catalog file

    Returns:
        Registered projects in registration order

    Raises:
        CatalogReadError: If the file exists but cannot be read
        CatalogParseError: If the file is not a valid catalog
    """
    catalog_path = Path(path)
    try:
        with open(catalog_path, encoding="utf-8") as f:
            raw = f.read()
    except FileNotFoundError:
        logger.debug(f"No autoindex catalog at {catalog_path}, starting empty")
        return []
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogReadError(f"Failed to read autoindex catalog {catalog_path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogParseError(f"Failed to parse autoindex catalog {catalog_path}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise CatalogParseError(f"Failed to parse autoindex catalog {catalog_path}: expected a JSON array, got {type(data).__name__}")

    try:
        # On disk the fingerprint is only ever stored under "hash"
        return _projects_adapter.validate_python(data, by_alias=True, by_name=False)
    except ValidationError as e:
        raise CatalogParseError(f"Failed to parse autoindex catalog {catalog_path}: {e}") from e


def write_autoindex(path: str | Path, projects: list[AutoIndexedProject]) -> None:
    """Write the full autoindex catalog, replacing any previous file.

    The parent directory must exist. On failure the previous file is left
    untouched.

    Args:
        path: Path to the catalog file
        projects: Registered projects in registration order

    Raises:
        CatalogWriteError: If the catalog cannot be written
    """
    catalog_path = Path(path)
    try:
        atomic_write_json(catalog_path, [project.to_json_dict() for project in projects])
    except OSError as e:
        raise CatalogWriteError(f"Failed to write autoindex catalog {catalog_path}: {e}") from e


class AutoIndexCatalog:
    """Autoindex catalog bound to a single file.

    Every operation goes to disk; no state is cached between calls.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the catalog.

        Args:
            path: Path to the catalog file
        """
        self.path = Path(path)

    def load(self) -> list[AutoIndexedProject]:
        """Read all registered projects."""
        return read_autoindex(self.path)

    def save(self, projects: list[AutoIndexedProject]) -> None:
        """Replace the catalog with ``projects``."""
        write_autoindex(self.path, projects)

