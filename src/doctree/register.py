"""Registering project directories for automatic indexing."""

import os
from pathlib import Path

from doctree.catalog import AutoIndexCatalog
from doctree.config import FingerprintSettings
from doctree.exceptions import PathResolutionError
from doctree.fingerprint import FINGERPRINT_UNAVAILABLE, compute_fingerprint
from doctree.logger import logger
from doctree.models import AutoIndexedProject

__all__ = ["add_project", "resolve_project_path"]


def resolve_project_path(raw_path: str | Path) -> str:
    """Make a project path absolute and lexically clean.

    Symlinks are not resolved and the path does not need to exist.

    Raises:
        PathResolutionError: If the path cannot be made absolute
    """
    try:
        if not str(raw_path):
            raise ValueError("path is empty")
        return os.path.abspath(raw_path)
    except (OSError, ValueError) as e:
        raise PathResolutionError(f"Failed to resolve project path {raw_path!r}: {e}") from e


def add_project(
    raw_path: str | Path,
    project_name: str,
    autoindex_path: str | Path,
    settings: FingerprintSettings | None = None,
) -> AutoIndexedProject:
    """Register a directory in the autoindex catalog.

    Loads the catalog, fingerprints the directory, appends a new record and
    writes the catalog back. Fingerprinting problems never abort the
    registration; the record then carries FINGERPRINT_UNAVAILABLE.

    Args:
        raw_path: Project directory, relative or absolute
        project_name: Label for the project
        autoindex_path: Path to the catalog file
        settings: Fingerprint settings. Defaults to get_fingerprint_settings().

    Returns:
        The record that was appended

    Raises:
        ValueError: If project_name is empty
        PathResolutionError: If raw_path cannot be made absolute
        CatalogReadError: If the existing catalog cannot be read
        CatalogParseError: If the existing catalog is malformed
        CatalogWriteError: If the updated catalog cannot be written
    """
    if not project_name:
        raise ValueError("Project name cannot be empty")

    project_path = resolve_project_path(raw_path)

    catalog = AutoIndexCatalog(autoindex_path)
    projects = catalog.load()

    fingerprint = compute_fingerprint(project_path, settings)
    project = AutoIndexedProject(name=project_name, path=project_path, fingerprint=fingerprint)

    projects.append(project)
    catalog.save(projects)

    if fingerprint == FINGERPRINT_UNAVAILABLE:
        logger.info(f"Registered project {project_name} at {project_path} without a fingerprint")
    else:
        logger.info(f"Registered project {project_name} at {project_path}")
    return project
