"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from doctree import config
from doctree.config import FingerprintSettings


@pytest.fixture(autouse=True)
def clean_env_for_tests(monkeypatch):
    """Clean environment variables for test isolation.

    Ensures tests don't accidentally write to user's real data directory
    and don't pick up fingerprint settings from the environment.

    This fixture is applied automatically to all tests (autouse=True).
    """
    monkeypatch.delenv("DOCTREE_DATA_DIR", raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.delenv("DOCTREE_FINGERPRINT_METHOD", raising=False)
    monkeypatch.delenv("DOCTREE_FINGERPRINT_TIMEOUT", raising=False)
    monkeypatch.delenv("DOCTREE_LOG_LEVEL", raising=False)
    monkeypatch.setattr(config, "_fingerprint_settings", None)


@pytest.fixture
def walk_settings():
    """Fingerprint settings using the in-process walk."""
    return FingerprintSettings(method="walk", timeout=30)


@pytest.fixture
def tar_settings():
    """Fingerprint settings using the external tar archive."""
    return FingerprintSettings(method="tar", timeout=30)


@pytest.fixture
def project_dir(tmp_path):
    """A project directory holding a single file a.txt with content "hello"."""
    proj = tmp_path / "proj"
    proj.mkdir()
    (proj / "a.txt").write_text("hello")
    return proj


@pytest.fixture
def nested_project_dir(tmp_path):
    """A project directory with nested subdirectories."""
    proj = tmp_path / "nested"
    (proj / "docs" / "api").mkdir(parents=True)
    (proj / "src").mkdir()
    (proj / "README.md").write_text("# Nested\n")
    (proj / "docs" / "index.md").write_text("Index\n")
    (proj / "docs" / "api" / "reference.md").write_text("Reference\n")
    (proj / "src" / "main.py").write_text("print('hi')\n")
    return proj
