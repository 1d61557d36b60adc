"""Tests for config module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from doctree import config
from doctree.config import (
    FingerprintSettings,
    default_project_name,
    get_autoindex_path,
    get_data_dir,
    get_fingerprint_settings,
)
from doctree.exceptions import ConfigurationError


class TestGetDataDir:
    """Tests for get_data_dir function."""

    def test_doctree_data_dir_takes_priority(self, monkeypatch):
        """Test that DOCTREE_DATA_DIR has highest priority."""
        monkeypatch.setenv("DOCTREE_DATA_DIR", "/custom/doctree/data")
        monkeypatch.setenv("XDG_DATA_HOME", "/should/not/be/used")

        result = get_data_dir()

        assert result == Path("/custom/doctree/data")

    def test_xdg_data_home_used_when_doctree_data_dir_not_set(self, monkeypatch):
        """Test that XDG_DATA_HOME/doctree is used when DOCTREE_DATA_DIR not set."""
        monkeypatch.setenv("XDG_DATA_HOME", "/home/user/.local/share")

        result = get_data_dir()

        assert result == Path("/home/user/.local/share/doctree")

    def test_fallback_to_home_local_share(self):
        """Test fallback to ~/.local/share/doctree when no env vars set."""
        result = get_data_dir()

        assert result == Path.home() / ".local" / "share" / "doctree"

    def test_path_expansion_with_tilde(self, monkeypatch):
        """Test that ~ is expanded in DOCTREE_DATA_DIR."""
        monkeypatch.setenv("DOCTREE_DATA_DIR", "~/custom/data")

        result = get_data_dir()

        assert result == (Path.home() / "custom" / "data").resolve()
        assert "~" not in str(result)

    def test_empty_doctree_data_dir_uses_xdg(self, monkeypatch):
        """Test that empty DOCTREE_DATA_DIR falls through to XDG_DATA_HOME."""
        monkeypatch.setenv("DOCTREE_DATA_DIR", "")
        monkeypatch.setenv("XDG_DATA_HOME", "/home/user/.local/share")

        result = get_data_dir()

        assert result == Path("/home/user/.local/share/doctree")

    @pytest.mark.parametrize("forbidden", ["/", "/etc", "/usr"])
    def test_system_directory_rejected(self, monkeypatch, forbidden):
        """Test that DOCTREE_DATA_DIR cannot point at a system directory."""
        monkeypatch.setenv("DOCTREE_DATA_DIR", forbidden)

        with pytest.raises(ValueError, match="system directory"):
            get_data_dir()


class TestAutoindexPath:
    """Tests for get_autoindex_path and default_project_name."""

    def test_autoindex_path_inside_data_dir(self, tmp_path):
        assert get_autoindex_path(tmp_path) == tmp_path / "autoindex"

    def test_autoindex_path_defaults_to_data_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DOCTREE_DATA_DIR", str(tmp_path))

        assert get_autoindex_path() == tmp_path.resolve() / "autoindex"

    def test_default_project_name_is_cwd_name(self, monkeypatch, tmp_path):
        work = tmp_path / "my_docs"
        work.mkdir()
        monkeypatch.chdir(work)

        assert default_project_name() == "my_docs"


class TestFingerprintSettings:
    """Tests for FingerprintSettings."""

    def test_defaults(self):
        settings = FingerprintSettings()

        assert settings.method == "walk"
        assert settings.timeout == 60.0

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DOCTREE_FINGERPRINT_METHOD", "tar")
        monkeypatch.setenv("DOCTREE_FINGERPRINT_TIMEOUT", "5")

        settings = FingerprintSettings.from_env()

        assert settings.method == "tar"
        assert settings.timeout == 5.0

    @pytest.mark.parametrize(
        ("env_var", "value"),
        [
            ("DOCTREE_FINGERPRINT_TIMEOUT", "abc"),
            ("DOCTREE_FINGERPRINT_TIMEOUT", "-5"),
            ("DOCTREE_FINGERPRINT_METHOD", "zip"),
        ],
    )
    def test_from_env_names_invalid_variable(self, monkeypatch, env_var, value):
        monkeypatch.setenv(env_var, value)

        with pytest.raises(ConfigurationError, match=f"Invalid {env_var} '{value}'"):
            FingerprintSettings.from_env()

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError):
            FingerprintSettings(method="zip")

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            FingerprintSettings(timeout=0)

    def test_get_fingerprint_settings_is_cached(self, monkeypatch):
        monkeypatch.setenv("DOCTREE_FINGERPRINT_METHOD", "tar")

        first = get_fingerprint_settings()
        monkeypatch.setenv("DOCTREE_FINGERPRINT_METHOD", "walk")
        second = get_fingerprint_settings()

        assert first is second
        assert second.method == "tar"
        assert config._fingerprint_settings is first
