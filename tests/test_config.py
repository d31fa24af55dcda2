"""
Configuration Tests
===================

Tests for YAML + environment configuration loading.
"""

import pytest
from pydantic import ValidationError


ENV_VARS = (
    "BACKED_ENUM_FILTER_NUMERIC_KEYS",
    "BACKED_ENUM_LOG_LEVEL",
    "BACKED_ENUM_LOG_FORMAT",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no backed-enum environment variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults(self, clean_env):
        """Verify defaults when no file or environment is present."""
        from backed_enum.config import load_config

        settings = load_config()
        assert settings.adapters.filter_numeric_keys is True
        assert settings.logging.level == "WARNING"
        assert settings.logging.format == "text"

    def test_yaml_file_in_working_directory(self, clean_env):
        """Verify backed_enum.yaml is picked up from the working directory."""
        from backed_enum.config import load_config

        (clean_env / "backed_enum.yaml").write_text(
            "adapters:\n  filter_numeric_keys: false\nlogging:\n  level: DEBUG\n"
        )

        settings = load_config()
        assert settings.adapters.filter_numeric_keys is False
        assert settings.logging.level == "DEBUG"

    def test_explicit_path(self, clean_env):
        """Verify an explicit config path is honoured."""
        from backed_enum.config import load_config

        path = clean_env / "custom.yaml"
        path.write_text("logging:\n  format: json\n")

        assert load_config(str(path)).logging.format == "json"

    def test_empty_yaml_file(self, clean_env):
        """Verify an empty file falls back to defaults."""
        from backed_enum.config import load_config

        (clean_env / "backed_enum.yml").write_text("")
        assert load_config().logging.level == "WARNING"

    def test_environment_overrides_file(self, clean_env, monkeypatch):
        """Verify environment variables take precedence over the file."""
        from backed_enum.config import load_config

        (clean_env / "backed_enum.yaml").write_text(
            "adapters:\n  filter_numeric_keys: true\nlogging:\n  level: DEBUG\n"
        )
        monkeypatch.setenv("BACKED_ENUM_FILTER_NUMERIC_KEYS", "no")
        monkeypatch.setenv("BACKED_ENUM_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("BACKED_ENUM_LOG_FORMAT", "json")

        settings = load_config()
        assert settings.adapters.filter_numeric_keys is False
        assert settings.logging.level == "ERROR"
        assert settings.logging.format == "json"

    def test_invalid_log_format(self, clean_env, monkeypatch):
        """Verify unknown log formats are rejected."""
        from backed_enum.config import load_config

        monkeypatch.setenv("BACKED_ENUM_LOG_FORMAT", "xml")
        with pytest.raises(ValidationError):
            load_config()
