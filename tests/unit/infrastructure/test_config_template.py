"""Tests for config.yaml loading and environment substitution."""

import os
from pathlib import Path

import pytest

from src.bookshelf.runtime.config.config_data import ConfigData, StorageConfig
from src.bookshelf.runtime.config.config_template import (
    apply_environment_overrides,
    load_templated_yaml,
    substitute_env_vars,
)
from src.bookshelf.runtime.settings import EnvironmentVariables

REPO_CONFIG = Path(__file__).resolve().parents[3] / "config.yaml"


class TestSubstituteEnvVars:
    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("BOOKSHELF_UNSET", raising=False)

        assert substitute_env_vars("x: ${BOOKSHELF_UNSET:-fallback}") == "x: fallback"

    def test_value_from_environment(self, monkeypatch):
        monkeypatch.setenv("BOOKSHELF_VALUE", "real")

        assert substitute_env_vars("x: ${BOOKSHELF_VALUE:-fallback}") == "x: real"

    def test_required_variable_missing(self, monkeypatch):
        monkeypatch.delenv("BOOKSHELF_REQUIRED", raising=False)

        with pytest.raises(ValueError, match="BOOKSHELF_REQUIRED"):
            substitute_env_vars("x: ${BOOKSHELF_REQUIRED}")

    def test_required_variable_custom_message(self, monkeypatch):
        monkeypatch.delenv("BOOKSHELF_REQUIRED", raising=False)

        with pytest.raises(ValueError, match="set it please"):
            substitute_env_vars("x: ${BOOKSHELF_REQUIRED:?set it please}")


class TestEnvironmentOverrides:
    def test_prefixed_variables_are_promoted(self, monkeypatch):
        monkeypatch.setenv("STAGING_BOOKSHELF_DB", "postgresql://db/books")
        monkeypatch.delenv("BOOKSHELF_DB", raising=False)

        applied = apply_environment_overrides("staging")

        assert "BOOKSHELF_DB" in applied
        assert os.environ["BOOKSHELF_DB"] == "postgresql://db/books"
        monkeypatch.delenv("BOOKSHELF_DB")


class TestLoadTemplatedYaml:
    def test_repository_config_loads(self):
        config = load_templated_yaml(REPO_CONFIG)

        assert isinstance(config, ConfigData)
        assert config.storage.image_folder == "images/books"
        assert config.storage.cache_max_age_seconds == 604800
        assert config.pagination.default_page_size == 10
        assert config.pagination.max_page_size == 100

    def test_values_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BOOKSHELF_TEST_ROOT", str(tmp_path / "public"))
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  storage:\n"
            "    web_root: ${BOOKSHELF_TEST_ROOT:-wwwroot}\n"
            "    image_folder: /covers/\n"
            "  pagination:\n"
            "    max_page_size: 25\n"
        )

        config = load_templated_yaml(config_file)

        assert config.storage.root_path == tmp_path / "public" / "covers"
        assert config.storage.public_prefix == "/covers"
        assert config.pagination.max_page_size == 25
        assert config.database.url == "sqlite:///./bookshelf.db"

    def test_invalid_values_raise_value_error(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  pagination:\n    max_page_size: 0\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file)

    def test_empty_file_rejected(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        with pytest.raises(ValueError):
            load_templated_yaml(config_file)


class TestConfigModels:
    def test_storage_folder_must_not_be_empty(self):
        with pytest.raises(ValueError):
            StorageConfig(image_folder="/")

    def test_database_helpers(self):
        config = ConfigData()

        assert config.database.is_sqlite
        assert config.database.connection_string == config.database.url

    def test_environment_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("APP_ENVIRONMENT", "production")
        monkeypatch.setenv("BOOKSHELF_CONFIG_FILE", str(tmp_path / "custom.yaml"))

        env = EnvironmentVariables()

        assert env.environment == "production"
        assert env.config_file == tmp_path / "custom.yaml"
