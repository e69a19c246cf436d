"""Tests for settings and docs path resolution."""

from pathlib import Path

import pytest

from codeops.config import BUNDLED_DOCS_PATH, Settings, resolve_docs_path


def test_defaults():
    config = Settings(docs_path=None)
    assert config.default_search_limit == 5
    assert config.max_search_limit == 7
    assert config.project_config_path == ".clinerules/project.md"


def test_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("CODEOPS_DOCS_PATH", str(tmp_path))
    monkeypatch.setenv("CODEOPS_MAX_SEARCH_LIMIT", "3")
    config = Settings()
    assert config.docs_path == tmp_path
    assert config.max_search_limit == 3


def test_resolve_bundled_by_default():
    assert resolve_docs_path(config=Settings(docs_path=None)) == BUNDLED_DOCS_PATH


def test_resolve_cli_arg(tmp_path):
    resolved = resolve_docs_path(str(tmp_path), config=Settings(docs_path=None))
    assert resolved == tmp_path.resolve()


def test_config_takes_priority_over_cli_arg(tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    resolved = resolve_docs_path(str(other), config=Settings(docs_path=tmp_path))
    assert resolved == tmp_path.resolve()


def test_flag_like_cli_arg_ignored():
    assert resolve_docs_path("--verbose", config=Settings(docs_path=None)) == BUNDLED_DOCS_PATH


def test_missing_directory_lists_options(tmp_path):
    with pytest.raises(FileNotFoundError, match="CODEOPS_DOCS_PATH"):
        resolve_docs_path(config=Settings(docs_path=Path(tmp_path / "missing")))
