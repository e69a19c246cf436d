"""Shared fixtures for CodeOps tests."""

from datetime import date

import pytest

from codeops.config import BUNDLED_DOCS_PATH, Settings
from codeops.engine import CodeOpsEngine
from codeops.engine.scoring import SearchEngine
from codeops.models import ProjectAnalysis
from codeops.store import RuleStore

SCAN_DATE = date(2026, 1, 15)


@pytest.fixture
def rule_store():
    """RuleStore loaded with the seven bundled rule documents."""
    store = RuleStore()
    store.load_from_directory(BUNDLED_DOCS_PATH)
    return store


@pytest.fixture
def search_engine(rule_store):
    """SearchEngine indexed over the bundled rule documents."""
    engine = SearchEngine()
    engine.build_index(rule_store.all_documents())
    return engine


@pytest.fixture
def analysis():
    """A typical single-repo Python project analysis."""
    return ProjectAnalysis(
        name="demo-service",
        type="API Service",
        languages=["Python"],
        frameworks=["FastAPI"],
        package_manager="pip",
        test_framework="pytest",
        build_command="python -m build",
        test_command="pytest",
        verify_command="ruff check . && pytest",
        structure=["src", "tests", "docs"],
        manifest_files=["pyproject.toml"],
    )


@pytest.fixture
def engine():
    """CodeOpsEngine pointed at the bundled docs (call ``await engine.load()``)."""
    return CodeOpsEngine(config=Settings(docs_path=None), docs_path=BUNDLED_DOCS_PATH)
