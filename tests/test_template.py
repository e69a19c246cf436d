"""Tests for project.md template rendering."""

from codeops.engine.merge import SECTION_STRATEGIES, format_project_md, parse_sections
from codeops.engine.merge.template import DOCUMENT_TITLE
from codeops.models import ProjectAnalysis


def test_starts_with_title(analysis):
    assert format_project_md(analysis).startswith(DOCUMENT_TITLE + "\n")


def test_sections_in_table_order(analysis):
    headers = [s.header for s in parse_sections(format_project_md(analysis)) if not s.is_preamble]
    assert headers == list(SECTION_STRATEGIES)


def test_deterministic(analysis):
    assert format_project_md(analysis) == format_project_md(analysis.model_copy())


def test_detected_values_rendered(analysis):
    text = format_project_md(analysis)
    assert "- **Name:** demo-service" in text
    assert "- **Language(s):** Python" in text
    assert "- **Framework(s):** FastAPI" in text
    assert "ruff check . && pytest" in text
    assert "src/\ntests/\ndocs/" in text
    assert "# feat(module): description" in text


def test_missing_values_use_placeholders():
    text = format_project_md(ProjectAnalysis(name="bare"))
    assert "- **Type:** unknown" in text
    assert "- **Language(s):** [Not detected]" in text
    assert "- **Framework(s):** [None detected]" in text
    assert "**Manifest files found:** [None found]" in text
    assert "# [TODO: Add build command]" in text
    assert "[TODO: Add directory layout]" in text
    assert "- **Description:** [TODO: Add project description]" in text


def test_monorepo(analysis):
    text = format_project_md(analysis.model_copy(update={"is_monorepo": True}))
    assert "- **Structure:** Monorepo" in text
    assert "### Type: Monorepo" in text
    assert "# feat(package-name): description" in text
