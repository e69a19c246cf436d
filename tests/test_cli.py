"""Tests for the codeops-rules command line."""

from typer.testing import CliRunner

from codeops.cli import app
from codeops.config import BUNDLED_DOCS_PATH
from codeops.engine.merge import format_project_md

runner = CliRunner()


def _invoke(*args):
    return runner.invoke(app, ["--docs", str(BUNDLED_DOCS_PATH), *args])


def test_list():
    result = _invoke("list")
    assert result.exit_code == 0
    assert "**Total rules:** 7" in result.output


def test_get_alias():
    result = _invoke("get", "git")
    assert result.exit_code == 0
    assert "# Git Commands & Workflow" in result.output


def test_search_with_limit():
    result = _invoke("search", "git commit", "--limit", "1")
    assert result.exit_code == 0
    assert "*Found 1 result*" in result.output


def test_invalid_category_exits_nonzero():
    result = _invoke("search", "git", "--category", "nope")
    assert result.exit_code == 1


def test_analyze_write(tmp_path):
    result = _invoke("analyze", str(tmp_path), "--write")
    assert result.exit_code == 0
    written = (tmp_path / ".clinerules" / "project.md").read_text(encoding="utf-8")
    assert written.startswith("# Generated Project Configuration")


def test_missing_docs_directory(tmp_path):
    result = runner.invoke(app, ["--docs", str(tmp_path / "missing"), "list"])
    assert result.exit_code == 2


def _existing_project(tmp_path, analysis):
    project = tmp_path / "project"
    config_dir = project / ".clinerules"
    config_dir.mkdir(parents=True)
    target = config_dir / "project.md"
    target.write_text(format_project_md(analysis), encoding="utf-8")
    return project, target


def test_analyze_write_with_analysis_keeps_detected_sections(tmp_path, analysis):
    project, target = _existing_project(tmp_path, analysis)
    analysis_file = tmp_path / "analysis.json"
    analysis_file.write_text(analysis.model_dump_json(), encoding="utf-8")

    result = _invoke("analyze", str(project), "--analysis", str(analysis_file), "--write")

    assert result.exit_code == 0
    written = target.read_text(encoding="utf-8")
    assert "- **Language(s):** Python" in written
    assert "Re-analyzed by `analyze_project`" in written


def test_analyze_write_without_analysis_refuses_existing_file(tmp_path, analysis):
    project, target = _existing_project(tmp_path, analysis)
    before = target.read_text(encoding="utf-8")

    result = _invoke("analyze", str(project), "--write")

    assert result.exit_code == 1
    assert target.read_text(encoding="utf-8") == before


def test_analyze_invalid_analysis_file(tmp_path):
    analysis_file = tmp_path / "analysis.json"
    analysis_file.write_text("{not json", encoding="utf-8")

    result = _invoke("analyze", str(tmp_path), "--analysis", str(analysis_file))

    assert result.exit_code == 2


def test_docs_option_does_not_carry_over(tmp_path):
    assert runner.invoke(app, ["--docs", str(tmp_path / "missing"), "list"]).exit_code == 2

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "**Total rules:** 7" in result.output
