"""Command-line access to the CodeOps tools.

    codeops-rules list
    codeops-rules get git
    codeops-rules search "context window" --category behavior
    codeops-rules analyze /path/to/project --analysis analysis.json --write
"""

import asyncio
import sys
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from .config import resolve_docs_path, settings
from .engine import CodeOpsEngine
from .logging_config import configure_logging
from .models import ProjectAnalysis, ToolName, ToolResult

app = typer.Typer(help="Universal AI coding rules: lookup, search and project.md generation.")


@app.callback()
def main(
    ctx: typer.Context,
    docs: Optional[Path] = typer.Option(None, "--docs", help="Rule documents directory"),
    log_level: str = typer.Option(settings.log_level, help="Logging level"),
):
    """Configure logging and the docs directory for all commands."""
    configure_logging(log_level)
    ctx.obj = {"docs": docs}


def _run(ctx: typer.Context, tool: ToolName, params: dict[str, Any]) -> ToolResult:
    docs = ctx.obj["docs"] if ctx.obj else None

    async def _execute() -> ToolResult:
        engine = CodeOpsEngine(docs_path=resolve_docs_path(str(docs) if docs else None))
        await engine.load()
        return await engine.execute(tool, params)

    try:
        return asyncio.run(_execute())
    except FileNotFoundError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)


def _emit(result: ToolResult) -> None:
    typer.echo(result.content)
    if result.is_error:
        raise typer.Exit(code=1)


def _load_analysis(path: Path) -> ProjectAnalysis:
    try:
        return ProjectAnalysis.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        typer.echo(f"Cannot read project analysis from {path}: {e}", err=True)
        raise typer.Exit(code=2)


@app.command("list")
def list_rules(ctx: typer.Context):
    """List all rule documents."""
    _emit(_run(ctx, ToolName.LIST_RULES, {}))


@app.command("get")
def get_rule(ctx: typer.Context, name: str = typer.Argument(..., help="Rule name or alias")):
    """Show a rule document."""
    _emit(_run(ctx, ToolName.GET_RULE, {"name": name}))


@app.command("search")
def search_rules(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Search query"),
    category: Optional[str] = typer.Option(None, help="Restrict to a category"),
    limit: Optional[int] = typer.Option(None, help="Maximum results (1-7)"),
):
    """Search rule documents."""
    _emit(_run(ctx, ToolName.SEARCH_RULES, {"query": query, "category": category, "limit": limit}))


@app.command("setup")
def setup_guide(
    ctx: typer.Context,
    project_type: Optional[str] = typer.Argument(None, help="Project type"),
):
    """Show the setup guide."""
    _emit(_run(ctx, ToolName.GET_SETUP_GUIDE, {"project_type": project_type}))


@app.command("analyze")
def analyze_project(
    ctx: typer.Context,
    project_path: Path = typer.Argument(..., help="Project root directory"),
    analysis_file: Optional[Path] = typer.Option(
        None, "--analysis", help="JSON file with the project analysis"
    ),
    write: bool = typer.Option(False, "--write", help="Write the result to the project"),
):
    """Generate or update the project's .clinerules/project.md."""
    params: dict[str, Any] = {"project_path": str(project_path)}
    if analysis_file is not None:
        params["analysis"] = _load_analysis(analysis_file).model_dump()

    target = project_path / settings.project_config_path

    # Without an analysis every detected section renders as a placeholder
    if write and analysis_file is None and target.exists():
        typer.echo(
            f"Refusing to overwrite {target} without --analysis: "
            "detected sections would be replaced by placeholders.",
            err=True,
        )
        raise typer.Exit(code=1)

    result = _run(ctx, ToolName.ANALYZE_PROJECT, params)
    if write and not result.is_error:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(result.content, encoding="utf-8")
        typer.echo(f"Wrote {target}", err=True)
        return
    _emit(result)


if __name__ == "__main__":
    sys.exit(app())
