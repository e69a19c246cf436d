"""Project tool handlers.

Handles:
- analyze_project: Generate or incrementally update .clinerules/project.md
- get_setup_guide: Step-by-step setup instructions
"""

import asyncio
import logging
from pathlib import Path
from typing import Any

from ...models import (
    AnalyzeProjectParams,
    GetSetupGuideParams,
    ProjectAnalysis,
    ToolResult,
)
from ..merge import format_project_md, merge_project_md
from .base import HandlerContext, error_result, text_result

logger = logging.getLogger(__name__)


def _read_text_or_none(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"No readable project config at {path}: {e}")
        return None


async def read_existing_project_md(project_path: Path, relative_path: str) -> str | None:
    """Read an existing project.md from the project.

    Returns:
        The file content, or None when it is missing, unreadable or only
        whitespace.
    """
    content = await asyncio.to_thread(_read_text_or_none, project_path / relative_path)
    if content is None or not content.strip():
        return None
    return content


async def handle_analyze_project(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Generate a project.md, merging with an existing one when present.

    Args:
        params: Dict containing:
            - project_path: Absolute path to the project root
            - analysis: Optional ProjectAnalysis fields for the project

    Returns:
        ToolResult with the complete project.md content
    """
    args = AnalyzeProjectParams.model_validate(params)
    raw_path = args.project_path.strip()

    if not raw_path:
        return error_result(
            "Project path is required. Provide the absolute path to your project root."
        )

    project_path = Path(raw_path)
    if not await asyncio.to_thread(project_path.exists):
        return error_result(f'Failed to analyze project: "{raw_path}" does not exist.', raw_path)
    if not await asyncio.to_thread(project_path.is_dir):
        return error_result(f'"{raw_path}" is not a directory.', raw_path)

    analysis = args.analysis or ProjectAnalysis(name=project_path.resolve().name)
    fresh = format_project_md(analysis)

    existing = await read_existing_project_md(project_path, ctx.settings.project_config_path)
    result = merge_project_md(existing, fresh)

    if existing is not None:
        logger.info(
            f"Merged existing {ctx.settings.project_config_path} for {analysis.name}: "
            f"{len(result.changes)} change(s)"
        )
    return text_result(result.text, raw_path)


# Project-type tips for the setup guide
PROJECT_TYPE_TIPS: dict[str, list[str]] = {
    "web-app": [
        "- Set up component testing (unit + integration)",
        "- Define component file naming conventions in project.md",
        "- Consider E2E testing with Playwright or Cypress",
        "- Use `code.md` Section 9 for test file organization",
    ],
    "api": [
        "- Define API endpoint testing strategy (unit + integration + E2E)",
        "- Set up Docker for integration tests if using databases",
        "- Document request/response validation patterns",
        "- Use `testing.md` Rule 4 for integration test workflow",
    ],
    "library": [
        "- Focus on high test coverage (90%+) for public APIs",
        "- Document all public exports with docstrings",
        "- Use `code.md` Section 6 for module boundary rules",
        "- Consider backward compatibility in your plan phases",
    ],
    "cli": [
        "- Test command-line argument parsing thoroughly",
        "- Add E2E tests for complete command workflows",
        "- Document help text and usage patterns",
        "- Use `code.md` Section 7 for splitting large command handlers",
    ],
}

DEFAULT_TIPS = [
    "- Review `code.md` for universal coding standards",
    "- Set up your test commands in `.clinerules/project.md`",
    "- Use `make_plan` for any non-trivial feature implementation",
    "- Follow `git-commands.md` for consistent commit messages",
]


async def handle_get_setup_guide(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Return setup instructions, optionally tailored to a project type."""
    args = GetSetupGuideParams.model_validate(params)
    project_type = (args.project_type or "").strip()

    parts = [
        "# CodeOps Setup Guide",
        "",
        "Set up universal AI coding rules for your project in 3 steps.",
        "",
        "---",
        "",
        "## Step 1: Generate Project Configuration",
        "",
        "Run `analyze_project` with your project path:",
        "",
        "```",
        'analyze_project("/path/to/your/project")',
        "```",
        "",
        "Running it again later updates the file in place: detected toolchain",
        "sections are refreshed and your own edits are kept.",
        "",
        "## Step 2: Save the Configuration",
        "",
        f"Save the generated content to `{ctx.settings.project_config_path}` in your project root,",
        "then review and adjust the detected values.",
        "",
        "## Step 3: Use the Rules",
        "",
        "The AI agent reads `.clinerules/project.md` and applies the universal rules.",
        "Available rule documents:",
        "",
    ]

    documents = ctx.store.all_documents()
    if documents:
        parts.extend(f"- **{doc.id}** — {doc.description}" for doc in documents)
    else:
        parts.append("- *(no rule documents loaded)*")
    parts.append("")

    if project_type:
        tips = PROJECT_TYPE_TIPS.get(project_type.lower(), DEFAULT_TIPS)
        parts.extend(["---", "", f"## Tips for {project_type} Projects", "", *tips, ""])

    template = ctx.store.get_by_id("project-template")
    if template is not None:
        parts.extend(
            [
                "---",
                "",
                "## Manual Setup",
                "",
                f"Prefer to fill it in by hand? Use `get_rule(\"{template.id}\")` "
                f"for the blank template ({template.title}).",
                "",
                f"> {template.description}",
                "",
            ]
        )

    parts.extend(
        [
            "---",
            "",
            "## Common Workflows",
            "",
            "| Workflow | Command |",
            "|----------|---------|",
            '| Start coding | `get_rule("code")` — Review coding standards first |',
            '| Run tests | `get_rule("testing")` — Get test commands and workflow |',
            '| Commit changes | `get_rule("git")` — Use gitcm/gitcmp protocol |',
            '| Create a plan | `get_rule("make_plan")` — Full plan creation workflow |',
            '| Search for a topic | `search_rules("context window")` — Find relevant rules |',
        ]
    )
    return text_result("\n".join(parts), project_type)
