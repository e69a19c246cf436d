"""Renders a complete project.md from a project analysis.

Section headings come from ``headings.py`` so the classifier and the
template stay in agreement.
"""

from ...models import ProjectAnalysis
from .headings import (
    BOOTSTRAP_HEADING,
    CODING_CONVENTIONS_HEADING,
    COMMANDS_HEADING,
    CROSS_REFERENCES_HEADING,
    DESCRIPTION_FIELD,
    DESCRIPTION_PLACEHOLDER,
    GIT_CONVENTIONS_HEADING,
    PROJECT_OVERVIEW_HEADING,
    PROJECT_STRUCTURE_HEADING,
    SPECIAL_RULES_HEADING,
    TOOLCHAIN_HEADING,
)

DOCUMENT_TITLE = "# Generated Project Configuration"


def _bootstrap(parts: list[str]) -> None:
    parts.append(BOOTSTRAP_HEADING)
    parts.append("")
    parts.append("**Before ANY planning or implementation, the AI agent MUST load these rules")
    parts.append("using the codeops-rules tools:**")
    parts.append("")
    parts.append('1. `get_rule("agents")` — Load agent behavior rules **(REQUIRED FIRST)**')
    parts.append('2. `get_rule("code")` — Load coding standards')
    parts.append('3. `get_rule("testing")` — Load testing workflows')
    parts.append('4. `get_rule("git-commands")` — Load git commit protocols')
    parts.append("")
    parts.append("These rules are **mandatory** and must be consulted before every task.")
    parts.append("**Do NOT skip this step. Do NOT proceed without reading these documents.**")
    parts.append("")
    parts.append("---")
    parts.append("")


def _overview(parts: list[str], analysis: ProjectAnalysis) -> None:
    parts.append(PROJECT_OVERVIEW_HEADING)
    parts.append("")
    parts.append(f"- **Name:** {analysis.name}")
    parts.append(f"{DESCRIPTION_FIELD} {DESCRIPTION_PLACEHOLDER}")
    parts.append(f"- **Type:** {analysis.type}")
    parts.append("")


def _toolchain(parts: list[str], analysis: ProjectAnalysis) -> None:
    parts.append(TOOLCHAIN_HEADING)
    parts.append("")
    parts.append(f"- **Language(s):** {', '.join(analysis.languages) or '[Not detected]'}")
    parts.append(f"- **Framework(s):** {', '.join(analysis.frameworks) or '[None detected]'}")
    parts.append(f"- **Package Manager:** {analysis.package_manager or '[Not detected]'}")
    parts.append(f"- **Test Framework:** {analysis.test_framework or '[Not detected]'}")
    if analysis.is_monorepo:
        parts.append("- **Structure:** Monorepo")
    parts.append("")
    parts.append(f"**Manifest files found:** {', '.join(analysis.manifest_files) or '[None found]'}")
    parts.append("")


def _command_block(parts: list[str], title: str, comment: str | None, command: str | None, todo: str) -> None:
    parts.append(f"### {title}")
    parts.append("")
    parts.append("```bash")
    if comment:
        parts.append(comment)
    parts.append(command or f"# [TODO: {todo}]")
    parts.append("```")
    parts.append("")


def _commands(parts: list[str], analysis: ProjectAnalysis) -> None:
    parts.append(COMMANDS_HEADING)
    parts.append("")
    parts.append(
        "All commands assume execution from the project root. "
        "Prefix all shell commands with `clear &&`."
    )
    parts.append("")
    _command_block(parts, "Build", None, analysis.build_command, "Add build command")
    _command_block(parts, "Test", "# Run all tests", analysis.test_command, "Add test command")
    _command_block(
        parts,
        "Verify (before commit)",
        "# Full verification — run this before any git commit",
        analysis.verify_command,
        "Add verify command",
    )


def _structure(parts: list[str], analysis: ProjectAnalysis) -> None:
    parts.append(PROJECT_STRUCTURE_HEADING)
    parts.append("")
    parts.append(f"### Type: {'Monorepo' if analysis.is_monorepo else 'Single repository'}")
    parts.append("")
    parts.append("### Directory Layout")
    parts.append("")
    parts.append("```")
    if analysis.structure:
        parts.extend(f"{directory}/" for directory in analysis.structure)
    else:
        parts.append("[TODO: Add directory layout]")
    parts.append("```")
    parts.append("")


def _conventions(parts: list[str], analysis: ProjectAnalysis) -> None:
    parts.append(CODING_CONVENTIONS_HEADING)
    parts.append("")
    parts.append("### Naming")
    parts.append("")
    parts.append("- **Files:** [TODO: e.g., kebab-case, camelCase, snake_case]")
    parts.append("- **Components/Classes:** [TODO: e.g., PascalCase]")
    parts.append("- **Functions/Methods:** [TODO: e.g., camelCase, snake_case]")
    parts.append("- **Constants:** [TODO: e.g., UPPER_SNAKE_CASE]")
    parts.append("")

    parts.append(GIT_CONVENTIONS_HEADING)
    parts.append("")
    parts.append("### Commit Scope")
    parts.append("")
    parts.append("```")
    if analysis.is_monorepo:
        parts.append("# Monorepo — use package name as scope:")
        parts.append("# feat(package-name): description")
    else:
        parts.append("# Use module/feature as scope:")
        parts.append("# feat(module): description")
    parts.append("```")
    parts.append("")
    parts.append("### Branch Strategy")
    parts.append("")
    parts.append("- **Main branch:** `main`")
    parts.append("- **Feature branches:** `feature/[name]`")
    parts.append("")

    parts.append(SPECIAL_RULES_HEADING)
    parts.append("")
    parts.append("```")
    parts.append("[TODO: Add any project-specific rules]")
    parts.append("```")
    parts.append("")


def _cross_references(parts: list[str]) -> None:
    parts.append(CROSS_REFERENCES_HEADING)
    parts.append("")
    parts.append("The generic rule files that read this `project.md`:")
    parts.append("")
    parts.append("- **make_plan.md** — Uses verify command, file paths, commit scope")
    parts.append("- **code.md** — Uses language conventions, architecture rules")
    parts.append("- **testing.md** — Uses test commands, test locations, test framework")
    parts.append("- **git-commands.md** — Uses commit scope, verify command")
    parts.append("- **agents.md** — Uses shell commands, verify command")
    parts.append("- **plans.md** — Uses task file path patterns")


def format_project_md(analysis: ProjectAnalysis) -> str:
    """Render a complete project.md for the given analysis.

    Deterministic: the same analysis always renders the same text.
    """
    parts: list[str] = [
        DOCUMENT_TITLE,
        "",
        "> **Auto-generated by `analyze_project`**",
        f"> **Project:** {analysis.name}",
        f"> **Type:** {analysis.type}",
        "",
        "Save this content to `.clinerules/project.md` in your project root,",
        "then review and adjust the values as needed.",
        "",
        "---",
        "",
    ]

    _bootstrap(parts)
    _overview(parts, analysis)
    _toolchain(parts, analysis)
    _commands(parts, analysis)
    _structure(parts, analysis)
    _conventions(parts, analysis)
    _cross_references(parts)

    return "\n".join(parts)
