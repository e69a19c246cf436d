"""Rule tool handlers.

Handles:
- get_rule: Look up a rule document by name or alias
- list_rules: Overview of all rule documents grouped by category
- search_rules: TF-IDF full-text search across rule documents
"""

from typing import Any

from ...models import (
    CATEGORY_INFO,
    RULE_METADATA,
    GetRuleParams,
    RuleCategory,
    RuleDocument,
    SearchResult,
    SearchRulesParams,
    ToolResult,
    aliases_for,
    category_label,
)
from ..core.tokens import count_tokens
from .base import HandlerContext, error_result, text_result


async def handle_get_rule(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Return the full documentation for one rule.

    Args:
        params: Dict containing:
            - name: Rule id or alias (e.g. "git", "testing")

    Returns:
        ToolResult with a metadata header followed by the rule markdown
    """
    args = GetRuleParams.model_validate(params)
    name = args.name.strip()

    if not name:
        return error_result(
            "Rule name is required.\n\n"
            f"Available rules: {', '.join(RULE_METADATA)}\n\n"
            "*Use `list_rules` to see all available rules with descriptions.*"
        )

    doc = ctx.store.find_by_name(name)
    if doc is None:
        return text_result(_format_not_found(name), name)

    return text_result(_format_rule(doc), name)


def _format_rule(doc: RuleDocument) -> str:
    parts = [
        f"# {doc.title}",
        "",
        f"**Rule ID:** `{doc.id}`",
        f"**Category:** {category_label(doc.category)}",
        f"**Description:** {doc.description}",
    ]
    if doc.cross_references:
        parts.append(f"**Related Rules:** {', '.join(f'`{ref}`' for ref in doc.cross_references)}")
    parts.append(f"**Size:** ~{count_tokens(doc.content)} tokens")
    parts.extend(["", "---", "", doc.content])
    return "\n".join(parts)


def _format_not_found(name: str) -> str:
    parts = [f'Rule "{name}" not found.', "", "**Available rules:**"]
    for rule_id, meta in RULE_METADATA.items():
        aliases = aliases_for(rule_id)
        alias_note = f" *(aliases: {', '.join(aliases[:3])})*" if aliases else ""
        parts.append(f"- **{rule_id}** — {meta.description}{alias_note}")
    parts.append("")
    parts.append('*Tip: Use aliases like "git" for "git-commands", "test" for "testing"*')
    return "\n".join(parts)


async def handle_list_rules(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """List all loaded rule documents grouped by category."""
    if ctx.store.size == 0:
        return text_result(
            "\n".join(
                [
                    "**No rules loaded.**",
                    "",
                    "The rule store is empty. This may indicate:",
                    "- The docs directory was not found",
                    "- No .md files were discovered in the docs directory",
                    "- An error occurred during loading",
                    "",
                    "Check the server startup logs for error details.",
                ]
            )
        )

    parts = [
        "# CodeOps Rule Documents",
        "",
        f"**Total rules:** {ctx.store.size}",
        "",
        "These are universal, language-agnostic rules for AI coding agents.",
        "Each rule document works with any software project when paired with a",
        "project-specific `.clinerules/project.md` configuration file.",
        "",
        "---",
    ]

    for category in RuleCategory:
        docs = ctx.store.get_by_category(category)
        if not docs:
            continue

        info = CATEGORY_INFO[category]
        parts.extend(["", f"## {info.label}", f"*{info.description}*", ""])

        for doc in docs:
            parts.append(f"### {doc.title}")
            parts.append(f"- **ID:** `{doc.id}`")
            parts.append(f"- **Description:** {doc.description}")
            aliases = aliases_for(doc.id)
            if aliases:
                parts.append(f"- **Aliases:** {', '.join(aliases)}")
            if doc.cross_references:
                parts.append(
                    f"- **Related:** {', '.join(f'`{ref}`' for ref in doc.cross_references)}"
                )
            parts.append(f'- *Use `get_rule("{doc.id}")` for full documentation*')
            parts.append("")

    parts.extend(
        [
            "---",
            "",
            "## Quick Start",
            "",
            '1. **Get coding standards:** `get_rule("code")`',
            '2. **Get testing rules:** `get_rule("testing")`',
            '3. **Get git workflow:** `get_rule("git")`',
            '4. **Create a plan:** `get_rule("make_plan")`',
            '5. **Set up a project:** `get_rule("project-template")` or '
            '`analyze_project("/path/to/project")`',
            '6. **Search rules:** `search_rules("context window management")`',
        ]
    )
    return text_result("\n".join(parts))


async def handle_search_rules(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Full-text search across rule documents.

    Args:
        params: Dict containing:
            - query: Search query string
            - category: Optional category filter
            - limit: Optional maximum number of results (1-7)

    Returns:
        ToolResult with ranked results, or suggestions when nothing matched
    """
    args = SearchRulesParams.model_validate(params)
    query = args.query.strip()

    if not query:
        return error_result(
            "Search query is required.\n\n"
            'Examples: "context window management", "git commit", "test coverage", "DRY principle"'
        )

    results = ctx.search_engine.search(query, args.limit, args.category)

    if not results:
        return text_result(_format_no_results(query, args.category), query)

    return text_result(_format_search_results(query, results, args.category), query)


def _format_search_results(
    query: str,
    results: list[SearchResult],
    category: RuleCategory | None,
) -> str:
    filter_note = f" in **{CATEGORY_INFO[category].label}**" if category else ""
    plural = "" if len(results) == 1 else "s"

    parts = [
        f'## Search Results for "{query}"{filter_note}',
        f"*Found {len(results)} result{plural}*",
        "",
    ]

    for rank, result in enumerate(results, start=1):
        doc = result.document
        parts.append(f"### {rank}. {doc.title} ({result.relevance}% relevant)")
        parts.append(f"📁 {category_label(doc.category)} · 📄 `{doc.id}`")
        parts.append(f"> {result.excerpt}")
        parts.append(f'*Use `get_rule("{doc.id}")` for full documentation*')
        parts.append("")

    return "\n".join(parts)


def _format_no_results(query: str, category: RuleCategory | None) -> str:
    parts = [f'No results found for "{query}".', ""]

    if category:
        parts.append(
            f"*You searched only in **{CATEGORY_INFO[category].label}**. "
            "Try removing the category filter.*"
        )
        parts.append("")

    parts.extend(
        [
            "**Suggestions:**",
            "- Try simpler or shorter search terms",
            '- Use specific concepts: "DRY", "commit", "context window", "testing"',
            "- Use `list_rules` to see all available rule documents",
            '- Use `get_rule("name")` if you know which rule you need',
        ]
    )
    return "\n".join(parts)
