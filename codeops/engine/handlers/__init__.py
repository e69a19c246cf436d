"""Tool handlers for the CodeOps engine.

This package contains tool handlers organized by domain:
- rules: Rule lookup, listing and search (get_rule, list_rules, search_rules)
- project: Project configuration (analyze_project, get_setup_guide)

Each handler is a standalone async function that takes:
- params: dict[str, Any] - Tool parameters
- ctx: HandlerContext - Shared engine context (store, search engine, settings)

And returns:
- ToolResult with markdown content and token estimates
"""

from .base import HandlerContext, HandlerFunc, error_result, format_error, text_result
from .project import (
    handle_analyze_project,
    handle_get_setup_guide,
    read_existing_project_md,
)
from .rules import (
    handle_get_rule,
    handle_list_rules,
    handle_search_rules,
)

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    "error_result",
    "format_error",
    "text_result",
    # Rule handlers
    "handle_get_rule",
    "handle_list_rules",
    "handle_search_rules",
    # Project handlers
    "handle_analyze_project",
    "handle_get_setup_guide",
    "read_existing_project_md",
]
