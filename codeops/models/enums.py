"""Enumeration types for the CodeOps rules server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available CodeOps tools."""

    GET_RULE = "get_rule"
    LIST_RULES = "list_rules"
    SEARCH_RULES = "search_rules"
    ANALYZE_PROJECT = "analyze_project"
    GET_SETUP_GUIDE = "get_setup_guide"


class RuleCategory(StrEnum):
    """Categories for grouping rule documents."""

    STANDARDS = "standards"  # code.md, testing.md
    WORKFLOW = "workflow"  # git-commands.md, make_plan.md
    PLANNING = "planning"  # plans.md
    BEHAVIOR = "behavior"  # agents.md
    SETUP = "setup"  # project-template.md


class SectionMergeStrategy(StrEnum):
    """How a project.md section is handled during merge."""

    AUTO_UPDATE = "auto-update"  # Refreshed from fresh analysis
    PRESERVE = "preserve"  # User content, kept verbatim
    STATIC = "static"  # Boilerplate, always regenerated
