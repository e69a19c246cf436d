"""Known rule documents, aliases and category display info."""

from typing import NamedTuple

from .enums import RuleCategory


class RuleMeta(NamedTuple):
    title: str
    category: RuleCategory
    description: str


class CategoryInfo(NamedTuple):
    label: str
    description: str


# Rule id -> metadata; ids are the markdown filenames without extension
RULE_METADATA: dict[str, RuleMeta] = {
    "code": RuleMeta(
        "Coding Standards",
        RuleCategory.STANDARDS,
        "Universal coding standards: DRY, testing, documentation, architecture, type safety.",
    ),
    "testing": RuleMeta(
        "Testing Standards & Rules",
        RuleCategory.STANDARDS,
        "Test commands, workflows, coverage requirements, and debugging strategies.",
    ),
    "git-commands": RuleMeta(
        "Git Commands & Workflow",
        RuleCategory.WORKFLOW,
        "Git commit protocols (gitcm/gitcmp), commit message format, and push workflow.",
    ),
    "make_plan": RuleMeta(
        "Implementation Plan Creation & Execution",
        RuleCategory.WORKFLOW,
        "Complete protocol for creating and executing multi-document implementation plans.",
    ),
    "plans": RuleMeta(
        "Implementation Plan Rules",
        RuleCategory.PLANNING,
        "Rules for structuring plans: phases, tasks, dependencies, testing, architecture.",
    ),
    "agents": RuleMeta(
        "AI Agent Instructions",
        RuleCategory.BEHAVIOR,
        "Mandatory AI agent behavior: compliance, context management, multi-session execution.",
    ),
    "project-template": RuleMeta(
        "Project Configuration Template",
        RuleCategory.SETUP,
        "Template for .clinerules/project.md — project-specific toolchain and conventions.",
    ),
}

# Shorthand name -> rule id
RULE_ALIASES: dict[str, str] = {
    # code.md
    "coding": "code",
    "standards": "code",
    "coding-standards": "code",
    # testing.md
    "test": "testing",
    "tests": "testing",
    # git-commands.md
    "git": "git-commands",
    "gitcm": "git-commands",
    "gitcmp": "git-commands",
    "commit": "git-commands",
    # make_plan.md
    "make-plan": "make_plan",
    "makeplan": "make_plan",
    "plan-creation": "make_plan",
    "exec-plan": "make_plan",
    "exec_plan": "make_plan",
    # plans.md
    "planning": "plans",
    "plan-rules": "plans",
    # agents.md
    "agent": "agents",
    "agent-rules": "agents",
    "behavior": "agents",
    # project-template.md
    "project": "project-template",
    "template": "project-template",
    "setup": "project-template",
    "project-config": "project-template",
}

CATEGORY_INFO: dict[RuleCategory, CategoryInfo] = {
    RuleCategory.STANDARDS: CategoryInfo(
        "Standards", "Code quality, testing, and documentation standards"
    ),
    RuleCategory.WORKFLOW: CategoryInfo(
        "Workflow", "Git operations and plan creation/execution protocols"
    ),
    RuleCategory.PLANNING: CategoryInfo(
        "Planning", "Implementation plan structure and formatting rules"
    ),
    RuleCategory.BEHAVIOR: CategoryInfo(
        "Agent Behavior", "AI agent compliance, context management, and session rules"
    ),
    RuleCategory.SETUP: CategoryInfo(
        "Project Setup", "Project configuration templates and toolchain setup"
    ),
}


def aliases_for(rule_id: str) -> list[str]:
    """Return every alias pointing at a rule id, in declaration order."""
    return [alias for alias, target in RULE_ALIASES.items() if target == rule_id]


def category_label(category: str) -> str:
    """Display label for a category, falling back to the raw value."""
    try:
        return CATEGORY_INFO[RuleCategory(category)].label
    except ValueError:
        return category
