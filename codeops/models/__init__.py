"""Pydantic models and metadata for the CodeOps rules server.

Import from submodules directly for narrower imports:

    from codeops.models.enums import RuleCategory, ToolName
    from codeops.models.documents import RuleDocument
"""

from .documents import LoadStats, RuleDocument, SearchResult
from .enums import RuleCategory, SectionMergeStrategy, ToolName
from .metadata import (
    CATEGORY_INFO,
    RULE_ALIASES,
    RULE_METADATA,
    CategoryInfo,
    RuleMeta,
    aliases_for,
    category_label,
)
from .project import ProjectAnalysis
from .requests import (
    AnalyzeProjectParams,
    GetRuleParams,
    GetSetupGuideParams,
    SearchRulesParams,
)
from .responses import HealthResponse, ToolResult

__all__ = [
    # Enums
    "RuleCategory",
    "SectionMergeStrategy",
    "ToolName",
    # Metadata
    "CATEGORY_INFO",
    "RULE_ALIASES",
    "RULE_METADATA",
    "CategoryInfo",
    "RuleMeta",
    "aliases_for",
    "category_label",
    # Documents
    "LoadStats",
    "RuleDocument",
    "SearchResult",
    # Project
    "ProjectAnalysis",
    # Request models
    "AnalyzeProjectParams",
    "GetRuleParams",
    "GetSetupGuideParams",
    "SearchRulesParams",
    # Response models
    "HealthResponse",
    "ToolResult",
]
