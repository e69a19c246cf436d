"""Request models (Pydantic *Params classes) for CodeOps tools."""

from pydantic import BaseModel, Field

from .enums import RuleCategory
from .project import ProjectAnalysis


class GetRuleParams(BaseModel):
    """Parameters for get_rule tool."""

    name: str = Field(default="", description="Rule name or alias (e.g. 'git', 'testing')")


class SearchRulesParams(BaseModel):
    """Parameters for search_rules tool."""

    query: str = Field(default="", description="Search query string")
    category: RuleCategory | None = Field(
        default=None, description="Restrict results to a single category"
    )
    limit: int | None = Field(default=None, description="Maximum results (clamped to 1-7)")


class AnalyzeProjectParams(BaseModel):
    """Parameters for analyze_project tool."""

    project_path: str = Field(default="", description="Absolute path to the project root")
    analysis: ProjectAnalysis | None = Field(
        default=None,
        description="Project analysis record (defaults to one named after the directory)",
    )


class GetSetupGuideParams(BaseModel):
    """Parameters for get_setup_guide tool."""

    project_type: str | None = Field(default=None, description="Optional project type")
