"""Rule document and search result models."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import RuleCategory


class RuleDocument(BaseModel):
    """A single rule document loaded from the docs directory.

    Immutable once loaded; the search index holds references to these and
    callers must treat them as read-only.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique id derived from the filename (e.g. 'git-commands')")
    title: str = Field(..., description="Display title from the first H1 heading")
    description: str = Field(default="", description="Brief description")
    content: str = Field(default="", description="Full raw markdown body")
    category: RuleCategory = Field(default=RuleCategory.STANDARDS, description="Rule category")
    cross_references: tuple[str, ...] = Field(
        default=(), description="Ids of other rule documents referenced by this one"
    )
    file_path: str | None = Field(default=None, description="Absolute file path on disk")
    filename: str | None = Field(default=None, description="Original filename")


class SearchResult(BaseModel):
    """A ranked search hit."""

    document: RuleDocument = Field(..., description="The matching rule document")
    relevance: int = Field(..., ge=0, le=100, description="Relevance score (0-100)")
    excerpt: str = Field(..., min_length=1, description="Context line where the query matched")


class LoadStats(BaseModel):
    """Statistics from loading a docs directory."""

    loaded_files: int = Field(default=0, ge=0, description="Files successfully loaded")
    failed_files: int = Field(default=0, ge=0, description="Files that failed to load")
    duration_ms: float = Field(default=0.0, ge=0, description="Load time in milliseconds")
