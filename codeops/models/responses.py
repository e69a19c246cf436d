"""Response models for CodeOps tools."""

from pydantic import BaseModel, Field


class ToolResult(BaseModel):
    """Result of executing a tool.

    ``content`` is markdown for the calling agent; errors are reported in
    the content with ``is_error`` set rather than raised.
    """

    content: str = Field(..., description="Markdown response text")
    is_error: bool = Field(default=False, description="Whether the call failed validation")
    input_tokens: int = Field(default=0, ge=0, description="Estimated input tokens")
    output_tokens: int = Field(default=0, ge=0, description="Estimated output tokens")


class HealthResponse(BaseModel):
    """Engine health snapshot."""

    status: str = Field(..., description="'healthy' or 'not_loaded'")
    version: str = Field(..., description="Server version")
    documents: int = Field(default=0, ge=0, description="Loaded rule documents")
    vocabulary_size: int = Field(default=0, ge=0, description="Distinct indexed terms")
    docs_path: str | None = Field(default=None, description="Docs directory in use")
