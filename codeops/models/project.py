"""Project analysis model.

Produced by a project scanner outside this package and consumed by the
project.md template renderer.
"""

from pydantic import BaseModel, Field


class ProjectAnalysis(BaseModel):
    """Result of analyzing a project directory."""

    name: str = Field(..., description="Detected project name")
    type: str = Field(default="unknown", description="Inferred project type")
    languages: list[str] = Field(default_factory=list, description="Detected languages")
    frameworks: list[str] = Field(default_factory=list, description="Detected frameworks")
    package_manager: str | None = Field(default=None, description="Detected package manager")
    test_framework: str | None = Field(default=None, description="Detected test framework")
    build_command: str | None = Field(default=None, description="Build command")
    test_command: str | None = Field(default=None, description="Test command")
    verify_command: str | None = Field(default=None, description="Pre-commit verify command")
    is_monorepo: bool = Field(default=False, description="Whether this is a monorepo")
    structure: list[str] = Field(default_factory=list, description="Top-level directories")
    manifest_files: list[str] = Field(default_factory=list, description="Manifest files found")
