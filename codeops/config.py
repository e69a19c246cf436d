"""Configuration for the CodeOps rules server.

Values come from environment variables prefixed with ``CODEOPS_`` (or a
``.env`` file), falling back to the defaults below.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Rule documents shipped inside the package
BUNDLED_DOCS_PATH = Path(__file__).parent / "docs"

DOCS_PATH_ENV_VAR = "CODEOPS_DOCS_PATH"


class Settings(BaseSettings):
    """Server settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="CODEOPS_",
        env_file=".env",
        extra="ignore",
    )

    # Server identity
    server_name: str = "codeops-rules"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Rule documents directory (None = bundled docs)
    docs_path: Path | None = None

    # Search
    default_search_limit: int = Field(default=5, ge=1)
    max_search_limit: int = Field(default=7, ge=1)
    excerpt_max_length: int = Field(default=200, ge=20)

    # Project configuration file, relative to the project root
    project_config_path: str = ".clinerules/project.md"


settings = Settings()


def resolve_docs_path(cli_arg: str | None = None, config: Settings | None = None) -> Path:
    """Resolve the absolute path to the rule documents directory.

    Priority:
    1. ``CODEOPS_DOCS_PATH`` environment variable
    2. First CLI positional argument
    3. Bundled docs at ``codeops/docs/``

    Args:
        cli_arg: Optional positional argument from the command line
        config: Settings to read the env override from (defaults to module settings)

    Returns:
        Absolute path to an existing docs directory

    Raises:
        FileNotFoundError: If the resolved directory does not exist
    """
    config = config or settings

    if config.docs_path is not None:
        docs_path = config.docs_path.expanduser().resolve()
    elif cli_arg and not cli_arg.startswith("-"):
        docs_path = Path(cli_arg).expanduser().resolve()
    else:
        docs_path = BUNDLED_DOCS_PATH

    if not docs_path.is_dir():
        raise FileNotFoundError(
            f"Documentation path not found: {docs_path}\n"
            "Available options:\n"
            f"  - Set env var: {DOCS_PATH_ENV_VAR}=/path/to/docs\n"
            "  - Pass path as CLI arg: codeops-rules /path/to/docs\n"
            f"  - Ensure bundled docs exist at: {BUNDLED_DOCS_PATH}"
        )

    return docs_path
