"""CodeOps engine: owns the rule store and search index and dispatches tools."""

import asyncio
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .. import __version__
from ..config import Settings, resolve_docs_path, settings as default_settings
from ..models import HealthResponse, LoadStats, ToolName, ToolResult
from ..store import RuleStore
from .handlers import (
    HandlerContext,
    HandlerFunc,
    error_result,
    handle_analyze_project,
    handle_get_rule,
    handle_get_setup_guide,
    handle_list_rules,
    handle_search_rules,
)
from .scoring import SearchEngine

logger = logging.getLogger(__name__)

TOOL_HANDLERS: dict[ToolName, HandlerFunc] = {
    ToolName.GET_RULE: handle_get_rule,
    ToolName.LIST_RULES: handle_list_rules,
    ToolName.SEARCH_RULES: handle_search_rules,
    ToolName.ANALYZE_PROJECT: handle_analyze_project,
    ToolName.GET_SETUP_GUIDE: handle_get_setup_guide,
}


class CodeOpsEngine:
    """Rule documents, search index and tool dispatch for one server process.

    ``load()`` reads the docs directory and builds the index; ``reload()``
    does the same again. Loads are serialized by a lock, and the search
    index swaps in each rebuild atomically, so tool calls issued during a
    reload see either the old or the new corpus.
    """

    def __init__(self, config: Settings | None = None, docs_path: str | Path | None = None):
        self.settings = config or default_settings
        self._docs_path = Path(docs_path) if docs_path else None
        self.store = RuleStore()
        self.search_engine = SearchEngine(
            default_limit=self.settings.default_search_limit,
            max_limit=self.settings.max_search_limit,
            excerpt_max_length=self.settings.excerpt_max_length,
        )
        self._load_lock = asyncio.Lock()
        self._loaded = False

    @property
    def docs_path(self) -> Path:
        if self._docs_path is None:
            self._docs_path = resolve_docs_path(config=self.settings)
        return self._docs_path

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def context(self) -> HandlerContext:
        return HandlerContext(
            store=self.store,
            search_engine=self.search_engine,
            settings=self.settings,
        )

    async def load(self) -> LoadStats:
        """Load rule documents and rebuild the search index."""
        async with self._load_lock:
            docs_path = self.docs_path
            stats = await asyncio.to_thread(self.store.load_from_directory, docs_path)
            self.search_engine.build_index(self.store.all_documents())
            self._loaded = True
            logger.info(
                f"{self.settings.server_name} v{__version__} ready: "
                f"{stats.loaded_files} rules, {self.search_engine.vocabulary_size} terms"
            )
            return stats

    async def reload(self) -> LoadStats:
        return await self.load()

    def health(self) -> HealthResponse:
        return HealthResponse(
            status="healthy" if self._loaded and self.store.size > 0 else "not_loaded",
            version=__version__,
            documents=self.store.size,
            vocabulary_size=self.search_engine.vocabulary_size,
            docs_path=str(self._docs_path) if self._docs_path else None,
        )

    async def execute(self, tool: ToolName | str, params: dict[str, Any] | None = None) -> ToolResult:
        """Run a tool and return its result.

        Unknown tools, invalid parameters and unexpected handler failures are
        reported as error results rather than raised.
        """
        try:
            tool_name = ToolName(tool)
        except ValueError:
            available = ", ".join(t.value for t in ToolName)
            return error_result(f"Unknown tool: {tool}. Available tools: {available}")

        handler = TOOL_HANDLERS[tool_name]
        try:
            return await handler(params or {}, self.context)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            logger.info(f"Invalid parameters for {tool_name}: {fields}")
            return error_result(f"Invalid parameters for {tool_name}: {fields}")
        except Exception as e:
            logger.error(f"Tool {tool_name} failed: {e}", exc_info=True)
            return error_result(f"{tool_name} failed. Check the server logs for details.")
