"""Base infrastructure for tool handlers.

This module provides the common types and utilities used by all handler modules.
Each handler receives a HandlerContext with shared state and returns a ToolResult.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Coroutine

from ...models import ToolResult
from ..core.tokens import count_tokens

if TYPE_CHECKING:
    from ...config import Settings
    from ...store import RuleStore
    from ..scoring import SearchEngine


@dataclass
class HandlerContext:
    """Context object passed to all handlers.

    Contains shared state and dependencies that handlers need to operate.
    This decouples handlers from the CodeOpsEngine class.
    """

    store: "RuleStore"
    search_engine: "SearchEngine"
    settings: "Settings"


# Type alias for handler functions
HandlerFunc = Callable[
    [dict[str, Any], HandlerContext],
    Coroutine[Any, Any, ToolResult],
]


def format_error(message: str) -> str:
    return f"**Error:** {message}"


def text_result(content: str, input_text: str = "") -> ToolResult:
    """Wrap markdown output in a ToolResult with token estimates."""
    return ToolResult(
        content=content,
        input_tokens=count_tokens(input_text),
        output_tokens=count_tokens(content),
    )


def error_result(message: str, input_text: str = "") -> ToolResult:
    content = format_error(message)
    return ToolResult(
        content=content,
        is_error=True,
        input_tokens=count_tokens(input_text),
        output_tokens=count_tokens(content),
    )
