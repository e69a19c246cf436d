"""CodeOps engine.

- core: shared data structures and token estimation
- scoring: TF-IDF rule search
- merge: project.md section parsing, classification and merging
- handlers: tool handlers
"""

from .codeops_engine import TOOL_HANDLERS, CodeOpsEngine

__all__ = ["CodeOpsEngine", "TOOL_HANDLERS"]
