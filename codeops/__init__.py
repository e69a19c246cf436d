"""CodeOps rules server.

Serves universal AI coding-agent rule documents (search, lookup, listing)
and generates or incrementally merges a project's `.clinerules/project.md`.
"""

__version__ = "1.1.0"
