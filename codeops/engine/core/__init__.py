"""Engine core module.

Core data structures and utilities shared by the search and merge engines:
- Index and section data structures
- Token estimation
"""

from .document import IndexedDocument, MergeChange, ParsedSection, Posting
from .tokens import count_tokens

__all__ = [
    # Data structures
    "IndexedDocument",
    "MergeChange",
    "ParsedSection",
    "Posting",
    # Token utilities
    "count_tokens",
]
