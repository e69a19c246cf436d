"""Internal data structures for the search index and section merge engine.

Public, caller-facing records (RuleDocument, SearchResult) are pydantic
models in ``codeops.models``; the structures here are engine-internal.
"""

from dataclasses import dataclass, field

from ...models import RuleDocument


@dataclass(frozen=True)
class Posting:
    """A single entry in the inverted index.

    Attributes:
        document_id: Id of the document containing the term
        term_frequency: Raw count of the term across title, description and body
    """

    document_id: str
    term_frequency: int


@dataclass
class IndexedDocument:
    """A rule document with pre-tokenized fields.

    The three token lists are kept separate so the scorer can weight each
    field independently. Duplicates are retained for frequency counting.
    """

    entry: RuleDocument
    title_tokens: list[str] = field(default_factory=list)
    description_tokens: list[str] = field(default_factory=list)
    content_tokens: list[str] = field(default_factory=list)


@dataclass
class ParsedSection:
    """A level-2 section of a project.md document.

    Attributes:
        header: The exact heading line (e.g. "## Toolchain"); empty for the preamble
        level: 2 for a real section, 0 for the preamble
        content: Raw text after the heading up to the next level-2 heading,
            including any nested ``###`` subsections
        heading_only: True when the heading is immediately followed by another
            level-2 heading (no content lines at all)
    """

    header: str
    level: int
    content: str
    heading_only: bool = False

    @property
    def is_preamble(self) -> bool:
        return self.header == ""

    def render(self) -> str:
        """Render back to markdown (heading omitted for the preamble)."""
        if self.is_preamble:
            return self.content
        if self.heading_only:
            return self.header
        return f"{self.header}\n{self.content}"


@dataclass(frozen=True)
class MergeChange:
    """A single change-log entry produced during a merge."""

    section: str
    description: str
