"""In-memory store for rule documents.

Loads every markdown file from the docs directory and provides lookups by
id, fuzzy name matching via aliases, and category filtering.
"""

import logging
import re
import time
from pathlib import Path

from ..models import (
    RULE_ALIASES,
    RULE_METADATA,
    LoadStats,
    RuleCategory,
    RuleDocument,
)

logger = logging.getLogger(__name__)

_TITLE_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_H1_LINE_RE = re.compile(r"^#\s+")
# **code.md**, `testing.md`
_CROSS_REF_PATTERNS = (
    re.compile(r"\*\*(\w[\w-]*)\.md\*\*"),
    re.compile(r"`(\w[\w-]*)\.md`"),
)
_PROJECT_MD_RE = re.compile(r"project\.md", re.IGNORECASE)

_DESCRIPTION_SKIP_PREFIXES = ("#", ">", "---", "|", "```", "*")
DESCRIPTION_MAX_LENGTH = 200


def extract_title(content: str) -> str:
    match = _TITLE_RE.search(content)
    return match.group(1).strip() if match else "Untitled"


def extract_description(content: str) -> str:
    """First prose line after the H1 title, truncated to 200 characters."""
    lines = content.split("\n")
    start = 0
    for i, line in enumerate(lines):
        if _H1_LINE_RE.match(line):
            start = i + 1
            break

    for line in lines[start:]:
        trimmed = line.strip()
        if trimmed and not trimmed.startswith(_DESCRIPTION_SKIP_PREFIXES):
            if len(trimmed) > DESCRIPTION_MAX_LENGTH:
                return trimmed[:DESCRIPTION_MAX_LENGTH] + "..."
            return trimmed

    return "Rule document"


def extract_cross_references(content: str) -> tuple[str, ...]:
    """Ids of known rule documents referenced by name in ``content``."""
    refs: dict[str, None] = {}
    for pattern in _CROSS_REF_PATTERNS:
        for match in pattern.finditer(content):
            name = match.group(1)
            if name in RULE_METADATA:
                refs[name] = None

    if _PROJECT_MD_RE.search(content):
        refs["project-template"] = None

    return tuple(refs)


def create_document(doc_id: str, content: str, file_path: Path | None = None) -> RuleDocument:
    """Build a RuleDocument from raw markdown, using known metadata when available."""
    known = RULE_METADATA.get(doc_id)
    return RuleDocument(
        id=doc_id,
        title=extract_title(content),
        description=known.description if known else extract_description(content),
        content=content,
        category=known.category if known else RuleCategory.STANDARDS,
        cross_references=tuple(
            ref for ref in extract_cross_references(content) if ref != doc_id
        ),
        file_path=str(file_path) if file_path else None,
        filename=file_path.name if file_path else f"{doc_id}.md",
    )


class RuleStore:
    """In-memory store for all rule documents."""

    def __init__(self) -> None:
        self._documents: dict[str, RuleDocument] = {}

    def load_from_directory(self, docs_path: str | Path) -> LoadStats:
        """Load all ``*.md`` files (non-recursive) from a directory.

        Files that cannot be read are logged and skipped. Previously loaded
        documents are discarded first.

        Raises:
            FileNotFoundError: If ``docs_path`` does not exist
            NotADirectoryError: If ``docs_path`` is not a directory
        """
        start = time.perf_counter()
        docs_dir = Path(docs_path)
        loaded = 0
        failed = 0

        self._documents.clear()

        if not docs_dir.exists():
            raise FileNotFoundError(f"Docs directory not found: {docs_dir}")
        if not docs_dir.is_dir():
            raise NotADirectoryError(f"Docs path is not a directory: {docs_dir}")

        for file_path in sorted(docs_dir.glob("*.md")):
            try:
                content = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to load rule document {file_path.name}: {e}")
                failed += 1
                continue

            document = create_document(file_path.stem, content, file_path)
            self._documents[document.id] = document
            loaded += 1

        stats = LoadStats(
            loaded_files=loaded,
            failed_files=failed,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        logger.info(
            f"Loaded {loaded} rule documents from {docs_dir} "
            f"({failed} failed, {stats.duration_ms:.1f}ms)"
        )
        return stats

    def add_documents(self, documents: list[RuleDocument]) -> None:
        """Add already-built documents (later ids replace earlier ones)."""
        for document in documents:
            self._documents[document.id] = document

    def get_by_id(self, doc_id: str) -> RuleDocument | None:
        return self._documents.get(doc_id)

    def find_by_name(self, name: str) -> RuleDocument | None:
        """Find a document by name using fuzzy matching.

        Strategies, in order:
        1. Exact id match
        2. Alias resolution
        3. Case-insensitive id match
        4. Partial id match (either contains the other)
        5. Title substring match
        """
        normalized = name.lower().strip()
        if not normalized:
            return None

        exact = self._documents.get(normalized)
        if exact:
            return exact

        aliased_id = RULE_ALIASES.get(normalized)
        if aliased_id:
            return self._documents.get(aliased_id)

        for doc_id, doc in self._documents.items():
            if doc_id.lower() == normalized:
                return doc

        for doc_id, doc in self._documents.items():
            if doc_id in normalized or normalized in doc_id:
                return doc

        for doc in self._documents.values():
            if normalized in doc.title.lower():
                return doc

        return None

    def get_by_category(self, category: RuleCategory | str) -> list[RuleDocument]:
        return [doc for doc in self._documents.values() if doc.category == category]

    def all_documents(self) -> list[RuleDocument]:
        return list(self._documents.values())

    @property
    def size(self) -> int:
        return len(self._documents)

    def clear(self) -> None:
        self._documents.clear()
