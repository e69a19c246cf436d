"""In-memory inverted index over rule documents.

The index has a two-phase lifecycle: ``build_index`` once (or on reload),
then any number of lock-free reads. Builds and clears swap in a complete
new snapshot under a lock, so a reader always sees the result of the most
recently completed build and never a half-built index.
"""

import logging
import math
import threading
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from ...models import RuleDocument
from ..core.document import IndexedDocument, Posting
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexSnapshot:
    """Immutable view of one completed index build.

    Attributes:
        documents: Indexed documents keyed by id, in corpus order
        postings: Inverted index, term -> postings (one per containing document)
        total_documents: Number of documents passed to the build (IDF base)
    """

    documents: dict[str, IndexedDocument] = field(default_factory=dict)
    postings: dict[str, list[Posting]] = field(default_factory=dict)
    total_documents: int = 0


def _build_snapshot(documents: Iterable[RuleDocument]) -> IndexSnapshot:
    indexed: dict[str, IndexedDocument] = {}
    postings: dict[str, list[Posting]] = {}
    corpus = list(documents)

    for entry in corpus:
        indexed_doc = IndexedDocument(
            entry=entry,
            title_tokens=tokenize(entry.title),
            description_tokens=tokenize(entry.description),
            content_tokens=tokenize(entry.content),
        )
        indexed[entry.id] = indexed_doc

    # Postings are derived from the final document set so a duplicated id
    # contributes once, with the counts of its last occurrence.
    for doc_id, indexed_doc in indexed.items():
        counts = Counter(
            indexed_doc.title_tokens
            + indexed_doc.description_tokens
            + indexed_doc.content_tokens
        )
        for term, count in counts.items():
            postings.setdefault(term, []).append(
                Posting(document_id=doc_id, term_frequency=count)
            )

    return IndexSnapshot(documents=indexed, postings=postings, total_documents=len(corpus))


class DocumentIndex:
    """Holds tokenized documents and the inverted index for one corpus."""

    def __init__(self) -> None:
        self._snapshot = IndexSnapshot()
        self._write_lock = threading.Lock()

    @property
    def snapshot(self) -> IndexSnapshot:
        """The current, fully built index state."""
        return self._snapshot

    def build_index(self, documents: Iterable[RuleDocument]) -> None:
        """Replace the index wholesale with one built from ``documents``.

        Idempotent: building twice from the same corpus yields identical state.
        """
        snapshot = _build_snapshot(documents)
        with self._write_lock:
            self._snapshot = snapshot
        logger.info(
            f"Search index built: {snapshot.total_documents} documents, "
            f"{len(snapshot.postings)} terms"
        )

    def clear(self) -> None:
        """Drop all indexed documents and postings."""
        with self._write_lock:
            self._snapshot = IndexSnapshot()
        logger.debug("Search index cleared")

    @property
    def vocabulary_size(self) -> int:
        """Number of distinct terms currently indexed."""
        return len(self._snapshot.postings)

    @property
    def total_documents(self) -> int:
        return self._snapshot.total_documents


def calculate_idf(term: str, snapshot: IndexSnapshot) -> float:
    """Inverse document frequency with add-one dampening.

    ``ln(N / df) + 1`` where ``df`` is the number of documents containing
    the term. When the term has no exact postings, the posting counts of
    every indexed term that extends it as a prefix are summed instead, so a
    document holding several such terms counts once per term. Returns 0.0
    when nothing matches.

    Args:
        term: A single query token
        snapshot: Index state to read from

    Returns:
        IDF weight (below 1.0 when prefix matches outnumber the documents)
    """
    total = snapshot.total_documents
    if total == 0:
        return 0.0

    exact = snapshot.postings.get(term)
    if exact:
        doc_freq = len(exact)
    else:
        doc_freq = sum(
            len(postings)
            for index_term, postings in snapshot.postings.items()
            if index_term.startswith(term)
        )

    if doc_freq == 0:
        return 0.0
    return math.log(total / doc_freq) + 1
