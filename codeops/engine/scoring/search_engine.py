"""TF-IDF search engine for rule documents.

Usage:
1. Call ``build_index()`` with all documents at startup
2. Call ``search()`` for each query
3. Call ``build_index()`` again (or ``clear()``) to reload
"""

import logging
from collections.abc import Iterable

from ...models import RuleCategory, RuleDocument, SearchResult
from .constants import DEFAULT_SEARCH_LIMIT, EXCERPT_MAX_LENGTH, MAX_SEARCH_LIMIT
from .index import DocumentIndex, calculate_idf
from .tfidf_scorer import (
    extract_excerpt,
    max_possible_score,
    normalize_relevance,
    score_document,
)
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def clamp_limit(
    limit: object,
    default: int = DEFAULT_SEARCH_LIMIT,
    maximum: int = MAX_SEARCH_LIMIT,
) -> int:
    """Clamp a requested result limit into ``[1, maximum]``.

    ``None`` and values that cannot be read as an integer use ``default``.
    """
    if limit is None or isinstance(limit, bool):
        value = default
    else:
        try:
            value = int(limit)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            value = default
    return min(max(1, value), maximum)


class SearchEngine:
    """Full-text search over an in-memory ``DocumentIndex``."""

    def __init__(
        self,
        default_limit: int = DEFAULT_SEARCH_LIMIT,
        max_limit: int = MAX_SEARCH_LIMIT,
        excerpt_max_length: int = EXCERPT_MAX_LENGTH,
    ) -> None:
        self.index = DocumentIndex()
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.excerpt_max_length = excerpt_max_length

    def build_index(self, documents: Iterable[RuleDocument]) -> None:
        self.index.build_index(documents)

    def clear(self) -> None:
        self.index.clear()

    @property
    def vocabulary_size(self) -> int:
        return self.index.vocabulary_size

    def search(
        self,
        query: str,
        limit: int | None = None,
        category_filter: RuleCategory | str | None = None,
    ) -> list[SearchResult]:
        """Search for documents matching a query string.

        Args:
            query: The search query. Empty, whitespace-only or all-stop-word
                queries return no results.
            limit: Maximum results, clamped to [1, max_limit]; defaults to
                ``default_limit``.
            category_filter: Only score documents in this category. IDF is
                still computed over the full corpus.

        Returns:
            Results sorted by descending relevance; ties keep corpus order.
        """
        query_tokens = tokenize(query)
        if not query_tokens:
            return []

        effective_limit = clamp_limit(limit, self.default_limit, self.max_limit)
        snapshot = self.index.snapshot

        idf_by_token = {token: calculate_idf(token, snapshot) for token in query_tokens}

        scored: list[tuple[str, float]] = []
        for doc_id, indexed_doc in snapshot.documents.items():
            if category_filter and indexed_doc.entry.category != category_filter:
                continue
            score = score_document(indexed_doc, query_tokens, idf_by_token)
            if score > 0:
                scored.append((doc_id, score))

        # sorted() is stable, so equal scores keep corpus order
        top = sorted(scored, key=lambda item: item[1], reverse=True)[:effective_limit]

        max_score = max_possible_score(len(query_tokens), snapshot.total_documents)
        results = [
            SearchResult(
                document=snapshot.documents[doc_id].entry,
                relevance=normalize_relevance(score, max_score),
                excerpt=extract_excerpt(
                    snapshot.documents[doc_id].entry.content,
                    query_tokens,
                    self.excerpt_max_length,
                ),
            )
            for doc_id, score in top
        ]

        logger.debug(f"Search '{query}' → {len(results)} results (of {len(scored)} matches)")
        return results
