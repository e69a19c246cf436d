"""Scoring engine for rule search.

This package provides the TF-IDF search subsystem:
- Tokenization with stop-word filtering
- Inverted index with snapshot swaps on rebuild
- Field-weighted TF-IDF scoring with prefix matching
- Excerpt extraction

Usage:
    from codeops.engine.scoring import SearchEngine, tokenize
"""

from .constants import (
    DEFAULT_SEARCH_LIMIT,
    EXCERPT_PLACEHOLDER,
    MAX_SEARCH_LIMIT,
    STOP_WORDS,
)
from .index import DocumentIndex, IndexSnapshot, calculate_idf
from .search_engine import SearchEngine, clamp_limit
from .tfidf_scorer import (
    calculate_tf,
    extract_excerpt,
    max_possible_score,
    normalize_relevance,
    score_document,
)
from .tokenizer import tokenize

__all__ = [
    # Constants
    "DEFAULT_SEARCH_LIMIT",
    "EXCERPT_PLACEHOLDER",
    "MAX_SEARCH_LIMIT",
    "STOP_WORDS",
    # Tokenizer
    "tokenize",
    # Index
    "DocumentIndex",
    "IndexSnapshot",
    "calculate_idf",
    # Scorer
    "calculate_tf",
    "extract_excerpt",
    "max_possible_score",
    "normalize_relevance",
    "score_document",
    # Search
    "SearchEngine",
    "clamp_limit",
]
