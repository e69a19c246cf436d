"""TF-IDF scoring and excerpt extraction for rule search.

Scoring factors per query token:
- Term frequency per field, with prefix matching ("test" matches "testing")
- Inverse document frequency over the whole corpus
- Field weights (title 10x, description 5x, body 1x)
"""

import math

from ..core.document import IndexedDocument
from .constants import (
    CONTENT_WEIGHT,
    DESCRIPTION_WEIGHT,
    EXCERPT_ELLIPSIS,
    EXCERPT_MAX_LENGTH,
    EXCERPT_MIN_LINE_LENGTH,
    EXCERPT_PLACEHOLDER,
    STRUCTURAL_LINE_PREFIXES,
    TITLE_WEIGHT,
)


def calculate_tf(token: str, field_tokens: list[str]) -> float:
    """Normalized term frequency of ``token`` within one field.

    A field token counts if it equals the query token or starts with it.

    Returns:
        Matching token count divided by field length (0.0 for an empty field)
    """
    if not field_tokens:
        return 0.0
    count = sum(1 for field_token in field_tokens if field_token.startswith(token))
    return count / len(field_tokens)


def score_field(token: str, field_tokens: list[str], idf: float, weight: float) -> float:
    tf = calculate_tf(token, field_tokens)
    if tf == 0:
        return 0.0
    return tf * idf * weight


def score_document(
    indexed_doc: IndexedDocument,
    query_tokens: list[str],
    idf_by_token: dict[str, float],
) -> float:
    """Sum weighted TF-IDF contributions across fields and query tokens.

    Args:
        indexed_doc: The pre-tokenized document
        query_tokens: Tokenized query
        idf_by_token: Precomputed IDF per query token

    Returns:
        Combined score (0.0 when nothing matches)
    """
    total = 0.0
    for token in query_tokens:
        idf = idf_by_token.get(token, 0.0)
        if idf == 0:
            continue
        total += score_field(token, indexed_doc.title_tokens, idf, TITLE_WEIGHT)
        total += score_field(token, indexed_doc.description_tokens, idf, DESCRIPTION_WEIGHT)
        total += score_field(token, indexed_doc.content_tokens, idf, CONTENT_WEIGHT)
    return total


def max_possible_score(query_token_count: int, total_documents: int) -> float:
    """Theoretical maximum: every query token hits the title at maximum IDF."""
    max_idf = math.log(total_documents) + 1 if total_documents > 0 else 1.0
    return query_token_count * TITLE_WEIGHT * max_idf


def normalize_relevance(score: float, max_score: float) -> int:
    """Scale a raw score to an integer percentage in [0, 100]."""
    if max_score <= 0 or score <= 0:
        return 0
    # Round half up
    return min(math.floor(score / max_score * 100 + 0.5), 100)


def is_structural_line(trimmed: str) -> bool:
    """Whether a stripped line is markdown structure or too short to excerpt."""
    return len(trimmed) < EXCERPT_MIN_LINE_LENGTH or trimmed.startswith(STRUCTURAL_LINE_PREFIXES)


def _truncate(text: str, max_length: int) -> str:
    if len(text) > max_length:
        return text[:max_length] + EXCERPT_ELLIPSIS
    return text


def extract_excerpt(
    content: str,
    query_tokens: list[str],
    max_length: int = EXCERPT_MAX_LENGTH,
) -> str:
    """Pick a context line from a document body.

    Returns the first prose line containing any query token (plain
    case-insensitive substring check). Falls back to the first prose line
    of the body, then to a fixed placeholder, so the result is never empty.
    """
    lines = content.split("\n") if content else []

    for line in lines:
        line_lower = line.lower()
        if not any(token in line_lower for token in query_tokens):
            continue
        trimmed = line.strip()
        if is_structural_line(trimmed):
            continue
        return _truncate(trimmed, max_length)

    for line in lines:
        trimmed = line.strip()
        if trimmed and not is_structural_line(trimmed):
            return _truncate(trimmed, max_length)

    return EXCERPT_PLACEHOLDER
