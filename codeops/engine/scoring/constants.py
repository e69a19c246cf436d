"""Scoring constants for the TF-IDF rule search engine.

- Stop words excluded from the index and from queries
- Field weights for title / description / body scoring
- Result limits
- Excerpt extraction settings
"""

# ---------------------------------------------------------------------------
# Stop words, too common to help relevance. Queries made up entirely of
# these tokenize to nothing and return no results.
# ---------------------------------------------------------------------------
STOP_WORDS = frozenset(
    {
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "but",
        "by",
        "for",
        "from",
        "has",
        "have",
        "he",
        "her",
        "his",
        "how",
        "i",
        "if",
        "in",
        "is",
        "it",
        "its",
        "just",
        "let",
        "may",
        "my",
        "no",
        "not",
        "of",
        "on",
        "or",
        "our",
        "own",
        "say",
        "she",
        "so",
        "than",
        "that",
        "the",
        "their",
        "them",
        "then",
        "there",
        "these",
        "they",
        "this",
        "to",
        "too",
        "us",
        "was",
        "we",
        "what",
        "when",
        "which",
        "who",
        "will",
        "with",
        "you",
        "your",
    }
)

# Minimum token length kept by the tokenizer
MIN_TOKEN_LENGTH = 2

# ---------------------------------------------------------------------------
# Field weights. Title matches rank highest, then description, then body.
# ---------------------------------------------------------------------------
TITLE_WEIGHT = 10.0
DESCRIPTION_WEIGHT = 5.0
CONTENT_WEIGHT = 1.0

# ---------------------------------------------------------------------------
# Result limits
# ---------------------------------------------------------------------------
DEFAULT_SEARCH_LIMIT = 5
MAX_SEARCH_LIMIT = 7

# ---------------------------------------------------------------------------
# Excerpt extraction
# ---------------------------------------------------------------------------
EXCERPT_MAX_LENGTH = 200
EXCERPT_MIN_LINE_LENGTH = 20
EXCERPT_ELLIPSIS = "..."
EXCERPT_PLACEHOLDER = "CodeOps rule document"

# Lines starting with these are markdown structure, not prose
STRUCTURAL_LINE_PREFIXES = (
    "#",  # headings
    "|",  # table rows
    "```",  # code fences
    "---",  # horizontal rules
    ">",  # blockquotes
    "- ❌",  # do/don't checklists
    "- ✅",
    "- [ ]",  # task checklists
    "- [x]",
    "- [X]",
)
