"""Tokenizer shared by index building and query parsing."""

import re

from .constants import MIN_TOKEN_LENGTH, STOP_WORDS

_CODE_BLOCK_RE = re.compile(r"```[\s\S]*?```")
_INLINE_CODE_RE = re.compile(r"`[^`]+`")
_MARKDOWN_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_FORMATTING_RE = re.compile(r"[*_~#>|]")
_SPLIT_RE = re.compile(r"[^a-z0-9-]+")


def tokenize(text: str) -> list[str]:
    """Turn raw markdown text into index terms.

    Code fences and inline code are dropped entirely, links are reduced to
    their text, and markdown formatting characters act as separators.
    Tokens shorter than two characters and stop words are removed. No
    stemming is applied.

    Args:
        text: Raw text to tokenize. Non-string input yields no tokens.

    Returns:
        Lowercase tokens matching ``[a-z0-9-]+``, duplicates retained.
    """
    if not isinstance(text, str) or not text:
        return []

    text = text.lower()
    text = _CODE_BLOCK_RE.sub(" ", text)
    text = _INLINE_CODE_RE.sub(" ", text)
    text = _MARKDOWN_LINK_RE.sub(r"\1", text)
    text = _FORMATTING_RE.sub(" ", text)

    return [
        token
        for token in _SPLIT_RE.split(text)
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]
