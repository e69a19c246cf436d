"""Token estimation utilities."""


def count_tokens(text: str) -> int:
    """Estimate token count for a string.

    Uses a simple heuristic of ~4 characters per token.
    This is a reasonable approximation for English text.
    """
    if not text:
        return 0
    return max(1, len(text) // 4)
