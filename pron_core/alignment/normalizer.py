"""Token normalization used before comparing reference and hypothesis words."""
from __future__ import annotations


def normalize_token(token: str) -> str:
    """Normalize a token for alignment (lowercase, surrounding whitespace removed).

    Punctuation is kept: recognizers that emit "fox." are compared as-is so
    their output is never silently rewritten.
    """
    return token.strip().lower()
