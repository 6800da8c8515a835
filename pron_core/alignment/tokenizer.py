"""Reference text tokenization for alignment."""
from __future__ import annotations

import re
from typing import List

from pron_core.errors import PreconditionViolation

from .normalizer import normalize_token

_WHITESPACE = re.compile(r"\s+")


def tokenize_reference(text: str) -> List[str]:
    """Split reference text into normalized word tokens.

    Example: "  The quick\tBrown " -> ["the", "quick", "brown"]

    Args:
        text: The reference text to tokenize

    Returns:
        List of lowercase tokens, empty tokens dropped

    Raises:
        PreconditionViolation: If text is None
    """
    if text is None:
        raise PreconditionViolation("reference text must not be None")
    tokens = []
    for raw in _WHITESPACE.split(text.strip().lower()):
        token = normalize_token(raw)
        if token:
            tokens.append(token)
    return tokens
