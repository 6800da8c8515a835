"""Alignment utilities for matching reference text to ASR output."""
from .edit_distance import MAX_ALIGNMENT_TOKENS, align, edit_cost
from .normalizer import normalize_token
from .tokenizer import tokenize_reference

__all__ = ["MAX_ALIGNMENT_TOKENS", "align", "edit_cost", "normalize_token", "tokenize_reference"]
