"""Data model for a single step of a reference/hypothesis alignment."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorType(Enum):
    MATCH = "match"
    SUBSTITUTION = "sub"
    INSERTION = "ins"
    DELETION = "del"


@dataclass(frozen=True)
class AlignmentStep:
    """One edit operation in an optimal alignment.

    Attributes:
        op: Operation type
        ref_index: Index into the reference tokens (None for INSERTION)
        hyp_index: Index into the hypothesis tokens (None for DELETION)
    """
    op: ErrorType
    ref_index: Optional[int] = None
    hyp_index: Optional[int] = None
