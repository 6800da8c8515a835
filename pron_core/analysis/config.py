"""Immutable configuration for the detailed analysis."""
from __future__ import annotations

from dataclasses import dataclass

from .rules import EMPTY_REFERENCE_WER, MAX_ALIGNMENT_TOKENS, MIN_PAUSE_SEC


@dataclass(frozen=True)
class AnalysisConfig:
    min_pause_sec: float = MIN_PAUSE_SEC
    empty_reference_wer: float = EMPTY_REFERENCE_WER
    max_alignment_tokens: int = MAX_ALIGNMENT_TOKENS
