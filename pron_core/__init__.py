"""Pronunciation evaluation core: alignment/WER analysis, prosody scoring and text similarity."""
from .alignment import align, tokenize_reference
from .analysis import AnalysisConfig, analyze_detailed
from .prosody import ProsodyConfig, extract_features, score_prosody
from .scoring import score_similarity

__version__ = "1.0.0"

__all__ = [
    "align",
    "tokenize_reference",
    "AnalysisConfig",
    "analyze_detailed",
    "ProsodyConfig",
    "extract_features",
    "score_prosody",
    "score_similarity",
]
