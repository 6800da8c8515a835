"""Prosody feature extraction and multi-dimensional scoring."""
from .config import ProsodyConfig
from .features import detect_pause_regions, extract_features, extract_features_from_wav
from .scorer import calculate_overall_score, score_prosody
from .syllables import estimate_syllable_count

__all__ = [
    "ProsodyConfig",
    "detect_pause_regions",
    "extract_features",
    "extract_features_from_wav",
    "calculate_overall_score",
    "score_prosody",
    "estimate_syllable_count",
]
