"""WER and timing analysis of recognized speech against a reference text."""
from .config import AnalysisConfig
from .detailed import analyze_detailed, build_word_analyses, compute_wer
from .pauses import detect_pauses
from .timing import compute_durations

__all__ = [
    "AnalysisConfig",
    "analyze_detailed",
    "build_word_analyses",
    "compute_wer",
    "detect_pauses",
    "compute_durations",
]
