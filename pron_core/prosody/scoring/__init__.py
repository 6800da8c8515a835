"""Independent prosody dimension scorers."""
from .feedback import generate_feedback
from .fluency import score_fluency
from .intonation import score_intonation
from .pacing import score_pacing
from .rhythm import score_rhythm
from .stress import score_stress

__all__ = [
    "generate_feedback",
    "score_fluency",
    "score_intonation",
    "score_pacing",
    "score_rhythm",
    "score_stress",
]
