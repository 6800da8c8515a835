"""Value objects exchanged between the evaluation components."""
from .alignment_step import AlignmentStep, ErrorType
from .analysis import DetailedAnalysis, Pause, WordAnalysis
from .prosody import (
    EnergyPoint,
    FeedbackSeverity,
    FluencyMetrics,
    IntonationMetrics,
    ModelType,
    PacingMetrics,
    PauseRegion,
    PitchPoint,
    ProsodyCategory,
    ProsodyDiagnostics,
    ProsodyFeatures,
    ProsodyFeedback,
    ProsodyMetadata,
    ProsodyScore,
    ProsodySubScores,
    RhythmMetrics,
    StressMetrics,
    WordTiming,
)
from .serialize import to_dict
from .similarity import PronunciationScore, WordDetail
from .words import PhonemeEvaluation, RecognizedSpeech, WordHypothesis

__all__ = [
    "AlignmentStep",
    "ErrorType",
    "DetailedAnalysis",
    "Pause",
    "WordAnalysis",
    "EnergyPoint",
    "FeedbackSeverity",
    "FluencyMetrics",
    "IntonationMetrics",
    "ModelType",
    "PacingMetrics",
    "PauseRegion",
    "PitchPoint",
    "ProsodyCategory",
    "ProsodyDiagnostics",
    "ProsodyFeatures",
    "ProsodyFeedback",
    "ProsodyMetadata",
    "ProsodyScore",
    "ProsodySubScores",
    "RhythmMetrics",
    "StressMetrics",
    "WordTiming",
    "to_dict",
    "PronunciationScore",
    "WordDetail",
    "PhonemeEvaluation",
    "RecognizedSpeech",
    "WordHypothesis",
]
