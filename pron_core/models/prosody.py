"""Acoustic features and prosody score model.

Every dimension carries its own metrics record so that a single scorer can be
recalibrated or swapped out without touching the others.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


@dataclass(frozen=True)
class PitchPoint:
    time: float
    frequency_hz: float
    voiced: bool


@dataclass(frozen=True)
class EnergyPoint:
    time: float
    energy: float


@dataclass(frozen=True)
class WordTiming:
    word: str
    start: float
    end: float
    syllable_count: int
    stressed: bool = False

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class PauseRegion:
    """Gap between two words; ``filled`` when the following word is a filler (um, uh)."""
    start: float
    end: float
    filled: bool = False

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class ProsodyFeatures:
    """Raw features extracted once per audio buffer.

    Attributes:
        duration: Total audio duration in seconds
        pitch_contour: Pitch estimate per analysis frame
        energy_contour: RMS energy per analysis frame
        word_timings: Word timings with syllable estimates
        pause_regions: Inter-word pauses
    """
    duration: float
    pitch_contour: List[PitchPoint] = field(default_factory=list)
    energy_contour: List[EnergyPoint] = field(default_factory=list)
    word_timings: List[WordTiming] = field(default_factory=list)
    pause_regions: List[PauseRegion] = field(default_factory=list)


@dataclass(frozen=True)
class RhythmMetrics:
    syllable_timing_variance: float
    expected_variance: float
    isochrony_index: float
    interpretation: str


@dataclass(frozen=True)
class IntonationMetrics:
    pitch_range_hz: float
    pitch_variation_coefficient: float
    mean_pitch_hz: float
    contour_smoothness: float
    interpretation: str


@dataclass(frozen=True)
class StressMetrics:
    stressed_syllable_count: int
    expected_stress_count: int
    stress_placement_accuracy: float
    energy_contrast_ratio: float
    interpretation: str


@dataclass(frozen=True)
class PacingMetrics:
    syllables_per_second: float
    words_per_minute: float
    optimal_range_min: float
    optimal_range_max: float
    interpretation: str


@dataclass(frozen=True)
class FluencyMetrics:
    pause_count: int
    long_pause_count: int
    filled_pause_count: int
    average_pause_duration: float
    disfluency_rate: float
    interpretation: str


@dataclass(frozen=True)
class ProsodySubScores:
    rhythm: float
    intonation: float
    stress: float
    pacing: float
    fluency: float


@dataclass(frozen=True)
class ProsodyDiagnostics:
    rhythm: RhythmMetrics
    intonation: IntonationMetrics
    stress: StressMetrics
    pacing: PacingMetrics
    fluency: FluencyMetrics


class ProsodyCategory(Enum):
    RHYTHM = "rhythm"
    INTONATION = "intonation"
    STRESS = "stress"
    PACING = "pacing"
    FLUENCY = "fluency"
    OVERALL = "overall"


class FeedbackSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class ModelType(Enum):
    HEURISTIC = "heuristic"
    CALIBRATED = "calibrated"
    ML_BASED = "ml_based"


@dataclass(frozen=True)
class ProsodyFeedback:
    category: ProsodyCategory
    severity: FeedbackSeverity
    message: str
    suggestion: str


@dataclass(frozen=True)
class ProsodyMetadata:
    scorer_version: str
    model_type: ModelType
    reference_language: str
    processing_timestamp: int  # epoch milliseconds


@dataclass(frozen=True)
class ProsodyScore:
    overall_score: float
    sub_scores: ProsodySubScores
    diagnostics: ProsodyDiagnostics
    feedback: List[ProsodyFeedback]
    features: ProsodyFeatures
    metadata: ProsodyMetadata
