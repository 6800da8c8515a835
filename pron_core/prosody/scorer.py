"""Prosody scoring with explainable sub-scores and learner feedback."""
from __future__ import annotations

import logging
import time

from pron_core.errors import PreconditionViolation
from pron_core.models.prosody import (
    ModelType,
    ProsodyDiagnostics,
    ProsodyFeatures,
    ProsodyMetadata,
    ProsodyScore,
    ProsodySubScores,
)

from .config import ProsodyConfig
from .rules import SCORER_VERSION
from .scoring import (
    generate_feedback,
    score_fluency,
    score_intonation,
    score_pacing,
    score_rhythm,
    score_stress,
)

logger = logging.getLogger(__name__)


def calculate_overall_score(scores: ProsodySubScores, config: ProsodyConfig = ProsodyConfig()) -> float:
    """Fixed weighted sum of the five dimensions; pacing weighs the most."""
    return (
        scores.rhythm * config.rhythm_weight
        + scores.intonation * config.intonation_weight
        + scores.stress * config.stress_weight
        + scores.pacing * config.pacing_weight
        + scores.fluency * config.fluency_weight
    )


def score_prosody(
    features: ProsodyFeatures,
    language_code: str = "en-US",
    reference_text: str = "",
    config: ProsodyConfig = ProsodyConfig(),
) -> ProsodyScore:
    """Score prosody features and generate diagnostic feedback.

    Degenerate input (no words, no voiced frames, zero duration) yields low
    but well-defined scores instead of an error.

    Args:
        features: Extracted prosody features
        language_code: Language tag recorded in the metadata
        reference_text: Reference text; only selects language-specific norms,
            never compared word by word here
        config: Scoring thresholds and weights

    Returns:
        ProsodyScore with sub-scores, diagnostics, feedback and metadata

    Raises:
        PreconditionViolation: If features is None
    """
    if features is None:
        raise PreconditionViolation("prosody features must not be None")

    rhythm, rhythm_metrics = score_rhythm(features)
    intonation, intonation_metrics = score_intonation(features)
    stress, stress_metrics = score_stress(
        features, config.stress_energy_factor, config.expected_stress_ratio
    )
    pacing, pacing_metrics = score_pacing(features, config.optimal_wpm_min, config.optimal_wpm_max)
    fluency, fluency_metrics = score_fluency(features, config.long_pause_threshold_sec)

    sub_scores = ProsodySubScores(
        rhythm=rhythm,
        intonation=intonation,
        stress=stress,
        pacing=pacing,
        fluency=fluency,
    )
    diagnostics = ProsodyDiagnostics(
        rhythm=rhythm_metrics,
        intonation=intonation_metrics,
        stress=stress_metrics,
        pacing=pacing_metrics,
        fluency=fluency_metrics,
    )
    overall = calculate_overall_score(sub_scores, config)
    feedback = generate_feedback(sub_scores, diagnostics, config.optimal_wpm_min)

    logger.debug("prosody scored %.3f (%s)", overall, sub_scores)
    return ProsodyScore(
        overall_score=overall,
        sub_scores=sub_scores,
        diagnostics=diagnostics,
        feedback=feedback,
        features=features,
        metadata=ProsodyMetadata(
            scorer_version=SCORER_VERSION,
            model_type=ModelType.HEURISTIC,
            reference_language=language_code,
            processing_timestamp=int(time.time() * 1000),
        ),
    )
