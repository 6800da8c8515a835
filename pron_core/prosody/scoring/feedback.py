"""Learner feedback derived from the dimension scores."""
from __future__ import annotations

from typing import List

from pron_core.models.prosody import (
    FeedbackSeverity,
    ProsodyCategory,
    ProsodyDiagnostics,
    ProsodyFeedback,
    ProsodySubScores,
)

from ..rules import CRITICAL_THRESHOLD, FEEDBACK_THRESHOLD, OPTIMAL_WPM_MIN

SUGGESTIONS = {
    ProsodyCategory.RHYTHM: "Practice with a metronome or read along with native speakers",
    ProsodyCategory.INTONATION: (
        "Listen to native speech and mimic the pitch patterns, especially at sentence endings"
    ),
    ProsodyCategory.STRESS: (
        "Emphasize content words (nouns, verbs, adjectives) more than function words"
    ),
    ProsodyCategory.FLUENCY: (
        "Reduce hesitations and filler words. Prepare and practice the text beforehand"
    ),
}
SLOW_PACING_SUGGESTION = "Practice speaking more quickly and fluently without long pauses"
FAST_PACING_SUGGESTION = "Slow down and articulate each word clearly"


def _severity(score: float) -> FeedbackSeverity:
    return FeedbackSeverity.CRITICAL if score < CRITICAL_THRESHOLD else FeedbackSeverity.WARNING


def generate_feedback(
    scores: ProsodySubScores,
    diagnostics: ProsodyDiagnostics,
    optimal_wpm_min: float = OPTIMAL_WPM_MIN,
) -> List[ProsodyFeedback]:
    """One entry per dimension scoring below 0.7, or a single INFO entry.

    The returned list is never empty.
    """
    dimensions = [
        (ProsodyCategory.RHYTHM, scores.rhythm, diagnostics.rhythm.interpretation),
        (ProsodyCategory.INTONATION, scores.intonation, diagnostics.intonation.interpretation),
        (ProsodyCategory.STRESS, scores.stress, diagnostics.stress.interpretation),
        (ProsodyCategory.PACING, scores.pacing, diagnostics.pacing.interpretation),
        (ProsodyCategory.FLUENCY, scores.fluency, diagnostics.fluency.interpretation),
    ]

    feedback: List[ProsodyFeedback] = []
    for category, score, message in dimensions:
        if score >= FEEDBACK_THRESHOLD:
            continue
        if category is ProsodyCategory.PACING:
            slow = diagnostics.pacing.words_per_minute < optimal_wpm_min
            suggestion = SLOW_PACING_SUGGESTION if slow else FAST_PACING_SUGGESTION
        else:
            suggestion = SUGGESTIONS[category]
        feedback.append(ProsodyFeedback(category, _severity(score), message, suggestion))

    if not feedback:
        feedback.append(
            ProsodyFeedback(
                category=ProsodyCategory.OVERALL,
                severity=FeedbackSeverity.INFO,
                message="Excellent prosody across all dimensions",
                suggestion="Keep up the great work! Focus on maintaining this natural rhythm",
            )
        )
    return feedback
