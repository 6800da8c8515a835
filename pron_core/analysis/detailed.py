"""Detailed analysis: alignment against the reference, WER, pauses and speech rate."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pron_core.alignment import align, edit_cost, normalize_token, tokenize_reference
from pron_core.errors import PreconditionViolation
from pron_core.models.alignment_step import AlignmentStep, ErrorType
from pron_core.models.analysis import DetailedAnalysis, WordAnalysis
from pron_core.models.words import WordHypothesis

from .config import AnalysisConfig
from .pauses import detect_pauses
from .rules import EMPTY_REFERENCE_WER
from .timing import compute_durations

logger = logging.getLogger(__name__)


def compute_wer(
    reference_length: int,
    substitutions: int,
    insertions: int,
    deletions: int,
    hypothesis_empty: bool,
    empty_reference_wer: float = EMPTY_REFERENCE_WER,
) -> float:
    """Word error rate, (S + D + I) / N.

    An empty reference scores 0.0 against an empty hypothesis and
    ``empty_reference_wer`` (1.0) against anything else.
    """
    if reference_length == 0:
        return 0.0 if hypothesis_empty else empty_reference_wer
    return (substitutions + deletions + insertions) / reference_length


def _word_from_hypothesis(
    index: int, expected: Optional[str], hyp: WordHypothesis, op: ErrorType
) -> WordAnalysis:
    return WordAnalysis(
        index=index,
        expected=expected,
        actual=hyp.word,
        error_type=op,
        start=hyp.start,
        end=hyp.end,
        duration=hyp.duration,
        evaluation=float(hyp.evaluation),
        phonemes=hyp.phonemes,
    )


def build_word_analyses(
    steps: Sequence[AlignmentStep],
    reference_tokens: Sequence[str],
    hypothesis_words: Sequence[WordHypothesis],
) -> List[WordAnalysis]:
    """One WordAnalysis per alignment step, in alignment order."""
    out: List[WordAnalysis] = []
    for idx, step in enumerate(steps):
        expected = reference_tokens[step.ref_index] if step.ref_index is not None else None
        if step.op is ErrorType.DELETION:
            out.append(WordAnalysis(index=idx, expected=expected, actual=None, error_type=step.op))
        else:
            hyp = hypothesis_words[step.hyp_index]
            out.append(_word_from_hypothesis(idx, expected, hyp, step.op))
    return out


def analyze_detailed(
    reference_text: str,
    hypothesis_words: Sequence[WordHypothesis],
    transcript: Optional[str] = None,
    config: AnalysisConfig = AnalysisConfig(),
) -> DetailedAnalysis:
    """Align recognized words against the reference text and summarize the result.

    Args:
        reference_text: Text the speaker was asked to read
        hypothesis_words: Recognized words with timings, in recognition order
        transcript: Recognizer transcript; defaults to the words joined by spaces
        config: Analysis thresholds

    Returns:
        DetailedAnalysis with WER, S/I/D counts, pauses, speech rate and
        per-word results

    Raises:
        PreconditionViolation: If the reference text or word list is None, or
            either is longer than config.max_alignment_tokens
    """
    if hypothesis_words is None:
        raise PreconditionViolation("hypothesis words must not be None")

    reference_tokens = tokenize_reference(reference_text)
    hypothesis_tokens = [normalize_token(w.word) for w in hypothesis_words]
    steps = align(reference_tokens, hypothesis_tokens, config.max_alignment_tokens)

    substitutions = sum(1 for s in steps if s.op is ErrorType.SUBSTITUTION)
    insertions = sum(1 for s in steps if s.op is ErrorType.INSERTION)
    deletions = sum(1 for s in steps if s.op is ErrorType.DELETION)

    wer = compute_wer(
        reference_length=len(reference_tokens),
        substitutions=substitutions,
        insertions=insertions,
        deletions=deletions,
        hypothesis_empty=not hypothesis_tokens,
        empty_reference_wer=config.empty_reference_wer,
    )
    total, wpm, avg = compute_durations(hypothesis_words)

    if transcript is None:
        transcript = " ".join(w.word for w in hypothesis_words)

    logger.debug("detailed analysis: wer=%.3f, %d edits over %d reference tokens",
                 wer, edit_cost(steps), len(reference_tokens))

    return DetailedAnalysis(
        reference_text=reference_text,
        transcript=transcript.strip(),
        wer=wer,
        substitutions=substitutions,
        insertions=insertions,
        deletions=deletions,
        total_duration=total,
        speech_rate_wpm=wpm,
        average_word_duration=avg,
        pauses=detect_pauses(hypothesis_words, config.min_pause_sec),
        words=build_word_analyses(steps, reference_tokens, hypothesis_words),
    )
