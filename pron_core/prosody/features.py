"""Acoustic feature extraction for prosody scoring."""
from __future__ import annotations

import logging
from typing import AbstractSet, List, Optional, Sequence

import numpy as np

from pron_core.errors import PreconditionViolation
from pron_core.media.pcm import decode_wav
from pron_core.models.prosody import PauseRegion, ProsodyFeatures, WordTiming
from pron_core.models.words import WordHypothesis

from .config import ProsodyConfig
from .energy import extract_energy_contour
from .framing import frame_size_for
from .pitch import extract_pitch_contour
from .rules import FILLED_PAUSE_WORDS, PAUSE_THRESHOLD_SEC
from .syllables import build_word_timings

logger = logging.getLogger(__name__)


def detect_pause_regions(
    word_timings: Sequence[WordTiming],
    threshold: float = PAUSE_THRESHOLD_SEC,
    filled_pause_words: AbstractSet[str] = FILLED_PAUSE_WORDS,
) -> List[PauseRegion]:
    """Pause regions between adjacent words, in recognition order.

    A gap of at least ``threshold`` seconds is a pause; it is "filled" when
    the word that follows it is a disfluency marker.
    """
    regions: List[PauseRegion] = []
    for current, nxt in zip(word_timings, word_timings[1:]):
        gap = nxt.start - current.end
        if gap >= threshold:
            filled = nxt.word.strip().lower() in filled_pause_words
            regions.append(PauseRegion(start=current.end, end=nxt.start, filled=filled))
    return regions


def extract_features(
    samples: np.ndarray,
    sample_rate: int,
    hypothesis_words: Sequence[WordHypothesis],
    config: ProsodyConfig = ProsodyConfig(),
) -> ProsodyFeatures:
    """Extract pitch, energy, word timing and pause features.

    Args:
        samples: Mono PCM samples scaled to [-1, 1]
        sample_rate: Sample rate in Hz (normally 16000)
        hypothesis_words: Recognized words in recognition order
        config: Extraction thresholds

    Returns:
        ProsodyFeatures for the whole buffer

    Raises:
        PreconditionViolation: If samples or words are None, or the sample
            rate is not positive
    """
    if samples is None or hypothesis_words is None:
        raise PreconditionViolation("samples and hypothesis words must not be None")
    if sample_rate <= 0:
        raise PreconditionViolation(f"sample rate must be positive, got {sample_rate}")

    samples = np.asarray(samples, dtype=np.float64)
    if samples.ndim != 1:
        raise PreconditionViolation(f"expected mono samples, got shape {samples.shape}")

    frame_size = frame_size_for(sample_rate, config.frame_size_ms)
    pitch_contour = extract_pitch_contour(
        samples,
        sample_rate,
        frame_size,
        config.pitch_min_hz,
        config.pitch_max_hz,
        config.voicing_energy_floor,
        config.voicing_correlation_ratio,
    )
    energy_contour = extract_energy_contour(samples, sample_rate, frame_size)
    word_timings = build_word_timings(hypothesis_words)
    pause_regions = detect_pause_regions(
        word_timings, config.pause_threshold_sec, config.filled_pause_words
    )
    duration = len(samples) / sample_rate

    logger.debug(
        "extracted %d frames (%d voiced), %d words, %d pauses over %.2fs",
        len(pitch_contour),
        sum(1 for p in pitch_contour if p.voiced),
        len(word_timings),
        len(pause_regions),
        duration,
    )
    return ProsodyFeatures(
        duration=duration,
        pitch_contour=pitch_contour,
        energy_contour=energy_contour,
        word_timings=word_timings,
        pause_regions=pause_regions,
    )


def extract_features_from_wav(
    wav_bytes: bytes,
    hypothesis_words: Sequence[WordHypothesis],
    config: ProsodyConfig = ProsodyConfig(),
    target_sample_rate: Optional[int] = None,
) -> ProsodyFeatures:
    """Decode a normalized WAV buffer and extract its features."""
    samples, sample_rate = decode_wav(wav_bytes, target_sample_rate)
    return extract_features(samples, sample_rate, hypothesis_words, config)
