"""End-to-end evaluation: recognizer call followed by the pure scoring components.

Pipeline flow:
1. (optional) Normalize media to mono 16 kHz WAV with ffmpeg
2. Run the recognizer once to get the transcript + time-stamped words
3. Detailed analysis (alignment, WER, pauses, speech rate)
4. Prosody feature extraction + scoring
5. Text-similarity pronunciation score
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .analysis import AnalysisConfig, analyze_detailed
from .asr import HttpRecognizer, Recognizer, RecognizerResolver
from .config import Settings
from .errors import ProviderNotConfigured, UpstreamUnavailable
from .media import decode_wav, normalize_media
from .models.analysis import DetailedAnalysis
from .models.prosody import ProsodyScore
from .models.similarity import PronunciationScore
from .models.words import RecognizedSpeech
from .prosody import ProsodyConfig, extract_features, score_prosody
from .scoring import score_similarity

logger = logging.getLogger(__name__)

NO_SPEECH_TRANSCRIPT = "No speech detected"


@dataclass(frozen=True)
class EvaluationReport:
    recognized: RecognizedSpeech
    detailed: DetailedAnalysis
    prosody: ProsodyScore
    pronunciation: PronunciationScore


def build_resolver(settings: Settings) -> RecognizerResolver:
    """Recognizers available to this deployment, keyed by provider name."""
    return RecognizerResolver([HttpRecognizer(settings.asr_service_url, settings.asr_timeout)])


def prepare_audio(data: bytes, settings: Settings, normalize: bool = True) -> bytes:
    """Return WAV bytes ready for recognition, running ffmpeg when requested."""
    if not normalize:
        return data
    return normalize_media(
        data,
        ffmpeg_binary=settings.ffmpeg_binary,
        sample_rate=settings.sample_rate,
        timeout=settings.ffmpeg_timeout,
    )


def recognize(wav_bytes: bytes, recognizer: Recognizer, language_code: str) -> RecognizedSpeech:
    """Run the recognizer; unavailable backends fail the request, never the process."""
    name = recognizer.provider_names[0] if recognizer.provider_names else type(recognizer).__name__
    if not recognizer.is_available():
        logger.warning("Recognizer %s is not configured", name)
        raise ProviderNotConfigured(name, "recognizer is not configured")
    logger.info("Transcribing %d bytes with %s (%s)", len(wav_bytes), name, language_code)
    try:
        recognized = recognizer.transcribe(wav_bytes, language_code)
    except UpstreamUnavailable as e:
        logger.warning("Recognition failed: %s", e)
        raise
    logger.info("Recognized %d words", len(recognized.words))
    return recognized


def _pronunciation(recognized: RecognizedSpeech, reference_text: str) -> PronunciationScore:
    if not recognized.words:
        logger.warning("No speech recognition results returned")
        return PronunciationScore(score=0.0, transcribed_text=NO_SPEECH_TRANSCRIPT)
    return score_similarity(
        recognized.transcript,
        reference_text,
        [(w.word, w.evaluation) for w in recognized.words],
    )


def _prosody(
    wav_bytes: bytes,
    recognized: RecognizedSpeech,
    reference_text: str,
    language_code: str,
    config: ProsodyConfig,
    target_sample_rate: Optional[int],
) -> ProsodyScore:
    samples, sample_rate = decode_wav(wav_bytes, target_sample_rate)
    features = extract_features(samples, sample_rate, recognized.words, config)
    return score_prosody(features, language_code, reference_text, config)


def evaluate_detailed(
    wav_bytes: bytes,
    reference_text: str,
    recognizer: Recognizer,
    language_code: str = "en-US",
    config: AnalysisConfig = AnalysisConfig(),
) -> DetailedAnalysis:
    recognized = recognize(wav_bytes, recognizer, language_code)
    return analyze_detailed(reference_text, recognized.words, recognized.transcript, config)


def evaluate_prosody(
    wav_bytes: bytes,
    recognizer: Recognizer,
    reference_text: str = "",
    language_code: str = "en-US",
    config: ProsodyConfig = ProsodyConfig(),
    target_sample_rate: Optional[int] = None,
) -> ProsodyScore:
    recognized = recognize(wav_bytes, recognizer, language_code)
    score = _prosody(wav_bytes, recognized, reference_text, language_code, config, target_sample_rate)
    logger.info("Prosody evaluation completed. Overall score: %.3f", score.overall_score)
    return score


def evaluate_pronunciation(
    wav_bytes: bytes,
    reference_text: str,
    recognizer: Recognizer,
    language_code: str = "en-US",
) -> PronunciationScore:
    recognized = recognize(wav_bytes, recognizer, language_code)
    return _pronunciation(recognized, reference_text)


def evaluate_all(
    wav_bytes: bytes,
    reference_text: str,
    recognizer: Recognizer,
    language_code: str = "en-US",
    analysis_config: AnalysisConfig = AnalysisConfig(),
    prosody_config: ProsodyConfig = ProsodyConfig(),
    target_sample_rate: Optional[int] = None,
) -> EvaluationReport:
    """All three evaluations from a single recognizer call."""
    recognized = recognize(wav_bytes, recognizer, language_code)
    detailed = analyze_detailed(
        reference_text, recognized.words, recognized.transcript, analysis_config
    )
    prosody = _prosody(
        wav_bytes, recognized, reference_text, language_code, prosody_config, target_sample_rate
    )
    pronunciation = _pronunciation(recognized, reference_text)
    logger.info(
        "Evaluation completed: wer=%.3f prosody=%.3f pronunciation=%.3f",
        detailed.wer, prosody.overall_score, pronunciation.score,
    )
    return EvaluationReport(
        recognized=recognized,
        detailed=detailed,
        prosody=prosody,
        pronunciation=pronunciation,
    )
