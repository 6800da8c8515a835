"""Unit tests for acoustic feature extraction."""

import numpy as np
import pytest

from pron_core.errors import PreconditionViolation
from pron_core.models import WordTiming
from pron_core.prosody import (
    ProsodyConfig,
    detect_pause_regions,
    estimate_syllable_count,
    extract_features,
    extract_features_from_wav,
)
from pron_core.prosody.energy import extract_energy_contour
from pron_core.prosody.framing import frame_size_for, iter_frames
from pron_core.prosody.pitch import estimate_pitch, extract_pitch_contour

from conftest import SAMPLE_RATE, make_words


class TestFraming:

    def test_ten_ms_frame_at_16k(self):
        assert frame_size_for(16000, 10.0) == 160

    def test_frame_count_for_one_second(self, tone_samples):
        frames = list(iter_frames(tone_samples, 160))
        assert len(frames) == 198
        assert frames[1][0] == 80

    def test_buffer_shorter_than_frame(self):
        assert list(iter_frames(np.zeros(100), 160)) == []

    def test_frame_ending_at_buffer_end_is_skipped(self):
        assert list(iter_frames(np.zeros(160), 160)) == []


class TestPitch:

    def test_sine_tone_is_voiced_near_its_frequency(self, tone_samples):
        pitch, voiced = estimate_pitch(tone_samples[:160], SAMPLE_RATE)
        assert voiced
        assert 190.0 <= pitch <= 215.0

    def test_silence_is_unvoiced(self):
        pitch, voiced = estimate_pitch(np.zeros(160), SAMPLE_RATE)
        assert not voiced
        assert pitch == 0.0

    def test_quiet_frame_is_unvoiced(self):
        quiet = 0.001 * np.sin(2 * np.pi * 200.0 * np.arange(160) / SAMPLE_RATE)
        _, voiced = estimate_pitch(quiet, SAMPLE_RATE)
        assert not voiced

    def test_contour_timestamps_frame_starts(self, tone_samples):
        contour = extract_pitch_contour(tone_samples, SAMPLE_RATE, 160)
        assert len(contour) == 198
        assert contour[0].time == 0.0
        assert contour[1].time == pytest.approx(0.005)
        assert all(p.voiced for p in contour)


class TestEnergy:

    def test_rms_of_sine(self, tone_samples):
        contour = extract_energy_contour(tone_samples, SAMPLE_RATE, 160)
        assert len(contour) == 198
        assert contour[0].energy == pytest.approx(0.5 / np.sqrt(2), rel=1e-6)

    def test_silence_has_zero_energy(self):
        contour = extract_energy_contour(np.zeros(1600), SAMPLE_RATE, 160)
        assert all(p.energy == 0.0 for p in contour)


class TestSyllables:

    @pytest.mark.parametrize("word, expected", [
        ("quick", 1),
        ("table", 1),
        ("beautiful", 3),
        ("the", 1),
        ("rhythm", 1),
        ("banana", 3),
        ("", 1),
        ("BROWN", 1),
    ])
    def test_estimate(self, word, expected):
        assert estimate_syllable_count(word) == expected


class TestPauseRegions:

    def _timings(self, triples):
        return [WordTiming(w, s, e, 1) for w, s, e in triples]

    def test_filled_pause_marked_by_following_word(self):
        regions = detect_pause_regions(self._timings([
            ("so", 0.0, 0.3),
            ("um", 0.6, 0.8),
            ("yes", 0.85, 1.0),
        ]))
        assert len(regions) == 1
        assert regions[0].start == 0.3 and regions[0].end == 0.6
        assert regions[0].filled

    def test_plain_pause(self):
        regions = detect_pause_regions(self._timings([("hello", 0.0, 0.5), ("world", 1.0, 1.5)]))
        assert len(regions) == 1
        assert not regions[0].filled
        assert regions[0].duration == pytest.approx(0.5)

    def test_filler_match_ignores_case(self):
        regions = detect_pause_regions(self._timings([("well", 0.0, 0.2), ("Uh", 0.6, 0.7)]))
        assert regions[0].filled

    def test_custom_threshold(self):
        timings = self._timings([("a", 0.0, 0.5), ("b", 1.0, 1.5)])
        assert detect_pause_regions(timings, threshold=0.6) == []


class TestExtractFeatures:

    def test_tone_with_words(self, tone_samples, quick_fox_words):
        features = extract_features(tone_samples, SAMPLE_RATE, quick_fox_words)
        assert features.duration == pytest.approx(1.0)
        assert len(features.pitch_contour) == 198
        assert len(features.energy_contour) == 198
        assert [w.word for w in features.word_timings] == ["the", "quick", "brown", "fox"]
        assert all(not w.stressed for w in features.word_timings)
        assert features.pause_regions == []

    def test_empty_audio_and_no_words(self):
        features = extract_features(np.zeros(0), SAMPLE_RATE, [])
        assert features.duration == 0.0
        assert features.pitch_contour == []
        assert features.energy_contour == []
        assert features.word_timings == []

    def test_pause_threshold_from_config(self, tone_samples):
        words = make_words([("a", 0.0, 0.2), ("b", 0.35, 0.5)])
        assert extract_features(tone_samples, SAMPLE_RATE, words).pause_regions == []
        config = ProsodyConfig(pause_threshold_sec=0.1)
        assert len(extract_features(tone_samples, SAMPLE_RATE, words, config).pause_regions) == 1

    def test_from_wav_bytes(self, tone_wav, quick_fox_words):
        features = extract_features_from_wav(tone_wav, quick_fox_words)
        assert features.duration == pytest.approx(1.0)
        voiced = [p for p in features.pitch_contour if p.voiced]
        assert len(voiced) == len(features.pitch_contour)

    def test_none_samples_rejected(self, quick_fox_words):
        with pytest.raises(PreconditionViolation):
            extract_features(None, SAMPLE_RATE, quick_fox_words)

    def test_none_words_rejected(self, tone_samples):
        with pytest.raises(PreconditionViolation):
            extract_features(tone_samples, SAMPLE_RATE, None)

    def test_non_positive_sample_rate_rejected(self, tone_samples):
        with pytest.raises(PreconditionViolation):
            extract_features(tone_samples, 0, [])

    def test_multichannel_rejected(self):
        with pytest.raises(PreconditionViolation):
            extract_features(np.zeros((2, 1600)), SAMPLE_RATE, [])
