"""Unit tests for the heuristic prosody scorer."""

import pytest

from pron_core.models import (
    EnergyPoint,
    FeedbackSeverity,
    ModelType,
    PauseRegion,
    PitchPoint,
    ProsodyCategory,
    ProsodyFeatures,
    ProsodySubScores,
    WordTiming,
)
from pron_core.errors import PreconditionViolation
from pron_core.prosody import ProsodyConfig, calculate_overall_score, score_prosody
from pron_core.prosody.scoring import (
    score_fluency,
    score_intonation,
    score_pacing,
    score_rhythm,
    score_stress,
)
from pron_core.prosody.scoring.pacing import pacing_score_for_wpm
from pron_core.prosody.scoring.rhythm import rhythm_score_for_cv
from pron_core.prosody.stats import summarize

ONE_SYLLABLE = ["cat", "dog", "sun", "hat", "pen", "cup", "box", "map"]


def rising_pitch():
    return [PitchPoint(i * 0.005, 100.0 + 10.0 * i, True) for i in range(6)]


def alternating_timings(count=8, spacing=0.375):
    """One-syllable words alternating 0.13s and 0.27s long (CV 0.35)."""
    return [
        WordTiming(ONE_SYLLABLE[i % len(ONE_SYLLABLE)], i * spacing, i * spacing + (0.13 if i % 2 == 0 else 0.27), 1)
        for i in range(count)
    ]


def fox_timings():
    return [
        WordTiming("the", 0.0, 0.25, 1),
        WordTiming("quick", 0.3, 0.55, 1),
        WordTiming("brown", 0.6, 0.85, 1),
        WordTiming("fox", 0.9, 1.15, 1),
    ]


class TestStats:

    def test_summary(self):
        stats = summarize([1.0, 2.0, 3.0])
        assert stats.count == 3
        assert stats.mean == pytest.approx(2.0)
        assert stats.variance == pytest.approx(2.0 / 3.0)
        assert (stats.minimum, stats.maximum) == (1.0, 3.0)

    def test_empty(self):
        stats = summarize([])
        assert stats.count == 0
        assert stats.cv == 0.0

    def test_variance_never_negative(self):
        assert summarize([0.1] * 10).variance >= 0.0


class TestRhythm:

    def test_no_words(self):
        score, metrics = score_rhythm(ProsodyFeatures(duration=1.0))
        assert score == 0.0
        assert metrics.interpretation == "No speech detected"

    def test_mechanically_regular_speech(self):
        timings = [WordTiming("cat", i * 0.3, i * 0.3 + 0.25, 1) for i in range(4)]
        score, metrics = score_rhythm(ProsodyFeatures(duration=1.2, word_timings=timings))
        assert score == pytest.approx(0.6)
        assert metrics.isochrony_index < 0.2
        assert "robotic" in metrics.interpretation

    def test_natural_variation_scores_highest(self):
        score, metrics = score_rhythm(ProsodyFeatures(duration=3.0, word_timings=alternating_timings()))
        assert metrics.isochrony_index == pytest.approx(0.35, abs=1e-6)
        assert score == pytest.approx(1.0, abs=1e-5)
        assert metrics.expected_variance == 0.35

    @pytest.mark.parametrize("cv, expected", [
        (0.1, 0.6),
        (0.2, 1.0 - 0.15 / 0.35),
        (0.5, 1.0 - 0.15 / 0.35),
        (0.75, 0.5),
        (2.0, 0.3),
    ])
    def test_cv_curve(self, cv, expected):
        assert rhythm_score_for_cv(cv) == pytest.approx(expected)


class TestIntonation:

    def test_rising_contour(self):
        score, metrics = score_intonation(ProsodyFeatures(duration=1.0, pitch_contour=rising_pitch()))
        assert metrics.pitch_range_hz == pytest.approx(50.0)
        assert metrics.mean_pitch_hz == pytest.approx(125.0)
        assert metrics.contour_smoothness == pytest.approx(0.8)
        assert score == pytest.approx(0.96)
        assert metrics.interpretation == "Good pitch variation and natural intonation"

    def test_monotone(self):
        contour = [PitchPoint(i * 0.005, 120.0, True) for i in range(6)]
        score, metrics = score_intonation(ProsodyFeatures(duration=1.0, pitch_contour=contour))
        assert score == pytest.approx(0.44)
        assert metrics.pitch_range_hz == 0.0
        assert metrics.interpretation.startswith("Monotone")

    def test_unvoiced_frames_are_ignored(self):
        contour = rising_pitch() + [PitchPoint(1.0, 0.0, False), PitchPoint(1.1, 400.0, False)]
        _, metrics = score_intonation(ProsodyFeatures(duration=1.2, pitch_contour=contour))
        assert metrics.pitch_range_hz == pytest.approx(50.0)

    def test_no_voiced_frames(self):
        contour = [PitchPoint(0.0, 0.0, False)]
        score, metrics = score_intonation(ProsodyFeatures(duration=1.0, pitch_contour=contour))
        assert score == 0.0
        assert metrics.interpretation == "No voiced speech detected"


class TestStress:

    def _energy(self, values):
        times = [0.1, 0.4, 0.7, 1.0]
        return [EnergyPoint(t, e) for t, e in zip(times, values)]

    def test_alternating_emphasis(self):
        features = ProsodyFeatures(
            duration=1.2,
            energy_contour=self._energy([1.0, 0.1, 1.0, 0.1]),
            word_timings=fox_timings(),
        )
        score, metrics = score_stress(features)
        assert score == 1.0
        assert metrics.stressed_syllable_count == 2
        assert metrics.expected_stress_count == 2
        assert metrics.stress_placement_accuracy == pytest.approx(1.0)
        assert metrics.energy_contrast_ratio == pytest.approx(10.0)

    def test_flat_energy(self):
        features = ProsodyFeatures(
            duration=1.2,
            energy_contour=self._energy([0.5, 0.5, 0.5, 0.5]),
            word_timings=fox_timings(),
        )
        score, metrics = score_stress(features)
        assert score == 0.5
        assert metrics.stressed_syllable_count == 0
        assert metrics.stress_placement_accuracy == 0.0
        assert metrics.energy_contrast_ratio == pytest.approx(1.0)

    def test_every_word_stressed_with_lower_factor(self):
        features = ProsodyFeatures(
            duration=1.2,
            energy_contour=self._energy([1.0, 1.0, 1.0, 1.0]),
            word_timings=fox_timings(),
        )
        score, metrics = score_stress(features, energy_factor=0.5)
        assert metrics.stressed_syllable_count == 4
        assert score == 0.7

    def test_missing_energy(self):
        score, metrics = score_stress(ProsodyFeatures(duration=1.0, word_timings=fox_timings()))
        assert score == 0.5
        assert metrics.energy_contrast_ratio == 1.0

    def test_single_word_expects_no_stress(self):
        features = ProsodyFeatures(
            duration=0.5,
            energy_contour=[EnergyPoint(0.1, 0.5)],
            word_timings=[WordTiming("cat", 0.0, 0.3, 1)],
        )
        _, metrics = score_stress(features)
        assert metrics.expected_stress_count == 0
        assert metrics.stress_placement_accuracy == 0.0


class TestPacing:

    @pytest.mark.parametrize("wpm, expected", [
        (50.0, 0.4),
        (120.0, 0.7),
        (160.0, 1.0),
        (180.0, 1.0),
        (200.0, 0.8),
        (300.0, 0.5),
    ])
    def test_band(self, wpm, expected):
        assert pacing_score_for_wpm(wpm) == expected

    def test_optimal_rate(self):
        features = ProsodyFeatures(duration=1.5, word_timings=fox_timings())
        score, metrics = score_pacing(features)
        assert metrics.words_per_minute == pytest.approx(160.0)
        assert metrics.syllables_per_second == pytest.approx(4 / 1.5)
        assert (metrics.optimal_range_min, metrics.optimal_range_max) == (140.0, 180.0)
        assert score == 1.0

    def test_zero_duration(self):
        score, metrics = score_pacing(ProsodyFeatures(duration=0.0, word_timings=fox_timings()))
        assert score == 0.0
        assert metrics.words_per_minute == 0.0


class TestFluency:

    def test_no_pauses(self):
        score, metrics = score_fluency(ProsodyFeatures(duration=3.0))
        assert score == pytest.approx(1.0)
        assert metrics.pause_count == 0
        assert metrics.interpretation == "Excellent fluency with smooth delivery"

    def test_hesitant_speech(self):
        pauses = [PauseRegion(float(i), float(i) + 0.8, filled=True) for i in (1, 2, 3)]
        score, metrics = score_fluency(ProsodyFeatures(duration=6.0, pause_regions=pauses))
        assert score == pytest.approx(0.64)
        assert metrics.pause_count == 3
        assert metrics.long_pause_count == 3
        assert metrics.filled_pause_count == 3
        assert metrics.average_pause_duration == pytest.approx(0.8)
        assert metrics.disfluency_rate == pytest.approx(30.0)

    def test_long_pause_threshold(self):
        pauses = [PauseRegion(1.0, 1.4)]
        features = ProsodyFeatures(duration=6.0, pause_regions=pauses)
        assert score_fluency(features)[1].long_pause_count == 0
        assert score_fluency(features, long_pause_threshold=0.3)[1].long_pause_count == 1


class TestScoreProsody:

    def test_empty_features(self):
        result = score_prosody(ProsodyFeatures(duration=0.0))
        assert result.overall_score == pytest.approx(0.275)
        assert result.sub_scores.fluency == pytest.approx(1.0)
        by_category = {f.category: f for f in result.feedback}
        assert set(by_category) == {
            ProsodyCategory.RHYTHM,
            ProsodyCategory.INTONATION,
            ProsodyCategory.STRESS,
            ProsodyCategory.PACING,
        }
        assert by_category[ProsodyCategory.RHYTHM].severity is FeedbackSeverity.CRITICAL
        assert by_category[ProsodyCategory.STRESS].severity is FeedbackSeverity.WARNING
        assert "more quickly" in by_category[ProsodyCategory.PACING].suggestion

    def test_excellent_delivery(self):
        timings = alternating_timings()
        energy = [EnergyPoint(w.start + 0.05, 1.0 if i % 2 == 0 else 0.2) for i, w in enumerate(timings)]
        features = ProsodyFeatures(
            duration=3.0,
            pitch_contour=rising_pitch(),
            energy_contour=energy,
            word_timings=timings,
        )
        result = score_prosody(features)
        assert len(result.feedback) == 1
        assert result.feedback[0].category is ProsodyCategory.OVERALL
        assert result.feedback[0].severity is FeedbackSeverity.INFO
        assert result.overall_score == pytest.approx(0.992, abs=1e-4)

    def test_fast_speech_gets_slow_down_suggestion(self):
        timings = [WordTiming("cat", i * 0.2, i * 0.2 + 0.15, 1) for i in range(10)]
        result = score_prosody(ProsodyFeatures(duration=2.0, word_timings=timings))
        pacing = [f for f in result.feedback if f.category is ProsodyCategory.PACING]
        assert len(pacing) == 1
        assert pacing[0].suggestion == "Slow down and articulate each word clearly"

    def test_overall_in_unit_range(self):
        result = score_prosody(ProsodyFeatures(duration=1.5, word_timings=fox_timings()))
        assert 0.0 <= result.overall_score <= 1.0

    def test_metadata(self):
        result = score_prosody(ProsodyFeatures(duration=0.0), language_code="en-GB")
        assert result.metadata.scorer_version == "1.0.0-heuristic"
        assert result.metadata.model_type is ModelType.HEURISTIC
        assert result.metadata.reference_language == "en-GB"
        assert result.metadata.processing_timestamp > 0

    def test_features_are_echoed(self):
        features = ProsodyFeatures(duration=1.5, word_timings=fox_timings())
        assert score_prosody(features).features is features

    def test_none_rejected(self):
        with pytest.raises(PreconditionViolation):
            score_prosody(None)


class TestOverallScore:

    def test_weights_sum_to_one(self):
        assert calculate_overall_score(ProsodySubScores(1.0, 1.0, 1.0, 1.0, 1.0)) == pytest.approx(1.0)

    def test_pacing_weighs_most(self):
        pacing_only = calculate_overall_score(ProsodySubScores(0.0, 0.0, 0.0, 1.0, 0.0))
        assert pacing_only == pytest.approx(0.25)

    def test_custom_weights(self):
        config = ProsodyConfig(
            rhythm_weight=1.0, intonation_weight=0.0, stress_weight=0.0,
            pacing_weight=0.0, fluency_weight=0.0,
        )
        assert calculate_overall_score(ProsodySubScores(0.4, 1.0, 1.0, 1.0, 1.0), config) == pytest.approx(0.4)
