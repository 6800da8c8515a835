"""Constants for prosody feature extraction and heuristic scoring.

Values are uncalibrated heuristics; ProsodyConfig lets callers override them.
"""
from __future__ import annotations

# --- Feature extraction ---
FRAME_SIZE_MS = 10.0  # analysis frame; hop is half a frame
PITCH_MIN_HZ = 75.0
PITCH_MAX_HZ = 500.0
VOICING_ENERGY_FLOOR = 0.01  # absolute frame energy (sum of squares)
VOICING_CORRELATION_RATIO = 0.3  # peak autocorrelation vs frame energy
PAUSE_THRESHOLD_SEC = 0.2
FILLED_PAUSE_WORDS = frozenset({"um", "uh", "er", "ah", "like", "you know"})
SYLLABLE_VOWELS = "aeiouy"

# --- Rhythm ---
EXPECTED_RHYTHM_CV = 0.35  # natural syllable-duration coefficient of variation
RHYTHM_REGULAR_CV = 0.2  # below: mechanically regular
RHYTHM_IRREGULAR_CV = 0.5  # above: irregular

# --- Intonation ---
SMOOTHNESS_DELTA_HZ = 50.0  # mean frame-to-frame delta giving zero smoothness
# (upper bound Hz, score); anything above the last bound scores PITCH_RANGE_ABOVE
PITCH_RANGE_SCORES = ((20.0, 0.3), (30.0, 0.6), (80.0, 1.0), (120.0, 0.9))
PITCH_RANGE_ABOVE = 0.7
PITCH_CV_FLAT = 0.05
PITCH_CV_NATURAL_MAX = 0.15
INTONATION_RANGE_WEIGHT = 0.6
INTONATION_VARIATION_WEIGHT = 0.2
INTONATION_SMOOTHNESS_WEIGHT = 0.2

# --- Stress ---
STRESS_ENERGY_FACTOR = 1.3  # word peak vs utterance mean energy
EXPECTED_STRESS_RATIO = 0.65  # share of words expected to carry stress
STRESS_RATIO_FLAT = 0.3
STRESS_RATIO_MAX = 0.8

# --- Pacing ---
OPTIMAL_WPM_MIN = 140.0
OPTIMAL_WPM_MAX = 180.0
SLOW_WPM_FACTOR = 0.7
FAST_WPM_FACTOR = 1.3

# --- Fluency ---
LONG_PAUSE_THRESHOLD_SEC = 0.5
FLUENCY_FREQUENCY_WEIGHT = 0.4
FLUENCY_DURATION_WEIGHT = 0.3
FLUENCY_FILLED_WEIGHT = 0.3

# --- Aggregation ---
RHYTHM_WEIGHT = 0.20
INTONATION_WEIGHT = 0.20
STRESS_WEIGHT = 0.15
PACING_WEIGHT = 0.25
FLUENCY_WEIGHT = 0.20

FEEDBACK_THRESHOLD = 0.7  # dimensions below this get feedback
CRITICAL_THRESHOLD = 0.5  # ... and below this it is critical

SCORER_VERSION = "1.0.0-heuristic"
