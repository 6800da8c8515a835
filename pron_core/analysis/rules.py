"""Thresholds for the detailed (WER + timing) analysis."""
from __future__ import annotations

# Minimum silence between two recognized words reported as a pause
MIN_PAUSE_SEC = 0.2  # seconds

# WER when the reference is empty: 0.0 for an empty hypothesis, otherwise
# this fixed value (kept bounded regardless of how many words were spoken)
EMPTY_REFERENCE_WER = 1.0

# Longest reference or hypothesis (in words) accepted for alignment
MAX_ALIGNMENT_TOKENS = 2000
