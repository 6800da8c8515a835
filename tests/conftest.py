"""Shared fixtures: synthetic audio and recognizer output."""
import os
from typing import List, Sequence, Tuple

import numpy as np
import pytest

from pron_core.media import encode_wav
from pron_core.models import WordHypothesis

SAMPLE_RATE = 16000


def sine(freq_hz: float, seconds: float, amplitude: float = 0.5, sr: int = SAMPLE_RATE) -> np.ndarray:
    t = np.arange(int(sr * seconds)) / sr
    return amplitude * np.sin(2 * np.pi * freq_hz * t)


def make_words(triples: Sequence[Tuple[str, float, float]], confidence: float = 0.9) -> List[WordHypothesis]:
    """Build WordHypothesis objects from (word, start, end) triples."""
    return [WordHypothesis(word=w, start=s, end=e, evaluation=confidence) for w, s, e in triples]


@pytest.fixture
def quick_fox_words():
    """'the quick brown fox', one word every 0.3s, 0.05s gaps."""
    return make_words([
        ("the", 0.0, 0.25),
        ("quick", 0.3, 0.55),
        ("brown", 0.6, 0.85),
        ("fox", 0.9, 1.15),
    ])


@pytest.fixture
def tone_samples():
    """One second of a 200 Hz tone."""
    return sine(200.0, 1.0)


@pytest.fixture
def tone_wav(tone_samples):
    return encode_wav(tone_samples, SAMPLE_RATE)


@pytest.fixture
def clean_env(monkeypatch):
    """Process environment without any PRON_* overrides."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("PRON_")}
    monkeypatch.setattr(os, "environ", env)
    return env
