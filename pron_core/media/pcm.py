"""Decoding of normalized WAV bytes into float PCM samples."""
from __future__ import annotations

import io
import logging
from typing import Optional, Tuple

import numpy as np
import soundfile as sf

from pron_core.errors import AudioDecodeError

logger = logging.getLogger(__name__)

PCM16_SCALE = 32768.0


def decode_wav(wav_bytes: bytes, target_sample_rate: Optional[int] = None) -> Tuple[np.ndarray, int]:
    """Decode WAV bytes into mono float64 samples in [-1, 1].

    16-bit PCM is scaled by 1/32768. Multi-channel audio is averaged to
    mono. When ``target_sample_rate`` differs from the file's rate the
    signal is resampled with librosa.

    Args:
        wav_bytes: WAV file content
        target_sample_rate: Optional rate to resample to

    Returns:
        Tuple of (samples, sample_rate)

    Raises:
        AudioDecodeError: If the bytes are empty or not decodable audio
    """
    if not wav_bytes:
        raise AudioDecodeError("audio buffer is empty")
    try:
        data, sr = sf.read(io.BytesIO(wav_bytes), dtype="int16", always_2d=True)
    except RuntimeError as e:
        raise AudioDecodeError(f"undecodable audio: {e}") from e

    samples = data.astype(np.float64).mean(axis=1) / PCM16_SCALE
    sr = int(sr)

    if target_sample_rate and sr != target_sample_rate:
        import librosa  # heavy import, only needed for non-normalized input

        logger.debug("resampling %d Hz -> %d Hz", sr, target_sample_rate)
        samples = librosa.resample(samples, orig_sr=sr, target_sr=target_sample_rate)
        sr = target_sample_rate
    return samples, sr


def encode_wav(samples: np.ndarray, sample_rate: int) -> bytes:
    """Encode float samples in [-1, 1] as 16-bit PCM WAV bytes."""
    buf = io.BytesIO()
    sf.write(buf, np.clip(samples, -1.0, 1.0), sample_rate, subtype="PCM_16", format="WAV")
    return buf.getvalue()
