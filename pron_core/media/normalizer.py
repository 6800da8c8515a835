"""Media normalization through an external ffmpeg process."""
from __future__ import annotations

import logging
import subprocess

from pron_core.errors import (
    AudioDecodeError,
    PreconditionViolation,
    ProviderNotConfigured,
    TransientUpstreamError,
)

logger = logging.getLogger(__name__)

TARGET_SAMPLE_RATE = 16000


def normalize_media(
    data: bytes,
    *,
    ffmpeg_binary: str = "ffmpeg",
    sample_rate: int = TARGET_SAMPLE_RATE,
    timeout: float = 120.0,
) -> bytes:
    """Convert arbitrary audio/video bytes to mono 16-bit PCM WAV.

    Args:
        data: Source media content
        ffmpeg_binary: ffmpeg executable name or path
        sample_rate: Output sample rate (default: 16000)
        timeout: Seconds before the ffmpeg process is killed

    Returns:
        WAV file bytes

    Raises:
        PreconditionViolation: If ``data`` is empty
        ProviderNotConfigured: If ffmpeg is not installed
        TransientUpstreamError: If ffmpeg times out
        AudioDecodeError: If ffmpeg cannot decode the source
    """
    if not data:
        raise PreconditionViolation("media buffer is empty")

    cmd = [
        ffmpeg_binary,
        "-hide_banner",
        "-loglevel", "error",
        "-i", "pipe:0",
        "-vn",
        "-ac", "1",
        "-ar", str(sample_rate),
        "-sample_fmt", "s16",
        "-f", "wav",
        "pipe:1",
    ]
    try:
        result = subprocess.run(
            cmd,
            input=data,
            capture_output=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise ProviderNotConfigured("ffmpeg", f"binary not found: {ffmpeg_binary}") from e
    except subprocess.TimeoutExpired as e:
        raise TransientUpstreamError("ffmpeg", f"timed out after {timeout}s") from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise AudioDecodeError(f"ffmpeg could not decode media: {stderr}")

    logger.debug("normalized %d bytes of media into %d bytes of WAV", len(data), len(result.stdout))
    return result.stdout
