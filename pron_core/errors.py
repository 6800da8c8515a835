"""Error taxonomy shared by the evaluation core and its collaborators."""
from __future__ import annotations

from typing import List


class PronCoreError(Exception):
    """Base class for every error raised by pron_core."""


class PreconditionViolation(PronCoreError, ValueError):
    """Malformed input handed to a pure function (null sequences, negative timings, ...)."""


class AudioDecodeError(PreconditionViolation):
    """Audio bytes could not be decoded into PCM samples."""


class UpstreamUnavailable(PronCoreError, RuntimeError):
    """An external recognizer or media normalizer could not serve the request."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class ProviderNotConfigured(UpstreamUnavailable):
    """The collaborator is not installed or not configured for this deployment."""


class TransientUpstreamError(UpstreamUnavailable):
    """The collaborator is configured but failed while handling this request."""


class UnknownProviderError(PronCoreError, ValueError):
    """No recognizer is registered under the requested name."""

    def __init__(self, name: str, available: List[str]) -> None:
        super().__init__(
            f"Unknown transcription provider: {name}. "
            f"Available providers: {', '.join(available)}"
        )
        self.name = name
        self.available = available
