"""Name-based selection of recognizer backends."""
from __future__ import annotations

from typing import Dict, Iterable, List

from pron_core.errors import UnknownProviderError

from .base import Recognizer


class RecognizerResolver:
    """Maps provider names (and aliases) to recognizers; built once at startup."""

    def __init__(self, recognizers: Iterable[Recognizer]) -> None:
        self._by_name: Dict[str, Recognizer] = {}
        for recognizer in recognizers:
            for name in recognizer.provider_names:
                self._by_name[name.lower()] = recognizer

    def resolve(self, provider_name: str) -> Recognizer:
        """Return the recognizer registered under ``provider_name`` (case-insensitive).

        Raises:
            UnknownProviderError: If no recognizer has that name
        """
        recognizer = self._by_name.get(provider_name.lower())
        if recognizer is None:
            raise UnknownProviderError(provider_name, self.available_providers())
        return recognizer

    def available_providers(self) -> List[str]:
        return sorted(self._by_name)

    def availability(self) -> Dict[str, bool]:
        """Health view: provider name -> whether it is configured."""
        return {name: self._by_name[name].is_available() for name in self.available_providers()}
