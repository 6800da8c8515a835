"""Conversion of result dataclasses into JSON-ready dictionaries."""
from __future__ import annotations

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple


def _factory(items: List[Tuple[str, Any]]) -> Dict[str, Any]:
    return {key: (value.name if isinstance(value, Enum) else value) for key, value in items}


def to_dict(result: Any) -> Dict[str, Any]:
    """Convert any result dataclass (nested included) into plain dicts.

    Enum members are emitted by name (e.g. ``"MATCH"``, ``"CRITICAL"``).

    Raises:
        TypeError: If ``result`` is not a dataclass instance
    """
    if not is_dataclass(result) or isinstance(result, type):
        raise TypeError(f"expected a dataclass instance, got {type(result).__name__}")
    return asdict(result, dict_factory=_factory)
