"""Speech recognizer backends."""
from .base import Recognizer, parse_word_entries
from .http_recognizer import HttpRecognizer
from .resolver import RecognizerResolver
from .static import StaticRecognizer

__all__ = [
    "Recognizer",
    "parse_word_entries",
    "HttpRecognizer",
    "RecognizerResolver",
    "StaticRecognizer",
]
