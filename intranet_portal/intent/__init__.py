"""Intent classification for chat messages"""

from .base import Intent, IntentClassifier, NullIntentClassifier, UNKNOWN_INTENT, parse_intent
from .factory import get_intent_classifier, clear_classifier_cache

__all__ = [
    "Intent",
    "IntentClassifier",
    "NullIntentClassifier",
    "UNKNOWN_INTENT",
    "parse_intent",
    "get_intent_classifier",
    "clear_classifier_cache",
]
