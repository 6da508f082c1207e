"""Intent classifier factory"""

from __future__ import annotations

from typing import Optional

from .base import IntentClassifier, NullIntentClassifier


# Singleton cache for classifiers
_classifier_cache: dict[str, IntentClassifier] = {}


def get_intent_classifier(
    provider: Optional[str] = None,
    use_cache: bool = True,
) -> IntentClassifier:
    """
    Get an intent classifier based on configuration.

    Args:
        provider: Provider name ('groq' or 'none'). If None, uses config.
        use_cache: Whether to return cached classifier instance.

    Returns:
        IntentClassifier instance
    """
    from ..db.config import settings

    provider = provider or settings.intent_provider

    if use_cache and provider in _classifier_cache:
        return _classifier_cache[provider]

    if provider == "groq":
        from .groq_classifier import GroqIntentClassifier
        instance: IntentClassifier = GroqIntentClassifier(
            api_key=settings.groq_api_key,
            base_url=settings.groq_base_url,
            model_name=settings.intent_model,
        )
    else:
        instance = NullIntentClassifier()

    if use_cache:
        _classifier_cache[provider] = instance

    return instance


def clear_classifier_cache() -> None:
    """Clear the classifier cache (useful for testing)"""
    _classifier_cache.clear()
