"""
Providers Module (v1.2.0)
Image model chain and text provider availability/priority.
"""
import logging
from typing import Optional, List, Dict, Any

from stylist_service.config.settings import get_settings

logger = logging.getLogger(__name__)


SUPPORTED_TEXT_PROVIDERS = ["openai", "gemini"]

# Primary + secondary only; a third model is never attempted
MAX_IMAGE_MODELS = 2


def get_image_models() -> List[str]:
    """
    Get the ordered image model chain (primary, secondary).

    Empty and duplicate entries are dropped so a misconfigured secondary
    never causes the primary to be called twice per attempt.
    """
    settings = get_settings()
    models: List[str] = []
    for model in (settings.image_model_primary, settings.image_model_secondary):
        model = (model or "").strip()
        if model and model not in models:
            models.append(model)
    return models[:MAX_IMAGE_MODELS]


def get_text_provider_availability() -> Dict[str, bool]:
    """Get availability status for each text provider."""
    settings = get_settings()
    return {
        "openai": settings.has_openai(),
        "gemini": settings.has_gemini(),
    }


def get_active_text_provider() -> Optional[str]:
    """
    Get the active primary text provider based on settings and availability.

    Returns:
        Provider name or None if no provider available
    """
    settings = get_settings()

    if not settings.text_enabled:
        logger.warning("Text recommendation LLMs disabled via STYLIST_TEXT_ENABLED")
        return None

    availability = get_text_provider_availability()

    if settings.text_primary in SUPPORTED_TEXT_PROVIDERS:
        if availability.get(settings.text_primary):
            return settings.text_primary
        logger.warning(
            f"Primary text provider '{settings.text_primary}' not available, "
            f"checking secondary..."
        )

    if settings.text_secondary in SUPPORTED_TEXT_PROVIDERS:
        if availability.get(settings.text_secondary):
            logger.info(f"Using secondary text provider: {settings.text_secondary}")
            return settings.text_secondary

    logger.warning("No text provider available - canned recommendation will be used")
    return None


def get_fallback_text_provider() -> Optional[str]:
    """
    Get the fallback text provider (secondary or any other available).

    Returns:
        Provider name or None if no fallback available
    """
    settings = get_settings()
    if not settings.text_enabled:
        return None

    availability = get_text_provider_availability()
    active = get_active_text_provider()

    if settings.text_secondary != active and availability.get(settings.text_secondary):
        return settings.text_secondary

    for provider in SUPPORTED_TEXT_PROVIDERS:
        if provider != active and availability.get(provider):
            return provider

    return None


def get_provider_status() -> Dict[str, Any]:
    """Get complete provider status for diagnostics."""
    settings = get_settings()
    return {
        "image_models": get_image_models(),
        "image_configured": settings.has_gemini(),
        "weather_configured": settings.has_weather(),
        "text_enabled": settings.text_enabled,
        "text_availability": get_text_provider_availability(),
        "active_text_provider": get_active_text_provider(),
        "fallback_text_provider": get_fallback_text_provider(),
    }


def validate_provider_config() -> List[str]:
    """
    Validate provider configuration and return warnings.

    Returns:
        List of warning messages
    """
    settings = get_settings()
    warnings = []

    if not settings.has_gemini():
        warnings.append("GEMINI_API_KEY not set - outfit images will be skipped")

    if not get_image_models():
        warnings.append("No image model configured")

    if not settings.has_weather():
        warnings.append("OPENWEATHER_API_KEY not set - default weather will be used")

    if settings.text_primary not in SUPPORTED_TEXT_PROVIDERS:
        warnings.append(f"Unknown primary text provider: {settings.text_primary}")

    if settings.text_secondary not in SUPPORTED_TEXT_PROVIDERS:
        warnings.append(f"Unknown secondary text provider: {settings.text_secondary}")

    if settings.image_max_retries < 0:
        warnings.append("STYLIST_IMAGE_MAX_RETRIES is negative - treated as 0")

    return warnings
