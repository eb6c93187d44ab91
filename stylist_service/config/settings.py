"""
Settings Module (v1.2.0)
Centralized configuration from environment variables.
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


DEFAULT_IMAGE_MODEL_PRIMARY = "gemini-2.5-flash-image"
DEFAULT_IMAGE_MODEL_SECONDARY = "gemini-3-pro-image-preview"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class Settings:
    """Application settings from environment variables."""

    # API Keys
    gemini_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    openweather_api_key: Optional[str] = None

    # Image generation
    image_model_primary: str = DEFAULT_IMAGE_MODEL_PRIMARY
    image_model_secondary: str = DEFAULT_IMAGE_MODEL_SECONDARY
    image_max_retries: int = 2
    retry_backoff_ms: int = 2000
    image_timeout_seconds: float = 120.0

    # Batch
    batch_stagger_ms: int = 1000
    batch_deadline_seconds: float = 300.0

    # Text recommendation
    text_enabled: bool = True
    text_primary: str = "openai"
    text_secondary: str = "gemini"
    default_language: str = "en"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            # API Keys
            gemini_api_key=os.getenv("GEMINI_API_KEY"),
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY"),

            # Image generation
            image_model_primary=os.getenv("STYLIST_IMAGE_MODEL_PRIMARY", DEFAULT_IMAGE_MODEL_PRIMARY),
            image_model_secondary=os.getenv("STYLIST_IMAGE_MODEL_SECONDARY", DEFAULT_IMAGE_MODEL_SECONDARY),
            image_max_retries=int(os.getenv("STYLIST_IMAGE_MAX_RETRIES", "2")),
            retry_backoff_ms=int(os.getenv("STYLIST_RETRY_BACKOFF_MS", "2000")),
            image_timeout_seconds=float(os.getenv("STYLIST_IMAGE_TIMEOUT_SECONDS", "120")),

            # Batch
            batch_stagger_ms=int(os.getenv("STYLIST_BATCH_STAGGER_MS", "1000")),
            batch_deadline_seconds=float(os.getenv("STYLIST_BATCH_DEADLINE_SECONDS", "300")),

            # Text recommendation
            text_enabled=_env_bool("STYLIST_TEXT_ENABLED", "true"),
            text_primary=os.getenv("STYLIST_TEXT_PRIMARY", "openai").lower(),
            text_secondary=os.getenv("STYLIST_TEXT_SECONDARY", "gemini").lower(),
            default_language=os.getenv("STYLIST_DEFAULT_LANGUAGE", "en").lower(),
        )

    def has_gemini(self) -> bool:
        """Check if Gemini API key is configured."""
        return bool(self.gemini_api_key)

    def has_openai(self) -> bool:
        """Check if OpenAI API key is configured."""
        return bool(self.openai_api_key)

    def has_weather(self) -> bool:
        """Check if OpenWeatherMap API key is configured."""
        return bool(self.openweather_api_key)

    def to_dict(self) -> dict:
        """Export settings as dict (without sensitive keys)."""
        return {
            "image_model_primary": self.image_model_primary,
            "image_model_secondary": self.image_model_secondary,
            "image_max_retries": self.image_max_retries,
            "retry_backoff_ms": self.retry_backoff_ms,
            "batch_stagger_ms": self.batch_stagger_ms,
            "batch_deadline_seconds": self.batch_deadline_seconds,
            "text_enabled": self.text_enabled,
            "text_primary": self.text_primary,
            "text_secondary": self.text_secondary,
            "default_language": self.default_language,
            "gemini_configured": self.has_gemini(),
            "openai_configured": self.has_openai(),
            "weather_configured": self.has_weather(),
        }


def get_settings() -> Settings:
    """Get application settings (cached singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.info(f"Settings loaded: {_settings.to_dict()}")
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from environment."""
    global _settings
    _settings = Settings.from_env()
    logger.info(f"Settings reloaded: {_settings.to_dict()}")
    return _settings


# Singleton instance
_settings: Optional[Settings] = None
