"""
Daily Style Orchestrator (v1.1.0)
One subscriber's daily job: weather, recommendation text, two outfit images.
"""
import time
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from stylist_service.config import get_settings
from stylist_service.core.validation import PhotoUnavailableError, load_photo_data_uri
from stylist_service.llm.router import RecommendationResult, generate_style_recommendation
from stylist_service.renderer.batch import OutfitImage, Publisher, generate_outfit_images
from stylist_service.renderer.gemini_image import GeminiImageEditor
from stylist_service.scenarios.daily import get_daily_scenarios, normalize_language
from stylist_service.scenarios.rotation import Clock
from stylist_service.services.weather import WeatherSnapshot, get_weather_or_default

logger = logging.getLogger(__name__)

# image_status values
IMAGES_GENERATED = "generated"
IMAGES_NONE_RETURNED = "no_images_returned"
IMAGES_SKIPPED = "skipped"
IMAGES_ERROR = "error"


@dataclass
class StyleProfile:
    """Subscriber attributes the daily job reads."""
    gender: Optional[str] = None
    language: str = "en"
    city: str = "Seoul"
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None

    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass
class DailyStyleResult:
    weather: WeatherSnapshot
    recommendation: str
    text_source: str
    images: List[OutfitImage] = field(default_factory=list)
    image_status: str = IMAGES_SKIPPED
    text_error: Optional[str] = None
    image_error: Optional[str] = None
    elapsed_ms: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weather": self.weather.to_dict(),
            "recommendation": self.recommendation,
            "text_source": self.text_source,
            "images": [image.to_dict() for image in self.images],
            "image_status": self.image_status,
            "text_error": self.text_error,
            "image_error": self.image_error,
            "elapsed_ms": self.elapsed_ms,
        }


def _resolve_photo(photo: Optional[str]) -> Optional[str]:
    """Data URIs pass through; anything else is read as a local file path."""
    if not photo:
        return None
    if photo.startswith("data:"):
        return photo
    return load_photo_data_uri(photo)


async def _fetch_weather(profile: StyleProfile) -> WeatherSnapshot:
    if not profile.has_location():
        logger.info(f"No coordinates for {profile.city} - using default weather")
        return await get_weather_or_default(None, None)
    return await get_weather_or_default(profile.latitude, profile.longitude)


async def run_daily_style_job(
    profile: StyleProfile,
    photo: Optional[str] = None,
    editor: Optional[GeminiImageEditor] = None,
    now: Clock = None,
    publish: Optional[Publisher] = None
) -> DailyStyleResult:
    """
    Run the daily style job for one subscriber.

    Steps:
    1. Current weather (default weather when unavailable)
    2. Recommendation text (LLM chain, canned text as last resort)
    3. Today's dressy + casual scenarios
    4. Outfit images on the subscriber's photo, under the batch deadline

    Args:
        profile: Subscriber profile
        photo: Data URI or local file path of the subscriber photo
        editor: Image editor (defaults to one built from settings)
        now: Clock override for the rotation
        publish: Optional uploader for finished images

    Returns:
        DailyStyleResult; provider failures are reported, never raised
    """
    start_time = time.time()
    settings = get_settings()
    language = normalize_language(profile.language)

    weather = await _fetch_weather(profile)
    logger.info(f"Weather for {profile.city}: {weather.temp}°C {weather.condition}")

    recommendation: RecommendationResult = await generate_style_recommendation(
        weather,
        gender=profile.gender,
        language=language,
        city=profile.city,
        height_cm=profile.height_cm,
        weight_kg=profile.weight_kg,
    )

    result = DailyStyleResult(
        weather=weather,
        recommendation=recommendation.text,
        text_source=recommendation.source,
        text_error=recommendation.error,
    )

    if editor is None and photo:
        editor = GeminiImageEditor.from_settings()

    if not photo or editor is None:
        logger.info("Skipping outfit images (no photo or no image provider)")
        result.image_status = IMAGES_SKIPPED
        result.elapsed_ms = int((time.time() - start_time) * 1000)
        return result

    scenarios = get_daily_scenarios(weather, profile.gender, now=now)

    try:
        photo_uri = _resolve_photo(photo)
        images = await generate_outfit_images(
            photo_uri,
            scenarios,
            profile.gender,
            editor,
            language=language,
            deadline_seconds=settings.batch_deadline_seconds,
            publish=publish,
        )
    except PhotoUnavailableError as e:
        logger.error(f"Outfit images aborted: {e}")
        result.image_status = IMAGES_ERROR
        result.image_error = str(e)
    else:
        result.images = images
        result.image_status = IMAGES_GENERATED if images else IMAGES_NONE_RETURNED

    result.elapsed_ms = int((time.time() - start_time) * 1000)
    logger.info(
        f"✓ Daily style job complete: text={result.text_source}, "
        f"images={len(result.images)} ({result.image_status}), {result.elapsed_ms}ms"
    )
    return result
