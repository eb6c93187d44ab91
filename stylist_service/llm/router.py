"""
LLM Router (v1.2.0)
Daily recommendation text: primary provider, secondary provider, then canned text.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Any

from stylist_service.llm import openai_client, gemini_client
from stylist_service.config import get_active_text_provider, get_fallback_text_provider
from stylist_service.scenarios.daily import normalize_language
from stylist_service.scenarios.prompt_builder import RAIN_CONDITIONS
from stylist_service.services.weather import WeatherSnapshot

logger = logging.getLogger(__name__)

LANGUAGE_NAMES = {
    "ko": "Korean",
    "en": "English",
    "ja": "Japanese",
    "zh": "Chinese",
    "es": "Spanish",
}

FALLBACK_COLD_BELOW = 10
FALLBACK_HOT_ABOVE = 25

PROVIDERS = {
    "openai": openai_client,
    "gemini": gemini_client,
}

# Recommendation source when no LLM answered
SOURCE_FALLBACK = "fallback"


@dataclass
class RecommendationResult:
    text: str
    source: str  # provider name or "fallback"
    error: Optional[str] = None


def build_recommendation_prompt(
    weather: WeatherSnapshot,
    gender: Optional[str] = None,
    language: Optional[str] = None,
    city: Optional[str] = None,
    height_cm: Optional[float] = None,
    weight_kg: Optional[float] = None,
    today: Optional[datetime] = None
) -> str:
    """
    Build the stylist email prompt for the text LLM.

    Args:
        weather: Current conditions
        gender: Subscriber gender (free text)
        language: ko, en, ja, zh, es
        city: Display city
        height_cm: Optional body height
        weight_kg: Optional body weight
        today: Date shown in the prompt (defaults to now, UTC)
    """
    profile_parts = []
    if gender:
        profile_parts.append(f"Gender: {gender}")
    if height_cm:
        profile_parts.append(f"Height: {height_cm:g}cm")
    if weight_kg:
        profile_parts.append(f"Weight: {weight_kg:g}kg")
    profile = ", ".join(profile_parts) or "Not specified"

    language_name = LANGUAGE_NAMES[normalize_language(language)]
    today = today or datetime.now(timezone.utc)
    date_str = f"{today.strftime('%A, %B')} {today.day}"

    return f"""You are an expert personal stylist trusted by celebrities. Generate a warm, detailed daily outfit recommendation email.

CONTEXT:
- City: {city or 'Unknown'}
- Weather: {weather.to_prompt_context()}
- Profile: {profile}
- Date: {date_str}

RULES:
1. Write ENTIRELY in {language_name}
2. Write 150-200 words, NOT shorter
3. Suggest a COMPLETE outfit with specific colors and materials: top, bottom, shoes, outerwear (if needed), accessories
4. Consider the weather practically (temperature, rain, wind)
5. Include a style tip of the day
6. Be warm, friendly, and encouraging
7. Format with clear sections using line breaks, each outfit item on its own line with a dash (-) prefix
8. Do NOT use markdown headers or asterisks; use plain text with emoji sparingly

REQUIRED OUTPUT FORMAT:
1. Friendly greeting with today's weather summary (2-3 sentences)
2. "Here's your outfit recommendation:" followed by each item on its own line
3. Style tip of the day (1-2 sentences with practical advice)
4. Warm closing line"""


def fallback_recommendation(weather: WeatherSnapshot, language: Optional[str] = None) -> str:
    """
    Canned recommendation used when no LLM answers.

    Korean subscribers get Korean text; every other language gets English.
    """
    is_cold = weather.temp < FALLBACK_COLD_BELOW
    is_hot = weather.temp > FALLBACK_HOT_ABOVE
    is_rainy = weather.condition.lower() in RAIN_CONDITIONS

    if normalize_language(language) == "ko":
        msg = f"오늘 날씨는 {weather.temp}°C, {weather.description}입니다.\n\n"
        if is_cold:
            msg += "따뜻한 코트와 니트를 추천합니다. 목도리도 잊지 마세요!"
        elif is_hot:
            msg += "시원한 린넨 셔츠와 면바지를 추천합니다. 선글라스 필수!"
        elif is_rainy:
            msg += "방수 재킷과 부츠를 추천합니다. 우산 챙기세요!"
        else:
            msg += "가벼운 레이어드 스타일을 추천합니다. 가디건이나 얇은 재킷이 딱이에요!"
        return msg

    msg = f"Today's weather: {weather.temp}°C, {weather.description}.\n\n"
    if is_cold:
        msg += "Stay warm with a cozy coat and knitwear. Don't forget your scarf!"
    elif is_hot:
        msg += "Keep cool with a linen shirt and light pants. Sunglasses are a must!"
    elif is_rainy:
        msg += "Grab a waterproof jacket and boots. Don't forget your umbrella!"
    else:
        msg += "Perfect layering weather! A cardigan or light jacket works great."
    return msg


async def _call_provider(provider: str, prompt: str) -> Any:
    return await PROVIDERS[provider].generate_recommendation(prompt)


async def generate_style_recommendation(
    weather: WeatherSnapshot,
    gender: Optional[str] = None,
    language: Optional[str] = None,
    city: Optional[str] = None,
    height_cm: Optional[float] = None,
    weight_kg: Optional[float] = None
) -> RecommendationResult:
    """
    Generate the daily recommendation text.

    Tries the active provider, then the fallback provider. When both fail
    or none is configured, the canned text is returned. Never raises.

    Returns:
        RecommendationResult with source "openai", "gemini" or "fallback"
    """
    prompt = build_recommendation_prompt(
        weather, gender=gender, language=language, city=city,
        height_cm=height_cm, weight_kg=weight_kg
    )

    active = get_active_text_provider()
    fallback = get_fallback_text_provider() if active else None

    errors = []
    for provider in (active, fallback):
        if not provider or provider not in PROVIDERS:
            continue
        try:
            logger.info(f"Generating recommendation with {provider}...")
            text = await _call_provider(provider, prompt)
        except Exception as e:
            logger.warning(f"{provider} recommendation failed: {e}")
            errors.append(f"{provider}: {e}")
            continue

        if text:
            logger.info(f"✓ Recommendation generated by {provider}")
            return RecommendationResult(text=text, source=provider)

        errors.append(f"{provider}: empty response")

    if not errors:
        errors.append("no text provider configured")

    logger.warning(f"Using canned recommendation ({'; '.join(errors)})")
    return RecommendationResult(
        text=fallback_recommendation(weather, language),
        source=SOURCE_FALLBACK,
        error="; ".join(errors),
    )
