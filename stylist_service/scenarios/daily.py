"""
Daily Scenario Facade (v1.0.0)
The two looks emailed every day: "dressy" then "casual".
"""
import logging
from typing import Dict, List, Mapping, Optional

from stylist_service.scenarios.prompt_builder import (
    ScenarioPrompt,
    build_casual_prompt,
    build_dressy_prompt,
)
from stylist_service.scenarios.rotation import Clock, resolve_day
from stylist_service.services.weather import WeatherSnapshot

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("ko", "en", "ja", "zh", "es")
DEFAULT_LANGUAGE = "en"

DAILY_SCENARIO_LABELS: Dict[str, Dict[str, str]] = {
    "dressy": {
        "ko": "격식 스타일",
        "en": "Dressy",
        "ja": "ドレッシー",
        "zh": "正式穿搭",
        "es": "Elegante",
    },
    "casual": {
        "ko": "캐주얼",
        "en": "Casual",
        "ja": "カジュアル",
        "zh": "休闲",
        "es": "Casual",
    },
}


def get_daily_scenarios(
    weather: WeatherSnapshot,
    gender: Optional[str],
    now: Clock = None,
    day: Optional[int] = None
) -> List[ScenarioPrompt]:
    """
    Build today's scenarios.

    Args:
        weather: Current (or default) weather
        gender: male/female; anything else uses the male catalog
        now: Clock override (datetime or epoch seconds)
        day: Explicit epoch-day number, takes precedence over `now`

    Returns:
        [dressy, casual]
    """
    day = resolve_day(day, now)
    return [
        build_dressy_prompt(weather, gender, day),
        build_casual_prompt(weather, gender, day),
    ]


def normalize_language(language: Optional[str]) -> str:
    language = (language or "").strip().lower()
    return language if language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def get_scenario_label(
    scenario_id: str,
    language: Optional[str],
    labels: Optional[Mapping[str, Mapping[str, str]]] = None
) -> Optional[str]:
    """
    Localized display label for a scenario id.

    Unknown languages fall back to English. Unknown ids return None.
    """
    table = DAILY_SCENARIO_LABELS if labels is None else labels
    translations = table.get(scenario_id)
    if translations is None:
        logger.error(f"Unknown scenario id for label lookup: {scenario_id!r}")
        return None
    return translations.get(normalize_language(language)) or translations.get(DEFAULT_LANGUAGE)
