# Scenarios module
from stylist_service.scenarios.catalogs import (
    ColorPalette,
    StylingArchetype,
    normalize_gender,
)
from stylist_service.scenarios.rotation import day_index, RotationState
from stylist_service.scenarios.prompt_builder import (
    ScenarioPrompt,
    WeatherBucket,
    classify_weather,
    build_dressy_prompt,
    build_casual_prompt,
)
from stylist_service.scenarios.daily import (
    DAILY_SCENARIO_LABELS,
    SUPPORTED_LANGUAGES,
    get_daily_scenarios,
    get_scenario_label,
)
