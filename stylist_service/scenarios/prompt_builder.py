"""
Scenario Prompt Builder (v1.0.0)
Weather-conditioned outfit prompts for the dressy and casual looks.

Flow:
1. Pick palette + archetype from the rotation indices
2. Classify weather into one bucket (snowy > rainy > temperature)
3. Render the bucket template with the palette colours
4. Append the archetype tag: "STYLING: {name} — {guide}"
"""
import math
import logging
from enum import Enum
from dataclasses import dataclass
from typing import Optional

from stylist_service.scenarios.catalogs import (
    CASUAL,
    DRESSY,
    FEMALE,
    MALE,
    normalize_gender,
    select_archetype,
    select_palette,
)
from stylist_service.scenarios.rotation import casual_rotation, dressy_rotation
from stylist_service.services.weather import WeatherSnapshot

logger = logging.getLogger(__name__)


class WeatherBucket(str, Enum):
    SNOWY = "snowy"
    RAINY = "rainy"
    COLD = "cold"
    COOL = "cool"
    WARM = "warm"
    HOT = "hot"
    DEFAULT = "default"


@dataclass(frozen=True)
class TemperatureThresholds:
    """Upper bounds (exclusive, °C) of the cold, cool and warm buckets."""
    cold_below: float
    cool_below: float
    warm_below: float


# Casual keeps its cool band up to 22°C
DRESSY_THRESHOLDS = TemperatureThresholds(cold_below=10, cool_below=20, warm_below=28)
CASUAL_THRESHOLDS = TemperatureThresholds(cold_below=10, cool_below=22, warm_below=28)

SNOW_CONDITIONS = frozenset({"snow"})
RAIN_CONDITIONS = frozenset({"rain", "drizzle", "thunderstorm"})


@dataclass(frozen=True)
class ScenarioPrompt:
    id: str
    prompt: str


def classify_weather(
    condition: Optional[str],
    temp: Optional[float],
    thresholds: TemperatureThresholds = DRESSY_THRESHOLDS
) -> WeatherBucket:
    """
    Classify weather into exactly one bucket.

    Precipitation wins over temperature. DEFAULT is only returned when the
    temperature is missing or not a finite number.
    """
    normalized = (condition or "").strip().lower()
    if normalized in SNOW_CONDITIONS:
        return WeatherBucket.SNOWY
    if normalized in RAIN_CONDITIONS:
        return WeatherBucket.RAINY

    if not isinstance(temp, (int, float)) or isinstance(temp, bool) or not math.isfinite(temp):
        return WeatherBucket.DEFAULT

    if temp < thresholds.cold_below:
        return WeatherBucket.COLD
    if temp < thresholds.cool_below:
        return WeatherBucket.COOL
    if temp < thresholds.warm_below:
        return WeatherBucket.WARM
    return WeatherBucket.HOT


_MALE_FINISH = "luxury editorial quality, naturally draped silhouette"
_FEMALE_FINISH = "luxury editorial quality, naturally draped elegant silhouette"

DRESSY_TEMPLATES = {
    FEMALE: {
        WeatherBucket.SNOWY: (
            "luxurious winter outfit in {tone} palette: long double-face wool coat in {c1} with elegant draping, "
            "cozy cashmere turtleneck in {c4}, tailored high-waisted wool trousers in {c3}, insulated leather ankle boots, "
            "{accent} cashmere scarf and leather gloves, delicate {accent} jewelry, " + _FEMALE_FINISH
        ),
        WeatherBucket.RAINY: (
            "chic rainy day outfit in {tone} palette: structured waterproof trench coat in {c3} with a sleek silhouette, "
            "fine-knit sweater in {c2}, tailored dark cropped trousers, polished waterproof chelsea boots, "
            "compact {accent} crossbody bag, minimalist earrings, " + _FEMALE_FINISH
        ),
        WeatherBucket.COLD: (
            "elegant cold weather outfit in {tone} palette: beautifully tailored wool coat in {c2} with clean lines, "
            "soft cashmere V-neck in {c1}, high-waisted wide-leg trousers in {c3}, leather ankle boots, "
            "delicate {accent} layered necklace, " + _FEMALE_FINISH
        ),
        WeatherBucket.COOL: (
            "polished layered outfit in {tone} palette: soft cashmere cardigan in {c1} over a silk camisole in {c4}, "
            "high-waisted tailored trousers in {c3}, pointed-toe flats or loafers, minimalist {accent} jewelry, "
            "structured tote bag, " + _FEMALE_FINISH
        ),
        WeatherBucket.WARM: (
            "breezy elegant outfit in {tone} palette: flowing linen blouse in {c4}, wide-leg linen trousers or midi skirt "
            "in {c3}, leather espadrilles or elegant sandals, delicate {accent} bracelet, woven tote, " + _FEMALE_FINISH
        ),
        WeatherBucket.HOT: (
            "cool summer outfit in {tone} palette: lightweight silk or cotton dress in {c2} with a flattering cut, "
            "flat sandals in natural leather, {accent} minimalist jewelry, straw bag, chic sunglasses, " + _FEMALE_FINISH
        ),
        WeatherBucket.DEFAULT: (
            "versatile chic outfit in {tone} palette: cashmere sweater in {c1}, high-waisted wide-leg trousers in {c3}, "
            "elegant pointed flats, delicate {accent} jewelry, " + _FEMALE_FINISH
        ),
    },
    MALE: {
        WeatherBucket.SNOWY: (
            "sharp winter outfit in {tone} palette: insulated wool overcoat in {c2} with structured shoulders, "
            "chunky cable-knit sweater in {c3}, relaxed dark wool trousers, waterproof leather boots in rich brown, "
            "{accent} wool scarf, leather gloves, " + _MALE_FINISH
        ),
        WeatherBucket.RAINY: (
            "sleek rainy day outfit in {tone} palette: modern waterproof mac coat in {c1}, fine merino crew-neck in {c3}, "
            "relaxed dark chinos, polished waterproof chelsea boots, minimal {accent} accent watch, " + _MALE_FINISH
        ),
        WeatherBucket.COLD: (
            "distinguished cold weather outfit in {tone} palette: tailored wool peacoat in {c2}, fine merino turtleneck "
            "in {c3}, straight-leg dark trousers, brown leather boots, minimal {accent} accent watch, " + _MALE_FINISH
        ),
        WeatherBucket.COOL: (
            "smart modern outfit in {tone} palette: cotton crew-neck sweater in {c3} over a crisp oxford shirt collar, "
            "relaxed straight-leg chinos in {c1}, leather sneakers or suede loafers, {accent} leather belt, " + _MALE_FINISH
        ),
        WeatherBucket.WARM: (
            "refined warm weather outfit in {tone} palette: breathable linen shirt in {c3}, relaxed cotton trousers "
            "in {c4}, leather sandals or canvas sneakers, minimal {accent} watch, " + _MALE_FINISH
        ),
        WeatherBucket.HOT: (
            "sharp summer outfit in {tone} palette: lightweight camp-collar linen shirt in {c3}, relaxed cotton shorts "
            "or light chinos in {c4}, leather sandals, {accent} accent sunglasses, " + _MALE_FINISH
        ),
        WeatherBucket.DEFAULT: (
            "clean modern outfit in {tone} palette: fine-knit cashmere sweater in {c3}, relaxed straight-leg chinos "
            "in {c1}, leather belt, clean sneakers or suede loafers, {accent} accent details, " + _MALE_FINISH
        ),
    },
}

CASUAL_TEMPLATES = {
    FEMALE: {
        WeatherBucket.SNOWY: (
            "cozy snow day casual outfit in {tone} palette: oversized puffer or shearling jacket in {c1}, chunky knit "
            "sweater in {c4}, straight-leg jeans in {c3}, lug-sole winter boots, {accent} knit beanie and mittens, "
            + _FEMALE_FINISH
        ),
        WeatherBucket.RAINY: (
            "easy rainy day casual outfit in {tone} palette: hooded rain parka in {c3}, relaxed sweatshirt in {c2}, "
            "straight-leg jeans, rubber chelsea rain boots, {accent} compact umbrella and crossbody bag, " + _FEMALE_FINISH
        ),
        WeatherBucket.COLD: (
            "warm casual outfit in {tone} palette: quilted jacket in {c2} over a chunky turtleneck in {c1}, "
            "straight-leg jeans in {c3}, suede ankle boots, {accent} knit scarf, " + _FEMALE_FINISH
        ),
        WeatherBucket.COOL: (
            "cozy chic casual outfit in {tone} palette: oversized {c1} cashmere cardigan over a fitted white tee, "
            "high-waisted light wash straight-leg jeans, clean {c3} sneakers or tan suede loafers, "
            "delicate {accent} necklace, " + _FEMALE_FINISH
        ),
        WeatherBucket.WARM: (
            "relaxed yet chic casual outfit in {tone} palette: oversized cotton tee in {c4} loosely tucked into "
            "high-waisted {c3} straight-leg jeans, clean white leather sneakers, {accent} minimalist crossbody bag, "
            "simple hoop earrings, " + _FEMALE_FINISH
        ),
        WeatherBucket.HOT: (
            "breezy casual outfit in {tone} palette: cotton poplin sundress or linen shorts set in {c2}, slide sandals, "
            "{accent} woven bag, oversized sunglasses, " + _FEMALE_FINISH
        ),
        WeatherBucket.DEFAULT: (
            "easy casual outfit in {tone} palette: soft knit sweater in {c1}, straight-leg jeans in {c3}, "
            "clean white sneakers, {accent} small shoulder bag, " + _FEMALE_FINISH
        ),
    },
    MALE: {
        WeatherBucket.SNOWY: (
            "rugged snow day casual outfit in {tone} palette: down parka in {c1}, thick wool crew-neck in {c3}, "
            "dark selvedge jeans, waterproof lace-up winter boots, {accent} knit beanie, " + _MALE_FINISH
        ),
        WeatherBucket.RAINY: (
            "practical rainy day casual outfit in {tone} palette: lightweight hooded rain shell in {c2}, cotton "
            "sweatshirt in {c3}, dark tapered jeans, waterproof leather sneakers, {accent} cap, " + _MALE_FINISH
        ),
        WeatherBucket.COLD: (
            "warm casual outfit in {tone} palette: quilted field jacket in {c2} over a half-zip fleece in {c3}, "
            "straight-leg dark jeans, suede desert boots, {accent} wool scarf, " + _MALE_FINISH
        ),
        WeatherBucket.COOL: (
            "elevated casual outfit in {tone} palette: cotton {c3} sweatshirt or half-zip pullover, straight-leg dark "
            "indigo jeans with a relaxed fit, clean white leather sneakers, minimal {accent} watch, " + _MALE_FINISH
        ),
        WeatherBucket.WARM: (
            "relaxed modern casual outfit in {tone} palette: soft cotton crew-neck tee in {c3}, relaxed chino shorts "
            "in {c4}, clean canvas sneakers or leather slides, minimal {accent} watch, " + _MALE_FINISH
        ),
        WeatherBucket.HOT: (
            "light summer casual outfit in {tone} palette: breathable linen-blend tee in {c4}, drawstring linen shorts "
            "in {c3}, leather slides, {accent} sunglasses, " + _MALE_FINISH
        ),
        WeatherBucket.DEFAULT: (
            "easy casual outfit in {tone} palette: cotton overshirt in {c1} over a white tee, straight-leg jeans, "
            "clean sneakers, {accent} accent watch, " + _MALE_FINISH
        ),
    },
}


def render_prompt(template: str, palette, archetype) -> str:
    """Fill a template and append the archetype tag as a single line."""
    outfit = template.format(
        tone=palette.tone,
        c1=palette.c1,
        c2=palette.c2,
        c3=palette.c3,
        c4=palette.c4,
        accent=palette.accent,
    )
    prompt = f"{outfit}. STYLING: {archetype.name} — {archetype.guide}"
    return " ".join(prompt.split())


def build_dressy_prompt(weather: WeatherSnapshot, gender: Optional[str], day: int) -> ScenarioPrompt:
    """Primary family: palette day mod 21, archetype day mod 13."""
    catalog_gender = normalize_gender(gender)
    rotation = dressy_rotation(day)
    palette = select_palette(catalog_gender, rotation.palette_index)
    archetype = select_archetype(DRESSY, catalog_gender, rotation.archetype_index)
    bucket = classify_weather(weather.condition, weather.temp, DRESSY_THRESHOLDS)

    logger.debug(
        f"[scenario] dressy day={day} palette={palette.tone} "
        f"archetype={archetype.name} bucket={bucket.value}"
    )
    return ScenarioPrompt(
        id=DRESSY,
        prompt=render_prompt(DRESSY_TEMPLATES[catalog_gender][bucket], palette, archetype),
    )


def build_casual_prompt(weather: WeatherSnapshot, gender: Optional[str], day: int) -> ScenarioPrompt:
    """Secondary family: offset palette and 7-cycle archetype."""
    catalog_gender = normalize_gender(gender)
    rotation = casual_rotation(day)
    palette = select_palette(catalog_gender, rotation.palette_index)
    archetype = select_archetype(CASUAL, catalog_gender, rotation.archetype_index)
    bucket = classify_weather(weather.condition, weather.temp, CASUAL_THRESHOLDS)

    logger.debug(
        f"[scenario] casual day={day} palette={palette.tone} "
        f"archetype={archetype.name} bucket={bucket.value}"
    )
    return ScenarioPrompt(
        id=CASUAL,
        prompt=render_prompt(CASUAL_TEMPLATES[catalog_gender][bucket], palette, archetype),
    )
