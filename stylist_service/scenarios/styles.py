"""
Interactive Style Sets (v1.0.0)
Fixed looks for the multi-style generator plus user-named outfit/hairstyle sets.
"""
import re
from typing import Dict, List, Sequence

from stylist_service.core.validation import ValidationError
from stylist_service.scenarios.prompt_builder import ScenarioPrompt

MAX_CUSTOM_STYLES = 9
MAX_STYLE_NAME_LENGTH = 100

STYLE_SCENARIOS = (
    ScenarioPrompt("best-match", "elegant casual daily outfit, clean minimal style"),
    ScenarioPrompt("interview", "professional interview outfit, business formal suit, confident"),
    ScenarioPrompt("date", "romantic date night outfit, stylish and charming, smart casual"),
    ScenarioPrompt("luxury", "high-end luxury designer fashion, premium quality, sophisticated"),
    ScenarioPrompt(
        "casual",
        "relaxed casual outfit, comfortable t-shirt or hoodie with jeans, sneakers, laid-back weekend style",
    ),
    ScenarioPrompt(
        "daily",
        "everyday practical outfit, simple and neat, comfortable for daily activities, effortless style",
    ),
)

STYLE_SCENARIO_LABELS: Dict[str, Dict[str, str]] = {
    "best-match": {"ko": "베스트 매치", "en": "Best Match", "ja": "ベストマッチ", "zh": "最佳搭配", "es": "Mejor Combinación"},
    "interview": {"ko": "인터뷰룩", "en": "Interview", "ja": "インタビュー", "zh": "面试装", "es": "Entrevista"},
    "date": {"ko": "데이트룩", "en": "Date Night", "ja": "デートルック", "zh": "约会装", "es": "Cita"},
    "luxury": {"ko": "럭셔리", "en": "Luxury", "ja": "ラグジュアリー", "zh": "奢华", "es": "Lujo"},
    "casual": {"ko": "캐주얼", "en": "Casual", "ja": "カジュアル", "zh": "休闲", "es": "Casual"},
    "daily": {"ko": "데일리", "en": "Daily", "ja": "デイリー", "zh": "日常", "es": "Diario"},
}


def _slugify(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug[:50] or "style"


def build_custom_scenarios(style_names: Sequence[str]) -> List[ScenarioPrompt]:
    """
    Turn user-chosen style names into scenarios with unique slug ids.

    Raises:
        ValidationError: Empty list, more than MAX_CUSTOM_STYLES names, or a bad name
    """
    if not style_names or len(style_names) > MAX_CUSTOM_STYLES:
        raise ValidationError(f"Invalid styles array (1-{MAX_CUSTOM_STYLES} items required)")

    scenarios: List[ScenarioPrompt] = []
    seen: Dict[str, int] = {}
    for name in style_names:
        if not isinstance(name, str) or not name.strip() or len(name) > MAX_STYLE_NAME_LENGTH:
            raise ValidationError(f"Invalid style name: {name!r}")

        slug = _slugify(name)
        seen[slug] = seen.get(slug, 0) + 1
        if seen[slug] > 1:
            slug = f"{slug}-{seen[slug]}"

        scenarios.append(ScenarioPrompt(id=slug, prompt=name.strip()))

    return scenarios


def labels_for(scenarios: Sequence[ScenarioPrompt]) -> Dict[str, Dict[str, str]]:
    """Label table for custom scenarios: the style name, stored as the English label."""
    return {scenario.id: {"en": scenario.prompt} for scenario in scenarios}
