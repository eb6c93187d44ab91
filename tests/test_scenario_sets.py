"""
Tests for scenario labels and the interactive style sets.
"""
import pytest

from stylist_service.core.validation import ValidationError
from stylist_service.scenarios.daily import (
    DAILY_SCENARIO_LABELS,
    SUPPORTED_LANGUAGES,
    get_scenario_label,
    normalize_language,
)
from stylist_service.scenarios.styles import (
    MAX_CUSTOM_STYLES,
    STYLE_SCENARIO_LABELS,
    STYLE_SCENARIOS,
    build_custom_scenarios,
    labels_for,
)


class TestScenarioLabels:
    """Tests for get_scenario_label."""

    def test_every_language_has_daily_labels(self):
        for scenario_id in ("dressy", "casual"):
            for language in SUPPORTED_LANGUAGES:
                assert DAILY_SCENARIO_LABELS[scenario_id][language]

    def test_localized(self):
        assert get_scenario_label("dressy", "en") == "Dressy"
        assert get_scenario_label("casual", "ja") == "カジュアル"
        assert get_scenario_label("dressy", "es") == "Elegante"

    def test_unknown_language_falls_back_to_english(self):
        assert get_scenario_label("dressy", "fr") == "Dressy"
        assert get_scenario_label("casual", None) == "Casual"

    def test_unknown_id(self):
        assert get_scenario_label("gala", "en") is None

    def test_normalize_language(self):
        assert normalize_language(" KO ") == "ko"
        assert normalize_language("de") == "en"
        assert normalize_language("") == "en"


class TestStyleScenarios:
    """Tests for the fixed interactive looks."""

    def test_six_looks_with_labels(self):
        ids = [scenario.id for scenario in STYLE_SCENARIOS]
        assert ids == ["best-match", "interview", "date", "luxury", "casual", "daily"]
        for scenario_id in ids:
            assert set(STYLE_SCENARIO_LABELS[scenario_id]) == set(SUPPORTED_LANGUAGES)

    def test_labels_usable_with_lookup(self):
        assert get_scenario_label("interview", "ko", STYLE_SCENARIO_LABELS) == "인터뷰룩"


class TestCustomScenarios:
    """Tests for build_custom_scenarios."""

    def test_slug_ids(self):
        built = build_custom_scenarios(["Old Money", "  K-Pop Idol Stage  "])

        assert [s.id for s in built] == ["old-money", "k-pop-idol-stage"]
        assert [s.prompt for s in built] == ["Old Money", "K-Pop Idol Stage"]

    def test_duplicate_names_get_suffix(self):
        built = build_custom_scenarios(["Minimal", "minimal", "MINIMAL"])
        assert [s.id for s in built] == ["minimal", "minimal-2", "minimal-3"]

    def test_non_latin_name_gets_fallback_slug(self):
        built = build_custom_scenarios(["미니멀"])
        assert built[0].id == "style"
        assert built[0].prompt == "미니멀"

    @pytest.mark.parametrize("names", [
        [],
        ["a"] * (MAX_CUSTOM_STYLES + 1),
        [""],
        ["   "],
        ["x" * 101],
        [42],
    ])
    def test_invalid_input(self, names):
        with pytest.raises(ValidationError) as excinfo:
            build_custom_scenarios(names)
        assert excinfo.value.status_code == 400

    def test_labels_for(self):
        built = build_custom_scenarios(["Old Money"])
        assert labels_for(built) == {"old-money": {"en": "Old Money"}}
