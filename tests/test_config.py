"""
Tests for settings, provider selection and generation metrics.
"""
import json

from stylist_service.config import (
    get_active_text_provider,
    get_fallback_text_provider,
    get_image_models,
    get_provider_status,
    reload_settings,
    validate_provider_config,
)
from stylist_service.observability import get_metrics, increment_generation, log_generation
from stylist_service.observability.logger import GENERATION_LOG_FILE, file_handler


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self):
        settings = reload_settings()

        assert settings.image_max_retries == 2
        assert settings.retry_backoff_ms == 2000
        assert settings.batch_stagger_ms == 1000
        assert settings.text_primary == "openai"
        assert not settings.has_gemini()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("STYLIST_IMAGE_MAX_RETRIES", "4")
        monkeypatch.setenv("STYLIST_TEXT_PRIMARY", "Gemini")
        monkeypatch.setenv("GEMINI_API_KEY", "secret")

        settings = reload_settings()

        assert settings.image_max_retries == 4
        assert settings.text_primary == "gemini"
        assert "secret" not in json.dumps(settings.to_dict())
        assert settings.to_dict()["gemini_configured"] is True


class TestProviders:
    """Tests for image model chain and text provider priority."""

    def test_image_chain(self):
        assert get_image_models() == ["gemini-2.5-flash-image", "gemini-3-pro-image-preview"]

    def test_duplicate_secondary_is_dropped(self, monkeypatch):
        monkeypatch.setenv("STYLIST_IMAGE_MODEL_SECONDARY", "gemini-2.5-flash-image")
        reload_settings()

        assert get_image_models() == ["gemini-2.5-flash-image"]

    def test_text_priority(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk")
        monkeypatch.setenv("GEMINI_API_KEY", "gm")
        reload_settings()

        assert get_active_text_provider() == "openai"
        assert get_fallback_text_provider() == "gemini"

    def test_secondary_promoted_when_primary_missing(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "gm")
        reload_settings()

        assert get_active_text_provider() == "gemini"
        assert get_fallback_text_provider() is None

    def test_no_text_provider(self):
        assert get_active_text_provider() is None
        assert get_provider_status()["active_text_provider"] is None

    def test_config_warnings(self):
        warnings = validate_provider_config()

        assert any("GEMINI_API_KEY" in warning for warning in warnings)
        assert any("OPENWEATHER_API_KEY" in warning for warning in warnings)


class TestObservability:
    """Tests for generation metrics and the JSON-lines log."""

    def test_metrics(self):
        increment_generation("model-a", success=True)
        increment_generation("model-b", success=True, attempts=2)
        increment_generation(None, success=False, attempts=3)

        metrics = get_metrics()
        assert metrics["total_generations"] == 3
        assert metrics["successes"] == 2
        assert metrics["failures"] == 1
        assert metrics["retries"] == 3
        assert metrics["success_ratio"] == 0.667
        assert metrics["successes_by_model"] == {"model-a": 1, "model-b": 1}

    def test_generation_log_entry(self):
        log_generation("dressy", "model-a", 2, 1234, "success")
        file_handler.flush()

        last = GENERATION_LOG_FILE.read_text(encoding="utf-8").strip().splitlines()[-1]
        entry = json.loads(last)
        assert entry["scenario_id"] == "dressy"
        assert entry["attempt"] == 2
        assert entry["status"] == "success"
        assert entry["timestamp"].endswith("Z")

    def test_logging_disabled(self, monkeypatch):
        monkeypatch.setenv("STYLIST_LOGGING_ENABLED", "false")
        before = GENERATION_LOG_FILE.read_text(encoding="utf-8") if GENERATION_LOG_FILE.exists() else ""

        log_generation("casual", None, 1, 10, "fail", "boom")
        file_handler.flush()

        after = GENERATION_LOG_FILE.read_text(encoding="utf-8") if GENERATION_LOG_FILE.exists() else ""
        assert after == before
