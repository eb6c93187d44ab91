# Config module
from stylist_service.config.settings import get_settings, reload_settings, Settings
from stylist_service.config.providers import (
    get_image_models,
    get_active_text_provider,
    get_fallback_text_provider,
    get_text_provider_availability,
    get_provider_status,
    validate_provider_config,
)
