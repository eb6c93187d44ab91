# Observability module
from stylist_service.observability.logger import log_generation, is_logging_enabled
from stylist_service.observability.metrics import (
    increment_generation,
    get_metrics,
    reset_metrics,
)
