"""
Generation Logger (v1.1.0)
Structured JSON-lines log of image generation outcomes.
"""
import os
import json
import logging
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional

# Ensure logs directory exists
LOGS_DIR = Path(os.getenv("STYLIST_LOGS_DIR", Path(__file__).parent.parent.parent / "logs"))
LOGS_DIR.mkdir(parents=True, exist_ok=True)

GENERATION_LOG_FILE = LOGS_DIR / "generations.log"

# Configure generation logger
generation_logger = logging.getLogger("stylist.generations")
generation_logger.setLevel(logging.INFO)

# File handler for generation entries
file_handler = logging.FileHandler(GENERATION_LOG_FILE, encoding="utf-8")
file_handler.setFormatter(logging.Formatter("%(message)s"))
generation_logger.addHandler(file_handler)

# Prevent propagation to root logger
generation_logger.propagate = False


def log_generation(
    scenario_id: str,
    model: Optional[str],
    attempt: int,
    latency_ms: int,
    status: str,
    error: Optional[str] = None
):
    """
    Log a structured generation entry.

    Args:
        scenario_id: Scenario being rendered (dressy, casual, ...)
        model: Image model that produced the final outcome (None if none answered)
        attempt: 1-based outer attempt number
        latency_ms: Wall time of the whole edit call chain
        status: success, no_image or fail
        error: Last error message if failed
    """
    if not is_logging_enabled():
        return

    entry = {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "scenario_id": scenario_id,
        "model": model,
        "attempt": attempt,
        "latency_ms": latency_ms,
        "status": status,
    }

    if error:
        entry["error"] = error[:500]

    generation_logger.info(json.dumps(entry))


def is_logging_enabled() -> bool:
    """Check if generation logging is enabled."""
    return os.getenv("STYLIST_LOGGING_ENABLED", "true").lower() == "true"
