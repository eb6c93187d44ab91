"""
Metrics Module (v1.1.0)
Track image generation counts, retries and per-model outcomes.
"""
import threading
from typing import Dict, Any, Optional

# Thread-safe metrics storage
_lock = threading.Lock()


def _empty_metrics() -> Dict[str, Any]:
    return {
        "total_generations": 0,
        "successes": 0,
        "failures": 0,
        "retries": 0,
        "successes_by_model": {},
    }


_metrics = _empty_metrics()


def increment_generation(model: Optional[str], success: bool, attempts: int = 1):
    """
    Record one finished edit call chain.

    Args:
        model: Model that produced the image (ignored on failure)
        success: Whether an image was returned
        attempts: Outer attempts used (1 = no retry)
    """
    with _lock:
        _metrics["total_generations"] += 1
        _metrics["retries"] += max(attempts - 1, 0)

        if success:
            _metrics["successes"] += 1
            if model:
                by_model = _metrics["successes_by_model"]
                by_model[model] = by_model.get(model, 0) + 1
        else:
            _metrics["failures"] += 1


def get_metrics() -> Dict[str, Any]:
    """Get current metrics snapshot."""
    with _lock:
        total = _metrics["total_generations"]
        successes = _metrics["successes"]

        return {
            "total_generations": total,
            "successes": successes,
            "failures": _metrics["failures"],
            "success_ratio": round(successes / total, 3) if total > 0 else 0.0,
            "retries": _metrics["retries"],
            "successes_by_model": dict(_metrics["successes_by_model"]),
        }


def reset_metrics():
    """Reset all metrics (for testing)."""
    global _metrics
    with _lock:
        _metrics = _empty_metrics()
