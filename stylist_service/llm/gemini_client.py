"""
Gemini Client (v1.1.0)
Secondary LLM for the daily outfit recommendation text.
"""
import logging
from typing import Optional

from stylist_service.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"


async def generate_recommendation(prompt: str, model: str = DEFAULT_MODEL) -> Optional[str]:
    """
    Generate the recommendation text with Gemini.

    Returns:
        Recommendation text, or None on an empty answer

    Raises:
        ValueError: If GEMINI_API_KEY is not set
    """
    api_key = get_settings().gemini_api_key
    if not api_key:
        raise ValueError("GEMINI_API_KEY not set")

    import google.generativeai as genai

    genai.configure(api_key=api_key)

    logger.info("Calling Gemini for style recommendation...")

    try:
        generative_model = genai.GenerativeModel(model)
        response = await generative_model.generate_content_async(prompt)
        text = response.text
    except Exception as e:
        logger.error(f"Gemini error: {e}")
        raise

    if not text or not text.strip():
        logger.warning("Gemini returned an empty recommendation")
        return None

    return text.strip()
