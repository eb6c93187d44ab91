"""
OpenAI Client (v1.1.0)
Primary LLM for the daily outfit recommendation text.
"""
import logging
from typing import Optional

from stylist_service.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

SYSTEM_PROMPT = (
    "You are an expert personal stylist writing a daily outfit recommendation email. "
    "Always write detailed, warm, helpful responses with at least 150 words. "
    "Never give short or one-line answers."
)


async def generate_recommendation(prompt: str, model: str = DEFAULT_MODEL) -> Optional[str]:
    """
    Generate the recommendation text with OpenAI.

    Args:
        prompt: Fully built user prompt
        model: Chat model name

    Returns:
        Recommendation text, or None on an empty answer

    Raises:
        ValueError: If OPENAI_API_KEY is not set
    """
    api_key = get_settings().openai_api_key
    if not api_key:
        raise ValueError("OPENAI_API_KEY not set")

    from openai import AsyncOpenAI

    client = AsyncOpenAI(api_key=api_key)

    logger.info("Calling OpenAI for style recommendation...")

    try:
        response = await client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt}
            ],
            temperature=0.8,
            max_tokens=800,
        )
    except Exception as e:
        logger.error(f"OpenAI error: {e}")
        raise

    content = response.choices[0].message.content if response.choices else None
    if not content or not content.strip():
        logger.warning("OpenAI returned an empty recommendation")
        return None

    return content.strip()
