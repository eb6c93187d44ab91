# LLM module (v1.2.0)
from stylist_service.llm import router, openai_client, gemini_client
from stylist_service.llm.router import (
    RecommendationResult,
    build_recommendation_prompt,
    fallback_recommendation,
    generate_style_recommendation,
)
