"""
Gemini Image Editing (v1.2.0)

Edits the subscriber's own photo into a scenario outfit (or hairstyle)
through the Gemini generateContent REST API.

Flow per call:
1. Validate the data URI (malformed = caller bug, no retry)
2. Try primary model, then secondary model on non-2xx / transport error
3. Extract the first inline image part from the response
4. On exhaustion or missing image, retry the whole chain with linear backoff

Never raises for provider problems: the result is a data URI or None.
"""
import time
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import httpx

from stylist_service.config import get_settings, get_image_models
from stylist_service.config.providers import MAX_IMAGE_MODELS
from stylist_service.core.validation import PhotoPayload, parse_data_uri
from stylist_service.observability import increment_generation, log_generation
from stylist_service.renderer.edit_prompts import EDIT_KINDS, OUTFIT, build_edit_prompt
from stylist_service.scenarios.prompt_builder import ScenarioPrompt

logger = logging.getLogger(__name__)

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_IMAGE_SIZE = "1K"


@dataclass(frozen=True)
class InlineImage:
    mime_type: str
    data: str

    def to_data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


@dataclass
class GenerationAttempt:
    """Transient state of one edit call chain."""
    model_index: int = 0
    retry_count: int = 0
    last_error: Optional[str] = None


def extract_inline_image(payload: Any) -> Optional[InlineImage]:
    """
    Find the first inline image in a generateContent response.

    Expected shape: {"candidates": [{"content": {"parts": [{"inlineData":
    {"mimeType": ..., "data": ...}}]}}]}. Any other shape yields None.
    """
    if not isinstance(payload, dict):
        return None

    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None

    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return None

    for part in parts:
        if not isinstance(part, dict):
            continue
        inline = part.get("inlineData") or part.get("inline_data")
        if not isinstance(inline, dict):
            continue
        data = inline.get("data")
        if isinstance(data, str) and data:
            mime_type = inline.get("mimeType") or inline.get("mime_type")
            if not isinstance(mime_type, str) or not mime_type.startswith("image/"):
                mime_type = "image/png"
            return InlineImage(mime_type=mime_type, data=data)

    return None


async def sleep_ms(ms: int):
    await asyncio.sleep(ms / 1000)


class GeminiImageEditor:
    """Two-model fallback chain with bounded, linearly backed-off retries."""

    def __init__(
        self,
        api_key: str,
        models: Optional[Sequence[str]] = None,
        max_retries: Optional[int] = None,
        backoff_ms: Optional[int] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        settings = get_settings()
        self.api_key = api_key
        chain = list(models) if models is not None else get_image_models()
        self.models: List[str] = chain[:MAX_IMAGE_MODELS]
        self.max_retries = max(0, settings.image_max_retries if max_retries is None else max_retries)
        self.backoff_ms = settings.retry_backoff_ms if backoff_ms is None else backoff_ms
        self.timeout = settings.image_timeout_seconds if timeout is None else timeout
        self._client = client

    @classmethod
    def from_settings(cls) -> Optional["GeminiImageEditor"]:
        """Editor configured from the environment, or None without GEMINI_API_KEY."""
        settings = get_settings()
        if not settings.has_gemini():
            logger.warning("GEMINI_API_KEY not set - image editing disabled")
            return None
        return cls(api_key=settings.gemini_api_key)

    @property
    def total_attempts(self) -> int:
        return self.max_retries + 1

    def build_request_body(self, photo: PhotoPayload, instruction: str) -> Dict[str, Any]:
        return {
            "contents": [{
                "role": "user",
                "parts": [
                    {"inlineData": {"mimeType": photo.mime_type, "data": photo.data}},
                    {"text": instruction},
                ],
            }],
            "generationConfig": {
                "responseModalities": ["IMAGE", "TEXT"],
                "imageConfig": {"imageSize": DEFAULT_IMAGE_SIZE},
            },
        }

    async def edit_photo(
        self,
        photo: str,
        scenario: ScenarioPrompt,
        gender: str,
        kind: str = OUTFIT
    ) -> Optional[str]:
        """
        Edit the photo into the scenario.

        Args:
            photo: data:image/<type>;base64,<payload>
            scenario: ScenarioPrompt (id used for logging)
            gender: male/female (other values use male wording)
            kind: "outfit" or "hairstyle"

        Returns:
            data URI of the edited photo, or None on failure
        """
        payload = parse_data_uri(photo)
        if payload is None:
            logger.error(f"[gemini] Malformed photo data URI for {scenario.id} - not retrying")
            return None

        if kind not in EDIT_KINDS:
            logger.error(f"[gemini] Unknown edit kind {kind!r} for {scenario.id} - not retrying")
            return None

        if not self.models:
            logger.error(f"[gemini] No image models configured for {scenario.id}")
            return None

        body = self.build_request_body(payload, build_edit_prompt(kind, scenario.prompt, gender))

        if self._client is not None:
            return await self._run(self._client, scenario.id, body)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._run(client, scenario.id, body)

    async def _run(self, client: httpx.AsyncClient, scenario_id: str, body: Dict[str, Any]) -> Optional[str]:
        state = GenerationAttempt()
        started = time.monotonic()

        while True:
            data, model = await self._try_models(client, scenario_id, body, state)

            if data is not None:
                image = extract_inline_image(data)
                if image is not None:
                    latency_ms = int((time.monotonic() - started) * 1000)
                    logger.info(
                        f"[gemini] ✓ Image for {scenario_id} from {model} "
                        f"(attempt {state.retry_count + 1}/{self.total_attempts}, {latency_ms}ms)"
                    )
                    log_generation(scenario_id, model, state.retry_count + 1, latency_ms, "success")
                    increment_generation(model, success=True, attempts=state.retry_count + 1)
                    return image.to_data_uri()

                if data:
                    state.last_error = f"{model} returned no image"
                logger.warning(f"[gemini] No image returned for {scenario_id} by {model}")

            if state.retry_count >= self.max_retries:
                break

            state.retry_count += 1
            delay = state.retry_count * self.backoff_ms
            logger.info(
                f"[gemini] Retrying {scenario_id} in {delay}ms "
                f"(attempt {state.retry_count + 1}/{self.total_attempts})"
            )
            await sleep_ms(delay)

        latency_ms = int((time.monotonic() - started) * 1000)
        logger.error(f"[gemini] Giving up on {scenario_id} after {self.total_attempts} attempts: {state.last_error}")
        log_generation(scenario_id, None, state.retry_count + 1, latency_ms, "fail", state.last_error)
        increment_generation(None, success=False, attempts=state.retry_count + 1)
        return None

    async def _try_models(
        self,
        client: httpx.AsyncClient,
        scenario_id: str,
        body: Dict[str, Any],
        state: GenerationAttempt
    ) -> Tuple[Optional[Any], Optional[str]]:
        """
        One outer attempt: each model in order until one answers 2xx.

        Returns:
            (decoded JSON, model) on a 2xx answer, (None, None) when every model failed
        """
        state.last_error = None
        for index, model in enumerate(self.models):
            state.model_index = index
            try:
                response = await client.post(
                    f"{GEMINI_API_BASE}/{model}:generateContent",
                    params={"key": self.api_key},
                    json=body,
                )
            except httpx.HTTPError as e:
                state.last_error = f"{model} exception: {e}"
                logger.error(f"[gemini] {model} error for {scenario_id}: {e}")
                continue

            if response.is_success:
                logger.info(f"[gemini] {model} succeeded for {scenario_id}")
                try:
                    return response.json(), model
                except ValueError as e:
                    state.last_error = f"{model} returned invalid JSON: {e}"
                    return {}, model

            state.last_error = f"{model} failed ({response.status_code}): {response.text[:500]}"
            logger.warning(f"[gemini] {model} failed ({response.status_code}) for {scenario_id}")

        logger.error(f"[gemini] All models failed for {scenario_id}: {state.last_error}")
        return None, None


async def edit_photo_with_gemini(
    photo: str,
    scenario: ScenarioPrompt,
    gender: str,
    api_key: Optional[str] = None,
    kind: str = OUTFIT
) -> Optional[str]:
    """Convenience wrapper using environment settings."""
    api_key = api_key or get_settings().gemini_api_key
    if not api_key:
        logger.error("GEMINI_API_KEY not set - cannot edit photo")
        return None
    editor = GeminiImageEditor(api_key=api_key)
    return await editor.edit_photo(photo, scenario, gender, kind=kind)
