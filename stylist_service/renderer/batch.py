"""
Batch Coordinator (v1.1.0)
Generates several scenario images for one photo, one at a time.

Requests are staggered to respect upstream rate limits. A failed scenario
is logged and skipped; only an unusable source photo aborts the batch.
"""
import asyncio
import logging
from dataclasses import dataclass, asdict
from typing import Awaitable, Callable, Dict, List, Mapping, Optional, Sequence

from stylist_service.config import get_settings
from stylist_service.core.validation import (
    PhotoUnavailableError,
    ValidationError,
    validate_photo_data_uri,
)
from stylist_service.renderer.edit_prompts import EDIT_KINDS, OUTFIT
from stylist_service.renderer.gemini_image import GeminiImageEditor, sleep_ms
from stylist_service.scenarios.daily import get_scenario_label
from stylist_service.scenarios.prompt_builder import ScenarioPrompt

logger = logging.getLogger(__name__)

MAX_BATCH_SCENARIOS = 9

# (scenario_id, data_uri) -> public URL, or None when the upload failed
Publisher = Callable[[str, str], Awaitable[Optional[str]]]


@dataclass(frozen=True)
class OutfitImage:
    id: str
    label: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


async def generate_outfit_images(
    photo: str,
    scenarios: Sequence[ScenarioPrompt],
    gender: str,
    editor: GeminiImageEditor,
    language: str = "en",
    labels: Optional[Mapping[str, Mapping[str, str]]] = None,
    stagger_ms: Optional[int] = None,
    deadline_seconds: Optional[float] = None,
    publish: Optional[Publisher] = None,
    kind: str = OUTFIT
) -> List[OutfitImage]:
    """
    Generate one image per scenario, sequentially.

    Args:
        photo: Source photo data URI
        scenarios: Scenarios in display order (at most MAX_BATCH_SCENARIOS)
        gender: male/female
        editor: Image editor to call per scenario
        language: Label language (ko, en, ja, zh, es)
        labels: Label table (defaults to the daily scenario labels)
        stagger_ms: Delay before every request after the first
        deadline_seconds: Overall time limit; remaining scenarios are skipped once exceeded
        publish: Optional uploader turning the data URI into a public URL
        kind: "outfit" or "hairstyle"

    Returns:
        Successful images in input order (never longer than `scenarios`)

    Raises:
        PhotoUnavailableError: The source photo is unusable
        ValidationError: Too many scenarios or an unknown edit kind
    """
    try:
        validate_photo_data_uri(photo)
    except ValidationError as e:
        raise PhotoUnavailableError(f"Source photo unusable: {e.message}") from e

    if len(scenarios) > MAX_BATCH_SCENARIOS:
        raise ValidationError(f"Too many scenarios: {len(scenarios)} (max {MAX_BATCH_SCENARIOS})")

    if kind not in EDIT_KINDS:
        raise ValidationError(f"Unknown edit kind: {kind!r}")

    settings = get_settings()
    if stagger_ms is None:
        stagger_ms = settings.batch_stagger_ms

    loop = asyncio.get_running_loop()
    deadline = loop.time() + deadline_seconds if deadline_seconds is not None else None

    results: List[OutfitImage] = []
    seen = set()
    issued = 0

    for scenario in scenarios:
        if scenario.id in seen:
            logger.warning(f"[batch] Duplicate scenario id {scenario.id} - skipped")
            continue
        seen.add(scenario.id)

        if issued > 0 and stagger_ms > 0:
            await sleep_ms(stagger_ms)
        issued += 1

        remaining = None if deadline is None else deadline - loop.time()
        if remaining is not None and remaining <= 0:
            logger.warning(f"[batch] Deadline reached before {scenario.id} - returning partial results")
            break

        logger.info(f"[batch] Generating image {scenario.id}")
        try:
            if remaining is None:
                data_uri = await editor.edit_photo(photo, scenario, gender, kind=kind)
            else:
                data_uri = await asyncio.wait_for(
                    editor.edit_photo(photo, scenario, gender, kind=kind),
                    timeout=remaining,
                )
        except asyncio.TimeoutError:
            logger.warning(f"[batch] Deadline reached during {scenario.id} - returning partial results")
            break
        except Exception as e:
            logger.error(f"[batch] Image gen error for {scenario.id}: {e}", exc_info=True)
            continue

        if not data_uri:
            logger.warning(f"[batch] Image generation returned None for {scenario.id}")
            continue

        url = data_uri
        if publish is not None:
            try:
                url = await publish(scenario.id, data_uri)
            except Exception as e:
                logger.error(f"[batch] Publishing {scenario.id} failed: {e}", exc_info=True)
                continue
            if not url:
                logger.warning(f"[batch] Publisher returned no URL for {scenario.id}")
                continue

        label = get_scenario_label(scenario.id, language, labels) or scenario.id
        results.append(OutfitImage(id=scenario.id, label=label, url=url))
        logger.info(f"[batch] ✓ Image {scenario.id} ready")

    logger.info(f"[batch] Generated {len(results)}/{len(scenarios)} images")
    return results
