"""
Tests for sequential batch generation.
"""
import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from stylist_service.core.validation import PhotoUnavailableError, ValidationError
from stylist_service.renderer.batch import MAX_BATCH_SCENARIOS, OutfitImage, generate_outfit_images
from stylist_service.scenarios.prompt_builder import ScenarioPrompt
from stylist_service.scenarios.styles import build_custom_scenarios, labels_for


class FakeEditor:
    """Stands in for GeminiImageEditor; fails the scenario ids it is told to."""

    def __init__(self, fail_ids=(), raise_ids=(), delay=0.0):
        self.fail_ids = set(fail_ids)
        self.raise_ids = set(raise_ids)
        self.delay = delay
        self.calls = []

    async def edit_photo(self, photo, scenario, gender, kind="outfit"):
        self.calls.append((scenario.id, gender, kind))
        if self.delay:
            await asyncio.sleep(self.delay)
        if scenario.id in self.raise_ids:
            raise RuntimeError("provider exploded")
        if scenario.id in self.fail_ids:
            return None
        return f"data:image/png;base64,{scenario.id}"


def scenarios(count):
    return [ScenarioPrompt(f"s{i}", f"look number {i}") for i in range(1, count + 1)]


@pytest.fixture
def no_stagger():
    with patch("stylist_service.renderer.batch.sleep_ms", new=AsyncMock()) as mocked:
        yield mocked


class TestGenerateOutfitImages:
    """Tests for generate_outfit_images."""

    def test_partial_failure_keeps_order(self, photo_data_uri, no_stagger):
        """Five scenarios with the third failing yield four images in order."""
        editor = FakeEditor(fail_ids={"s3"})

        images = asyncio.run(generate_outfit_images(photo_data_uri, scenarios(5), "female", editor))

        assert [image.id for image in images] == ["s1", "s2", "s4", "s5"]
        assert [call[0] for call in editor.calls] == ["s1", "s2", "s3", "s4", "s5"]

    def test_exception_in_one_scenario_is_skipped(self, photo_data_uri, no_stagger):
        editor = FakeEditor(raise_ids={"s2"})

        images = asyncio.run(generate_outfit_images(photo_data_uri, scenarios(3), "male", editor))

        assert [image.id for image in images] == ["s1", "s3"]

    def test_stagger_between_requests(self, photo_data_uri, no_stagger):
        editor = FakeEditor()

        asyncio.run(generate_outfit_images(photo_data_uri, scenarios(4), "male", editor, stagger_ms=1000))

        assert no_stagger.await_count == 3
        for awaited in no_stagger.await_args_list:
            assert awaited.args == (1000,)

    def test_default_stagger_from_settings(self, photo_data_uri, no_stagger):
        asyncio.run(generate_outfit_images(photo_data_uri, scenarios(2), "male", FakeEditor()))

        no_stagger.assert_awaited_once_with(1000)

    def test_no_stagger_when_zero(self, photo_data_uri, no_stagger):
        asyncio.run(generate_outfit_images(photo_data_uri, scenarios(3), "male", FakeEditor(), stagger_ms=0))

        no_stagger.assert_not_called()

    def test_daily_labels_localized(self, photo_data_uri, no_stagger):
        daily = [ScenarioPrompt("dressy", "a"), ScenarioPrompt("casual", "b")]

        images = asyncio.run(generate_outfit_images(photo_data_uri, daily, "female", FakeEditor(), language="ko"))

        assert images[0] == OutfitImage(id="dressy", label="격식 스타일", url="data:image/png;base64,dressy")
        assert images[1].label == "캐주얼"

    def test_custom_labels(self, photo_data_uri, no_stagger):
        custom = build_custom_scenarios(["Old Money", "Street Style"])

        images = asyncio.run(generate_outfit_images(
            photo_data_uri, custom, "male", FakeEditor(), language="ja", labels=labels_for(custom)
        ))

        assert [image.label for image in images] == ["Old Money", "Street Style"]

    def test_unknown_label_uses_scenario_id(self, photo_data_uri, no_stagger):
        images = asyncio.run(generate_outfit_images(photo_data_uri, scenarios(1), "male", FakeEditor()))

        assert images[0].label == "s1"

    def test_duplicate_ids_generated_once(self, photo_data_uri, no_stagger):
        editor = FakeEditor()
        duplicated = [ScenarioPrompt("a", "one"), ScenarioPrompt("a", "two"), ScenarioPrompt("b", "three")]

        images = asyncio.run(generate_outfit_images(photo_data_uri, duplicated, "male", editor))

        assert [image.id for image in images] == ["a", "b"]
        assert len(editor.calls) == 2

    def test_kind_is_forwarded(self, photo_data_uri, no_stagger):
        editor = FakeEditor()

        asyncio.run(generate_outfit_images(photo_data_uri, scenarios(1), "female", editor, kind="hairstyle"))

        assert editor.calls == [("s1", "female", "hairstyle")]

    def test_deadline_returns_partial_results(self, photo_data_uri, no_stagger):
        editor = FakeEditor(delay=0.2)

        images = asyncio.run(generate_outfit_images(
            photo_data_uri, scenarios(3), "male", editor, deadline_seconds=0.05
        ))

        assert images == []
        assert len(editor.calls) == 1

    def test_zero_deadline_generates_nothing(self, photo_data_uri, no_stagger):
        editor = FakeEditor()

        images = asyncio.run(generate_outfit_images(
            photo_data_uri, scenarios(3), "male", editor, deadline_seconds=0
        ))

        assert images == []
        assert editor.calls == []

    def test_publisher_replaces_url(self, photo_data_uri, no_stagger):
        async def publish(scenario_id, data_uri):
            if scenario_id == "s2":
                return None
            return f"https://images.example.com/{scenario_id}.png"

        images = asyncio.run(generate_outfit_images(
            photo_data_uri, scenarios(3), "male", FakeEditor(), publish=publish
        ))

        assert [image.url for image in images] == [
            "https://images.example.com/s1.png",
            "https://images.example.com/s3.png",
        ]

    def test_unusable_photo_aborts(self, no_stagger):
        editor = FakeEditor()

        with pytest.raises(PhotoUnavailableError):
            asyncio.run(generate_outfit_images("data:image/jpeg;base64,short", scenarios(2), "male", editor))

        assert editor.calls == []

    def test_too_many_scenarios(self, photo_data_uri, no_stagger):
        with pytest.raises(ValidationError):
            asyncio.run(generate_outfit_images(
                photo_data_uri, scenarios(MAX_BATCH_SCENARIOS + 1), "male", FakeEditor()
            ))

    def test_unknown_kind(self, photo_data_uri, no_stagger):
        editor = FakeEditor()

        with pytest.raises(ValidationError):
            asyncio.run(generate_outfit_images(photo_data_uri, scenarios(1), "male", editor, kind="makeup"))

        assert editor.calls == []

    def test_to_dict(self):
        image = OutfitImage(id="dressy", label="Dressy", url="https://x/y.png")
        assert image.to_dict() == {"id": "dressy", "label": "Dressy", "url": "https://x/y.png"}
