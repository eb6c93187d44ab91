"""
Tests for the image-edit instructions.
"""
import pytest

from stylist_service.renderer.edit_prompts import (
    BACKGROUND_INVARIANCE_CLAUSE,
    FACE_INVARIANCE_CLAUSE,
    HAIRSTYLE,
    OUTFIT,
    build_edit_prompt,
)


class TestEditPrompts:
    """Invariance clauses must survive every kind and gender."""

    @pytest.mark.parametrize("kind", [OUTFIT, HAIRSTYLE])
    @pytest.mark.parametrize("gender", ["male", "female", "other", None])
    def test_invariance_clauses_present(self, kind, gender):
        instruction = build_edit_prompt(kind, "navy wool coat, grey trousers", gender)
        assert FACE_INVARIANCE_CLAUSE in instruction
        assert BACKGROUND_INVARIANCE_CLAUSE in instruction

    def test_outfit_prompt_embeds_scenario(self):
        instruction = build_edit_prompt(OUTFIT, "camel trench coat over cream knit", "female")
        assert "ONLY change the OUTFIT of the MAIN PERSON to: camel trench coat over cream knit" in instruction
        assert "This is a woman" in instruction

    def test_outfit_prompt_male_wording_for_unknown_gender(self):
        assert "This is a man" in build_edit_prompt(OUTFIT, "linen shirt", "other")

    def test_hairstyle_prompt_embeds_style(self):
        instruction = build_edit_prompt(HAIRSTYLE, "Layered Bob", "female")
        assert "ONLY change the HAIRSTYLE to: Layered Bob" in instruction
        assert "OUTFIT" not in instruction.split("\n")[0]

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            build_edit_prompt("makeup", "red lips", "female")
