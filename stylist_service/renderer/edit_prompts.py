"""
Edit Instructions (v1.0.0)
Inpainting-style instructions wrapped around a scenario prompt.

The provider must EDIT the source photo, not generate a new one. Face,
background, framing and body silhouette must stay untouched; an image that
breaks them counts as a failed generation.
"""
from stylist_service.scenarios.catalogs import FEMALE, MALE, normalize_gender

OUTFIT = "outfit"
HAIRSTYLE = "hairstyle"
EDIT_KINDS = (OUTFIT, HAIRSTYLE)

FACE_INVARIANCE_CLAUSE = "Face position, size, and features MUST be PIXEL-PERFECT identical"
BACKGROUND_INVARIANCE_CLAUSE = "Background and OTHER PEOPLE - ZERO changes allowed"

FRAMING_RULES = f"""ABSOLUTE REQUIREMENTS - VIOLATION IS FAILURE:
1. NEVER CROP OR ZOOM - output must have IDENTICAL framing as input
2. NEVER change aspect ratio - if input is portrait, output is portrait
3. {FACE_INVARIANCE_CLAUSE}
4. Keep EXACTLY what is visible in the original - do not extend or add content
5. {BACKGROUND_INVARIANCE_CLAUSE}
6. Output resolution MUST match input resolution exactly"""

MAIN_SUBJECT_RULES = """FOCUS ON MAIN SUBJECT ONLY:
- Only edit the MAIN person in the center/foreground of the photo
- If there are OTHER PEOPLE in the background, LEAVE THEM COMPLETELY UNCHANGED
- Do NOT modify, remove, or add any other people"""

INPAINTING_RULES = """INPAINTING RULES - THIS IS AN INPAINTING TASK:
1. ONLY replace the clothing/fabric within the MAIN PERSON's body silhouette
2. DO NOT generate a new person or body - use the EXACT existing body outline
3. The new clothes must fit WITHIN the original body boundaries
4. Body parts (arms, legs, torso) and pose stay in EXACT same position
5. Hairstyle, hair color, skin tone base - ZERO changes allowed
6. Legs must be BEHIND/INSIDE pants or skirt, arms THROUGH sleeves"""

OUTFIT_DIRECTION = {
    FEMALE: (
        "STYLING DIRECTION (Max Mara, The Row aesthetic): naturally draped tailored silhouette with elegant "
        "proportions. Fabrics have visible weight and texture, draping naturally on the body."
    ),
    MALE: (
        "STYLING DIRECTION (Loro Piana, Brunello Cucinelli aesthetic): naturally draped tailored silhouette with "
        "relaxed elegance. Trousers drape comfortably with a straight or tapered leg; jackets sit naturally on "
        "the shoulders."
    ),
}

BEAUTY_RETOUCH = {
    FEMALE: """BEAUTY ENHANCEMENT for the face:
- Soft, natural skin smoothing (reduce blemishes subtly)
- Even skin tone with a warm, healthy glow and soft studio lighting
- Keep the face looking NATURAL - not overly edited""",
    MALE: """SUBTLE BEAUTY ENHANCEMENT for the face:
- Light natural skin smoothing (reduce blemishes subtly)
- Even skin tone slightly for a clean, fresh look
- Keep the face looking NATURAL and masculine - not overly edited""",
}

HAIRSTYLE_GUIDE = {
    FEMALE: "This is a WOMAN. Apply a feminine, elegant hairstyle that looks natural and attractive on her.",
    MALE: (
        "This is a MAN. The hairstyle should suit a man naturally. Perms, soft waves and textured styles are fine; "
        "avoid overly feminine hairstyles."
    ),
}


def gender_word(gender: str) -> str:
    return "woman" if normalize_gender(gender) == FEMALE else "man"


def build_outfit_edit_prompt(scenario_prompt: str, gender: str) -> str:
    """Instruction for replacing only the main subject's outfit."""
    catalog_gender = normalize_gender(gender)
    word = gender_word(catalog_gender)

    return f"""HIGH-END FASHION EDITORIAL - Style this photo as a professionally styled luxury fashion photograph.

EDIT this photo - ONLY change the OUTFIT of the MAIN PERSON to: {scenario_prompt}

CRITICAL: This is a {word}. The outfit MUST be appropriate for a {word} and flatter THIS person's proportions and complexion.
{OUTFIT_DIRECTION[catalog_gender]}

{BEAUTY_RETOUCH[catalog_gender]}

{MAIN_SUBJECT_RULES}

{INPAINTING_RULES}

{FRAMING_RULES}

This is a clothing REPLACEMENT task for the MAIN PERSON only.
Keep the person's HEAD and FACE at the EXACT same position.
DO NOT generate full body if the original only shows a partial body.

Generate the edited photo with IDENTICAL composition to the input."""


def build_hairstyle_edit_prompt(style_name: str, gender: str) -> str:
    """Instruction for replacing only the hair; face, body, skin and background stay."""
    catalog_gender = normalize_gender(gender)

    return f"""EDIT this photo - ONLY change the HAIRSTYLE to: {style_name}

{HAIRSTYLE_GUIDE[catalog_gender]}

CRITICAL REQUIREMENTS:
- The person's FACE must remain EXACTLY identical (same eyes, nose, mouth, face shape)
- Body, pose, expression and clothing must not change
- Skin tone must stay the same
- Only the HAIR is modified to "{style_name}" style

{FRAMING_RULES}

Also apply subtle beauty retouching: smooth clear skin, even skin tone, soft studio lighting.

Generate the edited photo with IDENTICAL composition to the input."""


def build_edit_prompt(kind: str, scenario_prompt: str, gender: str) -> str:
    """
    Dispatch on edit kind.

    Raises:
        ValueError: Unknown kind
    """
    if kind == OUTFIT:
        return build_outfit_edit_prompt(scenario_prompt, gender)
    if kind == HAIRSTYLE:
        return build_hairstyle_edit_prompt(scenario_prompt, gender)
    raise ValueError(f"Unknown edit kind: {kind!r}")
