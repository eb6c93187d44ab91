# Renderer module
from stylist_service.renderer.edit_prompts import (
    OUTFIT,
    HAIRSTYLE,
    FACE_INVARIANCE_CLAUSE,
    BACKGROUND_INVARIANCE_CLAUSE,
    build_edit_prompt,
    build_outfit_edit_prompt,
    build_hairstyle_edit_prompt,
)
from stylist_service.renderer.gemini_image import (
    GeminiImageEditor,
    GenerationAttempt,
    InlineImage,
    edit_photo_with_gemini,
    extract_inline_image,
)
from stylist_service.renderer.batch import (
    MAX_BATCH_SCENARIOS,
    OutfitImage,
    generate_outfit_images,
)
