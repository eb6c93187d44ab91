"""
Palette & Archetype Catalogs (v1.0.0)
Curated colour palettes and styling archetypes, per gender.

Catalogs are immutable module constants; selection is always
`index mod len(catalog)`.
"""
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

FEMALE = "female"
MALE = "male"

DRESSY = "dressy"
CASUAL = "casual"


@dataclass(frozen=True)
class ColorPalette:
    tone: str
    c1: str
    c2: str
    c3: str
    c4: str
    accent: str


@dataclass(frozen=True)
class StylingArchetype:
    name: str
    guide: str


def normalize_gender(value: Optional[str]) -> str:
    """
    Map any gender input onto a catalog key.

    Only "female" selects the female catalog; every other value, including
    missing or "other", uses the male catalog.
    """
    normalized = (value or "").strip().lower()
    if normalized == FEMALE:
        return FEMALE
    if normalized != MALE:
        logger.debug(f"Gender {value!r} has no catalog - using '{MALE}'")
    return MALE


_MALE_PALETTES: Tuple[ColorPalette, ...] = (
    ColorPalette("classic", "navy", "charcoal", "white", "cream", "burgundy"),
    ColorPalette("warm", "olive", "rust", "camel", "warm brown", "burnt orange"),
    ColorPalette("cool", "slate blue", "sage green", "stone grey", "off-white", "teal"),
    ColorPalette("earth", "terracotta", "forest green", "tan", "chocolate brown", "mustard"),
    ColorPalette("modern", "black", "ivory", "silver grey", "deep burgundy", "emerald"),
    ColorPalette("coastal", "sand beige", "ocean blue", "white linen", "light khaki", "coral"),
    ColorPalette("urban", "graphite", "steel blue", "bone white", "deep indigo", "amber"),
    ColorPalette("tonal neutral", "oatmeal", "taupe", "ecru", "mushroom grey", "cognac"),
    ColorPalette("heritage", "bottle green", "oxblood", "camel", "navy", "mustard"),
    ColorPalette("nordic", "ice grey", "charcoal", "snow white", "pale denim", "cobalt"),
    ColorPalette("mediterranean", "washed blue", "sand", "white", "olive", "terracotta"),
    ColorPalette("autumn", "cinnamon", "moss green", "cream", "dark brown", "burnt sienna"),
    ColorPalette("monochrome", "black", "graphite", "mid grey", "white", "silver"),
    ColorPalette("ivy league", "navy", "bone", "light blue", "khaki", "crimson"),
    ColorPalette("safari", "khaki", "olive drab", "stone", "tobacco brown", "brass"),
    ColorPalette("riviera", "powder blue", "white", "navy", "sand", "coral red"),
    ColorPalette("tobacco", "tobacco brown", "cream", "chocolate", "ecru", "gold"),
    ColorPalette("slate", "slate grey", "ink blue", "pearl grey", "charcoal", "ice blue"),
    ColorPalette("forest", "hunter green", "bark brown", "oat", "moss", "rust"),
    ColorPalette("midnight", "midnight navy", "black", "steel grey", "white", "burgundy"),
    ColorPalette("desert", "dune beige", "clay", "off-white", "sage", "turquoise"),
)

_FEMALE_PALETTES: Tuple[ColorPalette, ...] = (
    ColorPalette("soft", "cream", "dusty rose", "beige", "champagne", "gold"),
    ColorPalette("warm", "terracotta", "amber", "warm ivory", "cinnamon", "copper"),
    ColorPalette("cool", "lavender", "ice blue", "soft grey", "pearl white", "silver"),
    ColorPalette("rich", "emerald", "burgundy", "deep plum", "midnight blue", "bronze"),
    ColorPalette("fresh", "sage green", "blush pink", "sky blue", "lemon cream", "rose gold"),
    ColorPalette("romantic", "mauve", "ivory", "soft peach", "blush", "pearl"),
    ColorPalette("natural", "oatmeal", "olive green", "sand", "warm taupe", "amber"),
    ColorPalette("parisian", "black", "cream", "camel", "navy", "red"),
    ColorPalette("jewel", "sapphire", "ruby", "amethyst", "ivory", "gold"),
    ColorPalette("powder", "powder blue", "pale pink", "vanilla", "dove grey", "silver"),
    ColorPalette("terracotta sun", "burnt orange", "cream", "rust", "sand", "gold"),
    ColorPalette("gallery", "charcoal", "white", "stone", "black", "silver"),
    ColorPalette("garden", "mint", "lilac", "buttercream", "soft white", "rose gold"),
    ColorPalette("cocoa", "mocha", "caramel", "cream", "espresso", "gold"),
    ColorPalette("berry", "raspberry", "plum", "blush", "soft grey", "rose gold"),
    ColorPalette("seaside", "navy", "white", "sky blue", "sand", "coral"),
    ColorPalette("winter white", "ivory", "camel", "oatmeal", "winter white", "gold"),
    ColorPalette("sage", "sage", "cream", "eucalyptus", "stone", "pearl"),
    ColorPalette("noir", "black", "charcoal", "oxblood", "ivory", "silver"),
    ColorPalette("sunset", "apricot", "dusty coral", "peach", "cream", "copper"),
    ColorPalette("heather", "heather grey", "lavender", "mauve", "soft white", "silver"),
)

# Dressy family archetypes (6 per gender)
_MALE_DRESSY_ARCHETYPES: Tuple[StylingArchetype, ...] = (
    StylingArchetype("Quiet Luxury", "tonal layers, soft tailoring, no visible logos, premium fabrics with natural drape"),
    StylingArchetype("Modern Gentleman", "sharp but relaxed tailoring, clean lines, polished leather accessories"),
    StylingArchetype("Italian Sprezzatura", "deliberately easy elegance, unstructured jacket, rolled cuffs, rich textures"),
    StylingArchetype("Minimal Architect", "clean geometric silhouettes, restrained palette, precise proportions"),
    StylingArchetype("Heritage Classic", "timeless tweeds and knits, traditional patterns, well-worn leather"),
    StylingArchetype("Smart Creative", "refined basics with one confident texture or colour statement"),
)

_FEMALE_DRESSY_ARCHETYPES: Tuple[StylingArchetype, ...] = (
    StylingArchetype("Quiet Luxury", "tonal layers, fluid tailoring, no visible logos, fabrics that drape softly"),
    StylingArchetype("Parisian Chic", "effortless balance of tailored and soft pieces, understated accessories"),
    StylingArchetype("Modern Minimalist", "clean lines, sculptural silhouettes, restrained colour blocking"),
    StylingArchetype("Romantic Elegance", "soft volumes, delicate details, flowing fabrics and gentle shine"),
    StylingArchetype("Power Tailoring", "strong shoulders, long lines, structured pieces softened by fine knits"),
    StylingArchetype("Gallery Curator", "artful proportions, one sculptural statement piece, refined texture play"),
)

# Casual family archetypes (7 per gender)
_MALE_CASUAL_ARCHETYPES: Tuple[StylingArchetype, ...] = (
    StylingArchetype("Weekend Ease", "relaxed fits, soft cottons, effortless layering"),
    StylingArchetype("City Explorer", "practical layers, comfortable sneakers, clean utility details"),
    StylingArchetype("Coastal Casual", "washed textures, light layers, sun-faded colours"),
    StylingArchetype("Elevated Athleisure", "technical fabrics mixed with premium knits, clean lines"),
    StylingArchetype("Workwear Heritage", "sturdy twills, chore jacket shapes, honest materials"),
    StylingArchetype("Scandi Simple", "muted tones, clean silhouettes, functional minimalism"),
    StylingArchetype("Campus Prep", "oxford cloth, crew-neck knits, classic sneakers"),
)

_FEMALE_CASUAL_ARCHETYPES: Tuple[StylingArchetype, ...] = (
    StylingArchetype("Weekend Ease", "relaxed fits, soft cottons, effortless tucked layering"),
    StylingArchetype("City Explorer", "practical layers, comfortable sneakers, compact crossbody bag"),
    StylingArchetype("Coastal Casual", "breezy linens, light layers, sun-washed colours"),
    StylingArchetype("Elevated Athleisure", "sleek knit sets, clean sneakers, polished minimal accessories"),
    StylingArchetype("French Off-Duty", "striped knits, straight jeans, ballet flats, minimal jewelry"),
    StylingArchetype("Scandi Simple", "oversized knits, muted tones, clean functional shapes"),
    StylingArchetype("Soft Romantic", "delicate knits, gentle colours, feminine details kept casual"),
)

PALETTES = MappingProxyType({
    MALE: _MALE_PALETTES,
    FEMALE: _FEMALE_PALETTES,
})

DRESSY_ARCHETYPES = MappingProxyType({
    MALE: _MALE_DRESSY_ARCHETYPES,
    FEMALE: _FEMALE_DRESSY_ARCHETYPES,
})

CASUAL_ARCHETYPES = MappingProxyType({
    MALE: _MALE_CASUAL_ARCHETYPES,
    FEMALE: _FEMALE_CASUAL_ARCHETYPES,
})

_ARCHETYPES_BY_FAMILY = MappingProxyType({
    DRESSY: DRESSY_ARCHETYPES,
    CASUAL: CASUAL_ARCHETYPES,
})


def select_palette(gender: Optional[str], index: int) -> ColorPalette:
    palettes = PALETTES[normalize_gender(gender)]
    return palettes[index % len(palettes)]


def select_archetype(family: str, gender: Optional[str], index: int) -> StylingArchetype:
    """Pick an archetype from the dressy or casual catalog."""
    archetypes = _ARCHETYPES_BY_FAMILY[family][normalize_gender(gender)]
    return archetypes[index % len(archetypes)]
