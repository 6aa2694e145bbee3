"""
Derived Palette Builder - full token set from a primary/accent pair.

A dealer picks two colors; everything else the site needs (a lighter glow
variant, the hero gradient, shadows) is derived from them.

Usage:
    from dealersite.theme.palette import build_palette, get_preset

    palette = build_palette("#2563eb", "#f1f5f9")
    palette.primary_glow   # "221 83% 73%"
    palette.gradient       # "linear-gradient(135deg, hsl(221 83% 53%), hsl(221 83% 73%))"

    preset = get_preset("Luxury Purple")
    palette = build_palette(preset.primary, preset.accent)
"""

from dataclasses import dataclass
from functools import lru_cache

from ..exceptions import PresetNotFoundError
from .colors import HslTriple, hex_to_hsl, parse_hsl

GLOW_LIGHTNESS_STEP = 20
GLOW_LIGHTNESS_MAX = 90

GRADIENT_ANGLE = "135deg"
SHADOW_ELEGANT = "0 10px 30px -10px hsl({color} / 0.3)"
SHADOW_GLOW = "0 0 40px hsl({color} / 0.4)"


@dataclass(frozen=True)
class DerivedPalette:
    """Color, gradient and shadow tokens derived from a primary/accent pair."""
    primary_hsl: str
    accent_hsl: str
    primary_glow: str
    gradient: str
    shadow_elegant: str
    shadow_glow: str

    def to_css_vars(self) -> dict[str, str]:
        """Custom properties carried by the injected stylesheet."""
        return {
            "--primary": self.primary_hsl,
            "--accent": self.accent_hsl,
            "--primary-glow": self.primary_glow,
            "--gradient-primary": self.gradient,
            "--shadow-elegant": self.shadow_elegant,
            "--shadow-glow": self.shadow_glow,
        }

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {
            "primary_hsl": self.primary_hsl,
            "accent_hsl": self.accent_hsl,
            "primary_glow": self.primary_glow,
            "gradient": self.gradient,
            "shadow_elegant": self.shadow_elegant,
            "shadow_glow": self.shadow_glow,
        }


def glow_variant(hsl: str) -> str:
    """
    Lighten an ``"H S% L%"`` string for the glow token.

    Lightness goes up by 20 points and is capped at 90; hue and saturation
    are kept.
    """
    base = parse_hsl(hsl)
    glow = HslTriple(
        hue=base.hue,
        saturation=base.saturation,
        lightness=min(base.lightness + GLOW_LIGHTNESS_STEP, GLOW_LIGHTNESS_MAX),
    )
    return str(glow)


def build_palette(primary: str, accent: str) -> DerivedPalette:
    """
    Build the derived palette for a primary/accent pair.

    Results are memoized on the pair, so re-rendering a page with unchanged
    colors returns the same palette object. Non-string tokens are treated as
    malformed and get the fallback color.

    Args:
        primary: Primary hex color
        accent: Accent hex color

    Returns:
        DerivedPalette
    """
    if not isinstance(primary, str):
        primary = ""
    if not isinstance(accent, str):
        accent = ""
    return _build_palette(primary, accent)


@lru_cache(maxsize=256)
def _build_palette(primary: str, accent: str) -> DerivedPalette:
    primary_hsl = hex_to_hsl(primary)
    accent_hsl = hex_to_hsl(accent)
    primary_glow = glow_variant(primary_hsl)

    return DerivedPalette(
        primary_hsl=primary_hsl,
        accent_hsl=accent_hsl,
        primary_glow=primary_glow,
        gradient=f"linear-gradient({GRADIENT_ANGLE}, hsl({primary_hsl}), hsl({primary_glow}))",
        shadow_elegant=SHADOW_ELEGANT.format(color=primary_hsl),
        shadow_glow=SHADOW_GLOW.format(color=primary_glow),
    )


# =============================================================================
# Presets
# =============================================================================


@dataclass(frozen=True)
class PresetTheme:
    """A named primary/accent pair offered in the theme picker."""
    name: str
    primary: str
    accent: str
    description: str


PRESET_THEMES: tuple[PresetTheme, ...] = (
    PresetTheme("Professional Blue", "#2563eb", "#f1f5f9", "Trust and reliability"),
    PresetTheme("Luxury Purple", "#7c3aed", "#f8fafc", "Premium and elegant"),
    PresetTheme("Energy Orange", "#ea580c", "#fef3c7", "Bold and dynamic"),
    PresetTheme("Nature Green", "#16a34a", "#f0fdf4", "Fresh and eco-friendly"),
    PresetTheme("Classic Red", "#dc2626", "#fef2f2", "Bold and confident"),
    PresetTheme("Modern Teal", "#0d9488", "#f0fdfa", "Contemporary and clean"),
)


def list_presets() -> list[str]:
    """List preset names in picker order."""
    return [preset.name for preset in PRESET_THEMES]


def get_preset(name: str) -> PresetTheme:
    """
    Look up a preset by name (case-insensitive).

    Raises:
        PresetNotFoundError: If no preset has that name
    """
    for preset in PRESET_THEMES:
        if preset.name.lower() == name.lower():
            return preset
    raise PresetNotFoundError(name, available=list_presets())
