"""
Dealer site theming: hex -> HSL conversion, derived palettes and scoped
stylesheet injection.

Usage:
    from dealersite.theme import StyleDocument, ThemeProvider

    document = StyleDocument()
    with ThemeProvider(document, "#2563eb", "#f1f5f9") as theme:
        page = document.render() + theme.wrap("<h1 class='text-primary'>Hi</h1>")
"""

from .colors import (
    FALLBACK_HSL,
    HslTriple,
    hex_to_hsl,
    hex_to_rgb,
    rgb_to_hsl,
    parse_hsl,
    is_valid_hex,
)
from .palette import (
    DerivedPalette,
    PresetTheme,
    PRESET_THEMES,
    build_palette,
    glow_variant,
    get_preset,
    list_presets,
)
from .injector import (
    DEFAULT_STYLE_ID,
    DEFAULT_SCOPE_MARKER,
    StyleElement,
    StyleDocument,
    StyleInjector,
    ThemeProvider,
    generate_theme_css,
)

__all__ = [
    # Colors
    "FALLBACK_HSL",
    "HslTriple",
    "hex_to_hsl",
    "hex_to_rgb",
    "rgb_to_hsl",
    "parse_hsl",
    "is_valid_hex",
    # Palette
    "DerivedPalette",
    "PresetTheme",
    "PRESET_THEMES",
    "build_palette",
    "glow_variant",
    "get_preset",
    "list_presets",
    # Injection
    "DEFAULT_STYLE_ID",
    "DEFAULT_SCOPE_MARKER",
    "StyleElement",
    "StyleDocument",
    "StyleInjector",
    "ThemeProvider",
    "generate_theme_css",
]
