"""
Theme Config Page - dealer theme picker with live preview.

Features:
- Preset themes (one click sets primary and accent)
- Custom primary/accent color pickers
- Live preview rendered with the scoped theme stylesheet
- Save/reset against the dealer's stored site configuration
"""

from dataclasses import dataclass
from html import escape
from typing import Any, Optional
import logging

import gradio as gr

from ..config import SiteConfigStore
from ..exceptions import PresetNotFoundError
from ..theme import (
    DEFAULT_SCOPE_MARKER,
    StyleDocument,
    ThemeProvider,
    get_preset,
    is_valid_hex,
    list_presets,
)

logger = logging.getLogger(__name__)

CUSTOM_PRESET = "Custom"


@dataclass
class ThemeConfigPageConfig:
    """Configuration for the theme config page."""
    title: str = "Website Theme"
    subtitle: str = "Pick a preset or choose your own brand colors"
    scope_marker: str = DEFAULT_SCOPE_MARKER
    show_presets: bool = True


def render_preview(
    primary: str,
    accent: str,
    brand_name: str = "Your Dealership",
    headline: str = "Find Your Perfect Vehicle",
    marker: str = DEFAULT_SCOPE_MARKER,
) -> str:
    """
    Render a themed preview of the dealer site hero.

    Returns:
        HTML containing the scoped stylesheet followed by the themed markup
    """
    document = StyleDocument()
    with ThemeProvider(document, primary, accent, marker=marker) as theme:
        body = (
            f'<header class="bg-primary" style="padding:1rem;color:white">'
            f"<strong>{escape(brand_name)}</strong></header>"
            f'<section class="bg-accent" style="padding:2rem">'
            f'<h2 class="text-primary">{escape(headline)}</h2>'
            f'<button class="btn-hero" style="padding:.5rem 1rem;border:0;color:white">'
            f"Browse Inventory</button>"
            f'<div class="border-primary" style="border:2px solid;margin-top:1rem;padding:.5rem">'
            f"Schedule a test drive</div></section>"
        )
        return document.render() + theme.wrap(body)


def apply_preset(name: str) -> tuple[str, str]:
    """Primary and accent of a named preset."""
    preset = get_preset(name)
    return preset.primary, preset.accent


def save_colors(store: SiteConfigStore, primary: str, accent: str) -> str:
    """
    Validate and persist a color pair.

    Returns:
        Status markdown
    """
    invalid = [name for name, value in (("primary", primary), ("accent", accent)) if not is_valid_hex(value)]
    if invalid:
        return f"**Not saved:** invalid {' and '.join(invalid)} color"

    store.update({"colors": {"primary": primary, "accent": accent}})
    if store.save():
        return f"**Saved** theme for `{store.slug}`"
    return "**Not saved:** storage unavailable, changes kept for this session"


def reset_colors(store: SiteConfigStore) -> tuple[str, str]:
    """Reset the dealer's configuration and return the default pair."""
    config = store.reset()
    return config.colors.primary, config.colors.accent


def create_theme_config_panel(
    store: SiteConfigStore,
    config: Optional[ThemeConfigPageConfig] = None,
) -> dict[str, Any]:
    """
    Create the theme picker inside the current Blocks context.

    Args:
        store: Store for the dealer being configured
        config: Page configuration

    Returns:
        Dict of component references
    """
    config = config or ThemeConfigPageConfig()
    site = store.config
    components = {}

    components["title"] = gr.Markdown(f"# {config.title}\n{config.subtitle}")

    with gr.Row():
        with gr.Column(scale=1):
            if config.show_presets:
                components["preset"] = gr.Dropdown(
                    choices=[CUSTOM_PRESET] + list_presets(),
                    value=CUSTOM_PRESET,
                    label="Preset",
                    elem_id="theme-preset",
                )
            components["primary"] = gr.ColorPicker(
                value=site.colors.primary,
                label="Primary color",
                elem_id="theme-primary",
            )
            components["accent"] = gr.ColorPicker(
                value=site.colors.accent,
                label="Accent color",
                elem_id="theme-accent",
            )
            with gr.Row():
                components["save_btn"] = gr.Button("Save Theme", variant="primary")
                components["reset_btn"] = gr.Button("Reset to Defaults", variant="stop")
            components["status"] = gr.Markdown("")

        with gr.Column(scale=2):
            components["preview"] = gr.HTML(
                render_preview(
                    site.colors.primary,
                    site.colors.accent,
                    site.brand.name,
                    site.hero.headline,
                    config.scope_marker,
                ),
                elem_id="theme-preview",
            )

    def handle_preset(name: str):
        if name == CUSTOM_PRESET:
            return gr.update(), gr.update()
        try:
            return apply_preset(name)
        except PresetNotFoundError as e:
            logger.warning(str(e))
            return gr.update(), gr.update()

    def handle_preview(primary: str, accent: str) -> str:
        return render_preview(
            primary,
            accent,
            store.config.brand.name,
            store.config.hero.headline,
            config.scope_marker,
        )

    def handle_reset():
        primary, accent = reset_colors(store)
        return primary, accent, "Theme reset to defaults"

    if config.show_presets:
        components["preset"].change(
            fn=handle_preset,
            inputs=[components["preset"]],
            outputs=[components["primary"], components["accent"]],
        )

    for picker in (components["primary"], components["accent"]):
        picker.change(
            fn=handle_preview,
            inputs=[components["primary"], components["accent"]],
            outputs=[components["preview"]],
        )

    components["save_btn"].click(
        fn=lambda primary, accent: save_colors(store, primary, accent),
        inputs=[components["primary"], components["accent"]],
        outputs=[components["status"]],
    )

    components["reset_btn"].click(
        fn=handle_reset,
        outputs=[components["primary"], components["accent"], components["status"]],
    )

    return components


class ThemeConfigPage:
    """
    Complete theme configuration page.

    Usage:
        store = SiteConfigStore(SQLiteStorage("db/site_config.db"), slug="acme-motors")
        page = ThemeConfigPage(store)
        page.launch()
    """

    def __init__(
        self,
        store: SiteConfigStore,
        title: str = "Website Theme",
        **config_kwargs,
    ):
        self.store = store
        self.config = ThemeConfigPageConfig(title=title, **config_kwargs)
        self.components: dict[str, Any] = {}
        self.blocks: Optional[gr.Blocks] = None

    def build(self) -> gr.Blocks:
        """Build the theme config page."""
        self.blocks = gr.Blocks(title=self.config.title, theme=gr.themes.Soft())

        with self.blocks:
            self.components = create_theme_config_panel(self.store, self.config)

        return self.blocks

    def launch(self, **kwargs) -> None:
        """Build and launch the theme config page."""
        if self.blocks is None:
            self.build()
        self.blocks.launch(**kwargs)

    @staticmethod
    def render(
        store: SiteConfigStore,
        config: Optional[ThemeConfigPageConfig] = None,
    ) -> dict[str, Any]:
        """
        Render the theme picker into an existing Blocks context.

        Use inside a `with gr.Blocks()`.
        """
        return create_theme_config_panel(store, config)
