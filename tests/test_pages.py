"""
Tests for the Gradio theme configuration page.

Handlers are tested directly; building the page only checks that the
component tree wires up.
"""

import pytest
import gradio as gr

from dealersite.config import SiteConfig
from dealersite.exceptions import PresetNotFoundError
from dealersite.pages import (
    ThemeConfigPage,
    ThemeConfigPageConfig,
    apply_preset,
    create_theme_config_panel,
    render_preview,
    reset_colors,
    save_colors,
)
from dealersite.theme import DEFAULT_STYLE_ID


class TestRenderPreview:
    """Tests for render_preview."""

    def test_contains_single_stylesheet(self):
        html = render_preview("#2563eb", "#f1f5f9")
        assert html.count(f'<style id="{DEFAULT_STYLE_ID}">') == 1
        assert "--primary: 221 83% 53% !important;" in html

    def test_content_inside_marker(self):
        html = render_preview("#2563eb", "#f1f5f9")
        assert "<div data-theme-container" in html
        assert 'class="btn-hero"' in html

    def test_escapes_text(self):
        html = render_preview("#2563eb", "#f1f5f9", brand_name="<b>Acme</b>")
        assert "&lt;b&gt;Acme&lt;/b&gt;" in html

    def test_custom_marker(self):
        html = render_preview("#2563eb", "#f1f5f9", marker="data-preview")
        assert "[data-preview]" in html
        assert "<div data-preview" in html


class TestHandlers:
    """Tests for preset/save/reset handlers."""

    def test_apply_preset(self):
        assert apply_preset("Energy Orange") == ("#ea580c", "#fef3c7")

    def test_apply_unknown_preset(self):
        with pytest.raises(PresetNotFoundError):
            apply_preset("Neon Pink")

    def test_save_colors(self, store, memory_storage):
        status = save_colors(store, "#16a34a", "#f0fdf4")
        assert "Saved" in status
        assert memory_storage.get(store.storage_key) is not None
        assert store.config.colors.primary == "#16a34a"

    def test_save_invalid_colors(self, store, memory_storage):
        status = save_colors(store, "green", "#f0fdf4")
        assert "invalid primary" in status
        assert memory_storage.get(store.storage_key) is None

    def test_reset_colors(self, store):
        save_colors(store, "#16a34a", "#f0fdf4")
        assert reset_colors(store) == ("#8B5CF6", "#F3F4F6")
        assert store.config == SiteConfig()


class TestThemeConfigPage:
    """Building the page."""

    def test_panel_components(self, store):
        with gr.Blocks():
            components = create_theme_config_panel(store)
        for key in ("preset", "primary", "accent", "save_btn", "reset_btn", "status", "preview"):
            assert key in components

    def test_panel_without_presets(self, store):
        with gr.Blocks():
            components = create_theme_config_panel(
                store, ThemeConfigPageConfig(show_presets=False)
            )
        assert "preset" not in components

    def test_build(self, store):
        page = ThemeConfigPage(store, title="Acme Theme")
        blocks = page.build()
        assert isinstance(blocks, gr.Blocks)
        assert page.components["primary"].value == "#8B5CF6"

    def test_render_static(self, store):
        with gr.Blocks():
            components = ThemeConfigPage.render(store)
        assert "preview" in components
