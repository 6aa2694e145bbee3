"""
Tests for stylesheet injection.

Tests:
- StyleDocument insert/remove/render
- generate_theme_css output
- StyleInjector replace-on-apply and teardown
- ThemeProvider composition
"""

import pytest

from dealersite.theme.injector import (
    DEFAULT_SCOPE_MARKER,
    DEFAULT_STYLE_ID,
    StyleDocument,
    StyleElement,
    StyleInjector,
    ThemeProvider,
    generate_theme_css,
)
from dealersite.theme.palette import build_palette


@pytest.fixture
def document():
    return StyleDocument()


@pytest.fixture
def blue_palette():
    return build_palette("#2563eb", "#f1f5f9")


@pytest.fixture
def red_palette():
    return build_palette("#dc2626", "#fef2f2")


class TestStyleDocument:
    """Tests for the in-memory style tree."""

    def test_empty(self, document):
        assert len(document) == 0
        assert document.render() == ""

    def test_insert_and_get(self, document):
        document.insert(StyleElement("base", "body { margin: 0; }"))
        assert document.get("base").css == "body { margin: 0; }"
        assert document.get("missing") is None

    def test_remove_returns_count(self, document):
        document.insert(StyleElement("a", ""))
        document.insert(StyleElement("a", ""))
        assert document.remove("a") == 2
        assert document.remove("a") == 0

    def test_render(self, document):
        document.insert(StyleElement("base", "p { color: red; }"))
        assert document.render() == '<style id="base">p { color: red; }</style>'

    def test_render_cannot_close_style_early(self, document):
        document.insert(StyleElement("x", "</style><script>"))
        assert "</style><script>" not in document.render()


class TestGenerateThemeCss:
    """Tests for generate_theme_css function."""

    def test_scoped_custom_properties(self, blue_palette):
        css = generate_theme_css(blue_palette)
        assert "[data-theme-container],\n[data-theme-container] * {" in css
        assert "--primary: 221 83% 53% !important;" in css
        assert "--accent: 210 40% 96% !important;" in css
        assert "--primary-foreground: 210 40% 98% !important;" in css
        assert "--accent-foreground: 222.2 47.4% 11.2% !important;" in css

    def test_derived_tokens(self, blue_palette):
        css = generate_theme_css(blue_palette)
        assert f"--primary-glow: {blue_palette.primary_glow} !important;" in css
        assert f"--gradient-primary: {blue_palette.gradient} !important;" in css

    def test_utility_overrides(self, blue_palette):
        css = generate_theme_css(blue_palette)
        assert "[data-theme-container] .bg-primary" in css
        assert "background-color: hsl(221 83% 53%) !important;" in css
        assert "background-color: hsl(221 83% 53% / 0.9) !important;" in css
        assert "[data-theme-container] .text-primary" in css
        assert "[data-theme-container] .border-primary" in css
        assert "[data-theme-container] .bg-accent" in css

    def test_gradient_buttons(self, blue_palette):
        css = generate_theme_css(blue_palette)
        assert "[data-theme-container] .btn-hero" in css
        assert f"background-image: {blue_palette.gradient} !important;" in css
        assert f"box-shadow: {blue_palette.shadow_glow} !important;" in css

    def test_custom_marker(self, blue_palette):
        css = generate_theme_css(blue_palette, marker="data-dealer-preview")
        assert "[data-dealer-preview]" in css
        assert "[data-theme-container]" not in css


class TestStyleInjector:
    """Tests for StyleInjector."""

    def test_apply_inserts_one_element(self, document, blue_palette):
        injector = StyleInjector(document)
        injector.apply(blue_palette)
        assert len(document.find_all(DEFAULT_STYLE_ID)) == 1
        assert injector.is_applied

    def test_second_apply_replaces_first(self, document, blue_palette, red_palette):
        """Two applies leave exactly one element, with the second palette."""
        injector = StyleInjector(document)
        injector.apply(blue_palette)
        injector.apply(red_palette)

        elements = document.find_all(DEFAULT_STYLE_ID)
        assert len(elements) == 1
        assert elements[0].css == generate_theme_css(red_palette)
        assert "221 83% 53%" not in elements[0].css
        assert injector.palette is red_palette

    def test_two_injectors_same_id_share_slot(self, document, blue_palette, red_palette):
        StyleInjector(document).apply(blue_palette)
        StyleInjector(document).apply(red_palette)
        assert len(document.find_all(DEFAULT_STYLE_ID)) == 1

    def test_remove(self, document, blue_palette):
        injector = StyleInjector(document)
        injector.apply(blue_palette)
        assert injector.remove() is True
        assert document.get(DEFAULT_STYLE_ID) is None
        assert injector.palette is None

    def test_remove_without_element_is_noop(self, document):
        injector = StyleInjector(document)
        assert injector.remove() is False
        assert injector.remove() is False

    def test_context_manager_tears_down(self, document, blue_palette):
        with StyleInjector(document) as injector:
            injector.apply(blue_palette)
            assert injector.is_applied
        assert document.get(DEFAULT_STYLE_ID) is None

    def test_context_manager_tears_down_on_error(self, document, blue_palette):
        with pytest.raises(RuntimeError):
            with StyleInjector(document) as injector:
                injector.apply(blue_palette)
                raise RuntimeError("render failed")
        assert len(document) == 0

    def test_other_elements_untouched(self, document, blue_palette):
        document.insert(StyleElement("base", "body {}"))
        with StyleInjector(document) as injector:
            injector.apply(blue_palette)
            assert len(document) == 2
        assert document.get("base") is not None

    def test_custom_style_id(self, document, blue_palette):
        injector = StyleInjector(document, style_id="preview-theme")
        injector.apply(blue_palette)
        assert document.get("preview-theme") is not None
        assert document.get(DEFAULT_STYLE_ID) is None


class TestThemeProvider:
    """Tests for ThemeProvider."""

    def test_applies_on_init(self, document):
        ThemeProvider(document, "#2563eb", "#f1f5f9")
        assert "--primary: 221 83% 53% !important;" in document.get(DEFAULT_STYLE_ID).css

    def test_update_replaces(self, document):
        theme = ThemeProvider(document, "#2563eb", "#f1f5f9")
        palette = theme.update("#dc2626", "#fef2f2")
        assert palette.primary_hsl == "0 72% 51%"
        assert len(document.find_all(DEFAULT_STYLE_ID)) == 1
        assert "0 72% 51%" in document.get(DEFAULT_STYLE_ID).css
        assert theme.palette is palette

    def test_wrap(self, document):
        theme = ThemeProvider(document, "#2563eb", "#f1f5f9")
        html = theme.wrap("<p>hi</p>")
        assert html == f'<div {DEFAULT_SCOPE_MARKER} class="w-full h-full"><p>hi</p></div>'

    def test_close(self, document):
        with ThemeProvider(document, "#2563eb", "#f1f5f9"):
            assert len(document) == 1
        assert len(document) == 0
