"""
Style Injector - scoped CSS overrides for a dealer site.

The rendered page holds exactly one theme stylesheet, identified by a
fixed id. Every apply replaces the previous one; teardown removes it.

Usage:
    from dealersite.theme import StyleDocument, StyleInjector, build_palette

    document = StyleDocument()
    with StyleInjector(document) as injector:
        injector.apply(build_palette("#2563eb", "#f1f5f9"))
        head_html = document.render()
    # stylesheet removed on exit
"""

from dataclasses import dataclass
from html import escape
from typing import Optional
import logging

from .palette import DerivedPalette, build_palette

logger = logging.getLogger(__name__)

DEFAULT_STYLE_ID = "dealer-site-theme"
DEFAULT_SCOPE_MARKER = "data-theme-container"

PRIMARY_FOREGROUND = "210 40% 98%"
ACCENT_FOREGROUND = "222.2 47.4% 11.2%"


@dataclass
class StyleElement:
    """A single ``<style>`` element in a document."""
    element_id: str
    css: str

    def render(self) -> str:
        # Keep the stylesheet from closing its own element early
        body = self.css.replace("</", "<\\/")
        return f'<style id="{escape(self.element_id)}">{body}</style>'


class StyleDocument:
    """
    In-memory style tree of a rendered page.

    Elements keep insertion order; ``render()`` serializes them for the
    page head (or a Gradio ``gr.HTML`` component).
    """

    def __init__(self):
        self._elements: list[StyleElement] = []

    def insert(self, element: StyleElement) -> None:
        self._elements.append(element)

    def remove(self, element_id: str) -> int:
        """Remove every element with this id. Returns how many were removed."""
        before = len(self._elements)
        self._elements = [e for e in self._elements if e.element_id != element_id]
        return before - len(self._elements)

    def get(self, element_id: str) -> Optional[StyleElement]:
        for element in self._elements:
            if element.element_id == element_id:
                return element
        return None

    def find_all(self, element_id: str) -> list[StyleElement]:
        return [e for e in self._elements if e.element_id == element_id]

    def render(self) -> str:
        return "\n".join(element.render() for element in self._elements)

    def __len__(self) -> int:
        return len(self._elements)


def _scope(marker: str) -> str:
    return f"[{marker}]"


def generate_theme_css(palette: DerivedPalette, marker: str = DEFAULT_SCOPE_MARKER) -> str:
    """
    Serialize a palette into a ruleset scoped to the container marker.

    Custom properties are overridden on the container and all descendants;
    the utility classes get high-specificity ``!important`` rules so the
    dealer palette wins over any stylesheet loaded earlier.

    Args:
        palette: Derived palette to apply
        marker: Attribute name marking the themed container

    Returns:
        CSS text
    """
    scope = _scope(marker)
    p = palette.primary_hsl
    a = palette.accent_hsl

    variables = {
        **palette.to_css_vars(),
        "--primary-foreground": PRIMARY_FOREGROUND,
        "--accent-foreground": ACCENT_FOREGROUND,
    }
    var_lines = "\n".join(f"  {name}: {value} !important;" for name, value in variables.items())

    rules = [
        f"{scope},\n{scope} * {{\n{var_lines}\n}}",
        f"{scope} .bg-primary,\n{scope} .bg-primary * {{\n  background-color: hsl({p}) !important;\n}}",
        f"{scope} .bg-primary:hover,\n{scope} .bg-primary:hover * {{\n"
        f"  background-color: hsl({p} / 0.9) !important;\n}}",
        f"{scope} .text-primary,\n{scope} .text-primary * {{\n  color: hsl({p}) !important;\n}}",
        f"{scope} .border-primary,\n{scope} .border-primary * {{\n  border-color: hsl({p}) !important;\n}}",
        f"{scope} .bg-accent,\n{scope} .bg-accent * {{\n  background-color: hsl({a}) !important;\n}}",
        f"{scope} .bg-gradient-primary,\n{scope} .btn-hero {{\n"
        f"  background-image: {palette.gradient} !important;\n"
        f"  box-shadow: {palette.shadow_elegant} !important;\n}}",
        f"{scope} .btn-hero:hover {{\n  box-shadow: {palette.shadow_glow} !important;\n}}",
        f"{scope} .shadow-elegant {{\n  box-shadow: {palette.shadow_elegant} !important;\n}}",
        f"{scope} .shadow-glow {{\n  box-shadow: {palette.shadow_glow} !important;\n}}",
    ]
    return "\n\n".join(rules) + "\n"


class StyleInjector:
    """
    Owns the single theme stylesheet of a document.

    ``apply`` removes any element carrying ``style_id`` before inserting the
    new one, so the document never holds two. ``remove`` (and leaving the
    ``with`` block) tears it down and is a no-op when nothing is there.
    """

    def __init__(
        self,
        document: StyleDocument,
        marker: str = DEFAULT_SCOPE_MARKER,
        style_id: str = DEFAULT_STYLE_ID,
    ):
        self.document = document
        self.marker = marker
        self.style_id = style_id
        self.palette: Optional[DerivedPalette] = None

    def apply(self, palette: DerivedPalette) -> StyleElement:
        """Replace the theme stylesheet with one for ``palette``."""
        css = generate_theme_css(palette, self.marker)
        removed = self.document.remove(self.style_id)
        element = StyleElement(element_id=self.style_id, css=css)
        self.document.insert(element)
        self.palette = palette
        logger.debug(f"Applied theme stylesheet {self.style_id} (replaced {removed})")
        return element

    def remove(self) -> bool:
        """Remove the theme stylesheet. Returns True if one was present."""
        removed = self.document.remove(self.style_id)
        self.palette = None
        return removed > 0

    @property
    def is_applied(self) -> bool:
        return self.document.get(self.style_id) is not None

    def __enter__(self) -> "StyleInjector":
        return self

    def __exit__(self, *args) -> None:
        self.remove()


class ThemeProvider:
    """
    Applies a dealer's primary/accent pair to a document.

    Composes the memoized palette builder with a ``StyleInjector`` and wraps
    page content in the scope marker.
    """

    def __init__(
        self,
        document: StyleDocument,
        primary: str,
        accent: str,
        marker: str = DEFAULT_SCOPE_MARKER,
        style_id: str = DEFAULT_STYLE_ID,
    ):
        self.injector = StyleInjector(document, marker=marker, style_id=style_id)
        self.primary = primary
        self.accent = accent
        self.update(primary, accent)

    @property
    def palette(self) -> Optional[DerivedPalette]:
        return self.injector.palette

    def update(self, primary: str, accent: str) -> DerivedPalette:
        """Rebuild the palette for a new pair and re-apply it."""
        self.primary = primary
        self.accent = accent
        palette = build_palette(primary, accent)
        self.injector.apply(palette)
        return palette

    def wrap(self, content: str, css_class: str = "w-full h-full") -> str:
        """Wrap HTML content in the themed container."""
        return f'<div {self.injector.marker} class="{escape(css_class)}">{content}</div>'

    def close(self) -> None:
        self.injector.remove()

    def __enter__(self) -> "ThemeProvider":
        return self

    def __exit__(self, *args) -> None:
        self.close()
