"""
Dealer site pages built with Gradio.

Usage:
    from dealersite.config import SiteConfigStore, SQLiteStorage
    from dealersite.pages import ThemeConfigPage

    store = SiteConfigStore(SQLiteStorage("db/site_config.db"), slug="acme-motors")
    ThemeConfigPage(store).launch()

    # Or compose into a larger app
    with gr.Blocks() as demo:
        with gr.Tab("Theme"):
            ThemeConfigPage.render(store)
"""

from .theme_config import (
    ThemeConfigPage,
    ThemeConfigPageConfig,
    create_theme_config_panel,
    render_preview,
    apply_preset,
    save_colors,
    reset_colors,
)

__all__ = [
    "ThemeConfigPage",
    "ThemeConfigPageConfig",
    "create_theme_config_panel",
    "render_preview",
    "apply_preset",
    "save_colors",
    "reset_colors",
]
