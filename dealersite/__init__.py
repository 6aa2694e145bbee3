"""
dealersite - theming engine for multi-tenant dealership websites.

Each dealer (identified by a slug) owns a site configuration whose
primary/accent colors drive a derived palette, injected into the page as a
stylesheet scoped to the dealer site container.

Usage:
    from dealersite import (
        SiteConfigStore, SQLiteStorage, StyleDocument, ThemeProvider,
    )

    store = SiteConfigStore(SQLiteStorage("db/site_config.db"), slug="acme-motors")
    colors = store.load().colors

    document = StyleDocument()
    theme = ThemeProvider(document, colors.primary, colors.accent)
    html = document.render() + theme.wrap("<h1 class='text-primary'>Acme Motors</h1>")

The HTTP API lives in ``dealersite.api`` (FastAPI) and the theme
configurator page in ``dealersite.pages`` (Gradio).
"""

__version__ = "0.3.0"

from .exceptions import (
    DealerSiteError,
    ColorError,
    ColorParseError,
    PaletteError,
    PresetNotFoundError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    ConfigError,
    ConfigValidationError,
)
from .settings import DealerSiteSettings
from .theme import (
    FALLBACK_HSL,
    hex_to_hsl,
    build_palette,
    DerivedPalette,
    StyleDocument,
    StyleInjector,
    ThemeProvider,
    generate_theme_css,
)
from .config import (
    SiteConfig,
    SiteConfigStore,
    MemoryStorage,
    SQLiteStorage,
    DEFAULT_SITE_CONFIG,
    reset_all_site_configs,
)
from .routing import SubdomainInfo, get_subdomain_info

__all__ = [
    "__version__",
    # Exceptions
    "DealerSiteError",
    "ColorError",
    "ColorParseError",
    "PaletteError",
    "PresetNotFoundError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "ConfigError",
    "ConfigValidationError",
    # Settings
    "DealerSiteSettings",
    # Theme
    "FALLBACK_HSL",
    "hex_to_hsl",
    "build_palette",
    "DerivedPalette",
    "StyleDocument",
    "StyleInjector",
    "ThemeProvider",
    "generate_theme_css",
    # Config
    "SiteConfig",
    "SiteConfigStore",
    "MemoryStorage",
    "SQLiteStorage",
    "DEFAULT_SITE_CONFIG",
    "reset_all_site_configs",
    # Routing
    "SubdomainInfo",
    "get_subdomain_info",
]
