"""
Dealer site configuration: data models, key-value storage and the
slug-scoped config store.
"""

from .models import (
    SECTIONS,
    DEFAULT_PRIMARY,
    DEFAULT_ACCENT,
    THEME_VERSION,
    Brand,
    Hero,
    Contact,
    ThemeColors,
    Service,
    Content,
    SiteConfig,
    DEFAULT_SITE_CONFIG,
    merge_config,
)
from .storage import MemoryStorage, SQLiteStorage, KeyValueStorage
from .store import (
    STORAGE_NAMESPACE,
    DEFAULT_SLUG,
    SiteConfigStore,
    storage_key,
    clear_site_config,
    reset_all_site_configs,
)

__all__ = [
    # Models
    "SECTIONS",
    "DEFAULT_PRIMARY",
    "DEFAULT_ACCENT",
    "THEME_VERSION",
    "Brand",
    "Hero",
    "Contact",
    "ThemeColors",
    "Service",
    "Content",
    "SiteConfig",
    "DEFAULT_SITE_CONFIG",
    "merge_config",
    # Storage
    "MemoryStorage",
    "SQLiteStorage",
    "KeyValueStorage",
    # Store
    "STORAGE_NAMESPACE",
    "DEFAULT_SLUG",
    "SiteConfigStore",
    "storage_key",
    "clear_site_config",
    "reset_all_site_configs",
]
