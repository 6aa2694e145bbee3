"""
Site Config Store - per-dealer configuration persisted in key-value storage.

Each dealer slug gets its own storage key, so several dealer sites
previewed against the same storage never overwrite each other. Storage is
a best-effort cache: read problems fall back to defaults, write problems
are logged and swallowed.

Usage:
    from dealersite.config import SiteConfigStore, SQLiteStorage

    storage = SQLiteStorage("db/site_config.db")
    store = SiteConfigStore(storage, slug="acme-motors")

    config = store.load()
    store.update({"colors": {"primary": "#16a34a"}})
    store.save()
"""

import json
import logging
from typing import Callable, Optional

from ..exceptions import StorageError
from .models import (
    DEFAULT_SITE_CONFIG,
    THEME_VERSION,
    PartialConfig,
    SiteConfig,
    merge_config,
)
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

STORAGE_NAMESPACE = "dealerSite:config:"
DEFAULT_SLUG = "demo"

ConfigListener = Callable[[str, SiteConfig], None]


def storage_key(
    slug: Optional[str],
    namespace: str = STORAGE_NAMESPACE,
    default_slug: str = DEFAULT_SLUG,
) -> str:
    """Storage key for a dealer slug; an empty slug maps to ``default_slug``."""
    return f"{namespace}{slug or default_slug}"


class SiteConfigStore:
    """In-memory site configuration backed by slug-scoped storage."""

    def __init__(
        self,
        storage: KeyValueStorage,
        slug: Optional[str] = None,
        defaults: Optional[SiteConfig] = None,
        namespace: str = STORAGE_NAMESPACE,
        theme_version: str = THEME_VERSION,
        default_slug: str = DEFAULT_SLUG,
    ):
        """
        Initialize the store and load the slug's configuration.

        Args:
            storage: Key-value storage backend
            slug: Dealer slug (defaults to default_slug)
            defaults: Configuration used for missing data (uses built-in defaults if None)
            namespace: Storage key prefix
            theme_version: Version stamped onto saved configurations
            default_slug: Slug used when none is given
        """
        self.storage = storage
        self.slug = slug or default_slug
        self.defaults = (defaults or DEFAULT_SITE_CONFIG).copy()
        self.namespace = namespace
        self.theme_version = theme_version
        self.storage_key = storage_key(self.slug, namespace)
        self._listeners: list[ConfigListener] = []
        self.config = self.load()

    def load(self) -> SiteConfig:
        """
        Read the slug's configuration from storage.

        A missing or unparsable entry yields a copy of the defaults. A stored
        entry is merged section by section over the defaults; if its colors
        lack a primary or accent, the default colors are used in full.
        """
        try:
            raw = self.storage.get(self.storage_key)
        except StorageError as e:
            logger.warning(f"Could not read {self.storage_key}, using defaults: {e}")
            raw = None

        if not raw:
            self.config = self.defaults.copy()
            return self.config

        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Unparsable config at {self.storage_key}, using defaults: {e}")
            self.config = self.defaults.copy()
            return self.config

        if not isinstance(parsed, dict):
            logger.warning(f"Config at {self.storage_key} is not an object, using defaults")
            self.config = self.defaults.copy()
            return self.config

        colors = parsed.get("colors")
        if not isinstance(colors, dict) or not colors.get("primary") or not colors.get("accent"):
            logger.warning(f"Config at {self.storage_key} has incomplete colors, restoring defaults")
            parsed = {
                **parsed,
                "colors": self.defaults.colors.to_dict(),
                "themeVersion": self.theme_version,
            }

        self.config = merge_config(self.defaults, parsed, keep_none=True)
        return self.config

    def update(self, partial: PartialConfig) -> SiteConfig:
        """Merge a partial configuration into memory. Does not persist."""
        self.config = merge_config(self.config, partial)
        return self.config

    def save(self, config: Optional[SiteConfig] = None) -> bool:
        """
        Persist the current (or given) configuration.

        Args:
            config: Configuration to save instead of the in-memory one

        Returns:
            True if written, False if refused or the write failed
        """
        to_save = (config or self.config).copy()
        to_save.theme_version = self.theme_version

        if not to_save.colors.primary or not to_save.colors.accent:
            logger.error(f"Invalid colors, not saving {self.storage_key}: {to_save.colors}")
            return False

        try:
            self.storage.set(self.storage_key, json.dumps(to_save.to_dict()))
        except (StorageError, TypeError, ValueError) as e:
            logger.error(f"Error saving {self.storage_key}: {e}")
            return False

        self.config = to_save
        logger.debug(f"Saved site config {self.storage_key}")
        self._notify(to_save)
        return True

    def reset(self) -> SiteConfig:
        """Remove the stored entry and revert to the defaults."""
        try:
            self.storage.remove(self.storage_key)
        except StorageError as e:
            logger.error(f"Error clearing {self.storage_key}: {e}")
        self.config = self.defaults.copy()
        return self.config

    def subscribe(self, listener: ConfigListener) -> Callable[[], None]:
        """
        Register a listener called with ``(storage_key, config)`` after each save.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, config: SiteConfig) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.storage_key, config.copy())
            except Exception as e:
                logger.error(f"Config listener failed for {self.storage_key}: {e}")


def clear_site_config(
    storage: KeyValueStorage,
    slug: Optional[str],
    namespace: str = STORAGE_NAMESPACE,
) -> bool:
    """Remove one dealer's stored configuration."""
    return storage.remove(storage_key(slug, namespace))


def reset_all_site_configs(storage: KeyValueStorage, namespace: str = STORAGE_NAMESPACE) -> int:
    """
    Remove every stored dealer configuration.

    Returns:
        Number of keys removed
    """
    removed = 0
    for key in storage.keys():
        if key.startswith(namespace) and storage.remove(key):
            removed += 1
    logger.info(f"Reset {removed} site configs under {namespace}")
    return removed
