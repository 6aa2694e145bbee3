"""
Configuration for dealersite.
"""

from dataclasses import dataclass, field
from pathlib import Path
import os

from .theme.injector import DEFAULT_SCOPE_MARKER


@dataclass
class DealerSiteSettings:
    """Settings for the site configuration store, theming and API."""

    # Storage
    db_path: Path = field(default_factory=lambda: Path("dealersite/db/site_config.db"))
    namespace: str = "dealerSite:config:"
    default_slug: str = "demo"
    theme_version: str = "1.0.0"

    # Routing
    root_domain: str = "dealerdelight.com"
    dev_hosts: tuple[str, ...] = ("localhost", "127.0.0.1", "lovable.app")

    # Theming
    scope_marker: str = DEFAULT_SCOPE_MARKER

    log_level: str = "INFO"

    def __post_init__(self):
        """Ensure db_path parent directories exist."""
        if isinstance(self.db_path, str):
            self.db_path = Path(self.db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_env(cls, **overrides) -> "DealerSiteSettings":
        """Build settings from ``DEALERSITE_*`` environment variables."""
        values = {}
        if os.environ.get("DEALERSITE_DB_PATH"):
            values["db_path"] = Path(os.environ["DEALERSITE_DB_PATH"])
        if os.environ.get("DEALERSITE_ROOT_DOMAIN"):
            values["root_domain"] = os.environ["DEALERSITE_ROOT_DOMAIN"]
        if os.environ.get("DEALERSITE_LOG_LEVEL"):
            values["log_level"] = os.environ["DEALERSITE_LOG_LEVEL"].upper()
        values.update(overrides)
        return cls(**values)
