"""
Theme Configurator Example - pick and save a dealer's site colors.

Run with: python examples/theme_app.py
Then open http://localhost:7860 and try a preset, a custom pair, Save and Reset.
"""

import logging

from dealersite import DealerSiteSettings
from dealersite.config import SiteConfigStore, SQLiteStorage
from dealersite.pages import ThemeConfigPage

logging.basicConfig(level=logging.INFO)

settings = DealerSiteSettings.from_env()
storage = SQLiteStorage(settings.db_path)
store = SiteConfigStore(storage, slug="acme-motors", namespace=settings.namespace)

page = ThemeConfigPage(store, title="Acme Motors - Website Theme")

if __name__ == "__main__":
    page.launch()
