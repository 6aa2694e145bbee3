"""
FastAPI API layer for dealer site theming.

Provides REST endpoints for:
- Reading, patching and resetting a dealer's site configuration
- Rendering a dealer's scoped theme stylesheet
- Palette derivation and theme presets
- Resolving the dealer from the request host
"""

from typing import Any, Optional
import logging
import re

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi import Path as PathParam
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from . import __version__
from .config import (
    SiteConfigStore,
    SQLiteStorage,
    KeyValueStorage,
    reset_all_site_configs,
)
from .exceptions import ConfigValidationError, PresetNotFoundError
from .routing import get_subdomain_info
from .settings import DealerSiteSettings
from .theme import (
    PRESET_THEMES,
    build_palette,
    generate_theme_css,
    get_preset,
    is_valid_hex,
)

logger = logging.getLogger(__name__)

SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9-]*$"


# Pydantic models for API
class ColorsInput(BaseModel):
    """Primary/accent hex pair."""

    primary: Optional[str] = None
    accent: Optional[str] = None


class ConfigPatch(BaseModel):
    """Partial site configuration; omitted sections and fields are kept."""

    brand: Optional[dict[str, Any]] = None
    hero: Optional[dict[str, Any]] = None
    contact: Optional[dict[str, Any]] = None
    colors: Optional[ColorsInput] = None
    content: Optional[dict[str, Any]] = None


class PaletteResponse(BaseModel):
    """Derived palette tokens."""

    primary_hsl: str
    accent_hsl: str
    primary_glow: str
    gradient: str
    shadow_elegant: str
    shadow_glow: str
    css_vars: dict[str, str]


class PresetItem(BaseModel):
    """A named theme preset."""

    name: str
    primary: str
    accent: str
    description: str


class PresetsResponse(BaseModel):
    """Response for listing presets."""

    presets: list[PresetItem]


class ResetResponse(BaseModel):
    """Response from a bulk theme reset."""

    status: str
    removed: int


def _validate_colors(colors: Optional[ColorsInput]) -> None:
    if colors is None:
        return
    for field_name in ("primary", "accent"):
        value = getattr(colors, field_name)
        if value is not None and not is_valid_hex(value):
            raise ConfigValidationError(f"colors.{field_name}", f"{value!r} is not a hex color")


# FastAPI app factory
def create_app(
    settings: Optional[DealerSiteSettings] = None,
    storage: Optional[KeyValueStorage] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings (read from the environment if None)
        storage: Storage backend (SQLite at ``settings.db_path`` if None)

    Returns:
        Configured FastAPI app
    """
    settings = settings or DealerSiteSettings.from_env()
    logging.getLogger("dealersite").setLevel(settings.log_level)

    app = FastAPI(
        title="Dealer Site Theming API",
        description="Per-dealer site configuration and theme stylesheets",
        version=__version__,
    )

    # Initialize storage lazily
    _storage: Optional[KeyValueStorage] = storage

    def get_storage() -> KeyValueStorage:
        nonlocal _storage
        if _storage is None:
            _storage = SQLiteStorage(settings.db_path)
        return _storage

    def get_store(slug: str) -> SiteConfigStore:
        return SiteConfigStore(
            get_storage(),
            slug=slug,
            namespace=settings.namespace,
            theme_version=settings.theme_version,
            default_slug=settings.default_slug,
        )

    @app.exception_handler(ConfigValidationError)
    async def config_validation_handler(request: Request, exc: ConfigValidationError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "field": exc.field},
        )

    @app.exception_handler(PresetNotFoundError)
    async def preset_not_found_handler(request: Request, exc: PresetNotFoundError):
        return JSONResponse(status_code=404, content={"detail": exc.message})

    # Health check
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # =========================================================================
    # Site configuration
    # =========================================================================

    @app.get("/sites/{slug}/config")
    async def get_site_config(slug: str = PathParam(..., pattern=SLUG_PATTERN, max_length=63)):
        """Get a dealer's configuration merged over the defaults."""
        return get_store(slug).config.to_dict()

    @app.patch("/sites/{slug}/config")
    async def patch_site_config(
        patch: ConfigPatch,
        slug: str = PathParam(..., pattern=SLUG_PATTERN, max_length=63),
    ):
        """
        Merge a partial configuration and persist it.

        Colors are validated as hex before anything is merged.
        """
        _validate_colors(patch.colors)

        store = get_store(slug)
        store.update(patch.model_dump(exclude_none=True))
        if not store.save():
            raise HTTPException(status_code=500, detail="Site configuration could not be saved")
        return store.config.to_dict()

    @app.delete("/sites/{slug}/config")
    async def reset_site_config(slug: str = PathParam(..., pattern=SLUG_PATTERN, max_length=63)):
        """Drop a dealer's stored configuration and return the defaults."""
        return get_store(slug).reset().to_dict()

    @app.get("/sites/{slug}/theme.css")
    async def get_site_theme_css(slug: str = PathParam(..., pattern=SLUG_PATTERN, max_length=63)):
        """Scoped theme stylesheet for a dealer's colors."""
        colors = get_store(slug).config.colors
        css = generate_theme_css(build_palette(colors.primary, colors.accent), settings.scope_marker)
        return Response(content=css, media_type="text/css")

    @app.get("/site")
    async def get_current_site(request: Request):
        """Resolve the dealer from the Host header and return its configuration."""
        info = get_subdomain_info(
            request.headers.get("host", ""),
            root_domain=settings.root_domain,
            dev_hosts=settings.dev_hosts,
        )
        if not info.dealer_slug or not re.fullmatch(SLUG_PATTERN, info.dealer_slug):
            raise HTTPException(status_code=404, detail="No dealer site for this host")
        return {"slug": info.dealer_slug, "config": get_store(info.dealer_slug).config.to_dict()}

    # =========================================================================
    # Palettes & presets
    # =========================================================================

    @app.get("/palette", response_model=PaletteResponse)
    async def get_palette(
        primary: str = Query(..., description="Primary hex color"),
        accent: str = Query(..., description="Accent hex color"),
    ):
        """Derive the palette for a color pair. Malformed colors use the fallback."""
        palette = build_palette(primary, accent)
        return PaletteResponse(**palette.to_dict(), css_vars=palette.to_css_vars())

    @app.get("/presets", response_model=PresetsResponse)
    async def list_theme_presets():
        """List the theme presets."""
        return PresetsResponse(
            presets=[
                PresetItem(
                    name=p.name,
                    primary=p.primary,
                    accent=p.accent,
                    description=p.description,
                )
                for p in PRESET_THEMES
            ]
        )

    @app.get("/presets/{name}", response_model=PaletteResponse)
    async def get_preset_palette(name: str):
        """Derived palette of a named preset."""
        preset = get_preset(name)
        palette = build_palette(preset.primary, preset.accent)
        return PaletteResponse(**palette.to_dict(), css_vars=palette.to_css_vars())

    # =========================================================================
    # Admin
    # =========================================================================

    @app.post("/admin/reset-themes", response_model=ResetResponse)
    async def reset_themes():
        """Remove every stored dealer configuration."""
        removed = reset_all_site_configs(get_storage(), settings.namespace)
        return ResetResponse(status="reset", removed=removed)

    return app
