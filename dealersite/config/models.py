"""
Data models for a dealer site configuration.

Serialized form uses the camelCase field names the dealer site front end
stores (``logoUrl``, ``whyChooseUsPoints``, ...).
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union
import copy

SECTIONS = ("brand", "hero", "contact", "colors", "content")

DEFAULT_PRIMARY = "#8B5CF6"
DEFAULT_ACCENT = "#F3F4F6"
THEME_VERSION = "1.0.0"


def _str(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else default


def _bool(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else default


@dataclass
class Brand:
    """Dealer name, tagline and logo."""

    name: str = "Your Dealership"
    tagline: str = "Find Your Perfect Vehicle"
    logo_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "tagline": self.tagline, "logoUrl": self.logo_url}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Brand":
        default = cls()
        return cls(
            name=_str(data, "name", default.name),
            tagline=_str(data, "tagline", default.tagline),
            logo_url=data.get("logoUrl"),
        )


@dataclass
class Hero:
    """Hero banner copy and background."""

    headline: str = "Find Your Perfect Vehicle"
    subtitle: str = "Browse our extensive collection of quality pre-owned vehicles"
    background_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "headline": self.headline,
            "subtitle": self.subtitle,
            "backgroundUrl": self.background_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Hero":
        default = cls()
        return cls(
            headline=_str(data, "headline", default.headline),
            subtitle=_str(data, "subtitle", default.subtitle),
            background_url=data.get("backgroundUrl"),
        )


@dataclass
class Contact:
    """Public contact details."""

    phone: str = "(555) 123-4567"
    email: str = "contact@yourdealership.com"
    address: str = "123 Main St, Your City, ST 12345"

    def to_dict(self) -> dict[str, Any]:
        return {"phone": self.phone, "email": self.email, "address": self.address}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        default = cls()
        return cls(
            phone=_str(data, "phone", default.phone),
            email=_str(data, "email", default.email),
            address=_str(data, "address", default.address),
        )


@dataclass
class ThemeColors:
    """Primary/accent hex pair driving the site palette."""

    primary: str = DEFAULT_PRIMARY
    accent: str = DEFAULT_ACCENT

    def to_dict(self) -> dict[str, Any]:
        return {"primary": self.primary, "accent": self.accent}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ThemeColors":
        default = cls()
        return cls(
            primary=data.get("primary", default.primary),
            accent=data.get("accent", default.accent),
        )


@dataclass
class Service:
    """A service card on the dealer site."""

    title: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "description": self.description}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Service":
        return cls(title=data.get("title", ""), description=data.get("description", ""))


def _default_services() -> list[Service]:
    return [
        Service("Vehicle Sales", "Browse our extensive inventory of quality vehicles"),
        Service("Financing", "Flexible financing options to fit your budget"),
        Service("Service & Maintenance", "Professional maintenance and repair services"),
    ]


def _default_points() -> list[str]:
    return [
        "Quality inspected vehicles",
        "Competitive pricing",
        "Expert financing assistance",
        "Outstanding customer service",
    ]


@dataclass
class Content:
    """About text, services and "why choose us" points."""

    about_content: Optional[str] = (
        "We are a trusted dealership with years of experience in providing "
        "quality vehicles and exceptional customer service."
    )
    services_enabled: bool = True
    services: list[Service] = field(default_factory=_default_services)
    why_choose_us_enabled: bool = True
    why_choose_us_points: list[str] = field(default_factory=_default_points)

    def to_dict(self) -> dict[str, Any]:
        return {
            "aboutContent": self.about_content,
            "servicesEnabled": self.services_enabled,
            "services": [s.to_dict() for s in self.services],
            "whyChooseUsEnabled": self.why_choose_us_enabled,
            "whyChooseUsPoints": list(self.why_choose_us_points),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Content":
        default = cls()
        services = data.get("services")
        points = data.get("whyChooseUsPoints")
        return cls(
            about_content=data.get("aboutContent", default.about_content),
            services_enabled=_bool(data, "servicesEnabled", default.services_enabled),
            services=(
                [Service.from_dict(s) for s in services if isinstance(s, dict)]
                if isinstance(services, list)
                else default.services
            ),
            why_choose_us_enabled=_bool(data, "whyChooseUsEnabled", default.why_choose_us_enabled),
            why_choose_us_points=(
                [str(p) for p in points] if isinstance(points, list) else default.why_choose_us_points
            ),
        )


_SECTION_TYPES = {
    "brand": Brand,
    "hero": Hero,
    "contact": Contact,
    "colors": ThemeColors,
    "content": Content,
}


@dataclass
class SiteConfig:
    """Configuration of one dealer's public site."""

    brand: Brand = field(default_factory=Brand)
    hero: Hero = field(default_factory=Hero)
    contact: Contact = field(default_factory=Contact)
    colors: ThemeColors = field(default_factory=ThemeColors)
    content: Content = field(default_factory=Content)
    theme_version: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = {section: getattr(self, section).to_dict() for section in SECTIONS}
        if self.theme_version is not None:
            data["themeVersion"] = self.theme_version
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SiteConfig":
        """Create from dictionary; missing sections and fields use defaults."""
        sections = {}
        for section, section_type in _SECTION_TYPES.items():
            value = data.get(section)
            sections[section] = section_type.from_dict(value if isinstance(value, dict) else {})
        return cls(**sections, theme_version=data.get("themeVersion"))

    def copy(self) -> "SiteConfig":
        return copy.deepcopy(self)


PartialConfig = Union[SiteConfig, dict[str, Any]]


def _section_dict(value: Any) -> Optional[dict[str, Any]]:
    if isinstance(value, dict):
        return value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return None


def merge_config(
    base: SiteConfig,
    partial: Optional[PartialConfig],
    keep_none: bool = False,
) -> SiteConfig:
    """
    Merge a partial configuration over ``base``, one section at a time.

    Within a section, fields present in ``partial`` win; absent fields keep
    the base value. ``None`` values are skipped unless ``keep_none`` is set,
    which is how a stored configuration keeps its cleared fields. ``base``
    is not modified.

    Args:
        base: Configuration to merge onto
        partial: ``SiteConfig``, or a dict in serialized shape whose section
            values may be dicts or section dataclasses
        keep_none: Treat ``None`` as a value rather than as "not given"

    Returns:
        New merged SiteConfig
    """
    merged = base.to_dict()
    if partial is None:
        return SiteConfig.from_dict(merged)

    overrides = partial.to_dict() if isinstance(partial, SiteConfig) else partial
    for section in SECTIONS:
        section_override = _section_dict(overrides.get(section))
        if not section_override:
            continue
        merged[section] = {
            **merged[section],
            **{k: v for k, v in section_override.items() if keep_none or v is not None},
        }

    if overrides.get("themeVersion"):
        merged["themeVersion"] = overrides["themeVersion"]
    return SiteConfig.from_dict(merged)


DEFAULT_SITE_CONFIG = SiteConfig()
