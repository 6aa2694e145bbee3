"""
Tests for site configuration models and section merging.
"""

from dealersite.config.models import (
    DEFAULT_ACCENT,
    DEFAULT_PRIMARY,
    Brand,
    Content,
    Service,
    SiteConfig,
    ThemeColors,
    merge_config,
)


class TestDefaults:
    """Built-in defaults."""

    def test_default_colors(self):
        config = SiteConfig()
        assert config.colors.primary == DEFAULT_PRIMARY == "#8B5CF6"
        assert config.colors.accent == DEFAULT_ACCENT == "#F3F4F6"

    def test_default_content(self):
        content = Content()
        assert content.services_enabled is True
        assert [s.title for s in content.services] == [
            "Vehicle Sales",
            "Financing",
            "Service & Maintenance",
        ]
        assert len(content.why_choose_us_points) == 4

    def test_defaults_are_independent(self):
        a = SiteConfig()
        b = SiteConfig()
        a.content.services.append(Service("Detailing", "Shine"))
        assert len(b.content.services) == 3


class TestSerialization:
    """Tests for to_dict/from_dict."""

    def test_camel_case_keys(self):
        data = SiteConfig().to_dict()
        assert "logoUrl" in data["brand"]
        assert "backgroundUrl" in data["hero"]
        assert "whyChooseUsPoints" in data["content"]
        assert "themeVersion" not in data

    def test_theme_version_serialized_when_set(self):
        config = SiteConfig(theme_version="1.0.0")
        assert config.to_dict()["themeVersion"] == "1.0.0"

    def test_roundtrip(self):
        config = SiteConfig(
            brand=Brand(name="Acme Motors", tagline="Drive happy", logo_url="https://x/logo.png"),
            colors=ThemeColors(primary="#16a34a", accent="#f0fdf4"),
            theme_version="1.0.0",
        )
        assert SiteConfig.from_dict(config.to_dict()) == config

    def test_from_dict_fills_missing_fields(self):
        config = SiteConfig.from_dict({"brand": {"name": "Acme"}})
        assert config.brand.name == "Acme"
        assert config.brand.tagline == "Find Your Perfect Vehicle"
        assert config.colors == ThemeColors()

    def test_from_dict_ignores_bad_sections(self):
        config = SiteConfig.from_dict({"brand": "oops", "content": {"services": "nope"}})
        assert config.brand == Brand()
        assert config.content.services == Content().services

    def test_from_dict_requires_real_booleans(self):
        config = SiteConfig.from_dict({"content": {"servicesEnabled": "false", "whyChooseUsEnabled": 0}})
        assert config.content.services_enabled is True
        assert config.content.why_choose_us_enabled is True

    def test_from_dict_keeps_false_booleans(self):
        config = SiteConfig.from_dict({"content": {"servicesEnabled": False}})
        assert config.content.services_enabled is False

    def test_from_dict_non_string_text_uses_default(self):
        config = SiteConfig.from_dict({"brand": {"name": None, "tagline": 42}})
        assert config.brand == Brand()


class TestMergeConfig:
    """Tests for per-section merging."""

    def test_partial_colors_leave_other_sections(self):
        base = SiteConfig()
        merged = merge_config(base, {"colors": {"primary": "#2563eb"}})
        assert merged.colors.primary == "#2563eb"
        assert merged.colors.accent == DEFAULT_ACCENT
        assert merged.brand == base.brand
        assert merged.hero == base.hero
        assert merged.contact == base.contact
        assert merged.content == base.content

    def test_leaf_fields_fall_back(self):
        merged = merge_config(SiteConfig(), {"contact": {"phone": "(555) 000-0000"}})
        assert merged.contact.phone == "(555) 000-0000"
        assert merged.contact.email == "contact@yourdealership.com"

    def test_none_values_do_not_erase(self):
        merged = merge_config(SiteConfig(), {"brand": {"name": None}})
        assert merged.brand.name == "Your Dealership"

    def test_keep_none_clears_optional_fields(self):
        base = SiteConfig(brand=Brand(logo_url="https://cdn.example.com/logo.png"))
        merged = merge_config(
            base,
            {"brand": {"logoUrl": None}, "content": {"aboutContent": None}},
            keep_none=True,
        )
        assert merged.brand.logo_url is None
        assert merged.content.about_content is None
        assert merged.brand.name == "Your Dealership"

    def test_accepts_section_dataclasses(self):
        merged = merge_config(SiteConfig(), {"colors": ThemeColors("#000000", "#ffffff")})
        assert merged.colors.primary == "#000000"

    def test_accepts_full_config(self):
        other = SiteConfig(brand=Brand(name="Other"))
        assert merge_config(SiteConfig(), other).brand.name == "Other"

    def test_base_not_mutated(self):
        base = SiteConfig()
        merge_config(base, {"hero": {"headline": "New"}})
        assert base.hero.headline == "Find Your Perfect Vehicle"

    def test_unknown_sections_ignored(self):
        merged = merge_config(SiteConfig(), {"billing": {"plan": "pro"}})
        assert merged == SiteConfig()

    def test_none_partial(self):
        assert merge_config(SiteConfig(), None) == SiteConfig()
