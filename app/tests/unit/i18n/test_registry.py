"""Tests for validator_i18n.i18n.registry module."""

import pytest

from validator_i18n.i18n import (
    CatalogRegistry,
    CatalogRegistryFrozenError,
    DuplicateLocaleRegistrationError,
)
from tests.factories.i18n import make_catalog, make_locale


@pytest.mark.unit
class TestCatalogRegistry:
    """Tests for CatalogRegistry."""

    @pytest.fixture
    def registry(self):
        return CatalogRegistry(make_catalog("en"))

    def test_default_catalog_registered_at_construction(self, registry):
        """The default catalog is available without registering it."""
        assert registry.default_locale == make_locale("en")
        assert registry.default_catalog().locale == make_locale("en")
        assert registry.lookup(make_locale("en")) is registry.default_catalog()

    def test_register_and_lookup(self, registry):
        """A registered catalog is returned by lookup()."""
        catalog = make_catalog("fr", {"NotNullValidator": "fr"})
        registry.register(catalog)
        assert registry.lookup(make_locale("fr")) is catalog

    def test_lookup_is_exact_match_only(self, registry):
        """lookup() does not fall back to parent locales."""
        registry.register(make_catalog("fr", {"NotNullValidator": "fr"}))
        assert registry.lookup(make_locale("fr-FR")) is None

    def test_lookup_unknown_locale(self, registry):
        """lookup() returns None for an unregistered locale."""
        assert registry.lookup(make_locale("gu-IN")) is None

    def test_register_duplicate_raises(self, registry):
        """A second catalog for the same locale is rejected."""
        registry.register(make_catalog("fr", {}))
        with pytest.raises(DuplicateLocaleRegistrationError):
            registry.register(make_catalog("FR", {"other": "x"}))

    def test_register_duplicate_default_raises(self, registry):
        """The default locale cannot be registered twice."""
        with pytest.raises(DuplicateLocaleRegistrationError):
            registry.register(make_catalog("en", {}))

    def test_duplicate_does_not_replace_original(self, registry):
        """A rejected duplicate leaves the first catalog in place."""
        original = make_catalog("fr", {"NotNullValidator": "original"})
        registry.register(original)
        with pytest.raises(DuplicateLocaleRegistrationError):
            registry.register(make_catalog("fr", {"NotNullValidator": "replacement"}))
        assert registry.lookup(make_locale("fr")) is original

    def test_freeze_blocks_registration(self, registry):
        """register() fails once the registry is frozen."""
        registry.freeze()
        assert registry.frozen
        with pytest.raises(CatalogRegistryFrozenError):
            registry.register(make_catalog("fr", {}))

    def test_locales(self, registry):
        """locales() lists the default locale first."""
        registry.register(make_catalog("fr", {}))
        registry.register(make_catalog("de", {}))
        locales = registry.locales()
        assert locales[0] == make_locale("en")
        assert set(locales) == {make_locale("en"), make_locale("fr"), make_locale("de")}

    def test_contains_and_len(self, registry):
        """Membership and length count every registered locale."""
        registry.register(make_catalog("fr", {}))
        assert make_locale("fr") in registry
        assert make_locale("de") not in registry
        assert len(registry) == 2
