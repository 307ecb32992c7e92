"""Translation resolver implementing the locale fallback chain.

Core component of the i18n system: given a translation key and a locale it
always produces a template string, falling back through parent locales and
finally to the default catalog.
"""

from typing import Optional

from validator_i18n.i18n.exceptions import MissingDefaultCatalogEntryError
from validator_i18n.i18n.models import LocaleCode, Resolution, ResolutionSource
from validator_i18n.i18n.overrides import OverrideStore
from validator_i18n.i18n.registry import CatalogRegistry
from validator_i18n.logging import get_module_logger

logger = get_module_logger()


class TranslationResolver:
    """Resolves templates through overrides, catalogs and the default catalog.

    Resolution order, first match wins:
    1. Override for the requested locale
    2. Override for each parent locale, nearest first
    3. Catalog for the requested locale
    4. Catalog for each parent locale, nearest first
    5. Override for the default locale
    6. Default catalog entry

    Any override in the requested locale's chain beats every catalog, while a
    catalog in that chain beats an override of the default locale.

    Attributes:
        registry: CatalogRegistry holding the language pack.
        overrides: OverrideStore layered on top of the registry.
    """

    def __init__(self, registry: CatalogRegistry, overrides: OverrideStore):
        self.registry = registry
        self.overrides = overrides

    def find(self, key: str, locale: LocaleCode) -> Optional[Resolution]:
        """Run the fallback chain and report where the template came from.

        Args:
            key: Translation key (validator identity or error code).
            locale: Requested locale.

        Returns:
            Resolution for the first match, or None when the key has no entry
            in any override or catalog, including the default catalog.
        """
        chain = locale.chain()

        for candidate in chain:
            template = self.overrides.get(candidate, key)
            if template is not None:
                return Resolution(key, template, candidate, ResolutionSource.OVERRIDE)

        for candidate in chain:
            catalog = self.registry.lookup(candidate)
            template = catalog.get_message(key) if catalog else None
            if template is not None:
                return Resolution(key, template, candidate, ResolutionSource.CATALOG)

        default_locale = self.registry.default_locale
        template = self.overrides.get(default_locale, key)
        if template is not None:
            return Resolution(
                key, template, default_locale, ResolutionSource.DEFAULT_OVERRIDE
            )

        template = self.registry.default_catalog().get_message(key)
        if template is not None:
            return Resolution(
                key, template, default_locale, ResolutionSource.DEFAULT_CATALOG
            )

        return None

    def resolve(self, key: str, locale: LocaleCode) -> str:
        """Resolve a key to a template string.

        Args:
            key: Translation key (validator identity or error code).
            locale: Requested locale.

        Returns:
            The resolved template string.

        Raises:
            MissingDefaultCatalogEntryError: If the key is missing from the
                default catalog too. This indicates a badly provisioned
                language pack, not a runtime condition.
        """
        resolution = self.find(key, locale)
        if resolution is None:
            logger.error(
                "translation_not_found",
                key=key,
                locale=str(locale),
                default_locale=str(self.registry.default_locale),
            )
            raise MissingDefaultCatalogEntryError(key, str(locale))

        if resolution.locale != locale:
            logger.debug(
                "used_fallback_translation",
                key=key,
                requested_locale=str(locale),
                resolved_locale=str(resolution.locale),
                source=resolution.source.value,
            )

        return resolution.template

    def has_entry(self, key: str, locale: LocaleCode) -> bool:
        """Check whether the chain for ``locale`` has any entry for ``key``."""
        return self.find(key, locale) is not None
