"""Factory functions for creating i18n components.

Provides convenience functions for building a LocalizationService from the
application settings and a language pack.
"""

from functools import lru_cache
from typing import Optional

from validator_i18n.configuration import Settings, get_settings
from validator_i18n.i18n.exceptions import InvalidLocaleCodeError
from validator_i18n.i18n.loader import (
    DEFAULT_LANGUAGE_PACK_DIR,
    LanguagePackLoader,
    YAMLLanguagePackLoader,
    load_overrides,
)
from validator_i18n.i18n.models import LocaleCode
from validator_i18n.i18n.registry import CatalogRegistry
from validator_i18n.i18n.resolvers import ContextLocaleProvider, LocaleProvider
from validator_i18n.i18n.service import LocalizationService
from validator_i18n.logging import get_module_logger

logger = get_module_logger()


def create_registry(
    language_pack: LanguagePackLoader, default_locale: LocaleCode
) -> CatalogRegistry:
    """Build and freeze a registry from a language pack.

    Args:
        language_pack: Loader supplying the catalogs.
        default_locale: Locale of the terminal fallback catalog.

    Returns:
        Frozen CatalogRegistry.

    Raises:
        ValueError: If the pack has no catalog for the default locale.
    """
    catalogs = language_pack.load_all()

    default_catalog = catalogs.pop(default_locale, None)
    if default_catalog is None:
        raise ValueError(
            f"Language pack has no catalog for default locale '{default_locale}'"
        )

    registry = CatalogRegistry(default_catalog)
    for locale in sorted(catalogs, key=str):
        registry.register(catalogs[locale])
    registry.freeze()
    return registry


def create_localization_service(
    settings: Optional[Settings] = None,
    language_pack: Optional[LanguagePackLoader] = None,
    locale_provider: Optional[LocaleProvider] = None,
) -> LocalizationService:
    """Create and configure an independent LocalizationService.

    Every call builds a fresh registry and override store, so services created
    here never share state.

    Args:
        settings: Settings to read I18N_* options from (default: get_settings()).
        language_pack: Loader for the catalogs (default: YAML pack from
            I18N_LANGUAGE_PACK_DIR, or the pack shipped with the package).
        locale_provider: Ambient locale source (default: ContextLocaleProvider).

    Returns:
        LocalizationService: Configured service instance.

    Raises:
        InvalidLocaleCodeError: If I18N_DEFAULT_LOCALE is malformed.
        ValueError: If the language pack cannot be loaded.

    Usage:
        # Defaults from environment and the shipped language pack
        service = create_localization_service()

        # Custom pack
        service = create_localization_service(
            language_pack=InMemoryLanguagePack({"en": {...}, "fr": {...}}),
        )
    """
    settings = settings or get_settings()
    i18n_settings = settings.i18n

    default_locale = LocaleCode.parse(i18n_settings.default_locale)

    if language_pack is None:
        language_pack = YAMLLanguagePackLoader(
            i18n_settings.language_pack_dir or DEFAULT_LANGUAGE_PACK_DIR
        )

    registry = create_registry(language_pack, default_locale)

    pinned_locale = None
    if i18n_settings.pinned_locale:
        pinned_locale = LocaleCode.try_parse(i18n_settings.pinned_locale)
        if pinned_locale is None:
            logger.warning(
                "invalid_pinned_locale",
                locale_str=i18n_settings.pinned_locale,
                default_locale=str(default_locale),
            )

    service = LocalizationService(
        registry,
        locale_provider=locale_provider or ContextLocaleProvider(),
        enabled=i18n_settings.enabled,
        pinned_locale=pinned_locale,
    )

    if i18n_settings.overrides_file:
        for tag, templates in load_overrides(i18n_settings.overrides_file).items():
            try:
                locale = LocaleCode.parse(tag)
            except InvalidLocaleCodeError:
                logger.warning("invalid_override_locale", locale_str=tag)
                continue
            service.overrides.set_many(locale, templates)

    logger.info(
        "localization_service_created",
        default_locale=str(default_locale),
        locale_count=len(registry),
        enabled=service.enabled,
        pinned_locale=str(pinned_locale) if pinned_locale else None,
        override_count=len(service.overrides),
    )

    return service


@lru_cache
def get_localization_service() -> LocalizationService:
    """Get the process-wide LocalizationService built from get_settings().

    Returns:
        LocalizationService: Cached service instance.
    """
    return create_localization_service(get_settings())
