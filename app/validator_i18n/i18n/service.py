"""Localization service used by the validation engine.

Facade over the resolver that decides which locale to resolve in (disabled,
explicit, pinned, or ambient) and exposes lookups by validator identity and
by error code.
"""

from typing import List, Optional, Union

from validator_i18n.i18n.models import LocaleCode
from validator_i18n.i18n.overrides import OverrideStore
from validator_i18n.i18n.registry import CatalogRegistry
from validator_i18n.i18n.resolvers import LocaleProvider
from validator_i18n.i18n.translator import TranslationResolver
from validator_i18n.logging import get_module_logger

logger = get_module_logger()

LocaleLike = Union[LocaleCode, str]


def _as_locale(locale: LocaleLike) -> LocaleCode:
    if isinstance(locale, LocaleCode):
        return locale
    return LocaleCode.parse(locale)


class LocalizationService:
    """Resolves validation message templates for the current locale.

    Each instance owns its override store and holds its own ``enabled`` and
    ``pinned_locale`` state, so differently configured services can coexist
    over the same or different registries.

    Usage:
        service = create_localization_service()

        service.resolve_by_identity("NotNullValidator")
        service.resolve_by_error_code("CustomKey", "NotNullValidator")

        service.add_translation("en", "NotNullValidator", "Required")
        service.pinned_locale = "fr"
        service.enabled = False  # always the default locale
    """

    def __init__(
        self,
        registry: CatalogRegistry,
        overrides: Optional[OverrideStore] = None,
        locale_provider: Optional[LocaleProvider] = None,
        enabled: bool = True,
        pinned_locale: Optional[LocaleLike] = None,
    ):
        """Initialize localization service.

        Args:
            registry: CatalogRegistry holding the language pack.
            overrides: OverrideStore to layer on top (default: a new empty store).
            locale_provider: Source of the ambient locale. Without one the
                ambient locale is always the default locale.
            enabled: When False every lookup uses the default locale.
            pinned_locale: Locale used instead of the ambient one.
        """
        self.registry = registry
        self.overrides = overrides if overrides is not None else OverrideStore()
        self.locale_provider = locale_provider
        self.resolver = TranslationResolver(registry, self.overrides)
        self.enabled = enabled
        self.pinned_locale = pinned_locale

    @property
    def default_locale(self) -> LocaleCode:
        return self.registry.default_locale

    @property
    def pinned_locale(self) -> Optional[LocaleCode]:
        return self._pinned_locale

    @pinned_locale.setter
    def pinned_locale(self, locale: Optional[LocaleLike]) -> None:
        self._pinned_locale = _as_locale(locale) if locale is not None else None

    def effective_locale(self, locale: Optional[LocaleLike] = None) -> LocaleCode:
        """Determine the locale a lookup runs in.

        Order: default locale when disabled, then the explicit ``locale``
        argument, then the pinned locale, then the provider's ambient locale,
        then the default locale. A malformed explicit locale string is logged and
        replaced by the default locale.

        Args:
            locale: Optional explicit locale for this lookup.

        Returns:
            Locale to resolve in.
        """
        if not self.enabled:
            return self.default_locale
        if locale is not None:
            if isinstance(locale, LocaleCode):
                return locale
            explicit = LocaleCode.try_parse(locale)
            if explicit is None:
                logger.warning(
                    "invalid_requested_locale",
                    locale_str=locale,
                    default_locale=str(self.default_locale),
                )
                return self.default_locale
            return explicit
        if self._pinned_locale is not None:
            return self._pinned_locale
        if self.locale_provider is not None:
            ambient = self.locale_provider.current_locale()
            if ambient is not None:
                return ambient
        return self.default_locale

    def resolve(self, key: str, locale: Optional[LocaleLike] = None) -> str:
        """Resolve any translation key.

        Args:
            key: Translation key.
            locale: Optional explicit locale; ignored when localization is disabled.

        Returns:
            Template string.

        Raises:
            MissingDefaultCatalogEntryError: If the key is missing from the
                default catalog (a provisioning bug).
        """
        return self.resolver.resolve(key, self.effective_locale(locale))

    def resolve_by_identity(self, validator_identity: str) -> str:
        """Resolve the default message of a validator.

        Args:
            validator_identity: Stable validator name (e.g. "NotNullValidator").

        Returns:
            Template string for the effective locale.
        """
        return self.resolve(validator_identity)

    def resolve_by_error_code(
        self, error_code: Optional[str], validator_identity: str
    ) -> str:
        """Resolve a message by error code, falling back to the validator identity.

        The error code is a first-class translation key: if the fallback chain
        for the effective locale finds any entry for it, that entry wins.
        Otherwise the validator identity is resolved instead. An error code that
        exists only in catalogs outside the effective locale's chain (for
        example only in "de" when resolving in "fr") counts as absent.

        Args:
            error_code: Optional per-rule error code.
            validator_identity: Stable validator name used as the fallback key.

        Returns:
            Template string for the effective locale.
        """
        locale = self.effective_locale()

        if error_code:
            resolution = self.resolver.find(error_code, locale)
            if resolution is not None:
                return resolution.template
            logger.debug(
                "error_code_fallback",
                error_code=error_code,
                validator_identity=validator_identity,
                locale=str(locale),
            )

        return self.resolver.resolve(validator_identity, locale)

    def has_translation(self, key: str, locale: Optional[LocaleLike] = None) -> bool:
        """Check whether any entry exists for ``key`` in the effective locale's chain."""
        return self.resolver.has_entry(key, self.effective_locale(locale))

    def add_translation(self, locale: LocaleLike, key: str, template: str) -> None:
        """Override the template for one (locale, key) pair.

        The catalog registry is never modified; other keys and locales are
        unaffected.

        Args:
            locale: Locale the override applies to.
            key: Validator identity or error code.
            template: Replacement template.

        Raises:
            InvalidLocaleCodeError: If the locale is malformed.
            TypeError: If template is not a string.
        """
        locale = _as_locale(locale)
        self.overrides.set(locale, key, template)
        logger.info("translation_added", locale=str(locale), key=key)

    def remove_translation(self, locale: LocaleLike, key: str) -> bool:
        """Remove an override, restoring catalog-derived behavior for the key.

        Returns:
            True if an override was removed.
        """
        return self.overrides.remove(_as_locale(locale), key)

    def available_locales(self) -> List[LocaleCode]:
        return self.registry.locales()
