"""i18n system - localized validation message resolution.

Resolves message templates for validator identities and error codes in the
caller's locale, falling back through parent locales to the default catalog.

Main components:
- models: LocaleCode, MessageCatalog, Resolution
- registry: CatalogRegistry holding one catalog per locale
- overrides: OverrideStore layered over the catalogs
- translator: TranslationResolver implementing the fallback chain
- resolvers: ambient locale providers
- loader: language pack loaders (in-memory and YAML)
- service: LocalizationService facade used by the validation engine
- factory: create_localization_service() / get_localization_service()
"""

from validator_i18n.i18n.exceptions import (
    CatalogRegistryFrozenError,
    DuplicateLocaleRegistrationError,
    InvalidLocaleCodeError,
    LocalizationError,
    MissingDefaultCatalogEntryError,
)
from validator_i18n.i18n.factory import (
    create_localization_service,
    create_registry,
    get_localization_service,
)
from validator_i18n.i18n.loader import (
    InMemoryLanguagePack,
    LanguagePackLoader,
    YAMLLanguagePackLoader,
    load_overrides,
)
from validator_i18n.i18n.models import (
    LocaleCode,
    MessageCatalog,
    Resolution,
    ResolutionSource,
)
from validator_i18n.i18n.overrides import OverrideStore
from validator_i18n.i18n.placeholders import (
    PlaceholderMismatch,
    extract_placeholders,
    find_placeholder_mismatches,
)
from validator_i18n.i18n.registry import CatalogRegistry
from validator_i18n.i18n.resolvers import (
    AcceptLanguageLocaleProvider,
    ContextLocaleProvider,
    FixedLocaleProvider,
    LocaleProvider,
    locale_scope,
    parse_accept_language,
)
from validator_i18n.i18n.service import LocalizationService
from validator_i18n.i18n.sources import LanguageStringSource
from validator_i18n.i18n.translator import TranslationResolver

__all__ = [
    "LocaleCode",
    "MessageCatalog",
    "Resolution",
    "ResolutionSource",
    "CatalogRegistry",
    "OverrideStore",
    "TranslationResolver",
    "LocaleProvider",
    "FixedLocaleProvider",
    "ContextLocaleProvider",
    "AcceptLanguageLocaleProvider",
    "locale_scope",
    "parse_accept_language",
    "LanguagePackLoader",
    "InMemoryLanguagePack",
    "YAMLLanguagePackLoader",
    "load_overrides",
    "LocalizationService",
    "LanguageStringSource",
    "PlaceholderMismatch",
    "extract_placeholders",
    "find_placeholder_mismatches",
    "create_localization_service",
    "create_registry",
    "get_localization_service",
    "LocalizationError",
    "InvalidLocaleCodeError",
    "DuplicateLocaleRegistrationError",
    "CatalogRegistryFrozenError",
    "MissingDefaultCatalogEntryError",
]
