"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- LocaleCode
- MessageCatalog
- CatalogRegistry
- LocalizationService
"""

from typing import Dict, Optional

from validator_i18n.i18n import (
    CatalogRegistry,
    LocaleCode,
    LocalizationService,
    MessageCatalog,
)
from validator_i18n.i18n.resolvers import LocaleProvider

ENGLISH_MESSAGES = {
    "NotNullValidator": "'{PropertyName}' must not be empty.",
    "NotEmptyValidator": "'{PropertyName}' must not be empty.",
    "EmailValidator": "'{PropertyName}' is not a valid email address.",
    "LengthValidator": (
        "'{PropertyName}' must be between {MinLength} and {MaxLength} characters. "
        "You entered {TotalLength} characters."
    ),
}

FRENCH_MESSAGES = {
    "NotNullValidator": "'{PropertyName}' ne doit pas avoir la valeur null.",
    "NotEmptyValidator": "'{PropertyName}' ne doit pas être vide.",
}

CHINESE_MESSAGES = {
    "NotNullValidator": "'{PropertyName}' 不能为Null。",
}

GERMAN_MESSAGES = {
    "NotNullValidator": "'{PropertyName}' darf kein Nullwert sein.",
    "GermanOnlyCode": "Nur auf Deutsch",
}


def make_locale(tag: str = "en") -> LocaleCode:
    """Create a LocaleCode instance."""
    return LocaleCode.parse(tag)


def make_catalog(
    tag: str = "en",
    messages: Optional[Dict[str, str]] = None,
) -> MessageCatalog:
    """Create a MessageCatalog instance.

    Args:
        tag: Locale tag for the catalog.
        messages: Key/template mapping (default: English sample messages).

    Returns:
        MessageCatalog instance.
    """
    if messages is None:
        messages = dict(ENGLISH_MESSAGES)
    return MessageCatalog(locale=make_locale(tag), messages=messages)


def make_registry(
    catalogs: Optional[Dict[str, Dict[str, str]]] = None,
    default_tag: str = "en",
) -> CatalogRegistry:
    """Create a CatalogRegistry with an English default and en/fr/zh-CN/de catalogs.

    Args:
        catalogs: Extra {tag: messages} catalogs, replacing the sample set.
        default_tag: Tag of the default catalog.

    Returns:
        CatalogRegistry instance (not frozen).
    """
    if catalogs is None:
        catalogs = {
            "en": ENGLISH_MESSAGES,
            "fr": FRENCH_MESSAGES,
            "zh-CN": CHINESE_MESSAGES,
            "de": GERMAN_MESSAGES,
        }

    registry = CatalogRegistry(make_catalog(default_tag, dict(catalogs[default_tag])))
    for tag, messages in catalogs.items():
        if tag == default_tag:
            continue
        registry.register(make_catalog(tag, dict(messages)))
    return registry


def make_service(
    registry: Optional[CatalogRegistry] = None,
    locale_provider: Optional[LocaleProvider] = None,
    enabled: bool = True,
    pinned_locale: Optional[str] = None,
) -> LocalizationService:
    """Create a LocalizationService over the sample registry."""
    return LocalizationService(
        registry or make_registry(),
        locale_provider=locale_provider,
        enabled=enabled,
        pinned_locale=pinned_locale,
    )
