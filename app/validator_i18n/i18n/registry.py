"""Catalog registry for the language pack.

Provides thread-safe registration and exact-match retrieval of message
catalogs. Fallback between locales is the resolver's job, not the registry's.
"""

import threading
from typing import Dict, List, Optional

from validator_i18n.i18n.exceptions import (
    CatalogRegistryFrozenError,
    DuplicateLocaleRegistrationError,
)
from validator_i18n.i18n.models import LocaleCode, MessageCatalog
from validator_i18n.logging import get_module_logger

logger = get_module_logger()


class CatalogRegistry:
    """Registry of message catalogs, one per locale.

    Populated once at startup and read-only afterwards. The default catalog is
    supplied at construction so ``default_catalog()`` can never fail.

    Attributes:
        default_locale: Locale of the terminal fallback catalog.
        _catalogs: Dict mapping LocaleCode to MessageCatalog.
        _lock: Threading lock serializing registration.
    """

    def __init__(self, default_catalog: MessageCatalog):
        """Initialize the registry with its default catalog.

        Args:
            default_catalog: Catalog that must contain every key ever queried.
        """
        self.default_locale = default_catalog.locale
        self._default_catalog = default_catalog
        self._catalogs: Dict[LocaleCode, MessageCatalog] = {
            default_catalog.locale: default_catalog
        }
        self._lock = threading.Lock()
        self._frozen = False
        logger.info(
            "catalog_registry_initialized",
            default_locale=str(self.default_locale),
            message_count=len(default_catalog),
        )

    def register(self, catalog: MessageCatalog) -> None:
        """Register a catalog for a new locale.

        Args:
            catalog: MessageCatalog to register.

        Raises:
            DuplicateLocaleRegistrationError: If a catalog with the same locale
                is already registered.
            CatalogRegistryFrozenError: If the registry has been frozen.
        """
        with self._lock:
            if self._frozen:
                raise CatalogRegistryFrozenError(
                    f"Cannot register locale '{catalog.locale}': registry is frozen"
                )
            if catalog.locale in self._catalogs:
                raise DuplicateLocaleRegistrationError(
                    f"A catalog for locale '{catalog.locale}' is already registered"
                )

            self._catalogs[catalog.locale] = catalog
            logger.info(
                "catalog_registered",
                locale=str(catalog.locale),
                message_count=len(catalog),
            )

    def lookup(self, locale: LocaleCode) -> Optional[MessageCatalog]:
        """Get the catalog registered for exactly this locale.

        Args:
            locale: Locale to look up.

        Returns:
            MessageCatalog if registered, None otherwise.
        """
        return self._catalogs.get(locale)

    def default_catalog(self) -> MessageCatalog:
        return self._default_catalog

    def locales(self) -> List[LocaleCode]:
        """Get all registered locales, default first."""
        with self._lock:
            return list(self._catalogs.keys())

    def freeze(self) -> None:
        """Reject any further registration."""
        with self._lock:
            self._frozen = True
            logger.debug("catalog_registry_frozen", locale_count=len(self._catalogs))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, locale: object) -> bool:
        return locale in self._catalogs

    def __len__(self) -> int:
        return len(self._catalogs)
