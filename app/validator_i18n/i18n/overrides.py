"""Caller-supplied message overrides layered over the catalog registry.

Overrides are stored per (locale, key) pair and never touch catalog data, so
removing an override restores whatever the catalogs resolve for that key.
"""

import threading
from typing import Dict, Mapping, Optional, Tuple

from validator_i18n.i18n.models import LocaleCode
from validator_i18n.logging import get_module_logger

logger = get_module_logger()


def _check_template(key: str, template: object) -> None:
    if not isinstance(template, str):
        raise TypeError(
            f"Override template for '{key}' must be str, got {type(template).__name__}"
        )


class OverrideStore:
    """Thread-safe mapping of (LocaleCode, key) to template string.

    Writes hold a lock so per-key last-write-wins is atomic; reads are plain
    dict lookups.

    Attributes:
        _overrides: Dict mapping (locale, key) to template.
        _lock: Threading lock for write operations.
    """

    def __init__(self):
        self._overrides: Dict[Tuple[LocaleCode, str], str] = {}
        self._lock = threading.Lock()

    def set(self, locale: LocaleCode, key: str, template: str) -> None:
        """Add or replace the override for (locale, key).

        Args:
            locale: Locale the override applies to.
            key: Translation key (validator identity or error code).
            template: Template string returned for this pair.

        Raises:
            TypeError: If template is not a string.
        """
        _check_template(key, template)
        with self._lock:
            replaced = (locale, key) in self._overrides
            self._overrides[(locale, key)] = template
        logger.debug(
            "translation_override_set",
            locale=str(locale),
            key=key,
            replaced=replaced,
        )

    def set_many(self, locale: LocaleCode, templates: Mapping[str, str]) -> None:
        """Add or replace several overrides for one locale.

        Args:
            locale: Locale the overrides apply to.
            templates: Mapping of key to template.

        Raises:
            TypeError: If any template is not a string. Nothing is stored then.
        """
        for key, template in templates.items():
            _check_template(key, template)
        with self._lock:
            for key, template in templates.items():
                self._overrides[(locale, key)] = template
        logger.debug(
            "translation_overrides_set",
            locale=str(locale),
            count=len(templates),
        )

    def get(self, locale: LocaleCode, key: str) -> Optional[str]:
        """Get the override for exactly (locale, key).

        Returns:
            Template string, or None if no override exists.
        """
        return self._overrides.get((locale, key))

    def remove(self, locale: LocaleCode, key: str) -> bool:
        """Remove the override for (locale, key).

        Returns:
            True if an override was removed, False if none existed.
        """
        with self._lock:
            removed = self._overrides.pop((locale, key), None) is not None
        if removed:
            logger.debug("translation_override_removed", locale=str(locale), key=key)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._overrides.clear()
        logger.debug("translation_overrides_cleared")

    def snapshot(self) -> Dict[str, Dict[str, str]]:
        """Get a copy of all overrides grouped by locale tag.

        Returns:
            Nested dict {locale_tag: {key: template}}, suitable for persisting.
        """
        with self._lock:
            items = list(self._overrides.items())

        result: Dict[str, Dict[str, str]] = {}
        for (locale, key), template in items:
            result.setdefault(str(locale), {})[key] = template
        return result

    def __len__(self) -> int:
        return len(self._overrides)
