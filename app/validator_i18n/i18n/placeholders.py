"""Placeholder checks across the language pack.

Translations must use the same ``{Name}`` placeholders as the default
catalog, otherwise downstream substitution leaves tokens unfilled. Escaped
braces (``{{`` and ``}}``) are literal text, not placeholders.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, List

from validator_i18n.i18n.registry import CatalogRegistry
from validator_i18n.logging import get_module_logger

logger = get_module_logger()

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def extract_placeholders(template: str) -> List[str]:
    """Get placeholder names in order of appearance.

    Args:
        template: Template string such as "'{PropertyName}' must be {MaxLength}".

    Returns:
        Placeholder names, e.g. ["PropertyName", "MaxLength"].
    """
    unescaped = template.replace("{{", "").replace("}}", "")
    return _PLACEHOLDER.findall(unescaped)


@dataclass(frozen=True)
class PlaceholderMismatch:
    """A translation whose placeholders differ from the default template."""

    locale: str
    key: str
    expected: FrozenSet[str]
    actual: FrozenSet[str]

    def __str__(self) -> str:
        return (
            f"Translation for language {self.locale}, key {self.key} has parameters "
            f"{','.join(sorted(self.actual))}, expected {','.join(sorted(self.expected))}"
        )


def find_placeholder_mismatches(registry: CatalogRegistry) -> List[PlaceholderMismatch]:
    """Compare every catalog's placeholders with the default catalog.

    Only keys present in the default catalog are checked; keys a catalog does
    not translate fall back to the default template and cannot mismatch.

    Args:
        registry: CatalogRegistry to check.

    Returns:
        List of mismatches, empty when the pack is consistent.
    """
    default_catalog = registry.default_catalog()
    mismatches: List[PlaceholderMismatch] = []

    for locale in registry.locales():
        if locale == registry.default_locale:
            continue
        catalog = registry.lookup(locale)
        if catalog is None:
            continue

        for key in default_catalog.keys():
            translated = catalog.get_message(key)
            if translated is None:
                continue
            expected = frozenset(extract_placeholders(default_catalog.messages[key]))
            actual = frozenset(extract_placeholders(translated))
            if expected != actual:
                mismatches.append(
                    PlaceholderMismatch(str(locale), key, expected, actual)
                )

    if mismatches:
        logger.warning("placeholder_mismatches_found", count=len(mismatches))
    return mismatches
