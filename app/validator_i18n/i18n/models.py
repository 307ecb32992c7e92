"""Translation models for the i18n system.

Defines the locale identifier, the immutable per-locale message catalog and
the result type produced by the fallback chain.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional

from validator_i18n.i18n.exceptions import InvalidLocaleCodeError

_LANGUAGE_SUBTAG = re.compile(r"^[A-Za-z]{2,3}$")
_SUBTAG = re.compile(r"^[A-Za-z0-9]{1,8}$")
# POSIX locale names carry an optional codeset and modifier ("de_DE.UTF-8@euro")
_POSIX_LOCALE = re.compile(r"^([^.@]+)(?:\.[A-Za-z0-9-]+)?(?:@[A-Za-z0-9]+)?$")


def _normalize_tag(raw: str) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidLocaleCodeError(f"Invalid locale code: {raw!r}")

    tag = raw.strip()
    posix = _POSIX_LOCALE.match(tag)
    if posix:
        tag = posix.group(1)

    parts = tag.replace("_", "-").split("-")
    if not _LANGUAGE_SUBTAG.match(parts[0]):
        raise InvalidLocaleCodeError(f"Invalid locale code: {raw!r}")

    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if not _SUBTAG.match(part):
            raise InvalidLocaleCodeError(f"Invalid locale code: {raw!r}")
        if len(part) == 4 and part.isalpha():
            # Script subtag (e.g. "Hans")
            normalized.append(part.title())
        elif len(part) == 2 and part.isalpha():
            # Region subtag (e.g. "FR")
            normalized.append(part.upper())
        else:
            normalized.append(part.lower())

    return "-".join(normalized)


@dataclass(frozen=True)
class LocaleCode:
    """Normalized locale identifier (e.g. "en", "fr-FR", "zh-Hans-CN").

    Uses IETF BCP 47 style tags. The tag is normalized on construction, so
    two codes compare equal whenever their tags match case-insensitively
    ("FR_fr" == "fr-FR").

    Attributes:
        tag: Normalized locale tag.
    """

    tag: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", _normalize_tag(self.tag))

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def parse(cls, raw: str) -> "LocaleCode":
        """Parse a locale string.

        Args:
            raw: Locale string (e.g., "fr-FR", "fr_fr", "EN", "fr_FR.UTF-8").

        Returns:
            Normalized LocaleCode.

        Raises:
            InvalidLocaleCodeError: If the string is empty or malformed.
        """
        return cls(raw)

    @classmethod
    def try_parse(
        cls, raw: Optional[str], default: Optional["LocaleCode"] = None
    ) -> Optional["LocaleCode"]:
        """Parse a locale string, returning ``default`` when it is invalid.

        Args:
            raw: Locale string or None.
            default: Value returned for missing or malformed input.

        Returns:
            Parsed LocaleCode, or ``default``.
        """
        if raw is None:
            return default
        try:
            return cls(raw)
        except InvalidLocaleCodeError:
            return default

    @property
    def language(self) -> str:
        """Get language part of locale (e.g., "fr" from "fr-FR")."""
        return self.tag.split("-")[0]

    def parent(self) -> Optional["LocaleCode"]:
        """Get the parent locale by dropping the last subtag.

        Returns:
            "fr" for "fr-FR", "zh-Hans" for "zh-Hans-CN", None for a root code.
        """
        parts = self.tag.split("-")
        if len(parts) == 1:
            return None
        return LocaleCode("-".join(parts[:-1]))

    def chain(self) -> List["LocaleCode"]:
        """Get this locale followed by each of its parents, nearest first."""
        chain: List[LocaleCode] = []
        current: Optional[LocaleCode] = self
        while current is not None:
            chain.append(current)
            current = current.parent()
        return chain


@dataclass(frozen=True, eq=False)
class MessageCatalog:
    """Immutable set of message templates for one locale.

    The messages mapping is copied into a read-only proxy on construction.

    Attributes:
        locale: The locale this catalog is for.
        messages: Mapping of translation key to template string.
    """

    locale: LocaleCode
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a template by key.

        Args:
            key: Translation key (validator identity or error code).

        Returns:
            Template string, or None if not found.
        """
        return self.messages.get(key)

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def keys(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


class ResolutionSource(str, Enum):
    """Where in the fallback chain a template was found."""

    OVERRIDE = "override"
    CATALOG = "catalog"
    DEFAULT_OVERRIDE = "default_override"
    DEFAULT_CATALOG = "default_catalog"


@dataclass(frozen=True)
class Resolution:
    """A template found by the fallback chain.

    Attributes:
        key: Translation key that was looked up.
        template: The resolved template string.
        locale: Locale of the override or catalog that supplied the template.
        source: Which step of the chain produced it.
    """

    key: str
    template: str
    locale: LocaleCode
    source: ResolutionSource
