"""Ambient locale providers.

A locale provider tells the LocalizationService which locale the current call
runs in (e.g. derived from a request, a session or the running task). It
returns a best-effort LocaleCode or None, which the service treats as "use the
default locale".
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator, Iterable, List, Optional, Protocol, Tuple, Union

from validator_i18n.i18n.exceptions import InvalidLocaleCodeError
from validator_i18n.i18n.models import LocaleCode
from validator_i18n.logging import get_module_logger

logger = get_module_logger()


class LocaleProvider(Protocol):
    """Source of the ambient locale for the current call."""

    def current_locale(self) -> Optional[LocaleCode]:
        """Return the ambient locale, or None if unknown."""
        ...


class FixedLocaleProvider:
    """Provider that always reports the same locale."""

    def __init__(self, locale: Optional[Union[LocaleCode, str]] = None):
        if isinstance(locale, str):
            locale = LocaleCode.parse(locale)
        self.locale = locale

    def current_locale(self) -> Optional[LocaleCode]:
        return self.locale


_ambient_locale: ContextVar[Optional[LocaleCode]] = ContextVar(
    "validator_i18n_ambient_locale", default=None
)


class ContextLocaleProvider:
    """Provider reading the ambient locale from a context variable.

    The value is local to the current thread or asyncio task. Use
    ``locale_scope`` to set it for a block of code.

    Example:
        provider = ContextLocaleProvider()
        service = LocalizationService(registry, locale_provider=provider)

        with locale_scope("fr-FR"):
            service.resolve_by_identity("NotNullValidator")  # French template
    """

    def current_locale(self) -> Optional[LocaleCode]:
        return _ambient_locale.get()


@contextmanager
def locale_scope(
    locale: Optional[Union[LocaleCode, str]],
) -> Generator[Optional[LocaleCode], None, None]:
    """Set the ambient locale for the duration of the block.

    Invalid locale strings are logged and treated as "no ambient locale".

    Args:
        locale: Locale to make ambient, or None to clear it.

    Yields:
        The LocaleCode in effect inside the block.
    """
    if isinstance(locale, str):
        parsed = LocaleCode.try_parse(locale)
        if parsed is None:
            logger.warning("invalid_ambient_locale", locale_str=locale)
        locale = parsed

    token = _ambient_locale.set(locale)
    try:
        yield locale
    finally:
        _ambient_locale.reset(token)


def parse_accept_language(header: Optional[str]) -> List[Tuple[LocaleCode, float]]:
    """Parse an Accept-Language header into locales ordered by preference.

    Parses "fr-FR,fr;q=0.9,en;q=0.8" into
    [(fr-FR, 1.0), (fr, 0.9), (en, 0.8)]. Invalid quality values count as 1.0,
    wildcards and unparseable tags are skipped.

    Args:
        header: Accept-Language header value.

    Returns:
        List of (LocaleCode, quality), highest quality first.
    """
    if not header:
        return []

    preferences: List[Tuple[LocaleCode, float]] = []
    for part in header.split(","):
        lang_range = part.split(";")[0].strip()
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0

        try:
            preferences.append((LocaleCode.parse(lang_range), quality))
        except InvalidLocaleCodeError:
            logger.warning("invalid_accept_language_tag", tag=lang_range)

    # sorted() is stable, so equal weights keep header order
    return sorted(preferences, key=lambda item: item[1], reverse=True)


class AcceptLanguageLocaleProvider:
    """Provider deriving the locale from an Accept-Language header value.

    Without ``supported_locales`` the highest-weighted tag is returned as is.
    With them, preferences are tried in order and the first one that a
    supported locale can serve wins: either one of its fallback chain
    entries is supported ("fr-CA" is served by "fr"), or a supported locale
    shares its language ("fr" is served by "fr-FR").

    Attributes:
        header: Raw header value, typically taken from the current request.
        supported_locales: Locales with a catalog, e.g. ``registry.locales()``.

    Example:
        provider = AcceptLanguageLocaleProvider(
            request.headers.get("Accept-Language"),
            supported_locales=registry.locales(),
        )
    """

    def __init__(
        self,
        header: Optional[str] = None,
        supported_locales: Optional[Iterable[LocaleCode]] = None,
    ):
        self.header = header
        self.supported_locales = (
            list(supported_locales) if supported_locales is not None else None
        )

    def current_locale(self) -> Optional[LocaleCode]:
        preferences = parse_accept_language(self.header)
        if not preferences:
            return None
        if self.supported_locales is None:
            return preferences[0][0]

        for preferred, _ in preferences:
            # Exact or parent match, resolved through the fallback chain
            if any(locale in self.supported_locales for locale in preferred.chain()):
                logger.debug("resolved_from_header", locale=str(preferred))
                return preferred

            # Language-only match (e.g., "fr" matches "fr-FR")
            for locale in self.supported_locales:
                if locale.language == preferred.language:
                    logger.debug("resolved_from_header", locale=str(locale))
                    return locale

        logger.debug("no_matching_locale_in_header", header=self.header)
        return None
