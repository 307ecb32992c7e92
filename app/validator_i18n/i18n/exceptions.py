"""Custom exceptions for the i18n system.

Resolution itself never raises "not found" to callers; these exceptions
signal malformed input or a badly provisioned language pack.
"""


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            service = create_localization_service()
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class InvalidLocaleCodeError(LocalizationError, ValueError):
    """Raised when a locale string cannot be parsed.

    Callers that receive locale strings from users or environment usually
    recover by using the default locale instead.

    Example:
        >>> LocaleCode.parse("")
        Traceback (most recent call last):
        ...
        InvalidLocaleCodeError: Invalid locale code: ''
    """

    pass


class DuplicateLocaleRegistrationError(LocalizationError):
    """Raised when a second catalog is registered for the same locale.

    Indicates a language pack bug; fatal at startup.
    """

    pass


class CatalogRegistryFrozenError(LocalizationError):
    """Raised when registering a catalog after the registry was frozen."""

    pass


class MissingDefaultCatalogEntryError(LocalizationError, LookupError):
    """Raised when a key has no entry anywhere, not even in the default catalog.

    This is a programming error: the default catalog must contain every key
    the application queries.
    """

    def __init__(self, key: str, locale: str):
        self.key = key
        self.locale = locale
        super().__init__(
            f"No translation for key '{key}' (locale {locale}) in any override "
            f"or catalog, including the default catalog"
        )
