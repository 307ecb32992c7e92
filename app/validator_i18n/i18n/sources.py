"""Lazy message sources attached to validation rules."""

from typing import Optional

from validator_i18n.i18n.service import LocalizationService


class LanguageStringSource:
    """Message source that resolves its template each time it is read.

    A rule keeps one of these instead of a resolved string, so changes made to
    the service after the rule was built (pinning a locale, disabling
    localization, adding overrides) are reflected in its messages.

    Attributes:
        validator_identity: Stable validator name, the fallback key.
        error_code: Optional per-rule error code tried first.
        service: LocalizationService to resolve against.
    """

    def __init__(
        self,
        validator_identity: str,
        service: LocalizationService,
        error_code: Optional[str] = None,
    ):
        self.validator_identity = validator_identity
        self.error_code = error_code
        self.service = service

    def get_string(self) -> str:
        """Resolve the template in the service's current effective locale."""
        if self.error_code:
            return self.service.resolve_by_error_code(
                self.error_code, self.validator_identity
            )
        return self.service.resolve_by_identity(self.validator_identity)

    def with_error_code(self, error_code: Optional[str]) -> "LanguageStringSource":
        return LanguageStringSource(self.validator_identity, self.service, error_code)

    def __repr__(self) -> str:
        return (
            f"LanguageStringSource(validator_identity={self.validator_identity!r}, "
            f"error_code={self.error_code!r})"
        )
