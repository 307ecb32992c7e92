"""Localization settings."""

from typing import Optional

from pydantic import Field, field_validator

from validator_i18n.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Localization configuration for validation messages.

    Environment Variables:
        I18N_ENABLED: Resolve messages in the caller's locale (default: True).
            When False every message is resolved in the default locale.
        I18N_DEFAULT_LOCALE: Locale of the terminal fallback catalog (default: en)
        I18N_PINNED_LOCALE: Always resolve in this locale, ignoring the ambient one
        I18N_LANGUAGE_PACK_DIR: Directory of <domain>.<locale>.yml files
            (default: the language pack shipped with the package)
        I18N_OVERRIDES_FILE: YAML file of {locale: {key: template}} overrides

    Example:
        ```python
        from validator_i18n.configuration import get_settings

        settings = get_settings()
        if settings.i18n.enabled:
            pinned = settings.i18n.pinned_locale
        ```
    """

    enabled: bool = Field(
        default=True,
        alias="I18N_ENABLED",
        description="Resolve messages in the caller's locale",
    )
    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale of the terminal fallback catalog",
    )
    pinned_locale: Optional[str] = Field(
        default=None,
        alias="I18N_PINNED_LOCALE",
        description="Locale used for every resolution, overriding the ambient one",
    )
    language_pack_dir: Optional[str] = Field(
        default=None,
        alias="I18N_LANGUAGE_PACK_DIR",
        description="Directory containing YAML language pack files",
    )
    overrides_file: Optional[str] = Field(
        default=None,
        alias="I18N_OVERRIDES_FILE",
        description="YAML file with per-locale message overrides",
    )

    @field_validator("pinned_locale", "language_pack_dir", "overrides_file")
    @classmethod
    def _blank_as_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value
