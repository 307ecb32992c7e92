"""Configuration module - public API.

Exports:
    get_settings: Cached Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Localization settings section

Example:
    ```python
    from validator_i18n.configuration import get_settings

    settings = get_settings()
    enabled = settings.i18n.enabled
    ```
"""

from validator_i18n.configuration.i18n import I18nSettings
from validator_i18n.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "get_settings"]
