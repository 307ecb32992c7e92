import pytest

from validator_i18n.configuration import get_settings
from validator_i18n.i18n import get_localization_service


@pytest.fixture(autouse=True)
def reset_cached_singletons():
    """Drop cached settings and services so env changes apply per test."""
    get_settings.cache_clear()
    get_localization_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_localization_service.cache_clear()
